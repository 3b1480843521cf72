"""Command line entrypoint."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

import httpx

from poet.config import get_settings
from poet.domain.models import SearchField
from poet.logging import configure_logging, logger
from poet.services.poetry_client import PoemClient
from poet.services.search_controller import SearchController
from poet.ui.render import render_state


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="poet", description="Search PoetryDB from the terminal.")
    parser.add_argument("--log-level", default=None, help="Override POET_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    for field in SearchField:
        field_parser = subparsers.add_parser(field.value, help=f"Search poems by {field.value}")
        field_parser.add_argument("query", nargs="+")
        field_parser.set_defaults(mode=field)

    both_parser = subparsers.add_parser("both", help="Search by author and title together")
    both_parser.add_argument("author")
    both_parser.add_argument("title")

    subparsers.add_parser("random", help="Fetch a random poem")
    return parser


def build_http_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(follow_redirects=True, transport=transport)


async def run(args: argparse.Namespace, http_client: httpx.AsyncClient | None = None) -> int:
    settings = get_settings()
    owns_client = http_client is None
    client = http_client or build_http_client()
    try:
        controller = SearchController(PoemClient(client, settings=settings.api))
        if args.command == "random":
            await controller.get_random_poem()
        elif args.command == "both":
            await controller.search_by_author_and_title(args.author, args.title)
        else:
            controller.set_mode(args.mode)
            controller.set_query(" ".join(args.query))
            await controller.search()
    finally:
        if owns_client:
            await client.aclose()

    output = render_state(controller.state)
    if output:
        print(output)
    return 1 if controller.state.error_message else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)
    logger.info("poet_cli_starting", environment=settings.environment, command=args.command)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
