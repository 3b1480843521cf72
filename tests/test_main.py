"""Tests for logging configuration and the command line entrypoint."""

from __future__ import annotations

import httpx
import pytest
import structlog

from poet import main as main_module
from poet.config import PoetSettings
from poet.logging import configure_logging


@pytest.fixture
def settings(monkeypatch):
    value = PoetSettings(_env_file=None)
    monkeypatch.setattr(main_module, "get_settings", lambda: value)
    return value


def test_configure_logging_outputs_json(capsys):
    configure_logging()
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    err = capsys.readouterr().err
    assert "unit-test" in err
    assert "foo" in err


def test_parser_maps_field_commands():
    parser = main_module.build_parser()

    args = parser.parse_args(["title", "Sonnet", "18"])
    assert args.command == "title"
    assert args.mode.value == "title"
    assert args.query == ["Sonnet", "18"]

    with pytest.raises(SystemExit):
        parser.parse_args([])


@pytest.mark.asyncio
async def test_run_search_prints_results(settings, mock_http, capsys):
    paths: list[bytes] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.raw_path)
        return httpx.Response(
            200,
            json=[
                {
                    "title": "Ozymandias",
                    "author": "Percy Bysshe Shelley",
                    "lines": ["I met a traveller from an antique land"],
                    "linecount": "1",
                }
            ],
        )

    args = main_module.build_parser().parse_args(["author", "Percy", "Shelley"])
    code = await main_module.run(args, http_client=mock_http(handler))

    assert code == 0
    assert paths == [b"/author/Percy%20Shelley"]
    out = capsys.readouterr().out
    assert "Ozymandias" in out
    assert "by Percy Bysshe Shelley" in out


@pytest.mark.asyncio
async def test_run_random_reports_errors(settings, mock_http, capsys):
    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/random/1"
        return httpx.Response(502)

    args = main_module.build_parser().parse_args(["random"])
    code = await main_module.run(args, http_client=mock_http(handler))

    assert code == 1
    assert "Server returned status 502: Bad Gateway" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_run_both_uses_combined_endpoint(settings, mock_http):
    paths: list[bytes] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.raw_path)
        return httpx.Response(200, json={"status": 404, "reason": "Not found"})

    args = main_module.build_parser().parse_args(["both", "Keats", "Ode"])
    code = await main_module.run(args, http_client=mock_http(handler))

    assert code == 1
    assert paths == [b"/author,title/Keats;Ode"]


def test_main_bootstrap(settings, monkeypatch):
    captured = {}

    async def fake_run(args, http_client=None):
        captured["command"] = args.command
        return 0

    def fake_configure(level):
        captured["level"] = level

    monkeypatch.setattr(main_module, "run", fake_run)
    monkeypatch.setattr(main_module, "configure_logging", fake_configure)

    assert main_module.main(["--log-level", "warning", "random"]) == 0
    assert captured == {"command": "random", "level": "warning"}


@pytest.mark.asyncio
async def test_default_http_client_follows_redirects(settings, capsys):
    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "poetrydb.org":
            return httpx.Response(
                301, headers={"Location": "https://mirror.example/random/1"}
            )
        return httpx.Response(
            200,
            json=[
                {
                    "title": "Ozymandias",
                    "author": "Percy Bysshe Shelley",
                    "lines": ["I met a traveller from an antique land"],
                    "linecount": "1",
                }
            ],
        )

    client = main_module.build_http_client(transport=httpx.MockTransport(handler))
    args = main_module.build_parser().parse_args(["random"])
    try:
        code = await main_module.run(args, http_client=client)
    finally:
        await client.aclose()

    assert code == 0
    assert "Ozymandias" in capsys.readouterr().out
