"""Shared pytest fixtures for PoetryDB client tests."""

from __future__ import annotations

from typing import Awaitable, Callable

import httpx
import pytest
import pytest_asyncio
import structlog

SONNET_18 = {
    "title": "Sonnet 18",
    "author": "William Shakespeare",
    "lines": ["Shall I compare thee to a summer's day?"],
    "linecount": "1",
}

Handler = Callable[[httpx.Request], Awaitable[httpx.Response]]


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict]] = []

    def __getattr__(self, level: str):
        if level.startswith("_"):
            raise AttributeError(level)

        def _log(event: str, **kwargs) -> None:
            self.records.append((level, event, kwargs))

        return _log

    def events(self, level: str | None = None) -> list[str]:
        return [event for lvl, event, _ in self.records if level is None or lvl == level]


@pytest.fixture
def sonnet_payload() -> dict:
    return dict(SONNET_18)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest_asyncio.fixture
async def mock_http():
    """Yield a factory building AsyncClients served by a handler coroutine."""

    clients: list[httpx.AsyncClient] = []

    def _factory(handler: Handler) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    try:
        yield _factory
    finally:
        for client in clients:
            await client.aclose()


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
