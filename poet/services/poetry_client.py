"""PoetryDB HTTP client: request building, response shaping and error mapping."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from poet.config import PoetryApiSettings
from poet.domain.models import Poem, PoemList, SearchField
from poet.logging import logger
from poet.services.exceptions import (
    ConnectionFailedError,
    EmptyQueryError,
    NetworkError,
    PoemServiceError,
    PoemsNotFoundError,
    ServerError,
    UnknownPoemError,
)

# Characters left unescaped by JavaScript's encodeURIComponent besides [A-Za-z0-9_.-].
_COMPONENT_SAFE = "!~*'()"


def encode_component(value: str) -> str:
    return quote(value, safe=_COMPONENT_SAFE)


def classify_error(exc: BaseException) -> PoemServiceError:
    """Map any failure raised while talking to PoetryDB onto a user-facing error."""

    if isinstance(exc, PoemServiceError):
        return exc
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        if status_code not in (0, 200):
            if status_code == 404:
                return PoemsNotFoundError()
            return ServerError(status_code, exc.response.reason_phrase)
    # A refused or timed-out connection is the equivalent of a browser status 0.
    if isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout)):
        return ConnectionFailedError()
    if isinstance(exc, httpx.TransportError):
        return NetworkError(f"Network error: {exc}")
    return UnknownPoemError()


class PoemClient:
    """Stateless translator between search intents and PoetryDB responses."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: PoetryApiSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or PoetryApiSettings()

    async def search_by_field(self, field: SearchField | str, query: str) -> list[Poem]:
        field = SearchField(field)
        if not (query or "").strip():
            raise EmptyQueryError("Search query must not be empty.")
        path = f"{field.value}/{encode_component(query)}"
        return await self._fetch(path, allow_status_body=True)

    async def search_by_author_and_title(self, author: str, title: str) -> list[Poem]:
        if not (author or "").strip() or not (title or "").strip():
            raise EmptyQueryError("Author and title must not be empty.")
        path = f"author,title/{encode_component(author)};{encode_component(title)}"
        return await self._fetch(path, allow_status_body=True)

    async def random_poems(self, count: int = 1) -> list[Poem]:
        if count < 1:
            raise ValueError("count must be at least 1")
        return await self._fetch(f"random/{count}", allow_status_body=False)

    async def _fetch(self, path: str, *, allow_status_body: bool) -> list[Poem]:
        url = self._settings.endpoint(path)
        logger.debug("poetry_api_request", url=url)
        try:
            response = await self._client.get(
                url,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
            if allow_status_body and _is_status_body(payload):
                return []
            return PoemList.validate_python(payload)
        except (httpx.HTTPError, ValueError) as exc:
            error = classify_error(exc)
            logger.error(
                "poetry_api_error",
                url=url,
                error_type=error.__class__.__name__,
                message=error.message,
                cause=repr(exc),
            )
            raise error from exc


def _is_status_body(payload: Any) -> bool:
    # PoetryDB answers a miss with 200 and {"status": 404, "reason": "Not found"}.
    return isinstance(payload, dict) and "status" in payload


__all__ = ["PoemClient", "classify_error", "encode_component"]
