"""UI-facing search state and the user-triggered operations that drive it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable

from poet.domain.models import Poem, SearchField
from poet.logging import logger
from poet.services.exceptions import PoemServiceError
from poet.services.poetry_client import PoemClient

EMPTY_QUERY_MESSAGE = "Please enter a search term"
NO_RESULTS_MESSAGE = "No poems found. Try a different search!"
SEARCH_FAILED_MESSAGE = "Failed to fetch poems. Please try again."
NO_RANDOM_MESSAGE = "Could not fetch a random poem. Please try again."
RANDOM_FAILED_MESSAGE = "Failed to fetch a random poem. Please try again."


@dataclass
class SearchState:
    query: str = ""
    mode: SearchField = SearchField.AUTHOR
    results: list[Poem] = field(default_factory=list)
    loading: bool = False
    error_message: str = ""


class SearchController:
    """Mediates between user input and :class:`PoemClient`.

    The view reads :attr:`state` and calls :meth:`search`,
    :meth:`get_random_poem` and :meth:`clear`. Each network-bound operation
    is tagged with a request id; when operations overlap only the most
    recently issued one is allowed to write its outcome.
    """

    def __init__(self, client: PoemClient, state: SearchState | None = None) -> None:
        self._client = client
        self.state = state or SearchState()
        self._request_id = 0

    def set_query(self, query: str) -> None:
        self.state.query = query

    def set_mode(self, mode: SearchField | str) -> None:
        self.state.mode = SearchField(mode)

    async def search(self) -> None:
        query = self.state.query
        if not query.strip():
            # Prior results are intentionally left in place here.
            self.state.error_message = EMPTY_QUERY_MESSAGE
            return

        mode = self.state.mode
        await self._run(
            lambda: self._client.search_by_field(mode, query),
            empty_message=NO_RESULTS_MESSAGE,
            failure_message=SEARCH_FAILED_MESSAGE,
            operation="search",
        )

    async def search_by_author_and_title(self, author: str, title: str) -> None:
        author, title = author or "", title or ""
        if not author.strip() or not title.strip():
            self.state.error_message = EMPTY_QUERY_MESSAGE
            return

        await self._run(
            lambda: self._client.search_by_author_and_title(author, title),
            empty_message=NO_RESULTS_MESSAGE,
            failure_message=SEARCH_FAILED_MESSAGE,
            operation="search_by_author_and_title",
        )

    async def get_random_poem(self) -> None:
        self.state.query = ""
        await self._run(
            lambda: self._client.random_poems(1),
            empty_message=NO_RANDOM_MESSAGE,
            failure_message=RANDOM_FAILED_MESSAGE,
            operation="get_random_poem",
        )

    def clear(self) -> None:
        self.state.query = ""
        self.state.results = []
        self.state.error_message = ""

    async def _run(
        self,
        fetch: Callable[[], Awaitable[list[Poem]]],
        *,
        empty_message: str,
        failure_message: str,
        operation: str,
    ) -> None:
        self._request_id += 1
        request_id = self._request_id
        self.state.loading = True
        self.state.error_message = ""
        self.state.results = []

        try:
            poems = await fetch()
        except PoemServiceError as exc:
            if self._is_stale(request_id, operation):
                return
            self.state.error_message = str(exc) or failure_message
            self.state.loading = False
            return

        if self._is_stale(request_id, operation):
            return
        self.state.results = list(poems)
        self.state.loading = False
        if not poems:
            self.state.error_message = empty_message

    def _is_stale(self, request_id: int, operation: str) -> bool:
        if request_id == self._request_id:
            return False
        logger.info(
            "stale_response_discarded",
            operation=operation,
            request_id=request_id,
            latest_request_id=self._request_id,
        )
        return True


__all__ = [
    "SearchController",
    "SearchState",
    "EMPTY_QUERY_MESSAGE",
    "NO_RESULTS_MESSAGE",
    "NO_RANDOM_MESSAGE",
]
