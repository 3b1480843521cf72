"""Domain-specific exceptions."""

from __future__ import annotations


class ServiceError(Exception):
    pass


class EmptyQueryError(ServiceError):
    pass


class PoemServiceError(ServiceError):
    """A PoetryDB failure reduced to a message fit for the user."""

    default_message = "An error occurred while fetching poems."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class PoemsNotFoundError(PoemServiceError):
    default_message = "No poems found matching your search. Please try a different query."


class ServerError(PoemServiceError):
    def __init__(self, status_code: int, reason: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason or "Unknown error"
        super().__init__(f"Server returned status {status_code}: {self.reason}")


class NetworkError(PoemServiceError):
    pass


class ConnectionFailedError(PoemServiceError):
    default_message = "Unable to connect to the server. Please check your internet connection."


class UnknownPoemError(PoemServiceError):
    pass


__all__ = [
    "ServiceError",
    "EmptyQueryError",
    "PoemServiceError",
    "PoemsNotFoundError",
    "ServerError",
    "NetworkError",
    "ConnectionFailedError",
    "UnknownPoemError",
]
