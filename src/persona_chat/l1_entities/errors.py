"""Domain error types."""

from __future__ import annotations


class ChatClientError(Exception):
    """Base class for every failure the user can be told about."""


class ValidationError(ChatClientError):
    """A required local field is missing; raised before any network call."""


class HttpError(ChatClientError):
    """Non-success HTTP status whose body carried no error message."""

    def __init__(self, status: int) -> None:
        super().__init__(f'HTTP error, status {status}')
        self.status = status


class ApiError(ChatClientError):
    """Non-success response (or unusable success body) with a server-supplied message."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class NetworkError(ChatClientError):
    """Transport-level failure: DNS, refused connection, timeout."""
