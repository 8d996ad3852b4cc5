"""Custom exceptions raised by the service client."""

from __future__ import annotations

from typing import Any


class ServiceClientError(Exception):
    """Base error for all client failures."""

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        context: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.context = context

    def __str__(self) -> str:
        detail = str(self.cause) if self.cause is not None else ""
        if not detail:
            return self.message
        return f"{self.message}: {detail}"


class ConfigError(ServiceClientError):
    """Raised when a request target cannot be parsed."""


class RequestError(ServiceClientError):
    """Raised when the request could not be assembled or issued."""


class ClientError(ServiceClientError):
    """Raised for transport failures (DNS, connect, TLS, socket errors)."""


class TimeoutError(ServiceClientError):
    """Raised when no complete response arrives within the timeout."""


class ReadError(ServiceClientError):
    """Raised when a response body cannot be decoded as JSON."""


__all__ = [
    "ClientError",
    "ConfigError",
    "ReadError",
    "RequestError",
    "ServiceClientError",
    "TimeoutError",
]
