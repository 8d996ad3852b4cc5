"""Reusable entry point that hands out preconfigured requests."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from .config import ClientSettings
from .errors import ConfigError, ServiceClientError
from .logger import LogLevel, create_logger
from .request import Request
from .response import Response
from .transport import Target, UnixTarget, parse_tcp_target
from .types import ExecuteResult

_UNIX_PREFIXES = ("http+unix://", "unix://")


class ServiceClient:
    """
    Primary entry point for talking to one control-plane service.

    ``base_url`` selects the transport: ``http://`` and ``https://`` go over
    TCP, while ``unix://``, ``http+unix://`` or a bare absolute path select a
    Unix-domain socket.
    """

    def __init__(
        self,
        *,
        base_url: str,
        default_headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
        secure: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
        settings: ClientSettings | None = None,
        logger: Any | None = None,
        log_level: LogLevel | None = None,
    ) -> None:
        self.base_url = base_url
        self.target = self._resolve_target(base_url)
        self.timeout = timeout
        self.secure = secure
        self._default_headers = dict(default_headers or {})
        self._transport = transport
        self._settings = settings
        self._logger = create_logger(logger=logger, level=log_level)
        self._logger.info("Initializing ServiceClient for %s", base_url)

    def request(self) -> Request:
        req = Request(settings=self._settings, transport=self._transport, logger=self._logger)
        req.target = self.target
        for key, value in self._default_headers.items():
            req.set_header(key, value)
        if self.timeout:
            req.with_timeout(self.timeout)
        return req.secure(self.secure)

    def get(self, path: str) -> Request:
        return self.request().get(path)

    def put(self, path: str) -> Request:
        return self.request().put(path)

    def post(self, path: str) -> Request:
        return self.request().post(path)

    def delete(self, path: str) -> Request:
        return self.request().delete(path)

    async def execute_safe(self, request: Request) -> ExecuteResult[Response]:
        try:
            response = await request.end()
            return ExecuteResult(ok=True, data=response)
        except ServiceClientError as exc:
            return ExecuteResult(ok=False, error=exc)

    def _resolve_target(self, base_url: str) -> Target:
        if not base_url:
            raise ConfigError("ServiceClient: base_url is required")

        for prefix in _UNIX_PREFIXES:
            if base_url.startswith(prefix):
                path = base_url[len(prefix) :]
                if not path.startswith("/"):
                    raise ConfigError(f"ServiceClient: Unix socket path must be absolute: {base_url!r}")
                return UnixTarget(path)

        if base_url.startswith("/"):
            return UnixTarget(base_url)

        return parse_tcp_target(base_url)


__all__ = ["ServiceClient"]
