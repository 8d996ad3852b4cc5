"""Fluent request builder and the single-exchange send/receive lifecycle."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx

from .config import ClientSettings, get_settings
from .errors import ClientError, ConfigError, RequestError, ServiceClientError, TimeoutError
from .logger import BoundLogger, create_logger
from .response import Response
from .transport import Target, TcpTarget, UnixTarget, create_async_client, flatten_raw_headers, parse_tcp_target

_UNSET: Any = object()


class Request:
    """
    Builder for one outbound request.

    Configuration calls mutate the builder and return it so they can be
    chained; ``end()`` performs the exchange. A Request is meant to be sent
    once and is not safe to share between concurrent sends.
    """

    def __init__(
        self,
        *,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: Any | None = None,
    ) -> None:
        self.target: Target | None = None
        self.skip_verify = False
        self.timeout_millis = 0
        self.method: str | None = None
        self.path: str | None = None
        self.headers: dict[str, str] = {}
        self.data: Any = _UNSET
        self._settings = settings
        self._transport = transport
        self._logger = create_logger(logger=logger).child("request")

    def tcp(self, url: str) -> "Request":
        self.target = parse_tcp_target(url)
        return self

    def unix_socket(self, path: str) -> "Request":
        if not path:
            raise ConfigError("Request: Missing unix socket path")
        self.target = UnixTarget(path)
        return self

    def with_timeout(self, seconds: float) -> "Request":
        if seconds < 0:
            raise ConfigError(f"Request: Negative timeout {seconds!r}")
        self.timeout_millis = int(seconds * 1000)
        return self

    def get(self, path: str) -> "Request":
        return self._route("GET", path)

    def put(self, path: str) -> "Request":
        return self._route("PUT", path)

    def post(self, path: str) -> "Request":
        return self._route("POST", path)

    def delete(self, path: str) -> "Request":
        return self._route("DELETE", path)

    def set_header(self, key: str, value: str) -> "Request":
        self.headers[key] = value
        return self

    def secure(self, enabled: bool) -> "Request":
        self.skip_verify = not enabled
        return self

    def with_body(self, payload: Any) -> "Request":
        if not isinstance(payload, (str, bytes)):
            self.headers["Content-Type"] = "application/json"
        self.data = payload
        return self

    send = with_body

    @property
    def use_tls(self) -> bool:
        return isinstance(self.target, TcpTarget) and self.target.use_tls

    async def end(self) -> Response:
        """Send the request and wait for the complete buffered response."""
        try:
            settings = self._settings or get_settings()
            content = self._encode_body()
            client = self._open(settings)
        except Exception as exc:
            raise self._fail(RequestError("Request: Exception", cause=exc)) from exc

        async with client:
            try:
                request = self._assemble(client, settings, content)
            except Exception as exc:
                raise self._fail(RequestError("Request: Exception", cause=exc)) from exc

            try:
                self._logger.debug("%s %s (%s)", request.method, request.url, self._describe_target())
                resp = await client.send(request, stream=True)
                try:
                    response = Response(resp.status_code, resp.reason_phrase, flatten_raw_headers(resp.headers))
                    async for chunk in resp.aiter_bytes():
                        response.append(chunk)
                finally:
                    await resp.aclose()
            except httpx.TimeoutException as exc:
                raise self._fail(TimeoutError("Request: Timeout error", cause=exc)) from exc
            except httpx.RequestError as exc:
                raise self._fail(ClientError("Request: Client error", cause=exc)) from exc

        response.finish()
        self._logger.debug(
            "%s %s <- %s bytes=%d",
            request.method,
            request.url,
            response.status_code,
            len(response.string()),
        )
        return response

    def run(self) -> Response:
        """Blocking wrapper around ``end()`` for callers without an event loop."""
        return asyncio.run(self.end())

    def _route(self, method: str, path: str) -> "Request":
        self.method = method
        self.path = path
        return self

    def _open(self, settings: ClientSettings) -> httpx.AsyncClient:
        if self.target is None:
            raise ValueError("no transport target configured")
        if not self.method or not self.path:
            raise ValueError("method and path must be set before end()")
        timeout = self.timeout_millis or settings.timeout_millis
        return create_async_client(
            self.target,
            timeout=timeout / 1000,
            verify=settings.verify_tls and not self.skip_verify,
            transport=self._transport,
        )

    def _assemble(
        self,
        client: httpx.AsyncClient,
        settings: ClientSettings,
        content: str | bytes | None,
    ) -> httpx.Request:
        headers = dict(self.headers)
        if not any(key.lower() == "user-agent" for key in headers):
            headers["User-Agent"] = settings.user_agent
        assert self.method is not None and self.path is not None
        return client.build_request(self.method, self.path, headers=headers, content=content)

    def _encode_body(self) -> str | bytes | None:
        if self.data is _UNSET:
            return None
        if isinstance(self.data, (str, bytes)):
            return self.data or None
        return json.dumps(self.data, separators=(",", ":"))

    def _describe_target(self) -> str:
        if isinstance(self.target, UnixTarget):
            return f"unix:{self.target.path}"
        if isinstance(self.target, TcpTarget):
            return f"{'tls' if self.target.use_tls else 'tcp'}:{self.target.hostname}:{self.target.port}"
        return "none"

    def _fail(self, err: ServiceClientError) -> ServiceClientError:
        self._logger.failure(err)
        return err


__all__ = ["Request"]
