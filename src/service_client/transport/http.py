"""httpx-backed connection factory for TCP, TLS and Unix-socket targets."""

from __future__ import annotations

import httpx

from .base import Target, UnixTarget


def build_transport(target: Target, *, verify: bool) -> httpx.AsyncBaseTransport:
    if isinstance(target, UnixTarget):
        return httpx.AsyncHTTPTransport(uds=target.path, verify=verify)
    return httpx.AsyncHTTPTransport(verify=verify)


def create_async_client(
    target: Target,
    *,
    timeout: float,
    verify: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create a single-use AsyncClient bound to ``target``.

    ``transport`` replaces the network layer entirely (tests pass an
    ``httpx.MockTransport`` here). Redirects are never followed.
    """
    return httpx.AsyncClient(
        base_url=target.base_url,
        transport=transport or build_transport(target, verify=verify),
        timeout=httpx.Timeout(timeout),
        follow_redirects=False,
    )


def flatten_raw_headers(headers: httpx.Headers) -> list[str]:
    """Return headers as alternating name/value strings in received order."""
    encoding = headers.encoding
    flat: list[str] = []
    for name, value in headers.raw:
        flat.append(name.decode(encoding))
        flat.append(value.decode(encoding))
    return flat


__all__ = ["build_transport", "create_async_client", "flatten_raw_headers"]
