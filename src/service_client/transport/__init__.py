"""Connection targets and the httpx client factory."""

from .base import (
    DEFAULT_HTTP_PORT,
    DEFAULT_HTTPS_PORT,
    Target,
    TcpTarget,
    TransportKind,
    UnixTarget,
    parse_tcp_target,
)
from .http import build_transport, create_async_client, flatten_raw_headers

__all__ = [
    "DEFAULT_HTTPS_PORT",
    "DEFAULT_HTTP_PORT",
    "Target",
    "TcpTarget",
    "TransportKind",
    "UnixTarget",
    "build_transport",
    "create_async_client",
    "flatten_raw_headers",
    "parse_tcp_target",
]
