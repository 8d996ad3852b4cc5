"""Connection targets and target-string parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Union

from ..errors import ConfigError

TransportKind = Literal["tcp", "unix"]

DEFAULT_HTTP_PORT = 80
DEFAULT_HTTPS_PORT = 443


@dataclass(frozen=True)
class TcpTarget:
    hostname: str
    port: int
    use_tls: bool = False

    kind: ClassVar[TransportKind] = "tcp"

    @property
    def scheme(self) -> str:
        return "https" if self.use_tls else "http"

    @property
    def base_url(self) -> str:
        host = f"[{self.hostname}]" if ":" in self.hostname else self.hostname
        return f"{self.scheme}://{host}:{self.port}"


@dataclass(frozen=True)
class UnixTarget:
    path: str

    kind: ClassVar[TransportKind] = "unix"

    @property
    def base_url(self) -> str:
        # Requests are routed through the socket; the host only fills the Host header.
        return "http://localhost"


Target = Union[TcpTarget, UnixTarget]


def parse_tcp_target(url: str) -> TcpTarget:
    """
    Parse ``scheme://host[:port]`` into a TcpTarget.

    Only the last colon-separated segment may be a port, so unbracketed hosts
    containing colons keep everything before it. Bracketed IPv6 literals such
    as ``[::1]:8080`` are unwrapped.
    """
    scheme, sep, rest = (url or "").partition("://")
    if not sep or not scheme:
        raise ConfigError(f"Request: Missing scheme in target {url!r}")

    scheme = scheme.lower()
    if scheme not in {"http", "https"}:
        raise ConfigError(f"Request: Unsupported scheme {scheme!r}")
    use_tls = scheme == "https"

    if rest.endswith("/"):
        rest = rest[:-1]
    if not rest:
        raise ConfigError(f"Request: Missing host in target {url!r}")

    if rest.startswith("["):
        hostname, port = _split_bracketed(rest, url)
    else:
        parts = rest.split(":")
        port = None
        if len(parts) > 1:
            port = _parse_port(parts.pop(), url)
        hostname = ":".join(parts)

    if not hostname:
        raise ConfigError(f"Request: Missing host in target {url!r}")
    if port is None:
        port = DEFAULT_HTTPS_PORT if use_tls else DEFAULT_HTTP_PORT

    return TcpTarget(hostname=hostname, port=port, use_tls=use_tls)


def _split_bracketed(rest: str, url: str) -> tuple[str, int | None]:
    end = rest.find("]")
    if end < 0:
        raise ConfigError(f"Request: Unterminated IPv6 host in target {url!r}")
    hostname = rest[1:end]
    tail = rest[end + 1 :]
    if not tail:
        return hostname, None
    if not tail.startswith(":"):
        raise ConfigError(f"Request: Invalid target {url!r}")
    return hostname, _parse_port(tail[1:], url)


def _parse_port(value: str, url: str) -> int:
    try:
        port = int(value, 10)
    except ValueError as exc:
        raise ConfigError(f"Request: Invalid port in target {url!r}", cause=exc) from exc
    if not 0 < port < 65536:
        raise ConfigError(f"Request: Port out of range in target {url!r}")
    return port


__all__ = [
    "DEFAULT_HTTPS_PORT",
    "DEFAULT_HTTP_PORT",
    "Target",
    "TcpTarget",
    "TransportKind",
    "UnixTarget",
    "parse_tcp_target",
]
