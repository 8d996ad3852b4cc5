"""Public surface for the service client."""

from .client import ServiceClient
from .config import ClientSettings, configure, get_settings, load_settings, reset_settings
from .errors import (
    ClientError,
    ConfigError,
    ReadError,
    RequestError,
    ServiceClientError,
    TimeoutError,
)
from .request import Request
from .response import Response
from .transport import TcpTarget, UnixTarget, parse_tcp_target
from .types import ExecuteResult
from .version import __version__

__all__ = [
    "__version__",
    "ClientError",
    "ClientSettings",
    "ConfigError",
    "ExecuteResult",
    "ReadError",
    "Request",
    "RequestError",
    "Response",
    "ServiceClient",
    "ServiceClientError",
    "TcpTarget",
    "TimeoutError",
    "UnixTarget",
    "configure",
    "get_settings",
    "load_settings",
    "parse_tcp_target",
    "reset_settings",
]
