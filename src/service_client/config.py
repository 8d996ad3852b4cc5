"""Process-wide settings for outbound requests."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any

from .version import __version__

DEFAULT_TIMEOUT = 20.0
DEFAULT_USER_AGENT = f"service-client/{__version__}"

_LOG_LEVELS = {"trace", "debug", "info", "warn", "error"}


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ClientSettings:
    """Defaults applied to every request that does not override them."""

    timeout: float = DEFAULT_TIMEOUT
    verify_tls: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "info"

    @property
    def timeout_millis(self) -> int:
        return int(self.timeout * 1000)

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("SERVICE_CLIENT_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        log_level = os.getenv("SERVICE_CLIENT_LOG_LEVEL", cls.log_level).strip().lower()
        if log_level not in _LOG_LEVELS:
            log_level = cls.log_level
        return cls(
            timeout=timeout,
            verify_tls=_bool_env("SERVICE_CLIENT_VERIFY_TLS", cls.verify_tls),
            user_agent=os.getenv("SERVICE_CLIENT_USER_AGENT", cls.user_agent),
            log_level=log_level,
        )


_settings: ClientSettings | None = None


def load_settings() -> ClientSettings:
    """Load settings from the environment with sensible defaults."""
    return ClientSettings.from_env()


def get_settings() -> ClientSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def configure(settings: ClientSettings | None = None, **overrides: Any) -> ClientSettings:
    """Replace the process-wide settings. Meant to be called once at start-up."""
    global _settings
    base = settings or get_settings()
    _settings = replace(base, **overrides) if overrides else base
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


__all__ = [
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "ClientSettings",
    "configure",
    "get_settings",
    "load_settings",
    "reset_settings",
]
