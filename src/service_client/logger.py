"""Level-filtered logging wrapper used by requests and clients."""

from __future__ import annotations

import logging
from typing import Any, Literal, Protocol

from .config import get_settings

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

LOGGER_NAME = "service_client"

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

_STDLIB_LEVELS: dict[LogLevel, int] = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

LOG_LEVEL_PRIORITY: dict[LogLevel, int] = {
    "trace": 0,
    "debug": 1,
    "info": 2,
    "warn": 3,
    "error": 4,
}


class LoggerProtocol(Protocol):
    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


class BoundLogger:
    """Wraps a logging.Logger (or duck-typed object) with a minimum level."""

    def __init__(self, logger: Any | None = None, *, level: LogLevel = "info") -> None:
        self._logger = logger if logger is not None else _default_logger()
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("trace", msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("debug", msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("info", msg, *args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("warn", msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("error", msg, *args, **kwargs)

    def failure(self, err: BaseException) -> None:
        """Record a failed operation before it is raised to the caller."""
        self.error("%s: %s", type(err).__name__, err)

    def child(self, name: str) -> "BoundLogger":
        """Create a child logger anchored to the same Python logger."""
        if isinstance(self._logger, logging.Logger):
            base = self._logger.getChild(name)
        else:
            base = self._logger
        return BoundLogger(base, level=self._level)

    def enabled(self, level: LogLevel) -> bool:
        return LOG_LEVEL_PRIORITY[level] >= LOG_LEVEL_PRIORITY[self._level]

    def _emit(self, level: LogLevel, msg: str, *args: Any, **kwargs: Any) -> None:
        if not self.enabled(level):
            return
        try:
            if hasattr(self._logger, "log"):
                self._logger.log(_STDLIB_LEVELS[level], msg, *args, **kwargs)
                return
            handler = getattr(self._logger, level, None)
            if handler is None and level == "warn":
                handler = getattr(self._logger, "warning", None)
            if handler:
                handler(msg, *args, **kwargs)
        except Exception:
            # Never let logging failures bubble up into client code
            pass


def _default_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(TRACE_LEVEL)
    return logger


def create_logger(*, logger: Any | None = None, level: LogLevel | None = None) -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    if level is None:
        level = get_settings().log_level  # type: ignore[assignment]
    return BoundLogger(logger, level=level or "info")


__all__ = ["BoundLogger", "LOGGER_NAME", "LogLevel", "LoggerProtocol", "create_logger"]
