import logging
from typing import Any

import httpx
import pytest

from service_client import reset_settings

_ENV_VARS = (
    "SERVICE_CLIENT_TIMEOUT",
    "SERVICE_CLIENT_VERIFY_TLS",
    "SERVICE_CLIENT_USER_AGENT",
    "SERVICE_CLIENT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


class RecordingLogger:
    """Duck-typed logger that keeps every record it receives."""

    def __init__(self) -> None:
        self.records: list[tuple[int, str]] = []

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        self.records.append((level, msg % args if args else msg))

    def errors(self) -> list[str]:
        return [msg for level, msg in self.records if level >= logging.ERROR]


class ScriptedStream(httpx.AsyncByteStream):
    """Response body that yields fixed chunks, then optionally raises."""

    def __init__(self, chunks: list[bytes], error: Exception | None = None) -> None:
        self._chunks = chunks
        self._error = error
        self.closed = False

    async def __aiter__(self):
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
