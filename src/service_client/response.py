"""Buffered response returned by Request.end()."""

from __future__ import annotations

import codecs
import json
from typing import Any, Sequence

from .errors import ReadError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name!r}")


class Response:
    """
    One completed exchange.

    Body bytes are appended as they arrive and decoded incrementally as UTF-8.
    After ``finish()`` the response is read-only. The header index is built
    from ``raw_headers`` on the first ``header()`` call; a repeated header name
    keeps its last value.
    """

    def __init__(self, status_code: int, status_message: str, raw_headers: Sequence[str] = ()) -> None:
        self.status_code = status_code
        self.status_message = status_message
        self.raw_headers: tuple[str, ...] = tuple(raw_headers)
        self._headers: dict[str, str] | None = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._parts: list[str] = []
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    def append(self, chunk: bytes) -> None:
        if self._finished:
            raise RuntimeError("Response is already finished")
        if chunk:
            self._parts.append(self._decoder.decode(chunk))

    def finish(self) -> "Response":
        if not self._finished:
            self._parts.append(self._decoder.decode(b"", final=True))
            self._parts = ["".join(self._parts)]
            self._finished = True
        return self

    def header(self, name: str) -> str | None:
        if self._headers is None:
            headers: dict[str, str] = {}
            pairs = iter(self.raw_headers)
            for key, value in zip(pairs, pairs):
                headers[key] = value
            self._headers = headers
        return self._headers.get(name)

    def string(self) -> str:
        return "".join(self._parts)

    def json(self) -> Any:
        text = self.string()
        if not text:
            return None
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except ValueError as exc:
            raise ReadError("Request: JSON parse failed", cause=exc) from exc

    def json_passive(self) -> Any:
        try:
            return self.json()
        except ReadError:
            return None

    def __repr__(self) -> str:
        return f"<Response [{self.status_code} {self.status_message}]>"


__all__ = ["Response"]
