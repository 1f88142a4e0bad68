"""Sink that writes each entry as a single compact JSON line."""

from __future__ import annotations

import json
import sys
import threading
from collections.abc import Iterable
from typing import TextIO

from bootlog.domain.entries import Level, LogEntry


def render_json_line(level: str, fields: Iterable[tuple[str, object]], message: str) -> str:
    """Render ``level`` first, then ``fields`` in order, then ``message``."""

    payload: dict[str, object] = {"level": level}
    for key, value in fields:
        payload[key] = value
    payload["message"] = message
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


class JsonLineSink:
    """Write entries to a text stream, one JSON object per line."""

    def __init__(self, stream: TextIO | None = None, min_level: Level = Level.DEBUG) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._min_level = Level(min_level)
        self._lock = threading.Lock()

    @property
    def min_level(self) -> Level:
        return self._min_level

    def emit(self, entry: LogEntry) -> None:
        if entry.level.rank < self._min_level.rank:
            return
        line = render_json_line(entry.level.value, entry.fields, entry.message)
        with self._lock:
            self._stream.write(line + "\n")
            self._stream.flush()
