"""Structured log entry produced for a single lifecycle event."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Level(str, Enum):
    """Severity levels, declared lowest first."""

    DEBUG = "debug"
    INFO = "info"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _LEVEL_RANKS[self]


_LEVEL_RANKS: dict[Level, int] = {level: index for index, level in enumerate(Level)}


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One record handed to a sink: level, ordered fields, terminal message."""

    level: Level
    message: str
    fields: tuple[tuple[str, object], ...] = ()

    def field_dict(self) -> dict[str, object]:
        return dict(self.fields)
