"""Exception types raised or carried by bootlog."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EventDecodeError(ValueError):
    """A serialized event could not be turned into an event value."""

    message: str
    line: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"

    def as_dict(self) -> dict[str, object]:
        return {"line": self.line, "message": self.message}


class ReplayedError(Exception):
    """Upstream failure reconstructed from its rendered message text."""


class ConfigLoadError(ValueError):
    """A sink config file exists but could not be parsed."""
