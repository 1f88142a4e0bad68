"""Application-level ports for structured log sinks and event loggers."""

from __future__ import annotations

from typing import Protocol

from bootlog.domain.entries import LogEntry
from bootlog.domain.events import Event


class Sink(Protocol):
    """Port for writing a single structured log entry."""

    def emit(self, entry: LogEntry) -> None:
        """Serialize and write one entry."""


class Logger(Protocol):
    """Port implemented by anything that consumes lifecycle events."""

    def log_event(self, event: Event) -> None:
        """Handle one lifecycle event."""


class NullSink:
    """No-op sink used when lifecycle logging is disabled."""

    def emit(self, entry: LogEntry) -> None:  # noqa: ARG002
        return
