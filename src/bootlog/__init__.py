"""Public package exports for bootlog with lazy imports."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "Event",
    "Level",
    "LogEntry",
    "Logger",
    "Sink",
    "NullSink",
    "StructuredEventLogger",
    "entries_for",
    "JsonLineSink",
    "LoggingSink",
    "JsonRecordFormatter",
    "format_duration",
    "signal_name",
    "EventDecodeError",
    "ReplayedError",
]

_EXPORT_MODULES: dict[str, str] = {
    "Event": "bootlog.domain.events",
    "Level": "bootlog.domain.entries",
    "LogEntry": "bootlog.domain.entries",
    "Logger": "bootlog.application.sink",
    "Sink": "bootlog.application.sink",
    "NullSink": "bootlog.application.sink",
    "StructuredEventLogger": "bootlog.application.dispatcher",
    "entries_for": "bootlog.application.dispatcher",
    "JsonLineSink": "bootlog.infrastructure.json_sink",
    "LoggingSink": "bootlog.infrastructure.logging_sink",
    "JsonRecordFormatter": "bootlog.infrastructure.logging_sink",
    "format_duration": "bootlog.formatting",
    "signal_name": "bootlog.formatting",
    "EventDecodeError": "bootlog.errors",
    "ReplayedError": "bootlog.errors",
}


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MODULES:
        raise AttributeError(f"module 'bootlog' has no attribute {name!r}")

    module = import_module(_EXPORT_MODULES[name])
    value = getattr(module, name)
    globals()[name] = value
    return value
