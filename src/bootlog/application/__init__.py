"""DDD application layer."""

from .dispatcher import HANDLERS, StructuredEventLogger, entries_for
from .sink import Logger, NullSink, Sink

__all__ = ["HANDLERS", "Logger", "NullSink", "Sink", "StructuredEventLogger", "entries_for"]
