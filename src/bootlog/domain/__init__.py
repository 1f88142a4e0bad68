"""DDD domain layer."""

from .entries import Level, LogEntry
from .events import (
    EVENT_TYPES,
    Decorated,
    Event,
    Invoked,
    Invoking,
    LoggerInitialized,
    OnStartExecuted,
    OnStartExecuting,
    OnStopExecuted,
    OnStopExecuting,
    Provided,
    RolledBack,
    RollingBack,
    Replaced,
    Run,
    Started,
    Stopped,
    Stopping,
    Supplied,
)

__all__ = [
    "Event",
    "EVENT_TYPES",
    "OnStartExecuting",
    "OnStartExecuted",
    "OnStopExecuting",
    "OnStopExecuted",
    "Supplied",
    "Provided",
    "Decorated",
    "Replaced",
    "Run",
    "Invoking",
    "Invoked",
    "Started",
    "Stopping",
    "Stopped",
    "RollingBack",
    "RolledBack",
    "LoggerInitialized",
    "Level",
    "LogEntry",
]
