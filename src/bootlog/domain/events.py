"""Lifecycle event contracts emitted by the application bootstrap container.

Every event is an immutable value. Optional data is modelled as ``None``
rather than an empty-string sentinel so "absent" and "empty" stay distinct
until rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from signal import Signals


@dataclass(frozen=True, slots=True)
class Event:
    """Base class for the closed set of lifecycle events."""


@dataclass(frozen=True, slots=True)
class OnStartExecuting(Event):
    """An OnStart hook is about to run."""

    function_name: str = ""
    caller_name: str = ""


@dataclass(frozen=True, slots=True)
class OnStartExecuted(Event):
    """An OnStart hook finished, successfully or not."""

    function_name: str = ""
    caller_name: str = ""
    method: str | None = None
    runtime: timedelta | None = None
    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class OnStopExecuting(Event):
    """An OnStop hook is about to run."""

    function_name: str = ""
    caller_name: str = ""


@dataclass(frozen=True, slots=True)
class OnStopExecuted(Event):
    """An OnStop hook finished, successfully or not."""

    function_name: str = ""
    caller_name: str = ""
    method: str | None = None
    runtime: timedelta | None = None
    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class Supplied(Event):
    """A concrete value was supplied to the container."""

    type_name: str = ""
    module_name: str | None = None
    stack_trace: tuple[str, ...] = ()
    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class Provided(Event):
    """A constructor was registered for one or more output types."""

    constructor_name: str = ""
    module_name: str | None = None
    output_type_names: tuple[str, ...] = ()
    private: bool = False
    stack_trace: tuple[str, ...] = ()
    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class Decorated(Event):
    """A decorator was registered for one or more output types."""

    decorator_name: str = ""
    module_name: str | None = None
    output_type_names: tuple[str, ...] = ()
    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class Replaced(Event):
    """Values for one or more output types were replaced."""

    module_name: str | None = None
    output_type_names: tuple[str, ...] = ()
    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class Run(Event):
    """A constructor or decorator was executed by the container."""

    name: str = ""
    kind: str = ""
    module_name: str | None = None
    runtime: timedelta | None = None
    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class Invoking(Event):
    """An invoked function is about to run."""

    function_name: str = ""
    module_name: str | None = None


@dataclass(frozen=True, slots=True)
class Invoked(Event):
    """An invoked function returned."""

    function_name: str = ""
    module_name: str | None = None
    trace: str | None = None
    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class Started(Event):
    """The application finished starting (or failed to)."""

    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class Stopping(Event):
    """The application received a signal and is shutting down."""

    signal: Signals | str | None = None


@dataclass(frozen=True, slots=True)
class Stopped(Event):
    """The application finished stopping."""

    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class RollingBack(Event):
    """Startup failed and already-started hooks are being rolled back."""

    start_err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class RolledBack(Event):
    """Rollback after a failed start has completed."""

    err: BaseException | None = None


@dataclass(frozen=True, slots=True)
class LoggerInitialized(Event):
    """A custom event logger was constructed."""

    constructor_name: str = ""
    err: BaseException | None = None


EVENT_TYPES: tuple[type[Event], ...] = (
    OnStartExecuting,
    OnStartExecuted,
    OnStopExecuting,
    OnStopExecuted,
    Supplied,
    Provided,
    Decorated,
    Replaced,
    Run,
    Invoking,
    Invoked,
    Started,
    Stopping,
    Stopped,
    RollingBack,
    RolledBack,
    LoggerInitialized,
)
