"""Translate lifecycle events into structured log entries.

``StructuredEventLogger`` is stateless: each call looks up the handler for the
event's class, builds zero or more ``LogEntry`` values and hands them to the
sink. Errors embedded in events are rendered, never raised. Sink failures
propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from bootlog.application.sink import Sink
from bootlog.domain.entries import Level, LogEntry
from bootlog.domain.events import (
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
    Replaced,
    RolledBack,
    RollingBack,
    Run,
    Started,
    Stopped,
    Stopping,
    Supplied,
)
from bootlog.formatting import format_duration, signal_name

LOGGER = logging.getLogger("bootlog.dispatch")

LOGGER_INTERFACE_NAME = "bootlog.Logger"
APPLY_OPTIONS_FAILED = "error encountered while applying options"

Fields = tuple[tuple[str, object], ...]
Handler = Callable[[Event], Iterator[LogEntry]]


def _error_text(err: BaseException) -> str:
    return str(err)


def _module(module_name: str | None) -> Fields:
    """Optional module field: omitted when absent or empty."""

    if not module_name:
        return ()
    return (("module", module_name),)


def _info(message: str, *fields: tuple[str, object]) -> LogEntry:
    return LogEntry(level=Level.INFO, message=message, fields=tuple(fields))


def _error(message: str, err: BaseException, *fields: tuple[str, object]) -> LogEntry:
    return LogEntry(
        level=Level.ERROR,
        message=message,
        fields=(("error", _error_text(err)), *fields),
    )


def _hook_executing(message: str) -> Handler:
    def handle(event: OnStartExecuting | OnStopExecuting) -> Iterator[LogEntry]:
        yield _info(message, ("callee", event.function_name), ("caller", event.caller_name))

    return handle


def _hook_executed(hook: str) -> Handler:
    def handle(event: OnStartExecuted | OnStopExecuted) -> Iterator[LogEntry]:
        if event.err is not None:
            yield _error(
                f"{hook} hook failed",
                event.err,
                ("callee", event.function_name),
                ("caller", event.caller_name),
            )
            return
        yield _info(
            f"{hook} hook executed",
            ("callee", event.function_name),
            ("caller", event.caller_name),
            ("runtime", format_duration(event.runtime)),
        )

    return handle


def _supplied(event: Supplied) -> Iterator[LogEntry]:
    fields = (("type", event.type_name), ("module", event.module_name or ""))
    if event.err is not None:
        yield _error("supplied", event.err, *fields)
        return
    yield _info("supplied", *fields)


def _provided(event: Provided) -> Iterator[LogEntry]:
    module = ("module", event.module_name or "")
    for type_name in event.output_type_names:
        yield _info(
            "provided",
            ("constructor", event.constructor_name),
            module,
            ("type", type_name),
        )
    if event.err is not None:
        yield _error(APPLY_OPTIONS_FAILED, event.err, module)


def _decorated(event: Decorated) -> Iterator[LogEntry]:
    module = ("module", event.module_name or "")
    for type_name in event.output_type_names:
        yield _info(
            "decorated",
            ("decorator", event.decorator_name),
            module,
            ("type", type_name),
        )
    if event.err is not None:
        yield _error(APPLY_OPTIONS_FAILED, event.err, module)


def _replaced(event: Replaced) -> Iterator[LogEntry]:
    module = ("module", event.module_name or "")
    for type_name in event.output_type_names:
        yield _info("replaced", module, ("type", type_name))
    if event.err is not None:
        yield _error("error encountered while replacing", event.err, module)


def _run(event: Run) -> Iterator[LogEntry]:
    identity = (("name", event.name), ("kind", event.kind), *_module(event.module_name))
    if event.err is not None:
        yield _error("error returned", event.err, *identity)
        return
    yield _info("run", *identity, ("runtime", format_duration(event.runtime)))


def _invoking(event: Invoking) -> Iterator[LogEntry]:
    yield _info("invoking", ("function", event.function_name), *_module(event.module_name))


def _invoked(event: Invoked) -> Iterator[LogEntry]:
    if event.err is not None:
        yield _error(
            "invoke failed",
            event.err,
            ("stack", event.trace or ""),
            ("function", event.function_name),
        )


def _started(event: Started) -> Iterator[LogEntry]:
    if event.err is not None:
        yield _error("start failed", event.err)
        return
    yield _info("started")


def _stopping(event: Stopping) -> Iterator[LogEntry]:
    yield _info("received signal", ("signal", signal_name(event.signal)))


def _stopped(event: Stopped) -> Iterator[LogEntry]:
    if event.err is not None:
        yield _error("stop failed", event.err)


def _rolling_back(event: RollingBack) -> Iterator[LogEntry]:
    if event.start_err is not None:
        yield _error("start failed, rolling back", event.start_err)


def _rolled_back(event: RolledBack) -> Iterator[LogEntry]:
    if event.err is not None:
        yield _error("rollback failed", event.err)


def _logger_initialized(event: LoggerInitialized) -> Iterator[LogEntry]:
    if event.err is not None:
        yield _error("custom logger initialization failed", event.err)
        return
    yield _info(
        f"initialized custom {LOGGER_INTERFACE_NAME}",
        ("function", event.constructor_name),
    )


def _unhandled(event: Event) -> Iterator[LogEntry]:
    LOGGER.warning("no handler registered for event", extra={"event_name": type(event).__name__})
    yield LogEntry(
        level=Level.DEBUG,
        message="unhandled event",
        fields=(("event", type(event).__name__),),
    )


HANDLERS: dict[type[Event], Handler] = {
    OnStartExecuting: _hook_executing("OnStart hook executing"),
    OnStopExecuting: _hook_executing("OnStop hook executing"),
    OnStartExecuted: _hook_executed("OnStart"),
    OnStopExecuted: _hook_executed("OnStop"),
    Supplied: _supplied,
    Provided: _provided,
    Decorated: _decorated,
    Replaced: _replaced,
    Run: _run,
    Invoking: _invoking,
    Invoked: _invoked,
    Started: _started,
    Stopping: _stopping,
    Stopped: _stopped,
    RollingBack: _rolling_back,
    RolledBack: _rolled_back,
    LoggerInitialized: _logger_initialized,
}


def entries_for(event: Event) -> tuple[LogEntry, ...]:
    """Return the entries an event renders to, without writing them anywhere."""

    handler = _unhandled
    for cls in type(event).__mro__:
        if cls in HANDLERS:
            handler = HANDLERS[cls]
            break
    return tuple(handler(event))


class StructuredEventLogger:
    """Event logger that writes one structured entry per rendered record."""

    def __init__(self, sink: Sink) -> None:
        self._sink = sink

    @property
    def sink(self) -> Sink:
        return self._sink

    def log_event(self, event: Event) -> None:
        for entry in entries_for(event):
            self._sink.emit(entry)
