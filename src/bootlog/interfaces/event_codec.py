"""Decode serialized lifecycle events for replay.

Each serialized event is a JSON object with an ``"event"`` key naming the
event class plus snake_case fields. Errors travel as their message text and
come back as ``ReplayedError``.
"""

from __future__ import annotations

import json
import signal
from collections.abc import Callable, Iterable, Iterator
from dataclasses import fields
from datetime import timedelta
from typing import Any

from bootlog.domain.events import EVENT_TYPES, Event
from bootlog.errors import EventDecodeError, ReplayedError
from bootlog.formatting import parse_duration

EVENT_KEY = "event"

_EVENT_CLASSES: dict[str, type[Event]] = {cls.__name__: cls for cls in EVENT_TYPES}


def _decode_error(value: Any) -> BaseException | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("error values must be strings")
    return ReplayedError(value)


def _decode_runtime(value: Any) -> timedelta | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("runtime must be seconds or a duration string")
    if isinstance(value, (int, float)):
        try:
            return timedelta(seconds=value)
        except OverflowError as exc:
            raise ValueError("runtime out of range") from exc
    if isinstance(value, str):
        return parse_duration(value)
    raise ValueError("runtime must be seconds or a duration string")


def _decode_signal(value: Any) -> signal.Signals | str | None:
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return signal.Signals(value)
    if isinstance(value, str):
        name = value.strip().upper()
        if name in signal.Signals.__members__:
            return signal.Signals[name]
        return value
    raise ValueError("signal must be a name or a number")


def _decode_names(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError("expected a list of strings")
    return tuple(value)


def _decode_optional_str(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise ValueError("expected a string")


def _decode_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise ValueError("expected a string")


def _decode_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise ValueError("expected a boolean")


_FIELD_DECODERS: dict[str, Callable[[Any], Any]] = {
    "err": _decode_error,
    "start_err": _decode_error,
    "runtime": _decode_runtime,
    "signal": _decode_signal,
    "output_type_names": _decode_names,
    "stack_trace": _decode_names,
    "module_name": _decode_optional_str,
    "method": _decode_optional_str,
    "trace": _decode_optional_str,
    "private": _decode_bool,
}


def event_names() -> tuple[str, ...]:
    """Known event class names in declaration order."""

    return tuple(_EVENT_CLASSES)


def decode_event(data: Any, *, line: int | None = None) -> Event:
    if not isinstance(data, dict):
        raise EventDecodeError("event must be a JSON object", line=line)

    name = data.get(EVENT_KEY)
    if not isinstance(name, str) or not name:
        raise EventDecodeError(f"missing '{EVENT_KEY}' name", line=line)
    event_cls = _EVENT_CLASSES.get(name)
    if event_cls is None:
        raise EventDecodeError(f"unknown event '{name}'", line=line)

    allowed = {field.name for field in fields(event_cls)}
    kwargs: dict[str, Any] = {}
    for key, raw_value in data.items():
        if key == EVENT_KEY:
            continue
        if key not in allowed:
            raise EventDecodeError(f"unknown field '{key}' for {name}", line=line)
        decoder = _FIELD_DECODERS.get(key, _decode_str)
        try:
            kwargs[key] = decoder(raw_value)
        except ValueError as exc:
            raise EventDecodeError(f"invalid '{key}' for {name}: {exc}", line=line) from exc

    return event_cls(**kwargs)


def iter_events(lines: Iterable[str]) -> Iterator[Event]:
    """Decode JSON-lines input, skipping blank lines.

    Text files decode bytes in chunks while the iterator advances, so
    undecodable input is reported against the first line that could not be read.
    """

    line_iter = iter(lines)
    line_number = 0
    while True:
        try:
            raw_line = next(line_iter)
        except StopIteration:
            return
        except UnicodeDecodeError as exc:
            raise EventDecodeError(f"invalid text encoding: {exc.reason}", line=line_number + 1) from exc
        line_number += 1

        text = raw_line.strip()
        if not text:
            continue
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise EventDecodeError(f"invalid JSON: {exc.msg}", line=line_number) from exc
        yield decode_event(data, line=line_number)
