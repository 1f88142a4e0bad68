"""Rendering helpers for durations and signals.

Durations render the way Go's ``time.Duration`` prints them (``"3ms"``,
``"1.5s"``, ``"1m30s"``). Bootstrap containers on both sides of a polyglot
deployment then produce identical log lines. Signals render as their upper-cased
description (``SIGINT`` becomes ``"INTERRUPT"``).
"""

from __future__ import annotations

import re
import signal
from datetime import timedelta

_MICROS_PER_MS = 1_000
_MICROS_PER_SECOND = 1_000_000
_MICROS_PER_MINUTE = 60 * _MICROS_PER_SECOND
_MICROS_PER_HOUR = 60 * _MICROS_PER_MINUTE

_UNIT_MICROS: dict[str, float] = {
    "ns": 0.001,
    "us": 1.0,
    "µs": 1.0,
    "μs": 1.0,
    "ms": float(_MICROS_PER_MS),
    "s": float(_MICROS_PER_SECOND),
    "m": float(_MICROS_PER_MINUTE),
    "h": float(_MICROS_PER_HOUR),
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")

_SIGNAL_DESCRIPTIONS: dict[str, str] = {
    "SIGHUP": "hangup",
    "SIGINT": "interrupt",
    "SIGQUIT": "quit",
    "SIGILL": "illegal instruction",
    "SIGTRAP": "trace/breakpoint trap",
    "SIGABRT": "aborted",
    "SIGBUS": "bus error",
    "SIGFPE": "floating point exception",
    "SIGKILL": "killed",
    "SIGUSR1": "user defined signal 1",
    "SIGSEGV": "segmentation fault",
    "SIGUSR2": "user defined signal 2",
    "SIGPIPE": "broken pipe",
    "SIGALRM": "alarm clock",
    "SIGTERM": "terminated",
}


def _format_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if frac == 0:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{str(frac).zfill(digits).rstrip('0')}"


def format_duration(value: timedelta | None) -> str:
    """Render a duration in Go ``Duration.String`` form; ``None`` renders ``"0s"``."""

    if value is None:
        return "0s"

    micros = value // timedelta(microseconds=1)
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < _MICROS_PER_MS:
        return f"{sign}{micros}µs"
    if micros < _MICROS_PER_SECOND:
        return f"{sign}{_format_fraction(micros, _MICROS_PER_MS)}ms"

    hours, remainder = divmod(micros, _MICROS_PER_HOUR)
    minutes, seconds_micros = divmod(remainder, _MICROS_PER_MINUTE)
    rendered = sign
    if hours:
        rendered += f"{hours}h"
    if hours or minutes:
        rendered += f"{minutes}m"
    return rendered + f"{_format_fraction(seconds_micros, _MICROS_PER_SECOND)}s"


def parse_duration(text: str) -> timedelta:
    """Parse a Go-style duration string such as ``"1m30s"`` or ``"3ms"``."""

    raw = text.strip()
    if not raw:
        raise ValueError("Duration must not be empty.")

    sign = 1
    body = raw
    if body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]

    if body == "0":
        return timedelta(0)

    total_micros = 0.0
    position = 0
    while position < len(body):
        match = _DURATION_PART.match(body, position)
        if match is None:
            raise ValueError(f"Invalid duration: '{text}'.")
        total_micros += float(match.group(1)) * _UNIT_MICROS[match.group(2)]
        position = match.end()

    if position == 0:
        raise ValueError(f"Invalid duration: '{text}'.")
    try:
        return timedelta(microseconds=sign * round(total_micros))
    except OverflowError as exc:
        raise ValueError("runtime out of range") from exc


def signal_name(value: signal.Signals | int | str | None) -> str:
    """Return the upper-cased description used for the ``signal`` field."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value.upper()

    try:
        sig = signal.Signals(value)
    except ValueError:
        return f"SIGNAL {int(value)}"
    description = _SIGNAL_DESCRIPTIONS.get(sig.name)
    if description is None:
        description = signal.strsignal(sig) or sig.name
    return description.upper()
