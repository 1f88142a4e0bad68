"""stdlib ``logging`` bridge for lifecycle entries."""

from __future__ import annotations

import logging
from typing import TextIO

from bootlog.domain.entries import Level, LogEntry
from bootlog.infrastructure.json_sink import render_json_line

DEFAULT_LOGGER_NAME = "bootlog.events"

_STDLIB_LEVELS: dict[Level, int] = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.ERROR: logging.ERROR,
}


class LoggingSink:
    """Emit entries through a stdlib logger, carrying ordered fields in ``extra``."""

    def __init__(self, logger: logging.Logger | None = None, min_level: Level = Level.DEBUG) -> None:
        self._logger = logger if logger is not None else logging.getLogger(DEFAULT_LOGGER_NAME)
        self._min_level = Level(min_level)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def emit(self, entry: LogEntry) -> None:
        if entry.level.rank < self._min_level.rank:
            return
        self._logger.log(
            _STDLIB_LEVELS[entry.level],
            entry.message,
            extra={
                "bootlog_level": entry.level.value,
                "bootlog_fields": entry.fields,
            },
        )


class JsonRecordFormatter(logging.Formatter):
    """Render a ``LogRecord`` in the same single-line JSON shape as ``JsonLineSink``."""

    def format(self, record: logging.LogRecord) -> str:
        level = getattr(record, "bootlog_level", record.levelname.lower())
        fields = getattr(record, "bootlog_fields", ())
        return render_json_line(level, fields, record.getMessage())


def attach_json_handler(logger: logging.Logger, stream: TextIO) -> logging.Handler:
    """Route ``logger`` to ``stream`` using ``JsonRecordFormatter``.

    Handlers previously attached this way are replaced, so repeated calls do
    not duplicate output.
    """

    for existing in list(logger.handlers):
        if isinstance(existing.formatter, JsonRecordFormatter):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonRecordFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return handler
