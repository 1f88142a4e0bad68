"""CLI-facing handlers that wire sinks to the event logger."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from bootlog.application.dispatcher import StructuredEventLogger
from bootlog.application.sink import Sink
from bootlog.domain.entries import Level
from bootlog.infrastructure.json_sink import JsonLineSink
from bootlog.infrastructure.logging_sink import LoggingSink, attach_json_handler
from bootlog.interfaces.event_codec import iter_events
from bootlog.utils.config import SinkConfig, load_sink_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReplaySummary:
    events: int
    path: Path


def resolve_config(
    config_path: Path | None,
    min_level: Level | None = None,
    output_format: str | None = None,
) -> SinkConfig:
    """Load config from disk (or defaults) and apply command-line overrides."""

    config = load_sink_config(config_path) if config_path is not None else SinkConfig()
    overrides: dict[str, object] = {}
    if min_level is not None:
        overrides["min_level"] = min_level
    if output_format is not None:
        overrides["format"] = output_format
    if overrides:
        config = SinkConfig.model_validate({**config.model_dump(), **overrides})
    return config


def build_sink(config: SinkConfig, stream: TextIO) -> Sink:
    if config.format == "logging":
        target = logging.getLogger(config.logger_name)
        attach_json_handler(target, stream)
        return LoggingSink(target, min_level=config.min_level)
    return JsonLineSink(stream, min_level=config.min_level)


def replay_events(events_path: Path, config: SinkConfig, stream: TextIO) -> ReplaySummary:
    """Decode every event in a JSON-lines file and log it to ``stream``."""

    event_logger = StructuredEventLogger(build_sink(config, stream))
    count = 0
    with events_path.open("r", encoding="utf-8") as handle:
        for event in iter_events(handle):
            event_logger.log_event(event)
            count += 1

    logger.debug(
        "Replayed lifecycle events",
        extra={"events_path": str(events_path), "event_count": count, "sink_format": config.format},
    )
    return ReplaySummary(events=count, path=events_path)
