from __future__ import annotations

from pathlib import Path
from typing import Literal

import json

from pydantic import BaseModel, Field, field_validator

from bootlog.domain.entries import Level
from bootlog.errors import ConfigLoadError


class SinkConfig(BaseModel):
    format: Literal["json", "logging"] = "json"
    min_level: Level = Level.DEBUG
    logger_name: str = Field("bootlog.events", min_length=1)

    @field_validator("min_level", mode="before")
    @classmethod
    def _normalize_min_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


def load_sink_config(path: Path) -> SinkConfig:
    data = _load_config_data(path)
    return SinkConfig.model_validate(data)


def _load_config_data(path: Path) -> dict:
    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:
            raise ImportError("PyYAML is required to load YAML configs.") from exc

        with path.open("r", encoding="utf-8") as handle:
            try:
                return yaml.safe_load(handle) or {}
            except (yaml.YAMLError, UnicodeDecodeError) as exc:
                raise ConfigLoadError(f"Invalid YAML config {path}: {exc}") from exc

    with path.open("r", encoding="utf-8") as handle:
        try:
            return json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ConfigLoadError(f"Invalid JSON config {path}: {exc}") from exc
