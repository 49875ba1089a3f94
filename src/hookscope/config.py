"""Engine configuration and its YAML loader."""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from hookscope.core.errors import ConfigError
from hookscope.core.resolver import DEFAULT_POLL_INTERVAL_MS

DEFAULT_WAIT_TIME_MS = 2000

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "hookscope configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "wait_time": {"type": "integer", "minimum": 0},
        "waitTime": {"type": "integer", "minimum": 0},
        "start_delay": {"type": "integer", "minimum": 0},
        "startDelay": {"type": "integer", "minimum": 0},
        "poll_interval": {"type": "integer", "minimum": 1},
    },
}

_validator = Draft7Validator(CONFIG_SCHEMA)


@dataclass(frozen=True)
class EngineConfig:
    """Timing settings fixed for the lifetime of an engine (milliseconds)."""

    wait_time: int = DEFAULT_WAIT_TIME_MS
    start_delay: int = 0
    poll_interval: int = DEFAULT_POLL_INTERVAL_MS

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "EngineConfig":
        if not data:
            return cls()
        errors = sorted(_validator.iter_errors(dict(data)), key=lambda e: list(e.path))
        if errors:
            messages = "; ".join(
                f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors
            )
            raise ConfigError(f"Configuration validation failed: {messages}")
        return cls(
            wait_time=int(data.get("wait_time", data.get("waitTime", DEFAULT_WAIT_TIME_MS))),
            start_delay=int(data.get("start_delay", data.get("startDelay", 0))),
            poll_interval=int(data.get("poll_interval", DEFAULT_POLL_INTERVAL_MS)),
        )

    def with_overrides(self, **overrides: Optional[int]) -> "EngineConfig":
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values) if values else self


def load_config(path: str) -> EngineConfig:
    """Load and validate a YAML configuration file."""

    config_path = Path(path).expanduser().resolve()
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Unable to read configuration {config_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError("Configuration file must contain a mapping at the top level")
    return EngineConfig.from_mapping(raw)
