from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_QUOTA_LIMIT,
    DEFAULT_QUOTA_LIMITS,
    DEFAULT_TIME_SLOTS,
    AgendaConfig,
    ColumnSchema,
    QuotaLimitTable,
)

"""Config loader.

Responsibilities:
- Load YAML config (default config/agenda.yml, or LAB_AGENDA_CONFIG)
- Validate against config_schema.json shipped next to this module
- Apply defaults (quota table, default limit 10, time slots, column layout)
"""

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "ConfigError",
    "load_config",
    "resolve_config_path",
]

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/agenda.yml")
CONFIG_ENV_VAR = "LAB_AGENDA_CONFIG"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or if the
            config data fails validation (missing keys, wrong types, unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def resolve_config_path(explicit: str | Path | None = None) -> Path:
    """--config argument > LAB_AGENDA_CONFIG > config/agenda.yml."""
    if explicit:
        return Path(explicit)
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def load_config(path: Path) -> AgendaConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config validation failed: top level must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    quota = QuotaLimitTable.from_mapping(
        data.get("quota_limits", DEFAULT_QUOTA_LIMITS),
        data.get("default_quota_limit", DEFAULT_QUOTA_LIMIT),
    )
    return AgendaConfig(
        source_file=data["source_file"],
        schema=ColumnSchema.from_mapping(data.get("columns", {})),
        quota=quota,
        time_slots=tuple(data.get("time_slots", DEFAULT_TIME_SLOTS)),
    )
