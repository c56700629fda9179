"""Configuration loading for storygen (.storygen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .models import GenerationSchema

CONFIG_FILE_NAME = ".storygen.yml"

SCHEMA_FIELDS = tuple(item.name for item in fields(GenerationSchema))


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class StoryGenConfig:
    """Represents the settings defined in .storygen.yml."""

    root: Path
    templates_dir: Optional[Path] = None
    defaults: Dict[str, str] = field(default_factory=dict)


def load_config(config_path: Path) -> StoryGenConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return StoryGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    defaults_data = data.get("defaults")
    if defaults_data is None:
        defaults_data = {}
    if not isinstance(defaults_data, dict):
        raise ConfigError("'defaults' must be a mapping of schema fields")

    defaults: Dict[str, str] = {}
    for key, value in defaults_data.items():
        if key not in SCHEMA_FIELDS:
            raise ConfigError(f"Unknown schema field in defaults: {key}")
        text = _as_str(value)
        if text is not None:
            defaults[key] = text

    return StoryGenConfig(root=root, templates_dir=templates_dir, defaults=defaults)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    if config_path.name != CONFIG_FILE_NAME:
        return (config_path.parent / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


__all__ = ["CONFIG_FILE_NAME", "ConfigError", "StoryGenConfig", "load_config"]
