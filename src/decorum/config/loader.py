"""Config loading and normalization for the moderation relay."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import yaml

from decorum.config.model import DecorumConfig
from decorum.constants.config import ATTRIBUTES_KEY, MARKER_FIELDS, MARKERS_KEY, THRESHOLD_KEY
from decorum.exceptions import ConfigError
from decorum.types.config import MarkerSet


def load_config(path: Path) -> DecorumConfig:
    """Load and validate relay config from a JSON (or YAML) file."""
    path = path.resolve()
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid config file at {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a mapping")

    return DecorumConfig(
        attributes=_build_thresholds(raw.get(ATTRIBUTES_KEY)),
        markers=_build_markers(raw.get(MARKERS_KEY)),
    )


def _build_markers(raw: Any) -> MarkerSet:
    """Build a MarkerSet from the raw ``emotes`` block."""
    if not isinstance(raw, dict):
        raise ConfigError(f"{MARKERS_KEY} must be a mapping")

    values: dict[str, str] = {}
    for field_name in MARKER_FIELDS:
        if field_name not in raw:
            raise ConfigError(f"{MARKERS_KEY}.{field_name} is required")
        value = raw[field_name]
        if not isinstance(value, str):
            raise ConfigError(f"{MARKERS_KEY}.{field_name} must be a string")
        values[field_name] = value
    return MarkerSet(**values)


def _build_thresholds(raw: Any) -> dict[str, float]:
    """Build the attribute-name to threshold mapping from the raw ``attributes`` block."""
    if not isinstance(raw, dict):
        raise ConfigError(f"{ATTRIBUTES_KEY} must be a mapping")
    if not raw:
        raise ConfigError(f"{ATTRIBUTES_KEY} must name at least one attribute")

    thresholds: dict[str, float] = {}
    for name, options in raw.items():
        key_name = f"{ATTRIBUTES_KEY}.{name}"
        if not isinstance(options, dict):
            raise ConfigError(f"{key_name} must be a mapping")
        if THRESHOLD_KEY not in options:
            raise ConfigError(f"{key_name}.{THRESHOLD_KEY} is required")
        thresholds[str(name)] = _ensure_number(options[THRESHOLD_KEY], f"{key_name}.{THRESHOLD_KEY}")
    return thresholds


def _ensure_number(value: Any, key_name: str) -> float:
    """Coerce a value to float, raising ConfigError on type mismatch."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key_name} must be a number")
    if not math.isfinite(value):
        raise ConfigError(f"{key_name} must be a finite number, got {value!r}")
    return float(value)
