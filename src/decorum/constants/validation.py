"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

from decorum.constants.config import ATTRIBUTES_KEY, MARKER_FIELDS, MARKERS_KEY, THRESHOLD_KEY

CFG001: str = "CFG001"  # config file not found
CFG002: str = "CFG002"  # invalid JSON/YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # missing required key
CFG007: str = "CFG007"  # empty attribute set

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({MARKERS_KEY, ATTRIBUTES_KEY})
ALLOWED_MARKER_KEYS: frozenset[str] = frozenset(MARKER_FIELDS)
ALLOWED_ATTRIBUTE_KEYS: frozenset[str] = frozenset({THRESHOLD_KEY})
