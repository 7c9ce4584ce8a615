"""Configuration loading, validation, and environment settings for Decorum."""

from __future__ import annotations

from decorum.config.env import RuntimeSettings, load_runtime_settings
from decorum.config.loader import load_config
from decorum.config.model import DecorumConfig
from decorum.config.validator import validate_config_file

__all__ = [
    "DecorumConfig",
    "RuntimeSettings",
    "load_config",
    "load_runtime_settings",
    "validate_config_file",
]
