"""Configuration defaults, filenames, and environment variable names."""

from __future__ import annotations

CONFIG_FILENAME: str = "config.json"

ENV_DISCORD_TOKEN: str = "DISCORD_TOKEN"
ENV_PERSPECTIVE_TOKEN: str = "PERSPECTIVE_TOKEN"
ENV_SENSORED_CHANNEL: str = "SENSORED_CHANNEL"
ENV_LOGGING_CHANNEL: str = "LOGGING_CHANNEL"

MARKERS_KEY: str = "emotes"
ATTRIBUTES_KEY: str = "attributes"
THRESHOLD_KEY: str = "threshold"

MARKER_FIELDS: tuple[str, ...] = (
    "passed_check",
    "failed_check",
    "passed_check_highest",
    "passed_check_lowest",
    "failed_check_highest",
    "failed_check_lowest",
)
