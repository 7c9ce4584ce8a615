"""Runtime settings read from the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from decorum.constants.config import (
    ENV_DISCORD_TOKEN,
    ENV_LOGGING_CHANNEL,
    ENV_PERSPECTIVE_TOKEN,
    ENV_SENSORED_CHANNEL,
)
from decorum.exceptions import ConfigError


@dataclass(frozen=True)
class RuntimeSettings:
    """Secrets and channel ids needed to run the relay."""

    discord_token: str = field(repr=False)
    perspective_token: str = field(repr=False)
    sensored_channel: int
    logging_channel: int


def load_runtime_settings(environ: Mapping[str, str] | None = None) -> RuntimeSettings:
    """Read relay settings from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    return RuntimeSettings(
        discord_token=_require(env, ENV_DISCORD_TOKEN),
        perspective_token=_require(env, ENV_PERSPECTIVE_TOKEN),
        sensored_channel=_require_channel_id(env, ENV_SENSORED_CHANNEL),
        logging_channel=_require_channel_id(env, ENV_LOGGING_CHANNEL),
    )


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, "").strip()
    if not value:
        raise ConfigError(f"Expected {name} in the environment")
    return value


def _require_channel_id(env: Mapping[str, str], name: str) -> int:
    raw = _require(env, name)
    try:
        channel_id = int(raw)
    except ValueError as exc:
        raise ConfigError(f"Expected valid channel id in {name}, got {raw!r}") from exc
    if channel_id <= 0:
        raise ConfigError(f"Expected valid channel id in {name}, got {raw!r}")
    return channel_id
