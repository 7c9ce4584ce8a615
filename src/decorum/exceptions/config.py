"""Configuration-related exceptions."""

from __future__ import annotations

from decorum.exceptions.base import DecorumError


class ConfigError(DecorumError, ValueError):
    """Raised when relay configuration or environment is invalid."""


class ConfigMismatch(ConfigError, KeyError):
    """Raised when a scored attribute has no configured threshold.

    Signals that the scoring service response and the configured attribute
    set have diverged, so no verdict can be computed for the message.
    """

    def __init__(self, attribute: str) -> None:
        super().__init__(f"no threshold configured for scored attribute {attribute!r}")
        self.attribute = attribute

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])
