"""Shared exception hierarchy for Decorum."""

from __future__ import annotations

from .base import DecorumError
from .config import ConfigError, ConfigMismatch
from .scoring import EmptyScoreSet, ScoringServiceError

__all__ = [
    "ConfigError",
    "ConfigMismatch",
    "DecorumError",
    "EmptyScoreSet",
    "ScoringServiceError",
]
