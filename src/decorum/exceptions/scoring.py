"""Scoring-related exceptions."""

from __future__ import annotations

from decorum.exceptions.base import DecorumError


class EmptyScoreSet(DecorumError, ValueError):
    """Raised when an evaluation receives zero scored attributes."""


class ScoringServiceError(DecorumError, RuntimeError):
    """Raised when the external scoring service call fails or returns malformed data."""
