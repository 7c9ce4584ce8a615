"""Base exception for Decorum."""

from __future__ import annotations


class DecorumError(Exception):
    """Base class for all errors raised by Decorum."""
