"""Constants for score formatting."""

from __future__ import annotations

PERCENT_SCALE: float = 100.0
PERCENT_DECIMALS: int = 1
