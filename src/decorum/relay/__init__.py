"""Discord relay: watches the monitored channel and acts on evaluations."""

from __future__ import annotations

from .client import ModerationClient, run_bot
from .handler import ModerationRelay, Scorer

__all__ = ["ModerationClient", "ModerationRelay", "Scorer", "run_bot"]
