"""Constants for report embeds and stdout formatting."""

from __future__ import annotations

REPORT_TITLE: str = "Message rejected"
REPORT_COLOUR: int = 0xFF746D

FIELD_MESSAGE: str = "Message"
FIELD_CHECKS: str = "Checks"
FIELD_STATS: str = "Stats"

# Discord rejects embed field values longer than this.
EMBED_FIELD_LIMIT: int = 1024
TRUNCATION_SUFFIX: str = "…"
# Discord also rejects empty field values.
EMPTY_FIELD_PLACEHOLDER: str = "\u200b"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"
