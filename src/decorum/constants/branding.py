"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "DECORUM"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ DECORUM",
    "     // toxicity relay for chat channels",
)
EVALUATION_TITLE: str = "Evaluation"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} moderation relay"))
