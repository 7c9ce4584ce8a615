"""Discord embed rendering for rejected messages."""

from __future__ import annotations

import discord

from decorum.constants.reporting import (
    EMBED_FIELD_LIMIT,
    EMPTY_FIELD_PLACEHOLDER,
    FIELD_CHECKS,
    FIELD_MESSAGE,
    FIELD_STATS,
    REPORT_COLOUR,
    REPORT_TITLE,
    TRUNCATION_SUFFIX,
)
from decorum.model import Evaluation


def truncate_field(value: str, limit: int = EMBED_FIELD_LIMIT) -> str:
    """Clip ``value`` to ``limit`` characters, marking the cut."""
    if len(value) <= limit:
        return value
    return value[: limit - len(TRUNCATION_SUFFIX)] + TRUNCATION_SUFFIX


def build_report_embed(
    evaluation: Evaluation,
    *,
    content: str,
    author_name: str,
    author_icon_url: str | None = None,
) -> discord.Embed:
    """Build the log-channel embed describing a rejected message."""
    embed = discord.Embed(title=REPORT_TITLE, colour=discord.Colour(REPORT_COLOUR))
    embed.set_author(name=author_name, icon_url=author_icon_url)
    embed.add_field(name=FIELD_MESSAGE, value=truncate_field(content or EMPTY_FIELD_PLACEHOLDER), inline=False)
    embed.add_field(name=FIELD_CHECKS, value=truncate_field("\n".join(evaluation.report_lines)), inline=True)
    embed.add_field(name=FIELD_STATS, value=truncate_field(evaluation.stats_summary), inline=True)
    return embed
