"""Per-message orchestration around the pure evaluation engine.

The relay owns every side effect: calling the scorer, posting the report
and deleting the message.  Any failure that prevents a verdict leaves the
message in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

import discord

from decorum.config.model import DecorumConfig
from decorum.engine import evaluate, missing_attributes
from decorum.exceptions import ConfigMismatch, EmptyScoreSet, ScoringServiceError
from decorum.model import Evaluation
from decorum.reporting.embed import build_report_embed

logger = logging.getLogger(__name__)


class Scorer(Protocol):
    async def analyze(self, text: str, attributes: Iterable[str]) -> dict[str, float]: ...


class ModerationRelay:
    """Scores messages from one channel and reports rejections to another."""

    def __init__(
        self,
        config: DecorumConfig,
        scorer: Scorer,
        *,
        sensored_channel_id: int,
        logging_channel_id: int,
    ) -> None:
        self._config = config
        self._scorer = scorer
        self._sensored_channel_id = sensored_channel_id
        self._logging_channel_id = logging_channel_id

    async def handle_message(self, message: discord.Message, client: discord.Client) -> Evaluation | None:
        """Evaluate ``message`` and act on a rejection.

        Returns the evaluation, or ``None`` when the message was ignored or
        could not be evaluated.
        """
        if message.channel.id != self._sensored_channel_id:
            return None
        if client.user is not None and message.author.id == client.user.id:
            return None

        try:
            scores = await self._scorer.analyze(message.content, self._config.attribute_names)
        except ScoringServiceError as exc:
            logger.warning("Scoring failed for message %s: %s", message.id, exc)
            return None

        missing = missing_attributes(scores, self._config)
        if missing:
            logger.warning("Scoring response omitted attribute(s): %s", ", ".join(missing))

        try:
            evaluation = evaluate(scores, self._config)
        except ConfigMismatch as exc:
            logger.error("Cannot evaluate message %s: %s", message.id, exc)
            return None
        except EmptyScoreSet:
            logger.warning("No attributes scored for message %s; leaving it in place", message.id)
            return None

        if not evaluation.verdict:
            logger.debug("Message %s passed all checks", message.id)
            return evaluation

        logger.info(
            "Rejected message %s from %s (failed: %s)",
            message.id,
            message.author,
            ", ".join(result.name for result in evaluation.failed),
        )
        await self._post_report(message, evaluation, client)
        await self._delete(message)
        return evaluation

    async def _post_report(self, message: discord.Message, evaluation: Evaluation, client: discord.Client) -> None:
        embed = build_report_embed(
            evaluation,
            content=message.content,
            author_name=str(message.author),
            author_icon_url=message.author.display_avatar.url,
        )
        try:
            channel = client.get_channel(self._logging_channel_id)
            if channel is None:
                channel = await client.fetch_channel(self._logging_channel_id)
        except discord.HTTPException as exc:
            logger.error("Failed to log rejected message %s: %s", message.id, exc)
            return
        # Categories and forums resolve by id but have no send().
        if not isinstance(channel, discord.abc.Messageable):
            logger.error(
                "Failed to log rejected message %s: channel %s (%s) cannot receive messages",
                message.id,
                self._logging_channel_id,
                type(channel).__name__,
            )
            return
        try:
            await channel.send(embed=embed)
        except discord.HTTPException as exc:
            logger.error("Failed to log rejected message %s: %s", message.id, exc)

    async def _delete(self, message: discord.Message) -> None:
        try:
            await message.delete()
        except discord.NotFound:
            logger.debug("Message %s was already deleted", message.id)
        except discord.HTTPException as exc:
            logger.error("Failed to delete message %s: %s", message.id, exc)
