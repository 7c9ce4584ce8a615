"""discord.py client wiring for the relay."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp
import discord

from decorum.config.env import RuntimeSettings
from decorum.config.model import DecorumConfig
from decorum.perspective import PerspectiveClient
from decorum.relay.handler import ModerationRelay

logger = logging.getLogger(__name__)


class ModerationClient(discord.Client):
    """Gateway client that forwards monitored-channel messages to the relay."""

    def __init__(self, *, settings: RuntimeSettings, config: DecorumConfig, **options: Any) -> None:
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents, **options)
        self._settings = settings
        self._config = config
        self._session: aiohttp.ClientSession | None = None
        self.relay: ModerationRelay | None = None

    async def setup_hook(self) -> None:
        self._session = aiohttp.ClientSession()
        self.relay = ModerationRelay(
            self._config,
            PerspectiveClient(self._session, self._settings.perspective_token),
            sensored_channel_id=self._settings.sensored_channel,
            logging_channel_id=self._settings.logging_channel,
        )

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        await super().close()

    async def on_ready(self) -> None:
        logger.info("%s is connected!", self.user)

    async def on_message(self, message: discord.Message) -> None:
        if self.relay is None:
            return
        await self.relay.handle_message(message, self)


def run_bot(settings: RuntimeSettings, config: DecorumConfig) -> None:
    """Connect to the gateway and block until the client shuts down."""
    client = ModerationClient(settings=settings, config=config)
    # Logging is configured by the CLI; keep discord.py from installing its own handler.
    client.run(settings.discord_token, log_handler=None)
