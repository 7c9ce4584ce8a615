"""Async HTTP client for the Perspective API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

import aiohttp

from decorum.constants.perspective import PERSPECTIVE_ANALYZE_URL, PERSPECTIVE_TIMEOUT_SECONDS
from decorum.exceptions import ScoringServiceError
from decorum.perspective.payload import build_request, parse_response

logger = logging.getLogger(__name__)


class PerspectiveClient:
    """Scores message text for a set of attributes.

    The session is owned by the caller so one connection pool can be shared
    for the lifetime of the bot.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: str,
        *,
        url: str = PERSPECTIVE_ANALYZE_URL,
        timeout: float = PERSPECTIVE_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session
        self._api_key = api_key
        self._url = url
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def analyze(self, text: str, attributes: Iterable[str]) -> dict[str, float]:
        """Return one summary score per attribute the service scored.

        Every transport or decoding failure is raised as
        :class:`ScoringServiceError`.
        """
        body = build_request(text, attributes)
        try:
            async with self._session.post(
                self._url,
                params={"key": self._api_key},
                json=body,
                timeout=self._timeout,
            ) as response:
                if response.status >= 400:
                    detail = await response.text()
                    raise ScoringServiceError(f"scoring service returned HTTP {response.status}: {detail[:200]}")
                payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise ScoringServiceError(f"scoring request failed: {exc}") from exc

        scores = parse_response(payload)
        logger.debug("Scored %d attribute(s)", len(scores))
        return scores
