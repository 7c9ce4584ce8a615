"""Request and response shapes for the Perspective ``comments:analyze`` call."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from decorum.constants.perspective import PERSPECTIVE_DO_NOT_STORE
from decorum.exceptions import ScoringServiceError
from decorum.types import JsonObject


def build_request(text: str, attributes: Iterable[str]) -> JsonObject:
    """Build the analyze request body.

    Thresholds stay local; only attribute names are sent.
    """
    return {
        "comment": {"text": text},
        "requestedAttributes": {name: {} for name in attributes},
        "doNotStore": PERSPECTIVE_DO_NOT_STORE,
    }


def parse_response(payload: Any) -> dict[str, float]:
    """Extract ``attributeScores.<name>.summaryScore.value`` for every attribute."""
    if not isinstance(payload, dict):
        raise ScoringServiceError("scoring response must be a JSON object")
    if "attributeScores" not in payload:
        raise ScoringServiceError("scoring response has no attributeScores")
    attribute_scores = payload["attributeScores"]
    if not isinstance(attribute_scores, dict):
        raise ScoringServiceError("attributeScores must be a JSON object")

    scores: dict[str, float] = {}
    for name, entry in attribute_scores.items():
        summary = entry.get("summaryScore") if isinstance(entry, dict) else None
        value = summary.get("value") if isinstance(summary, dict) else None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ScoringServiceError(f"missing summaryScore.value for attribute {name!r}")
        if not math.isfinite(value):
            raise ScoringServiceError(f"non-finite summaryScore.value for attribute {name!r}: {value!r}")
        scores[name] = float(value)
    return scores
