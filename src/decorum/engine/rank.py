"""Rank a class by score and mark its extremal entries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from decorum.model import AttributeResult
from decorum.types import MarkerSet


def rank_class(
    results: Sequence[AttributeResult],
    highest_marker: str,
    lowest_marker: str,
) -> tuple[AttributeResult, ...]:
    """Return ``results`` sorted by descending score with extremes marked.

    The sort is stable, so entries with equal scores keep their input order.
    When the class has more than one entry the first takes
    ``highest_marker`` and the last takes ``lowest_marker``; a singleton
    keeps its plain marker.  The input is never mutated.
    """
    ranked = sorted(results, key=lambda result: -result.score)
    if len(ranked) > 1:
        ranked[0] = replace(ranked[0], marker=highest_marker)
        ranked[-1] = replace(ranked[-1], marker=lowest_marker)
    return tuple(ranked)


def rank_rejected(results: Sequence[AttributeResult], markers: MarkerSet) -> tuple[AttributeResult, ...]:
    """Rank the rejected class using the failed-check extreme markers."""
    return rank_class(results, *markers.extremes(True))


def rank_passed(results: Sequence[AttributeResult], markers: MarkerSet) -> tuple[AttributeResult, ...]:
    """Rank the passed class using the passed-check extreme markers."""
    return rank_class(results, *markers.extremes(False))
