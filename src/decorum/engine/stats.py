"""Aggregate statistics across both classes."""

from __future__ import annotations

import math
from collections.abc import Sequence

from decorum.exceptions import EmptyScoreSet
from decorum.model import AttributeResult, ScoreStats


def aggregate_stats(
    rejected: Sequence[AttributeResult],
    passed: Sequence[AttributeResult],
    total: float,
    count: int,
) -> ScoreStats:
    """Compute global min, max and mean from two ranked class lists.

    Both lists must already be sorted by descending score, so each class
    contributes its first entry to the maximum and its last to the minimum.
    An empty class contributes ``-inf``/``+inf`` and therefore never wins.

    Raises :class:`EmptyScoreSet` when there is nothing to aggregate.
    """
    if count <= 0 or not (rejected or passed):
        raise EmptyScoreSet("cannot compute statistics for zero scored attributes")

    maximum = max(
        passed[0].score if passed else -math.inf,
        rejected[0].score if rejected else -math.inf,
    )
    minimum = min(
        passed[-1].score if passed else math.inf,
        rejected[-1].score if rejected else math.inf,
    )
    return ScoreStats(minimum=minimum, maximum=maximum, mean=total / count)
