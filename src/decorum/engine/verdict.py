"""Combine ranked classes and statistics into an evaluation."""

from __future__ import annotations

from collections.abc import Sequence

from decorum.model import AttributeResult, Evaluation, ScoreStats


def assemble(
    rejected: Sequence[AttributeResult],
    passed: Sequence[AttributeResult],
    stats: ScoreStats,
) -> Evaluation:
    """Build the final evaluation.

    Rejected entries always precede passed entries, whatever their scores.
    """
    return Evaluation(
        verdict=bool(rejected),
        results=(*rejected, *passed),
        stats=stats,
    )
