"""Partition scored attributes into rejected and passed classes."""

from __future__ import annotations

from dataclasses import dataclass

from decorum.exceptions import ConfigMismatch
from decorum.model import AttributeResult
from decorum.types import MarkerSet, RawScores, Thresholds


@dataclass(frozen=True)
class Classification:
    """Unsorted class lists plus the running totals needed for the mean."""

    rejected: tuple[AttributeResult, ...]
    passed: tuple[AttributeResult, ...]
    total: float
    count: int


def is_rejected(score: float, threshold: float) -> bool:
    """Return whether ``score`` fails ``threshold``.

    The comparison is strict: a score equal to its threshold passes.
    """
    return score > threshold


def classify(scores: RawScores, thresholds: Thresholds, markers: MarkerSet) -> Classification:
    """Classify every scored attribute against its configured threshold.

    Raises :class:`ConfigMismatch` for the first attribute without a
    threshold; nothing is skipped silently.
    """
    rejected: list[AttributeResult] = []
    passed: list[AttributeResult] = []
    total = 0.0
    for name, score in scores.items():
        if name not in thresholds:
            raise ConfigMismatch(name)
        failed = is_rejected(score, thresholds[name])
        result = AttributeResult(name=name, score=score, rejected=failed, marker=markers.plain(failed))
        (rejected if failed else passed).append(result)
        total += score

    return Classification(
        rejected=tuple(rejected),
        passed=tuple(passed),
        total=total,
        count=len(rejected) + len(passed),
    )
