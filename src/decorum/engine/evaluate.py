"""Single entry point for evaluating a message's attribute scores."""

from __future__ import annotations

from decorum.config.model import DecorumConfig
from decorum.engine.classify import classify
from decorum.engine.rank import rank_passed, rank_rejected
from decorum.engine.stats import aggregate_stats
from decorum.engine.verdict import assemble
from decorum.exceptions import EmptyScoreSet
from decorum.model import Evaluation
from decorum.types import RawScores


def evaluate(scores: RawScores, config: DecorumConfig) -> Evaluation:
    """Classify, rank and summarise ``scores`` against ``config``.

    Raises :class:`~decorum.exceptions.ConfigMismatch` when a scored
    attribute has no threshold and :class:`~decorum.exceptions.EmptyScoreSet`
    when ``scores`` is empty.
    """
    if not scores:
        raise EmptyScoreSet("scoring service returned no attributes")

    classification = classify(scores, config.attributes, config.markers)
    rejected = rank_rejected(classification.rejected, config.markers)
    passed = rank_passed(classification.passed, config.markers)
    stats = aggregate_stats(rejected, passed, classification.total, classification.count)
    return assemble(rejected, passed, stats)


def missing_attributes(scores: RawScores, config: DecorumConfig) -> tuple[str, ...]:
    """Return configured attributes absent from ``scores``, sorted by name."""
    return tuple(sorted(name for name in config.attributes if name not in scores))
