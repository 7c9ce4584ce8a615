"""Scoring and ranking engine.

The engine is a pure transformation from a mapping of attribute scores and
an immutable :class:`~decorum.config.DecorumConfig` to an
:class:`~decorum.model.Evaluation`.  It performs no I/O and retains no state
between calls.
"""

from __future__ import annotations

from .classify import Classification, classify
from .evaluate import evaluate, missing_attributes
from .rank import rank_class, rank_passed, rank_rejected
from .stats import aggregate_stats
from .verdict import assemble

__all__ = [
    "Classification",
    "aggregate_stats",
    "assemble",
    "classify",
    "evaluate",
    "missing_attributes",
    "rank_class",
    "rank_passed",
    "rank_rejected",
]
