"""Core data models for Decorum."""

from .entities import AttributeResult, Evaluation, ScoreStats

__all__ = [
    "AttributeResult",
    "Evaluation",
    "ScoreStats",
]
