"""Shared type aliases for Decorum."""

from .common import AttributeName, JsonObject, JsonScalar, JsonValue, RawScores, Thresholds
from .config import MarkerSet

__all__ = [
    "AttributeName",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "MarkerSet",
    "RawScores",
    "Thresholds",
]
