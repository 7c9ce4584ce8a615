"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

AttributeName: TypeAlias = str
RawScores: TypeAlias = Mapping[AttributeName, float]
Thresholds: TypeAlias = Mapping[AttributeName, float]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
