"""Config data model for the moderation relay."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from decorum.types.config import MarkerSet


@dataclass(frozen=True)
class DecorumConfig:
    """Resolved relay config: per-attribute thresholds and report markers."""

    attributes: Mapping[str, float]
    markers: MarkerSet

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, MappingProxyType):
            object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def attribute_names(self) -> tuple[str, ...]:
        """Attribute names in configured order, as requested from the scorer."""
        return tuple(self.attributes)
