"""Typed entities produced by message evaluation."""

from __future__ import annotations

from dataclasses import dataclass

from decorum.constants.scoring import PERCENT_DECIMALS, PERCENT_SCALE


def as_percent(value: float) -> str:
    """Render a 0-1 fraction as a percentage with one decimal digit."""
    return f"{value * PERCENT_SCALE:.{PERCENT_DECIMALS}f}%"


@dataclass(frozen=True)
class AttributeResult:
    """Classification of one scored attribute."""

    name: str
    score: float
    rejected: bool
    marker: str

    def format(self) -> str:
        """Render as a single report line."""
        return f"{self.marker} {self.name} - {as_percent(self.score)}"


@dataclass(frozen=True)
class ScoreStats:
    """Minimum, maximum and mean over every scored attribute."""

    minimum: float
    maximum: float
    mean: float

    def as_percentages(self) -> tuple[float, float, float]:
        """Return ``(min, max, mean)`` scaled to 0-100."""
        return (
            self.minimum * PERCENT_SCALE,
            self.maximum * PERCENT_SCALE,
            self.mean * PERCENT_SCALE,
        )

    def format(self) -> str:
        """Render as the multi-line stats block."""
        minimum, maximum, mean = self.as_percentages()
        return "\n".join(
            (
                f"Min: {minimum:.{PERCENT_DECIMALS}f}%",
                f"Max: {maximum:.{PERCENT_DECIMALS}f}%",
                f"Avg: {mean:.{PERCENT_DECIMALS}f}%",
            )
        )


@dataclass(frozen=True)
class Evaluation:
    """Verdict and ordered report for one message."""

    verdict: bool
    results: tuple[AttributeResult, ...]
    stats: ScoreStats

    @property
    def failed(self) -> tuple[AttributeResult, ...]:
        """Rejected entries in ranked order."""
        return tuple(result for result in self.results if result.rejected)

    @property
    def passed(self) -> tuple[AttributeResult, ...]:
        """Passed entries in ranked order."""
        return tuple(result for result in self.results if not result.rejected)

    @property
    def report_lines(self) -> tuple[str, ...]:
        """Formatted report lines, rejected entries first."""
        return tuple(result.format() for result in self.results)

    @property
    def stats_summary(self) -> str:
        return self.stats.format()
