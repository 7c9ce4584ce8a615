"""Typed configuration structures for Decorum."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkerSet:
    """Presentation markers attached to report lines.

    The plain markers tag class membership; the ``*_highest`` and
    ``*_lowest`` markers replace them on the extremal entries of a class
    with more than one member.
    """

    passed_check: str
    failed_check: str
    passed_check_highest: str
    passed_check_lowest: str
    failed_check_highest: str
    failed_check_lowest: str

    def plain(self, rejected: bool) -> str:
        """Return the default marker for the given class."""
        return self.failed_check if rejected else self.passed_check

    def extremes(self, rejected: bool) -> tuple[str, str]:
        """Return the ``(highest, lowest)`` markers for the given class."""
        if rejected:
            return self.failed_check_highest, self.failed_check_lowest
        return self.passed_check_highest, self.passed_check_lowest
