"""Reporting package for Decorum outputs."""

from __future__ import annotations

from .embed import build_report_embed, truncate_field
from .stdout import StdoutReporter

__all__ = ["StdoutReporter", "build_report_embed", "truncate_field"]
