"""Human-readable stdout reporter for evaluations."""

from __future__ import annotations

from decorum.constants.branding import ASCII_LOGO_LINES, EVALUATION_TITLE
from decorum.constants.reporting import ANSI_DIM, ANSI_GREEN, ANSI_RED, ANSI_RESET
from decorum.model import Evaluation


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats an evaluation as terminal output."""

    def __init__(self, evaluation: Evaluation, *, color: bool = True) -> None:
        self._evaluation = evaluation
        self._color = color

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_checks(), self._render_stats()]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        ev = self._evaluation
        sep = "  " + "─" * 38
        failed = len(ev.failed)
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {EVALUATION_TITLE}",
            sep,
            "",
            f"  Verdict     {self._render_verdict()}",
            f"  Attributes  {len(ev.results)} scored / {failed} failed / {len(ev.results) - failed} passed",
            "",
        ]
        return "\n".join(lines)

    def _render_verdict(self) -> str:
        if self._evaluation.verdict:
            return _colorize("REJECT", ANSI_RED) if self._color else "REJECT"
        return _colorize("PASS", ANSI_GREEN) if self._color else "PASS"

    def _render_checks(self) -> str:
        lines = ["  Checks"]
        for result in self._evaluation.results:
            line = result.format()
            if self._color:
                line = _colorize(line, ANSI_RED if result.rejected else ANSI_GREEN)
            lines.append(f"    {line}")
        return "\n".join(lines)

    def _render_stats(self) -> str:
        lines = ["", "  Stats"]
        for stat_line in self._evaluation.stats_summary.splitlines():
            lines.append(f"    {_colorize(stat_line, ANSI_DIM) if self._color else stat_line}")
        lines.append("")
        return "\n".join(lines)
