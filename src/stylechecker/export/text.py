"""Plain-text report — one line per failing rule."""

from __future__ import annotations

from stylechecker.constants import (
    NO_ERRORS_MESSAGE,
    TRUNCATION_MARKER,
    RuleGroup,
)
from stylechecker.rules.schemas import Diagnostic, StyleReport

DEFAULT_MAX_SHOWN = 3


def format_line_numbers(
    lines: tuple[int, ...], max_shown: int = DEFAULT_MAX_SHOWN
) -> str:
    """Render 0-based lines as ``line n`` / ``lines a, b, c, etc``.

    Returns an empty string for no lines.
    """
    if not lines:
        return ""
    shown = [str(line + 1) for line in lines[:max_shown]]
    if len(lines) == 1:
        return f"line {shown[0]}"
    if len(lines) > max_shown:
        shown.append(TRUNCATION_MARKER)
    return "lines " + ", ".join(shown)


def format_diagnostic(
    diagnostic: Diagnostic, max_shown: int = DEFAULT_MAX_SHOWN
) -> str:
    """``"<message> (lines 1, 2)."``; empty string when it passed."""
    if diagnostic.passed:
        return ""
    numbers = format_line_numbers(diagnostic.lines, max_shown)
    return f"{diagnostic.message} ({numbers})."


def export_text(
    report: StyleReport, max_shown: int = DEFAULT_MAX_SHOWN
) -> str:
    """Failing rules grouped under headings, then the summary line."""
    out: list[str] = []
    for group in RuleGroup:
        failures = [d for d in report.failures if d.group == group]
        if not failures:
            continue
        out.append(f"\n# {group.value.title()} #")
        out.extend(format_diagnostic(d, max_shown) for d in failures)

    if report.passed:
        out.append(NO_ERRORS_MESSAGE)
    return "\n".join(out).lstrip("\n") + "\n"
