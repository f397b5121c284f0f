"""Whitespace around operators and after punctuation."""

from __future__ import annotations

from stylechecker.analysis.model import SourceModel
from stylechecker.analysis.text import first_nonspace_pos
from stylechecker.analysis.tokens import iter_tokens
from stylechecker.config import (
    PUNCTUATION_CHASERS,
    SPACED_OPERATORS,
    SPACED_PUNCTUATION,
    Settings,
)


def _has_unspaced_operator(line: str) -> bool:
    for token in iter_tokens(line):
        if token.text not in SPACED_OPERATORS:
            continue
        if token.start > 0 and not line[token.start - 1].isspace():
            return True
        if token.end < len(line) and not line[token.end].isspace():
            return True
    return False


def _has_unspaced_punctuation(line: str) -> bool:
    first = first_nonspace_pos(line)
    last = len(line) - 1
    for j, ch in enumerate(line):
        if ch not in SPACED_PUNCTUATION:
            continue
        if j > first and line[j - 1].isspace():
            return True
        if j < last and line[j + 1] not in PUNCTUATION_CHASERS:
            return True
    return False


def check_operator_spacing(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Comment lines are skipped; line start and end need no space."""
    return [
        i
        for i, line in enumerate(model.lines)
        if not model.is_comment(i) and _has_unspaced_operator(line)
    ]


def check_punctuation_spacing(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Space after commas and semicolons, never before.

    Punctuation that opens a line (a continued argument list) is not
    checked for the space before it.
    """
    return [
        i
        for i, line in enumerate(model.lines)
        if _has_unspaced_punctuation(line)
    ]
