"""File-level comment and header rules."""

from __future__ import annotations

from stylechecker.analysis.model import SourceModel
from stylechecker.config import HEADER_FIELDS, Settings


def check_any_comments(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Flag line 0 when the file has no comment lines at all."""
    if model.first_comment_line() == -1:
        return [0]
    return []


def check_header_start(
    model: SourceModel, settings: Settings
) -> list[int]:
    """The file must open with a comment."""
    if model.first_comment_line() != 0:
        return [0]
    return []


def _has_prefix(line: str, prefix: str) -> bool:
    return line.lstrip().startswith(prefix)


def check_header_format(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Match the first comment block against the header fields.

    Fields are expected on consecutive lines. A missing field flags
    the line where it should have been without consuming that line,
    so one omitted field yields one flag. A single stray line in front
    of an expected field is flagged and skipped. A file that ends
    early flags its last line.
    """
    start = model.first_comment_line()
    if start < 0:
        return []

    lines = model.lines
    total = len(lines)
    flagged: set[int] = set()
    current = start
    for prefix in HEADER_FIELDS:
        if current >= total:
            flagged.add(total - 1)
            break
        if _has_prefix(lines[current], prefix):
            current += 1
        elif current + 1 < total and _has_prefix(
            lines[current + 1], prefix
        ):
            flagged.add(current)
            current += 2
        else:
            flagged.add(current)
    return sorted(flagged)
