"""Line length and blank-line rules."""

from __future__ import annotations

from stylechecker.analysis.declarations import is_function_header
from stylechecker.analysis.model import SourceModel
from stylechecker.analysis.text import (
    is_label_line,
    is_template_line,
    is_type_header,
)
from stylechecker.config import Settings


def check_line_length(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Tabs count as one character, as the raw line length does."""
    return [
        i
        for i, line in enumerate(model.lines)
        if len(line) > settings.max_line_length
    ]


def check_extraneous_blanks(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Blank lines belong only before a comment, label, or header.

    Headers are function, template and class/struct lines.
    """
    errors: list[int] = []
    for i in range(len(model) - 1):
        if not model.is_blank(i):
            continue
        nxt = model.lines[i + 1]
        if (
            model.is_comment(i + 1)
            or is_label_line(nxt)
            or is_template_line(nxt)
            or is_type_header(nxt)
            or is_function_header(nxt, model.type_names)
        ):
            continue
        errors.append(i)
    return errors
