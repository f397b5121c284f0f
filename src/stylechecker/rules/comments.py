"""Comment placement and density rules."""

from __future__ import annotations

from stylechecker.analysis.model import SourceModel
from stylechecker.analysis.tokens import next_token
from stylechecker.config import Settings
from stylechecker.constants import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    LINE_COMMENT,
)

# comment, code, blank, comment, code, blank
_CHATTY_WINDOW = 5


def check_blank_before_comments(
    model: SourceModel, settings: Settings
) -> list[int]:
    """A comment follows a blank, another comment, or an open brace."""
    return [
        i
        for i in range(1, len(model))
        if model.is_comment(i)
        and not model.is_blank(i - 1)
        and not model.is_comment(i - 1)
        and not model.follows_open_brace(i)
    ]


def check_too_few_comments(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Flag the midpoint of every long run of uncommented lines.

    Runs are clamped to the file, so a run reaching end-of-file is
    measured up to the last line.
    """
    limit = settings.max_uncommented_run
    errors: list[int] = []
    run_start: int | None = None
    for i in range(len(model) + 1):
        if i < len(model) and not model.is_comment(i):
            if run_start is None:
                run_start = i
            continue
        if run_start is not None:
            length = i - run_start
            if length > limit:
                errors.append(run_start + length // 2)
            run_start = None
    return errors


def check_too_many_comments(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Flag commenting every single-line statement in one scope.

    Windows that would run past end-of-file are skipped.
    """
    errors: list[int] = []
    for i in range(len(model) - _CHATTY_WINDOW):
        if (
            model.is_comment(i)
            and model.is_code(i + 1)
            and model.is_blank(i + 2)
            and model.is_comment(i + 3)
            and model.is_code(i + 4)
            and model.is_blank(i + 5)
            and model.is_same_scope(i, _CHATTY_WINDOW)
        ):
            errors.append(i + 3)
    return errors


def check_endline_comments(
    model: SourceModel, settings: Settings
) -> list[int]:
    return [
        i
        for i, line in enumerate(model.lines)
        if not model.is_comment(i)
        and (LINE_COMMENT in line or BLOCK_COMMENT_OPEN in line)
    ]


def check_runon_comments(
    model: SourceModel, settings: Settings
) -> list[int]:
    """A block comment opened after code and left open.

    It would hide the following lines from comment classification.
    """
    return [
        i
        for i, line in enumerate(model.lines)
        if not model.is_comment(i)
        and BLOCK_COMMENT_OPEN in line
        and BLOCK_COMMENT_CLOSE not in line
    ]


def check_comment_spacing(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Line comments need a space after the slashes."""
    errors: list[int] = []
    for i, line in enumerate(model.lines):
        token, cursor = next_token(line)
        if (
            token.text == LINE_COMMENT
            and cursor < len(line)
            and not line[cursor].isspace()
        ):
            errors.append(i)
    return errors
