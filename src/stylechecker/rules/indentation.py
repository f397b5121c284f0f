"""Indentation rules — tabs only, one tab per scope level."""

from __future__ import annotations

from stylechecker.analysis.model import SourceModel
from stylechecker.analysis.text import first_nonspace_pos, leading_tab_count
from stylechecker.config import Settings


def is_indent_tabs(model: SourceModel, index: int) -> bool:
    """Is the indent of this line made of tabs?

    Auto-formatters align continuation lines with spaces, so for a
    possible run-on line only the first ``scope`` columns must be tabs.
    """
    line = model.line(index)
    check_to = first_nonspace_pos(line)
    if check_to < 0:
        return True
    if model.may_be_run_on(index):
        check_to = min(check_to, max(model.scope(index), 0))
    return all(ch == "\t" for ch in line[:check_to])


def is_okay_indent_level(model: SourceModel, index: int) -> bool:
    """Does the tab count match the inferred scope level?"""
    if (
        model.is_blank(index)
        or model.is_mid_block_comment(index)
        or not is_indent_tabs(model, index)
    ):
        return True

    level = model.scope(index)
    tabs = leading_tab_count(model.line(index))

    # Sketchy before the first case, hence the allowance
    if model.is_comment_before_case(index):
        return tabs in (level, level - 1)
    if model.may_be_run_on(index):
        return tabs >= level
    return tabs == level


def check_tab_usage(model: SourceModel, settings: Settings) -> list[int]:
    return [
        i
        for i in range(len(model))
        if not model.is_mid_block_comment(i)
        and not is_indent_tabs(model, i)
    ]


def check_indent_levels(
    model: SourceModel, settings: Settings
) -> list[int]:
    return [
        i
        for i in range(len(model))
        if not is_okay_indent_level(model, i)
    ]
