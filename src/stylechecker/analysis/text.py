"""Single-line text predicates shared by the passes and the rules."""

from __future__ import annotations

from stylechecker.analysis.tokens import first_token
from stylechecker.config import LABELS, TYPE_KEYWORDS
from stylechecker.constants import (
    OPEN_BRACE,
    STATEMENT_TERMINATOR,
    TEMPLATE_KEYWORD,
)


def first_nonspace_pos(line: str) -> int:
    """Index of the first non-whitespace char, or -1 if blank."""
    for i, ch in enumerate(line):
        if not ch.isspace():
            return i
    return -1


def last_nonspace_pos(line: str) -> int:
    """Index of the last non-whitespace char, or -1 if blank."""
    for i in range(len(line) - 1, -1, -1):
        if not line[i].isspace():
            return i
    return -1


def is_blank_text(line: str) -> bool:
    return first_nonspace_pos(line) == -1


def leading_tab_count(line: str) -> int:
    count = 0
    while count < len(line) and line[count] == "\t":
        count += 1
    return count


def starts_with_open_brace(line: str) -> bool:
    first = first_nonspace_pos(line)
    return first >= 0 and line[first] == OPEN_BRACE


def ends_with_terminator(line: str) -> bool:
    """Does the last non-space char end a statement?"""
    last = last_nonspace_pos(line)
    return last >= 0 and line[last] == STATEMENT_TERMINATOR


def is_label_line(line: str) -> bool:
    """Does the line start with case/default or an access specifier?"""
    return first_token(line).text in LABELS


def is_type_header(line: str) -> bool:
    """Does the line start a class or struct declaration?"""
    return first_token(line).text in TYPE_KEYWORDS


def is_template_line(line: str) -> bool:
    return first_token(line).text == TEMPLATE_KEYWORD
