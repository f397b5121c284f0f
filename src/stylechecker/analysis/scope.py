"""Scope engine — infer a nesting depth for every line.

Two stages, no parser:

1. Brace counting gives each line the depth in effect before its own
   opening braces; a line that starts with a closing brace reports the
   depth it returns to.
2. Label adjustment treats ``case``/``default`` and access specifiers
   as brace-less pseudo scopes. A label activates a level at its own
   depth; lines below it are one deeper until the depth drops under
   the activation point, i.e. the enclosing block has closed.

Depths may go negative on unbalanced input; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Sequence

from stylechecker.analysis.text import first_nonspace_pos, is_label_line
from stylechecker.constants import CLOSE_BRACE, OPEN_BRACE, CommentKind


def count_brace_levels(
    lines: Sequence[str],
    comment_kinds: Sequence[CommentKind],
) -> tuple[int, ...]:
    """Stage A: depth from brace balance alone.

    Comment lines inherit the running depth without being scanned.
    """
    levels: list[int] = []
    depth = 0
    for line, kind in zip(lines, comment_kinds, strict=True):
        first = first_nonspace_pos(line)
        if kind != CommentKind.NONE or first < 0:
            levels.append(depth)
            continue

        if line[first] == CLOSE_BRACE:
            depth -= 1
        levels.append(depth)

        for pos in range(first, len(line)):
            ch = line[pos]
            if ch == OPEN_BRACE:
                depth += 1
            elif ch == CLOSE_BRACE and pos > first:
                depth -= 1
    return tuple(levels)


def adjust_label_levels(
    lines: Sequence[str],
    comment_kinds: Sequence[CommentKind],
    base_levels: Sequence[int],
) -> tuple[int, ...]:
    """Stage B: add the pseudo levels opened by labels.

    Activation depths are stacked so a switch nested inside a case
    gets its own level. Labels at an active depth stay level with the
    label that activated it; every other line under an active label
    is pushed one deeper per activation.
    """
    levels: list[int] = []
    active: list[int] = []
    for line, kind, depth in zip(
        lines, comment_kinds, base_levels, strict=True
    ):
        while active and depth < active[-1]:
            active.pop()

        if kind == CommentKind.NONE and is_label_line(line):
            if not active or depth > active[-1]:
                active.append(depth)
            levels.append(depth + len(active) - 1)
        else:
            levels.append(depth + len(active))
    return tuple(levels)
