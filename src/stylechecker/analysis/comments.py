"""Classify every line as code, block comment, or line comment.

Assumes comments are full lines; trailing comments on code lines are
left as code here and reported by the comment-placement rules.
"""

from __future__ import annotations

from collections.abc import Sequence

from stylechecker.analysis.tokens import first_token, last_token
from stylechecker.constants import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    LINE_COMMENT,
    CommentKind,
)


def classify_comments(lines: Sequence[str]) -> tuple[CommentKind, ...]:
    """Return one CommentKind per line in a single forward pass.

    A block comment covers the line whose first token opens it
    through the line whose last token closes it, inclusive.
    """
    kinds: list[CommentKind] = []
    in_block = False
    for line in lines:
        first = first_token(line).text
        kind = CommentKind.NONE

        if first.startswith(BLOCK_COMMENT_OPEN):
            in_block = True
        if in_block:
            kind = CommentKind.BLOCK
        elif first.startswith(LINE_COMMENT):
            kind = CommentKind.LINE
        if last_token(line).text.endswith(BLOCK_COMMENT_CLOSE):
            in_block = False

        kinds.append(kind)
    return tuple(kinds)
