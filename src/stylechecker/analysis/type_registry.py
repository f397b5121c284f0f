"""Collect locally declared type names."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from stylechecker.analysis.tokens import iter_tokens
from stylechecker.config import TYPE_KEYWORDS
from stylechecker.constants import CommentKind, TokenKind


def discover_types(
    lines: Sequence[str],
    comment_kinds: Sequence[CommentKind],
    builtin_types: Iterable[str],
) -> frozenset[str]:
    """Return the built-in types plus every word after class/struct.

    Looks anywhere on a code line, so ``template <class T>`` registers
    ``T``. Name legality is checked separately by the naming rules.
    """
    known = set(builtin_types)
    for line, kind in zip(lines, comment_kinds, strict=True):
        if kind != CommentKind.NONE:
            continue
        after_keyword = False
        for token in iter_tokens(line):
            if after_keyword and token.kind == TokenKind.WORD:
                known.add(token.text)
            after_keyword = token.text in TYPE_KEYWORDS
    return frozenset(known)
