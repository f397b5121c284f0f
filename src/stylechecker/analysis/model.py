"""Immutable annotated line model and the pipeline that builds it."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from stylechecker.analysis.comments import classify_comments
from stylechecker.analysis.scope import (
    adjust_label_levels,
    count_brace_levels,
)
from stylechecker.analysis.source import SourceFile
from stylechecker.analysis.text import (
    ends_with_terminator,
    first_nonspace_pos,
    is_blank_text,
    last_nonspace_pos,
)
from stylechecker.analysis.tokens import first_token
from stylechecker.analysis.type_registry import discover_types
from stylechecker.config import SWITCH_LABELS, Settings
from stylechecker.constants import OPEN_BRACE, CommentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineAnnotation:
    """Derived facts about one line."""

    comment_kind: CommentKind
    scope_level: int
    is_blank: bool


@dataclass(frozen=True)
class SourceModel:
    """A source file plus its comment, scope and type annotations.

    Built once by :func:`build_model`; rules only read it.
    """

    source: SourceFile
    comment_kinds: tuple[CommentKind, ...]
    scope_levels: tuple[int, ...]
    type_names: frozenset[str]

    def __post_init__(self) -> None:
        n = len(self.source.lines)
        assert len(self.comment_kinds) == n
        assert len(self.scope_levels) == n

    def __len__(self) -> int:
        return len(self.source.lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return self.source.lines

    def _check(self, index: int) -> None:
        assert 0 <= index < len(self), f"line {index} out of range"

    def line(self, index: int) -> str:
        self._check(index)
        return self.source.lines[index]

    def scope(self, index: int) -> int:
        self._check(index)
        return self.scope_levels[index]

    def annotation(self, index: int) -> LineAnnotation:
        self._check(index)
        return LineAnnotation(
            comment_kind=self.comment_kinds[index],
            scope_level=self.scope_levels[index],
            is_blank=is_blank_text(self.source.lines[index]),
        )

    def annotations(self) -> Iterator[LineAnnotation]:
        for i in range(len(self)):
            yield self.annotation(i)

    # ── Line queries ─────────────────────────────────────

    def is_comment(self, index: int) -> bool:
        self._check(index)
        return self.comment_kinds[index] != CommentKind.NONE

    def is_code(self, index: int) -> bool:
        """Neither a comment nor blank."""
        return not self.is_comment(index) and not self.is_blank(index)

    def is_blank(self, index: int) -> bool:
        return is_blank_text(self.line(index))

    def is_mid_block_comment(self, index: int) -> bool:
        """Is the line strictly inside a multi-line block comment?"""
        self._check(index)
        kinds = self.comment_kinds
        return (
            kinds[index] == CommentKind.BLOCK
            and index > 0
            and kinds[index - 1] == CommentKind.BLOCK
            and index < len(kinds) - 1
            and kinds[index + 1] == CommentKind.BLOCK
        )

    def first_comment_line(self) -> int:
        """Index of the first comment line, or -1 if there is none."""
        for i, kind in enumerate(self.comment_kinds):
            if kind != CommentKind.NONE:
                return i
        return -1

    def is_comment_before_case(self, index: int) -> bool:
        """Is this a comment whose next code line is case/default?"""
        if not self.is_comment(index):
            return False
        for i in range(index + 1, len(self)):
            if self.is_comment(i):
                continue
            return first_token(self.lines[i]).text in SWITCH_LABELS
        return False

    def may_be_run_on(self, index: int) -> bool:
        """Could this line continue the statement on the line above?

        True when the previous line is code at the same scope that
        does not end with a semicolon.
        """
        self._check(index)
        if index == 0 or not self.is_code(index - 1):
            return False
        if self.scope_levels[index] != self.scope_levels[index - 1]:
            return False
        return not ends_with_terminator(self.lines[index - 1])

    def follows_open_brace(self, index: int) -> bool:
        """Does the previous line open a block?

        Accepts a brace on its own line or at the end of the line.
        """
        self._check(index)
        if index == 0:
            return False
        prior = self.lines[index - 1]
        first = first_nonspace_pos(prior)
        last = last_nonspace_pos(prior)
        return first >= 0 and OPEN_BRACE in (prior[first], prior[last])

    def is_same_scope(self, start: int, count: int) -> bool:
        """Are lines start..start+count all at one scope level?

        False when the window runs past either end of the file.
        """
        if start < 0 or start + count >= len(self):
            return False
        level = self.scope_levels[start]
        return all(
            self.scope_levels[start + i] == level
            for i in range(1, count + 1)
        )


def build_model(
    source: SourceFile, settings: Settings | None = None
) -> SourceModel:
    """Run the annotation passes in their fixed order.

    comments → types → brace scope → label scope.
    """
    cfg = settings or Settings()
    lines = source.lines

    comment_kinds = classify_comments(lines)
    type_names = discover_types(lines, comment_kinds, cfg.builtin_types)
    base_levels = count_brace_levels(lines, comment_kinds)
    scope_levels = adjust_label_levels(lines, comment_kinds, base_levels)

    logger.debug(
        "event=model_built file=%s lines=%d types=%d",
        source.display_name,
        len(lines),
        len(type_names),
    )
    return SourceModel(
        source=source,
        comment_kinds=comment_kinds,
        scope_levels=scope_levels,
        type_names=type_names,
    )
