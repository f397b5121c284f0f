"""Tests for the annotated SourceModel and its line queries."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from stylechecker.analysis.model import LineAnnotation, SourceModel
from stylechecker.constants import CommentKind

Make = Callable[..., SourceModel]


def test_empty_source(make_model: Make) -> None:
    model = make_model()
    assert len(model) == 0
    assert model.first_comment_line() == -1
    assert list(model.annotations()) == []


def test_annotation(make_model: Make) -> None:
    model = make_model("// hi", "", "int x;")
    assert model.annotation(0) == LineAnnotation(
        comment_kind=CommentKind.LINE, scope_level=0, is_blank=False
    )
    assert model.annotation(1).is_blank
    assert model.annotation(2).comment_kind == CommentKind.NONE


def test_annotations_follow_line_order(make_model: Make) -> None:
    model = make_model("int f() {", "\t// body", "}")
    assert [a.scope_level for a in model.annotations()] == [0, 1, 0]
    assert [a.comment_kind for a in model.annotations()] == [
        CommentKind.NONE,
        CommentKind.LINE,
        CommentKind.NONE,
    ]


def test_out_of_range_index_is_a_contract_violation(
    make_model: Make,
) -> None:
    model = make_model("int x;")
    with pytest.raises(AssertionError):
        model.line(1)
    with pytest.raises(AssertionError):
        model.scope(-1)


def test_registered_types(make_model: Make) -> None:
    model = make_model("class Shape {", "};")
    assert "Shape" in model.type_names
    assert "int" in model.type_names


# ── Line queries ─────────────────────────────────────────


class TestLineQueries:
    def test_is_code(self, make_model: Make) -> None:
        model = make_model("// a", "", "b();")
        assert [model.is_code(i) for i in range(3)] == [
            False,
            False,
            True,
        ]

    def test_mid_block_comment(self, make_model: Make) -> None:
        model = make_model(
            "/*", "text", "*/", "x();", "/* single */"
        )
        assert [model.is_mid_block_comment(i) for i in range(5)] == [
            False,
            True,
            False,
            False,
            False,
        ]

    def test_first_comment_line(self, make_model: Make) -> None:
        model = make_model("int x;", "", "// late")
        assert model.first_comment_line() == 2

    def test_comment_before_case(self, make_model: Make) -> None:
        model = make_model(
            "switch (a) {",
            "\t// first",
            "\t// still first",
            "\tcase 1:",
            "\t\t// body",
            "\t\tb();",
            "}",
        )
        assert model.is_comment_before_case(1)
        assert model.is_comment_before_case(2)
        assert not model.is_comment_before_case(3)
        assert not model.is_comment_before_case(4)

    def test_may_be_run_on(self, make_model: Make) -> None:
        model = make_model(
            "int main() {",
            "\tint total = first +",
            "\t\tsecond;",
            "\treturn total;",
            "}",
        )
        assert not model.may_be_run_on(0)
        assert not model.may_be_run_on(1)
        assert model.may_be_run_on(2)
        assert not model.may_be_run_on(3)

    def test_follows_open_brace(self, make_model: Make) -> None:
        model = make_model("int main()", "{", "\tx();", "if (a) {", "\ty();")
        assert model.follows_open_brace(2)
        assert model.follows_open_brace(4)
        assert not model.follows_open_brace(1)
        assert not model.follows_open_brace(0)

    def test_same_scope_window(self, make_model: Make) -> None:
        model = make_model("a();", "b();", "c();", "{", "d();")
        assert model.is_same_scope(0, 2)
        assert not model.is_same_scope(2, 2)

    def test_same_scope_window_past_end(self, make_model: Make) -> None:
        model = make_model("a();", "b();", "c();")
        assert not model.is_same_scope(0, 3)
