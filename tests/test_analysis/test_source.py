"""Tests for loading source files into immutable line sequences."""

from __future__ import annotations

from pathlib import Path

import pytest

from stylechecker.analysis.source import (
    SourceFile,
    load_source,
    source_from_text,
    split_lines,
)
from stylechecker.errors import InputErrorKind, SourceFileError

# ── split_lines ──────────────────────────────────────────


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ()),
        ("a", ("a",)),
        ("a\nb\n", ("a", "b")),
        ("a\nb", ("a", "b")),
        ("a\n\n", ("a", "")),
        ("a\r\nb\r\n", ("a", "b")),
        ("\n", ("",)),
    ],
)
def test_split_lines(text: str, expected: tuple[str, ...]) -> None:
    assert split_lines(text) == expected


def test_tabs_are_preserved() -> None:
    source = source_from_text("\tint x;\n")
    assert source.lines == ("\tint x;",)
    assert source.display_name == "<text>"


# ── load_source ──────────────────────────────────────────


class TestLoadSource:
    def test_reads_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "main.cpp"
        path.write_text("int main() {\n\treturn 0;\n}\n")
        source = load_source(path)
        assert isinstance(source, SourceFile)
        assert len(source) == 3
        assert source.path == path
        assert source.display_name == str(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.cpp"
        path.write_text("")
        assert load_source(path).lines == ()

    def test_invalid_utf8_is_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.cpp"
        path.write_bytes(b"// caf\xe9\n")
        source = load_source(path)
        assert source.lines[0].startswith("// caf")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceFileError) as exc_info:
            load_source(tmp_path / "nope.cpp")
        assert exc_info.value.kind == InputErrorKind.NOT_FOUND
        assert "File not found" in str(exc_info.value)

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(SourceFileError) as exc_info:
            load_source(tmp_path)
        assert exc_info.value.kind == InputErrorKind.NOT_A_FILE

    def test_name_too_long_is_unreadable(self) -> None:
        with pytest.raises(SourceFileError) as exc_info:
            load_source(Path("a" * 5000))
        assert exc_info.value.kind == InputErrorKind.UNREADABLE
        assert "Cannot read file" in str(exc_info.value)
