"""Tests for Settings parsing and validation."""

from __future__ import annotations

import logging

import pytest

from stylechecker.config import (
    HEADER_FIELDS,
    LABELS,
    SWITCH_LABELS,
    Settings,
)


def _settings(**kwargs: object) -> Settings:
    return Settings(_env_file=None, **kwargs)  # type: ignore[arg-type]


class TestDefaults:
    def test_limits(self) -> None:
        s = _settings()
        assert s.max_line_length == 80
        assert s.max_function_length == 25
        assert s.max_inline_function_length == 1
        assert s.max_uncommented_run == 24
        assert s.max_shown_lines == 3
        assert s.log_level == "WARNING"

    def test_builtin_types(self) -> None:
        assert "int" in _settings().builtin_types
        assert "string" in _settings().builtin_types


class TestBuiltinTypesParsing:
    def test_comma_separated_string_parsed_to_list(self) -> None:
        s = _settings(builtin_types="int, long ,size_t")
        assert s.builtin_types == ["int", "long", "size_t"]

    def test_list_passthrough(self) -> None:
        s = _settings(builtin_types=["int", "bool"])
        assert s.builtin_types == ["int", "bool"]

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STYLECHECK_BUILTIN_TYPES", "int,wchar_t")
        assert _settings().builtin_types == ["int", "wchar_t"]


class TestValidation:
    def test_empty_types_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one type"):
            _settings(builtin_types="")

    def test_duplicate_types_warns(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="stylechecker.config"):
            s = _settings(builtin_types=["int", "int", "bool"])
        assert "Duplicate types in STYLECHECK_BUILTIN_TYPES" in caplog.text
        assert s.builtin_types == ["int", "int", "bool"]

    def test_no_warning_without_duplicates(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="stylechecker.config"):
            _settings(builtin_types=["int", "bool"])
        assert "Duplicate" not in caplog.text

    @pytest.mark.parametrize(
        "field", ["max_line_length", "max_function_length", "max_shown_lines"]
    )
    def test_limits_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            _settings(**{field: 0})

    def test_limit_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("STYLECHECK_MAX_LINE_LENGTH", "100")
        assert _settings().max_line_length == 100


def test_switch_labels_are_labels() -> None:
    assert SWITCH_LABELS <= LABELS


def test_header_fields_start_with_block_comment() -> None:
    assert HEADER_FIELDS[0] == "/*"
    assert len(HEADER_FIELDS) == 6
