"""Tests for the rule catalog and full-file checks."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from stylechecker.analysis.model import SourceModel, build_model
from stylechecker.analysis.source import load_source
from stylechecker.config import Settings
from stylechecker.constants import RuleGroup
from stylechecker.rules.catalog import (
    CATALOG,
    RULES_BY_NAME,
    CheckOptions,
    is_enabled,
    run_rules,
)
from stylechecker.rules.schemas import StyleReport

Make = Callable[..., SourceModel]


def _failing(report: StyleReport) -> dict[str, tuple[int, ...]]:
    return {d.rule: d.lines for d in report.failures}


# ── Catalog shape ────────────────────────────────────────


class TestCatalog:
    def test_names_unique(self) -> None:
        assert len(RULES_BY_NAME) == len(CATALOG)

    def test_groups_in_report_order(self) -> None:
        order = list(RuleGroup)
        positions = [order.index(rule.group) for rule in CATALOG]
        assert positions == sorted(positions)

    def test_every_group_has_rules(self) -> None:
        assert {rule.group for rule in CATALOG} == set(RuleGroup)

    def test_only_two_rules_are_optional(self) -> None:
        optional = {rule.name for rule in CATALOG if rule.option}
        assert optional == {"function-length", "function-lead-comments"}

    def test_is_enabled(self) -> None:
        rule = RULES_BY_NAME["function-length"]
        assert is_enabled(rule, CheckOptions())
        assert not is_enabled(rule, CheckOptions(check_function_length=False))
        assert is_enabled(RULES_BY_NAME["line-length"], CheckOptions())


# ── run_rules ────────────────────────────────────────────


class TestRunRules:
    def test_report_lists_every_rule_in_order(
        self, make_model: Make, settings: Settings
    ) -> None:
        report = run_rules(make_model("int x;"), settings)
        assert [d.rule for d in report.diagnostics] == [
            rule.name for rule in CATALOG
        ]

    def test_disabled_rules_are_omitted(
        self, make_model: Make, settings: Settings
    ) -> None:
        options = CheckOptions(
            check_function_length=False, check_lead_comments=False
        )
        report = run_rules(make_model("int x;"), settings, options)
        names = {d.rule for d in report.diagnostics}
        assert "function-length" not in names
        assert "function-lead-comments" not in names
        assert len(names) == len(CATALOG) - 2

    def test_suppressed_long_function(
        self, make_model: Make, settings: Settings
    ) -> None:
        model = make_model(
            "// lead", "int main() {", *["\tx();"] * 30, "}"
        )
        assert "function-length" in _failing(run_rules(model, settings))
        options = CheckOptions(check_function_length=False)
        assert "function-length" not in _failing(
            run_rules(model, settings, options)
        )

    def test_uncommented_file(
        self, make_model: Make, settings: Settings
    ) -> None:
        report = run_rules(make_model(*["run();"] * 30), settings)
        failing = _failing(report)
        assert failing["any-comments"] == (0,)
        assert failing["header-start"] == (0,)
        for rule in ("class-names", "variable-names", "constant-names"):
            assert rule not in failing

    def test_top_level_function_too_long(
        self, make_model: Make, settings: Settings
    ) -> None:
        model = make_model(
            "// lead", "int main()", "{", *["\tx();"] * 28, "}"
        )
        report = run_rules(model, settings)
        assert _failing(report)["function-length"] == (1,)


# ── Fixture files ────────────────────────────────────────


def test_clean_file_passes(clean_path: Path, settings: Settings) -> None:
    model = build_model(load_source(clean_path), settings)
    report = run_rules(model, settings)
    assert _failing(report) == {}
    assert report.passed
    assert report.line_count == 51


def test_messy_file(messy_path: Path, settings: Settings) -> None:
    model = build_model(load_source(messy_path), settings)
    report = run_rules(model, settings)
    assert _failing(report) == {
        "header-start": (0,),
        "tab-usage": (11,),
        "class-names": (4,),
        "function-names": (10,),
        "constant-names": (3,),
        "variable-names": (2, 6),
        "extraneous-blanks": (8,),
        "punctuation-spacing": (10,),
        "operator-spacing": (11, 15),
        "header-format": (14,),
        "endline-comments": (11,),
        "function-lead-comments": (10, 13),
        "comment-spacing": (14,),
    }
