"""Ordered rule catalog and diagnostic collection.

The catalog order is the report order: critical problems first, then
readability, then documentation. Rules are independent of each other;
only the printing order is fixed here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from stylechecker.analysis.model import SourceModel
from stylechecker.config import Settings
from stylechecker.constants import RuleGroup
from stylechecker.rules import (
    comments,
    functions,
    header,
    indentation,
    layout,
    naming,
    spacing,
)
from stylechecker.rules.schemas import Diagnostic, StyleReport

logger = logging.getLogger(__name__)

RuleCheck = Callable[[SourceModel, Settings], list[int]]


@dataclass(frozen=True)
class CheckOptions:
    """Switches for rules the user may suppress."""

    check_function_length: bool = True
    check_lead_comments: bool = True


@dataclass(frozen=True)
class Rule:
    """A named check and the message reported when it fires."""

    name: str
    message: str
    group: RuleGroup
    check: RuleCheck
    option: str | None = None  # CheckOptions field that disables it


CATALOG: tuple[Rule, ...] = (
    # Critical
    Rule(
        "any-comments",
        "File lacks any comment lines",
        RuleGroup.CRITICAL,
        header.check_any_comments,
    ),
    Rule(
        "header-start",
        "Misplaced file comment header",
        RuleGroup.CRITICAL,
        header.check_header_start,
    ),
    Rule(
        "runon-comments",
        "End-line run-on comments used",
        RuleGroup.CRITICAL,
        comments.check_runon_comments,
    ),
    Rule(
        "tab-usage",
        "Tabs should be used for indents",
        RuleGroup.CRITICAL,
        indentation.check_tab_usage,
    ),
    Rule(
        "indent-level",
        "Indent level errors",
        RuleGroup.CRITICAL,
        indentation.check_indent_levels,
    ),
    Rule(
        "function-length",
        "Function is too long",
        RuleGroup.CRITICAL,
        functions.check_function_length,
        option="check_function_length",
    ),
    # Readability
    Rule(
        "line-length",
        "Line is too long",
        RuleGroup.READABILITY,
        layout.check_line_length,
    ),
    Rule(
        "class-names",
        "Classes should start caps camel-case",
        RuleGroup.READABILITY,
        naming.check_class_names,
    ),
    Rule(
        "struct-names",
        "Structures should start caps camel-case",
        RuleGroup.READABILITY,
        naming.check_struct_names,
    ),
    Rule(
        "function-names",
        "Functions should be camel-case name",
        RuleGroup.READABILITY,
        naming.check_function_names,
    ),
    Rule(
        "constant-names",
        "Constants should be all-caps name",
        RuleGroup.READABILITY,
        naming.check_constant_names,
    ),
    Rule(
        "variable-names",
        "Variables should be camel-case name",
        RuleGroup.READABILITY,
        naming.check_variable_names,
    ),
    Rule(
        "extraneous-blanks",
        "Extraneous blank lines",
        RuleGroup.READABILITY,
        layout.check_extraneous_blanks,
    ),
    Rule(
        "punctuation-spacing",
        "Punctuation should have space afterward",
        RuleGroup.READABILITY,
        spacing.check_punctuation_spacing,
    ),
    Rule(
        "operator-spacing",
        "Operators should have surrounding spaces",
        RuleGroup.READABILITY,
        spacing.check_operator_spacing,
    ),
    # Documentation
    Rule(
        "header-format",
        "Invalid comment header",
        RuleGroup.DOCUMENTATION,
        header.check_header_format,
    ),
    Rule(
        "endline-comments",
        "End-line comments shouldn't be used",
        RuleGroup.DOCUMENTATION,
        comments.check_endline_comments,
    ),
    Rule(
        "function-lead-comments",
        "Functions should have a lead-in comment",
        RuleGroup.DOCUMENTATION,
        functions.check_function_lead_comments,
        option="check_lead_comments",
    ),
    Rule(
        "blank-before-comments",
        "Missing blank line before comment",
        RuleGroup.DOCUMENTATION,
        comments.check_blank_before_comments,
    ),
    Rule(
        "too-few-comments",
        "Too few comments",
        RuleGroup.DOCUMENTATION,
        comments.check_too_few_comments,
    ),
    Rule(
        "too-many-comments",
        "Too many comments",
        RuleGroup.DOCUMENTATION,
        comments.check_too_many_comments,
    ),
    Rule(
        "comment-spacing",
        "Comments need space after slashes",
        RuleGroup.DOCUMENTATION,
        comments.check_comment_spacing,
    ),
)

RULES_BY_NAME: dict[str, Rule] = {rule.name: rule for rule in CATALOG}


def is_enabled(rule: Rule, options: CheckOptions) -> bool:
    return rule.option is None or bool(getattr(options, rule.option))


def run_rule(
    rule: Rule, model: SourceModel, settings: Settings
) -> Diagnostic:
    """Evaluate one rule; lines come back sorted and de-duplicated."""
    lines = tuple(sorted(set(rule.check(model, settings))))
    return Diagnostic(
        rule=rule.name,
        message=rule.message,
        group=rule.group,
        lines=lines,
    )


def run_rules(
    model: SourceModel,
    settings: Settings | None = None,
    options: CheckOptions | None = None,
) -> StyleReport:
    """Evaluate every enabled rule in catalog order."""
    cfg = settings or Settings()
    opts = options or CheckOptions()

    diagnostics: list[Diagnostic] = []
    for rule in CATALOG:
        if not is_enabled(rule, opts):
            logger.debug("event=rule_skipped rule=%s", rule.name)
            continue
        diagnostic = run_rule(rule, model, cfg)
        if diagnostic.lines:
            logger.debug(
                "event=rule_failed rule=%s hits=%d",
                rule.name,
                len(diagnostic.lines),
            )
        diagnostics.append(diagnostic)

    return StyleReport(
        file=model.source.display_name,
        line_count=len(model),
        diagnostics=diagnostics,
    )
