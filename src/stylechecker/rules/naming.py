"""Naming convention rules.

Variables and functions are single-hump camelCase, types are
CamelCase, constants are UPPER_CASE. Two upper-case letters in a row
are rejected so acronyms read as words (``htmlParser``).
"""

from __future__ import annotations

from stylechecker.analysis.declarations import (
    function_header_name,
    parse_declaration,
)
from stylechecker.analysis.model import SourceModel
from stylechecker.analysis.tokens import next_token
from stylechecker.config import Settings


def _is_single_hump(name: str) -> bool:
    for prev, ch in zip(name, name[1:]):
        if not ch.isalnum() or (ch.isupper() and prev.isupper()):
            return False
    return True


def is_ok_constant(name: str) -> bool:
    return len(name) >= 2 and all(
        ch.isupper() or ch == "_" for ch in name
    )


def is_ok_variable(name: str) -> bool:
    return len(name) >= 2 and name[0].islower() and _is_single_hump(name)


def is_ok_function(name: str) -> bool:
    return is_ok_variable(name)


def is_ok_type(name: str) -> bool:
    return len(name) >= 2 and name[0].isupper() and _is_single_hump(name)


def _check_type_names(model: SourceModel, keyword: str) -> list[int]:
    errors: list[int] = []
    for i, line in enumerate(model.lines):
        if model.is_comment(i):
            continue
        prefix, cursor = next_token(line)
        if prefix.text != keyword:
            continue
        name, _ = next_token(line, cursor)
        if not is_ok_type(name.text):
            errors.append(i)
    return errors


def check_class_names(model: SourceModel, settings: Settings) -> list[int]:
    return _check_type_names(model, "class")


def check_struct_names(
    model: SourceModel, settings: Settings
) -> list[int]:
    return _check_type_names(model, "struct")


def check_function_names(
    model: SourceModel, settings: Settings
) -> list[int]:
    errors: list[int] = []
    for i, line in enumerate(model.lines):
        if model.is_comment(i):
            continue
        name = function_header_name(line, model.type_names)
        if name is not None and not is_ok_function(name):
            errors.append(i)
    return errors


def check_constant_names(
    model: SourceModel, settings: Settings
) -> list[int]:
    errors: list[int] = []
    for i, line in enumerate(model.lines):
        if model.is_comment(i):
            continue
        decl = parse_declaration(line, model.type_names)
        if (
            decl is not None
            and decl.is_constant
            and not decl.is_function_like
            and not is_ok_constant(decl.name)
        ):
            errors.append(i)
    return errors


def check_variable_names(
    model: SourceModel, settings: Settings
) -> list[int]:
    """Only the first variable declared on a line is checked."""
    errors: list[int] = []
    for i, line in enumerate(model.lines):
        if model.is_comment(i):
            continue
        decl = parse_declaration(line, model.type_names)
        if (
            decl is not None
            and not decl.is_constant
            and not decl.is_function_like
            and not is_ok_variable(decl.name)
        ):
            errors.append(i)
    return errors
