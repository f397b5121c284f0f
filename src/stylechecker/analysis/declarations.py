"""Token-level detection of variable, constant and function declarations.

No grammar: a declaration is a line whose first token (after an
optional ``const``) is a known type name, followed by the declared
name. Only the first name declared on a line is inspected.
"""

from __future__ import annotations

from collections.abc import Set
from dataclasses import dataclass

from stylechecker.analysis.tokens import Token, next_token
from stylechecker.analysis.text import ends_with_terminator
from stylechecker.constants import (
    CONSTANT_QUALIFIER,
    GENERIC_OPEN,
    PARAMETER_LIST_OPEN,
    POINTER_MARKER,
    SCOPE_RESOLUTION,
    TokenKind,
)


@dataclass(frozen=True)
class Declaration:
    """The first name declared on a line."""

    name: str
    type_name: str
    is_constant: bool = False
    is_function_like: bool = False


def _read_head(
    line: str, type_names: Set[str], *, allow_const: bool
) -> tuple[Token, Token, Token, int, bool] | None:
    """Scan ``[const] type [*] name follow``.

    Returns (type, name, follow, cursor after follow, is_constant) or
    None when the line does not open with a known type and a word.
    """
    token, cursor = next_token(line)
    is_constant = allow_const and token.text == CONSTANT_QUALIFIER
    if is_constant:
        token, cursor = next_token(line, cursor)
    if token.text not in type_names:
        return None

    name, cursor = next_token(line, cursor)
    if name.text == POINTER_MARKER:
        name, cursor = next_token(line, cursor)
    if name.kind != TokenKind.WORD:
        return None

    follow, cursor = next_token(line, cursor)
    return token, name, follow, cursor, is_constant


def parse_declaration(
    line: str, type_names: Set[str]
) -> Declaration | None:
    """Detect a declaration and whether it looks like a function.

    A parameter list, scope resolution or generic opener after the
    name marks it function-like; such names are left to the function
    rules.
    """
    head = _read_head(line, type_names, allow_const=True)
    if head is None:
        return None
    type_token, name, follow, _, is_constant = head
    function_like = (
        follow.text.startswith(PARAMETER_LIST_OPEN)
        or follow.text == SCOPE_RESOLUTION
        or follow.text.startswith(GENERIC_OPEN)
    )
    return Declaration(
        name=name.text,
        type_name=type_token.text,
        is_constant=is_constant,
        is_function_like=function_like,
    )


def function_header_name(
    line: str, type_names: Set[str]
) -> str | None:
    """Return the function name if the line is a function header.

    A header starts with a type, does not end with a semicolon (that
    would be a prototype), and reaches a parameter list after an
    optional pointer marker and an optional ``Qualifier::`` prefix.
    """
    if ends_with_terminator(line):
        return None
    head = _read_head(line, type_names, allow_const=False)
    if head is None:
        return None
    _, name, follow, cursor, _ = head

    if follow.text == SCOPE_RESOLUTION:
        name, cursor = next_token(line, cursor)
        follow, cursor = next_token(line, cursor)
    if name.kind == TokenKind.WORD and follow.text.startswith(
        PARAMETER_LIST_OPEN
    ):
        return name.text
    return None


def is_function_header(line: str, type_names: Set[str]) -> bool:
    return function_header_name(line, type_names) is not None
