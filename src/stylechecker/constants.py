"""Shared constants — single source of truth for cross-module values.

StrEnum members are str-compatible, so the JSON reporter and the
text reporter can emit them unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class CommentKind(StrEnum):
    """Comment classification of a whole source line."""

    NONE = "none"
    BLOCK = "block"
    LINE = "line"


class TokenKind(StrEnum):
    """Character class of a scanned token.

    END marks an exhausted scan (only whitespace remained).
    """

    WORD = "word"
    NUMBER = "number"
    PUNCTUATION = "punctuation"
    END = "end"


class RuleGroup(StrEnum):
    """Report priority groups, printed in declaration order."""

    CRITICAL = "critical"
    READABILITY = "readability"
    DOCUMENTATION = "documentation"


class OutputFormat(StrEnum):
    """Reporter formats accepted by ``stylechecker check --format``."""

    TEXT = "text"
    JSON = "json"


# ── Markers ──────────────────────────────────────────────

BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
LINE_COMMENT = "//"

OPEN_BRACE = "{"
CLOSE_BRACE = "}"
STATEMENT_TERMINATOR = ";"
POINTER_MARKER = "*"
SCOPE_RESOLUTION = "::"
PARAMETER_LIST_OPEN = "("
GENERIC_OPEN = "<"
CONSTANT_QUALIFIER = "const"
TEMPLATE_KEYWORD = "template"

# ── Display ──────────────────────────────────────────────

TRUNCATION_MARKER = "etc"
NO_ERRORS_MESSAGE = "No errors found."
BANNER_TITLE = "StyleChecker"
