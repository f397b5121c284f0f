"""Environment-based configuration and style-guide vocabulary."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and STYLECHECK_* environment variables."""

    # Length limits
    max_line_length: int = 80
    max_function_length: int = 25
    max_inline_function_length: int = 1

    # Comment density
    max_uncommented_run: int = 24

    # Reporting
    max_shown_lines: int = 3

    # Types recognised before any class/struct is registered
    builtin_types: Annotated[list[str], NoDecode] = [
        "int",
        "float",
        "double",
        "char",
        "bool",
        "string",
        "void",
    ]

    # Logging
    log_level: str = "WARNING"

    @field_validator("builtin_types", mode="before")
    @classmethod
    def _parse_types(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("builtin_types")
    @classmethod
    def _validate_types(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError(
                "builtin_types must contain at least one type"
            )
        seen: set[str] = set()
        dupes: list[str] = []
        for t in v:
            if t in seen:
                dupes.append(t)
            seen.add(t)
        if dupes:
            logger.warning(
                "Duplicate types in STYLECHECK_BUILTIN_TYPES: %s",
                ", ".join(dupes),
            )
        return v

    @field_validator(
        "max_line_length",
        "max_function_length",
        "max_inline_function_length",
        "max_uncommented_run",
        "max_shown_lines",
    )
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("limits must be at least 1")
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "STYLECHECK_",
        "extra": "ignore",
    }


# Lines whose first token opens a brace-less pseudo scope
LABELS: frozenset[str] = frozenset({
    "case",
    "default",
    "public",
    "private",
    "protected",
})

# Labels that a comment may sit one indent shallower in front of
SWITCH_LABELS: frozenset[str] = frozenset({"case", "default"})

# Keywords whose following identifier names a new type
TYPE_KEYWORDS: frozenset[str] = frozenset({"class", "struct"})

# Operators that need whitespace on both sides.
# Skipped on purpose: '<' '>' (includes, templates), '++' '--',
# unary '-', pointer '*', and '/' (units such as ft/sec).
SPACED_OPERATORS: frozenset[str] = frozenset({
    "+",
    "%",
    "<<",
    ">>",
    "<=",
    ">=",
    "==",
    "!=",
    "&&",
    "||",
    "=",
    "+=",
    "-=",
    "*=",
    "/=",
})

# Punctuation that must be followed by whitespace.
# Colons are excluded (times, scope resolution).
SPACED_PUNCTUATION: frozenset[str] = frozenset({",", ";"})

# Characters allowed right after spaced punctuation (string literals)
PUNCTUATION_CHASERS: frozenset[str] = frozenset({
    " ",
    "\t",
    "\n",
    '"',
    "'",
    "\\",
})

# Dev-C++ style file header, matched from the first non-space char
HEADER_FIELDS: tuple[str, ...] = (
    "/*",
    "Name:",
    "Copyright:",
    "Author:",
    "Date:",
    "Description:",
)
