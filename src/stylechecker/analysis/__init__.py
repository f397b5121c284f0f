"""Structural annotation pipeline — comments, types, scopes, tokens."""

from stylechecker.analysis.model import (
    LineAnnotation,
    SourceModel,
    build_model,
)
from stylechecker.analysis.source import (
    SourceFile,
    load_source,
    source_from_text,
)
from stylechecker.analysis.tokens import Token, next_token

__all__ = [
    "LineAnnotation",
    "SourceFile",
    "SourceModel",
    "Token",
    "build_model",
    "load_source",
    "next_token",
    "source_from_text",
]
