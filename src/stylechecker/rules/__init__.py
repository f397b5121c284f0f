"""Rule catalog — stateless checks over the annotated source model."""

from stylechecker.rules.catalog import (
    CATALOG,
    CheckOptions,
    Rule,
    run_rules,
)
from stylechecker.rules.schemas import Diagnostic, StyleReport

__all__ = [
    "CATALOG",
    "CheckOptions",
    "Diagnostic",
    "Rule",
    "StyleReport",
    "run_rules",
]
