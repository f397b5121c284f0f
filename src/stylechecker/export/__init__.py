"""Export module — render a StyleReport for the terminal or tooling."""

from collections.abc import Callable

from stylechecker.constants import OutputFormat
from stylechecker.export.json_export import export_json
from stylechecker.export.text import (
    export_text,
    format_diagnostic,
    format_line_numbers,
)
from stylechecker.rules.schemas import StyleReport

__all__ = [
    "export_json",
    "export_report",
    "export_text",
    "format_diagnostic",
    "format_line_numbers",
]


def export_report(
    report: StyleReport,
    fmt: str = OutputFormat.TEXT,
    max_shown: int = 3,
) -> str:
    """Dispatch export by format string."""
    exporters: dict[str, Callable[[StyleReport], str]] = {
        OutputFormat.TEXT: lambda r: export_text(r, max_shown),
        OutputFormat.JSON: export_json,
    }
    exporter = exporters.get(fmt)
    if exporter is None:
        valid = ", ".join(exporters)
        msg = f"Unsupported format: {fmt}. Use: {valid}"
        raise ValueError(msg)
    return exporter(report)
