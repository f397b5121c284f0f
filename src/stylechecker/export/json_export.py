"""JSON report — structured envelope for tooling."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from stylechecker.rules.schemas import Diagnostic, StyleReport


def export_json(report: StyleReport) -> str:
    """Export failing diagnostics as structured JSON (1-based lines)."""
    payload: dict[str, Any] = {
        "file": report.file,
        "generated_at": datetime.now(UTC).isoformat(),
        "line_count": report.line_count,
        "passed": report.passed,
        "diagnostic_count": len(report.failures),
        "diagnostics": [
            _diagnostic_to_dict(d) for d in report.failures
        ],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _diagnostic_to_dict(
    diagnostic: Diagnostic,
) -> dict[str, Any]:
    return {
        "rule": diagnostic.rule,
        "group": diagnostic.group,
        "message": diagnostic.message,
        "lines": list(diagnostic.display_lines),
    }
