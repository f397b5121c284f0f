"""Pipeline orchestration — load a file, build the model, run the rules."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from stylechecker.analysis.model import build_model
from stylechecker.analysis.source import (
    SourceFile,
    load_source,
    source_from_text,
)
from stylechecker.config import Settings
from stylechecker.rules.catalog import CheckOptions, run_rules
from stylechecker.rules.schemas import StyleReport

logger = logging.getLogger(__name__)


def check_source(
    source: SourceFile,
    settings: Settings | None = None,
    options: CheckOptions | None = None,
) -> StyleReport:
    """Annotate a loaded source and evaluate the full catalog."""
    cfg = settings or Settings()
    start = time.monotonic()

    model = build_model(source, cfg)
    report = run_rules(model, cfg, options)

    elapsed = (time.monotonic() - start) * 1000
    logger.info(
        "event=check_done file=%s lines=%d failures=%d duration_ms=%.1f",
        source.display_name,
        len(source),
        len(report.failures),
        elapsed,
    )
    return report


def check_text(
    text: str,
    settings: Settings | None = None,
    options: CheckOptions | None = None,
) -> StyleReport:
    return check_source(source_from_text(text), settings, options)


def check_file(
    path: Path,
    settings: Settings | None = None,
    options: CheckOptions | None = None,
) -> StyleReport:
    """Check one file on disk.

    Raises SourceFileError before any analysis if the file cannot be
    read.
    """
    return check_source(load_source(path), settings, options)
