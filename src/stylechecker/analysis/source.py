"""Line store — load one source file as an immutable line sequence."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from stylechecker.errors import (
    InputErrorKind,
    SourceFileError,
    classify_input_error,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """Raw text lines of one file, 0-indexed, without line endings."""

    lines: tuple[str, ...]
    path: Path | None = None

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def display_name(self) -> str:
        return str(self.path) if self.path is not None else "<text>"


def split_lines(text: str) -> tuple[str, ...]:
    """Split text into lines without fabricating a trailing empty line.

    ``"a\\nb\\n"`` and ``"a\\nb"`` both give two lines; ``""`` gives none.
    Carriage returns from CRLF files are dropped.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return tuple(lines)


def source_from_text(text: str, path: Path | None = None) -> SourceFile:
    """Build a SourceFile from in-memory text."""
    return SourceFile(lines=split_lines(text), path=path)


def load_source(path: Path) -> SourceFile:
    """Read a file fully into memory.

    Undecodable bytes are replaced rather than rejected, since the
    checker only looks at ASCII structure.

    Raises SourceFileError if the path is missing or unreadable.
    """
    try:
        if path.exists() and not path.is_file():
            raise SourceFileError(path, InputErrorKind.NOT_A_FILE)
        data = path.read_bytes()
    except OSError as exc:
        kind = classify_input_error(exc)
        logger.debug(
            "event=source_read_failed path=%s kind=%s",
            path,
            kind.value,
        )
        raise SourceFileError(path, kind) from exc

    source = source_from_text(
        data.decode("utf-8", errors="replace"), path
    )
    logger.debug(
        "event=source_loaded path=%s lines=%d", path, len(source)
    )
    return source
