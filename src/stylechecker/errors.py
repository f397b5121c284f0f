"""Error types and classification for input handling.

Classifies read failures by category to enable:
- Informative user messages (missing vs directory vs permissions)
- Structured logging of the failure kind
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class InputErrorKind(Enum):
    NOT_FOUND = "not_found"  # path does not exist
    NOT_A_FILE = "not_a_file"  # directory or special file
    UNREADABLE = "unreadable"  # permissions, I/O failure


class StyleCheckError(Exception):
    """Base class for errors reported at the process boundary."""


class SourceFileError(StyleCheckError):
    """The source file could not be loaded; no analysis was run."""

    def __init__(self, path: Path, kind: InputErrorKind) -> None:
        self.path = path
        self.kind = kind
        super().__init__(f"{_MESSAGES[kind]}: {path}")


_MESSAGES = {
    InputErrorKind.NOT_FOUND: "File not found",
    InputErrorKind.NOT_A_FILE: "Not a regular file",
    InputErrorKind.UNREADABLE: "Cannot read file",
}


def classify_input_error(error: OSError) -> InputErrorKind:
    """Map an OS-level read failure to an input error kind.

    Checks exception types first, falls back to UNREADABLE.
    """
    if isinstance(error, FileNotFoundError):
        return InputErrorKind.NOT_FOUND
    if isinstance(error, (IsADirectoryError, NotADirectoryError)):
        return InputErrorKind.NOT_A_FILE
    return InputErrorKind.UNREADABLE
