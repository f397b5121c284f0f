"""Restartable lexical cursor over a single line.

Splits on whitespace, identifiers, numbers and punctuation. Simplistic
on purpose: runs of punctuation are glued together (``"();"`` is one
token) and string literals are not recognised.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from stylechecker.constants import TokenKind


@dataclass(frozen=True)
class Token:
    """One token and its start offset in the line."""

    text: str
    kind: TokenKind
    start: int = 0

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    def __bool__(self) -> bool:
        return self.kind != TokenKind.END


END_TOKEN = Token(text="", kind=TokenKind.END)


def _is_word_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _is_number_char(ch: str) -> bool:
    return ch.isdigit() or ch == "."


def _is_punctuation(ch: str) -> bool:
    return not ch.isspace() and not _is_word_char(ch)


def next_token(line: str, cursor: int = 0) -> tuple[Token, int]:
    """Scan the token starting at or after ``cursor``.

    Returns the token and the position just past it. When only
    whitespace remains, returns END_TOKEN and the cursor unchanged.
    """
    pos = cursor
    length = len(line)
    while pos < length and line[pos].isspace():
        pos += 1
    if pos >= length:
        return END_TOKEN, cursor

    start = pos
    ch = line[pos]
    if _is_word_start(ch):
        kind = TokenKind.WORD
        accept = _is_word_char
    elif ch.isdigit():
        kind = TokenKind.NUMBER
        accept = _is_number_char
    else:
        kind = TokenKind.PUNCTUATION
        accept = _is_punctuation

    pos += 1
    while pos < length and accept(line[pos]):
        pos += 1
    return Token(text=line[start:pos], kind=kind, start=start), pos


def iter_tokens(line: str, cursor: int = 0) -> Iterator[Token]:
    """Yield tokens from ``cursor`` until the line is exhausted."""
    token, cursor = next_token(line, cursor)
    while token:
        yield token
        token, cursor = next_token(line, cursor)


def first_token(line: str) -> Token:
    token, _ = next_token(line)
    return token


def last_token(line: str) -> Token:
    last = END_TOKEN
    for token in iter_tokens(line):
        last = token
    return last
