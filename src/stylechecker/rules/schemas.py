"""Pydantic models for rule output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from stylechecker.constants import RuleGroup


class Diagnostic(BaseModel):
    """One rule's verdict; empty ``lines`` means the rule passed."""

    model_config = ConfigDict(frozen=True)

    rule: str
    message: str
    group: RuleGroup
    lines: tuple[int, ...] = ()  # 0-based, ascending

    @property
    def passed(self) -> bool:
        return not self.lines

    @property
    def display_lines(self) -> tuple[int, ...]:
        """Line numbers as shown to the user (1-based)."""
        return tuple(line + 1 for line in self.lines)


class StyleReport(BaseModel):
    """Ordered diagnostics for one checked file."""

    file: str
    line_count: int = 0
    diagnostics: list[Diagnostic] = Field(
        default_factory=lambda: list[Diagnostic]()
    )

    @property
    def failures(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if not d.passed]

    @property
    def passed(self) -> bool:
        return not self.failures
