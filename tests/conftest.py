"""Shared test fixtures — settings, fixture sources, model builder."""

from collections.abc import Callable
from pathlib import Path

import pytest

from stylechecker.analysis.model import SourceModel, build_model
from stylechecker.analysis.source import SourceFile
from stylechecker.config import Settings

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def settings() -> Settings:
    """Default limits, ignoring any local .env file."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def make_model(settings: Settings) -> Callable[..., SourceModel]:
    """Build a model from literal lines (tabs written as ``\\t``)."""

    def _make(*lines: str) -> SourceModel:
        return build_model(SourceFile(lines=tuple(lines)), settings)

    return _make


@pytest.fixture
def clean_path() -> Path:
    """A small program that follows every rule."""
    return FIXTURES / "clean.cpp"


@pytest.fixture
def messy_path() -> Path:
    """A program breaking a spread of rules."""
    return FIXTURES / "messy.cpp"
