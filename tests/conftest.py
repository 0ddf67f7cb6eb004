"""Shared pytest fixtures for validate-helper tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config discovery and env overrides away from the developer's machine."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("VALIDATE_HELPER_CONFIG", raising=False)
    monkeypatch.delenv("VALIDATE_HELPER_PASSWORD__MIN_LENGTH", raising=False)
