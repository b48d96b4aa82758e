"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def workspace_dir(tmp_path: Path) -> Path:
    """Temporary Carebook workspace root (config and data file live under it)."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace
