# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with a plain pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-operator"
version = "1.0.0"
"""
    )

    yield project_dir


@pytest.fixture
def configured_project(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory creating a project with a [tool.kube-version] table."""

    def _create(tool_table: str) -> Path:
        project_dir = tmp_path / "configured_project"
        project_dir.mkdir(exist_ok=True)
        (project_dir / "pyproject.toml").write_text(
            f"""[project]
name = "test-operator"
version = "1.0.0"

[tool.kube-version]
{tool_table}
"""
        )
        return project_dir

    return _create
