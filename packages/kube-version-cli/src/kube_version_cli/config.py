# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

TOOL_SECTION = "kube-version"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from the [tool.kube-version] table.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        validate_group: Check that API groups are DNS subdomains
        allow_prerelease: Accept alpha and beta versions in ``check``
        priority_order: Sort by Kubernetes version priority in ``sort``
    """

    project_dir: Optional[Path] = None
    validate_group: bool = False
    allow_prerelease: bool = True
    priority_order: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or has wrongly typed settings
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If a setting has the wrong type
        """
        tool = pyproject.get("tool", {}).get(TOOL_SECTION, {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")

        defaults = cls()
        return cls(
            project_dir=project_dir,
            validate_group=_get_bool(tool, "validate-group", defaults.validate_group),
            allow_prerelease=_get_bool(tool, "allow-prerelease", defaults.allow_prerelease),
            priority_order=_get_bool(tool, "priority-order", defaults.priority_order),
        )


def _get_bool(table: dict[str, Any], key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(
            f"[tool.{TOOL_SECTION}] {key} must be a boolean, got {type(value).__name__}"
        )
    return value


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration, searching upward from ``project_dir``.

    Without a pyproject.toml the default configuration is returned.

    Args:
        project_dir: Directory to start searching from (defaults to cwd)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If a pyproject.toml is found but cannot be used
    """
    try:
        root = find_project_root(project_dir)
    except ConfigError:
        return CLIConfig()

    return CLIConfig.from_pyproject(root)
