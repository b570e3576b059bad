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


OUTPUT_FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory searched for pyproject.toml
        version: The project's ``[project].version``, "" if absent
        output: Output format, "text" or "json"
        reverse: Sort in descending precedence by default
    """

    project_dir: Path
    version: str = ""
    output: str = "text"
    reverse: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        A missing pyproject.toml yields the defaults.

        Raises:
            ConfigError: If the file is not valid TOML or has invalid settings
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            return cls(project_dir=project_path)

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {pyproject_path}: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any], project_dir: Path) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary."""
        project = pyproject.get("project", {})
        tool_config = pyproject.get("tool", {}).get("strict-semver", {})

        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError(f"[project].version must be a string, got {version!r}")

        output = tool_config.get("output", "text")
        if output not in OUTPUT_FORMATS:
            raise ConfigError(
                f"[tool.strict-semver].output must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {output!r}"
            )

        reverse = tool_config.get("reverse", False)
        if not isinstance(reverse, bool):
            raise ConfigError(f"[tool.strict-semver].reverse must be a boolean, got {reverse!r}")

        return cls(project_dir=project_dir, version=version, output=output, reverse=reverse)


def load_config(project_dir: Optional[Path] = None) -> CLIConfig:
    """Load configuration from ``project_dir`` or the current directory."""
    return CLIConfig.from_pyproject(project_dir or Path.cwd())
