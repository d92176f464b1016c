"""Configuration loading from pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from release_cut.config.models import ReleaseCutConfig
from release_cut.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

TOOL_NAME = "release-cut"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find the nearest pyproject.toml, searching upwards from ``start``.

    Args:
        start: Directory to start from (default: current directory)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists in ``start`` or above
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or any parent directory")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def extract_release_cut_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.release-cut]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_NAME, {})


def load_config(path: Path | None = None) -> ReleaseCutConfig:
    """Load configuration for the project at ``path``.

    Projects without a pyproject.toml (release-cut is not limited to
    Python projects) or without a ``[tool.release-cut]`` table get the
    defaults.

    Args:
        path: Project directory or a pyproject.toml file

    Returns:
        Validated configuration

    Raises:
        ConfigValidationError: If the table holds invalid values
        ConfigError: If pyproject.toml cannot be parsed
    """
    if path is not None and path.is_file():
        pyproject_path = path
    else:
        try:
            pyproject_path = find_pyproject_toml(path)
        except ConfigNotFoundError:
            logger.debug("No pyproject.toml found; using default configuration")
            return ReleaseCutConfig()

    raw = extract_release_cut_config(load_pyproject_toml(pyproject_path))
    try:
        config = ReleaseCutConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_NAME}] in {pyproject_path}:\n{e}") from e

    logger.debug("Loaded configuration from %s", pyproject_path)
    return config
