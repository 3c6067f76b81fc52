"""Configuration loading from pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from appdata_releases.config.models import AppdataReleasesConfig
from appdata_releases.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

TOOL_SECTION = "appdata-releases"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in ``start`` or any of its parents.

    Args:
        start: Directory to start searching from (defaults to cwd)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml is found
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and decode a TOML file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_tool_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.appdata-releases]`` table, or an empty dict."""
    section = pyproject.get("tool", {}).get(TOOL_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigValidationError(f"[tool.{TOOL_SECTION}] must be a table")
    return section


def load_config(path: Path | None = None, *, explicit: bool = False) -> AppdataReleasesConfig:
    """Load configuration.

    Args:
        path: A pyproject.toml file, or a directory to search upwards from
        explicit: The path was given by the user, so it must exist

    Returns:
        Validated configuration; defaults when no pyproject.toml is found

    Raises:
        ConfigNotFoundError: If an explicit path does not exist
        ConfigValidationError: If the configuration is invalid
    """
    if path is None or (path.is_dir() and not explicit):
        try:
            pyproject_path = find_pyproject_toml(path)
        except ConfigNotFoundError:
            logger.debug("No pyproject.toml found, using default configuration")
            return AppdataReleasesConfig()
    elif path.is_dir():
        pyproject_path = path / "pyproject.toml"
    else:
        pyproject_path = path

    data = extract_tool_config(load_pyproject_toml(pyproject_path))
    logger.debug("Loaded configuration from %s", pyproject_path)

    try:
        return AppdataReleasesConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_SECTION}] configuration:\n{e}") from e
