"""Shared fixtures for appdata-releases tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


SAMPLE_CHANGELOG = """\
Release notes
=============

2.0.0 - March 3rd, 2022
* Brand new renderer
* Dropped legacy & deprecated options

Known issues are tracked on the bug tracker.

1.0.0 - January 5th, 2021
* Initial release
* Fixed <bug> & typo
"""


@pytest.fixture
def sample_changelog() -> str:
    """A small changelog with two releases and some prose."""
    return SAMPLE_CHANGELOG


@pytest.fixture
def project_with_pyproject(tmp_path: Path) -> Path:
    """Create a project directory with an [tool.appdata-releases] section."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.appdata-releases.output]
indent_width = 4
base_level = 1

[tool.appdata-releases.dates]
on_invalid = "error"
"""
    )
    return tmp_path
