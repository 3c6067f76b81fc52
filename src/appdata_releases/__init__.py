"""Convert changelogs into appdata ``<releases>`` XML blocks."""

from __future__ import annotations

from appdata_releases.core import (
    Release,
    convert,
    parse_changelog,
    parse_releases,
    render_releases,
    render_to_string,
)

__version__ = "0.1.0"

__all__ = [
    "Release",
    "__version__",
    "convert",
    "parse_changelog",
    "parse_releases",
    "render_releases",
    "render_to_string",
]
