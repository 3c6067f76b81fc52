"""Core conversion logic for appdata-releases.

This module contains the building blocks of the conversion:
- Line classification (release headings, bullets, everything else)
- Release date parsing and formatting
- Changelog parsing into Release records
- XML rendering of Release records
"""

from __future__ import annotations

from appdata_releases.core.dates import format_release_date, parse_release_date, strip_ordinals
from appdata_releases.core.lines import (
    Bullet,
    ClassifiedLine,
    Heading,
    Other,
    classify_line,
    escape_text,
)
from appdata_releases.core.models import Release
from appdata_releases.core.parser import apply_line, parse_changelog, parse_releases
from appdata_releases.core.renderer import convert, render_releases, render_to_string

__all__ = [
    # Lines
    "Bullet",
    "ClassifiedLine",
    "Heading",
    "Other",
    "classify_line",
    "escape_text",
    # Dates
    "format_release_date",
    "parse_release_date",
    "strip_ordinals",
    # Models
    "Release",
    # Parser
    "apply_line",
    "parse_changelog",
    "parse_releases",
    # Renderer
    "convert",
    "render_releases",
    "render_to_string",
]
