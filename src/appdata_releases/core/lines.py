"""Changelog line classification.

Every input line is one of three things:

- a release heading: a version number followed, somewhere later on the
  line, by a four-digit year (e.g. ``1.0.0 - January 5th, 2021``)
- a bullet: an asterisk followed by whitespace (e.g. ``  * Fixed a crash``)
- anything else, which the parser ignores

The heading pattern is tried first, so a bullet that happens to contain
a version and a year is treated as a heading.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# One "digit.digit" anywhere on the line, a four-digit year at the end
HEADING_PATTERN = re.compile(r"\d\.\d.*\d{4}\s*$")
HEADING_PARTS_PATTERN = re.compile(r"(\d+\.\d+(?:\.\d+(?:\.\d+)?)?)\W*(.*)$")
BULLET_PATTERN = re.compile(r"^\s*\*\s+(.*)$")

_XML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}
_XML_ESCAPE_PATTERN = re.compile(r"[&<>]")


@dataclass(frozen=True)
class Heading:
    """A line announcing a new release."""

    version: str
    raw_date: str


@dataclass(frozen=True)
class Bullet:
    """A line describing one change; ``text`` is already escaped and trimmed."""

    text: str


@dataclass(frozen=True)
class Other:
    """A line that carries no release information."""


ClassifiedLine = Heading | Bullet | Other


def escape_text(text: str) -> str:
    """Escape the XML metacharacters ``&``, ``<`` and ``>``.

    Quotes are left untouched: item text only ever ends up in element
    content, never in an attribute value.
    """
    return _XML_ESCAPE_PATTERN.sub(lambda m: _XML_ESCAPES[m.group(0)], text)


def classify_line(line: str) -> ClassifiedLine:
    """Classify a single changelog line.

    Args:
        line: Raw input line, with or without its line terminator

    Returns:
        Heading, Bullet or Other
    """
    line = line.rstrip("\r\n")

    if HEADING_PATTERN.search(line):
        match = HEADING_PARTS_PATTERN.search(line)
        if match is not None:
            return Heading(version=match.group(1), raw_date=match.group(2))

    bullet = BULLET_PATTERN.match(line)
    if bullet:
        return Bullet(text=escape_text(bullet.group(1)).strip())

    return Other()
