"""Changelog parsing.

The parser folds classified lines into an ordered list of releases. The
release currently receiving bullets is always the last element of that
list, so the whole parse state is the list itself.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

from appdata_releases.core.dates import parse_release_date
from appdata_releases.core.lines import Bullet, ClassifiedLine, Heading, classify_line
from appdata_releases.core.models import Release

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def apply_line(releases: list[Release], line: ClassifiedLine) -> list[Release]:
    """Apply one classified line to the accumulated releases.

    Args:
        releases: Releases found so far, in input order
        line: Classified input line

    Returns:
        The same list, with a new release appended (Heading), an item
        appended to the last release (Bullet), or unchanged (Other, or a
        Bullet seen before any heading)
    """
    if isinstance(line, Heading):
        release_date = parse_release_date(line.raw_date)
        if release_date is None:
            logger.warning(
                "Could not parse date %r for release %s", line.raw_date, line.version
            )
        releases.append(Release(version=line.version, date=release_date))
    elif isinstance(line, Bullet):
        if releases:
            releases[-1].items.append(line.text)
        else:
            logger.debug("Dropping bullet before first release heading: %r", line.text)

    return releases


def parse_releases(lines: Iterable[str]) -> list[Release]:
    """Parse changelog lines into releases.

    The input is consumed completely before the result is returned.
    Lines that are neither headings nor bullets are ignored.

    Args:
        lines: Changelog lines in document order (line terminators optional)

    Returns:
        Releases in the order their headings appear
    """
    releases: list[Release] = []
    for line in lines:
        releases = apply_line(releases, classify_line(line))

    logger.debug("Parsed %d release(s)", len(releases))
    return releases


def parse_changelog(text: str) -> list[Release]:
    """Parse a whole changelog document held in memory.

    Only newlines split lines, exactly as when reading from a stream.
    """
    return parse_releases(io.StringIO(text))
