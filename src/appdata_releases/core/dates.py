"""Release date parsing and formatting.

Changelog headings carry free-form dates such as ``January 5th, 2021``
or ``2021-01-05``. Ordinal suffixes are removed first, then the text is
handed to dateutil's general purpose parser.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from dateutil import parser as date_parser

ORDINAL_PATTERN = re.compile(r"(\d)(st|nd|rd|th)", re.IGNORECASE)

DEFAULT_DATE_SENTINEL = "0000-00-00"

# Components missing from the text (e.g. "March 2021") fall back to these
_DEFAULT_COMPONENTS = datetime(2000, 1, 1)


def strip_ordinals(text: str) -> str:
    """Remove ordinal suffixes from day numbers ("1st" -> "1") and trim."""
    return ORDINAL_PATTERN.sub(r"\1", text).strip()


def parse_release_date(text: str) -> date | None:
    """Parse the date part of a release heading.

    Args:
        text: Raw text following the version on the heading line

    Returns:
        The calendar date, or None if the text is not a recognizable date.
        Any timezone in the text is ignored; the written date is kept.
    """
    cleaned = strip_ordinals(text)
    if not cleaned:
        return None

    try:
        parsed = date_parser.parse(cleaned, default=_DEFAULT_COMPONENTS)
    except (ValueError, OverflowError):
        return None

    return parsed.date()


def format_release_date(value: date | None, *, sentinel: str = DEFAULT_DATE_SENTINEL) -> str:
    """Format a release date as ``YYYY-MM-DD``, or return ``sentinel`` for None."""
    if value is None:
        return sentinel
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
