"""Rendering of releases as an appdata ``<releases>`` XML block.

Output layout, one element per line::

    <releases>
      <release version="1.0.0" date="2021-01-05">
        <description>
          <ul>
            <li>Initial release</li>
          </ul>
        </description>
      </release>
    </releases>

Versions and items are written verbatim; items were escaped by the
parser and versions consist of digits and dots only.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Literal

from appdata_releases.core.dates import DEFAULT_DATE_SENTINEL, format_release_date
from appdata_releases.core.parser import parse_releases
from appdata_releases.exceptions import InvalidReleaseDateError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import TextIO

    from appdata_releases.core.models import Release

InvalidDatePolicy = Literal["sentinel", "error"]

DEFAULT_INDENT = "  "


def _check_dates(releases: list[Release]) -> None:
    for release in releases:
        if not release.has_valid_date:
            raise InvalidReleaseDateError(
                f"Release {release.version} has no valid date",
                version=release.version,
            )


def _iter_lines(
    releases: list[Release],
    indent: str,
    base_level: int,
    date_sentinel: str,
) -> Iterator[str]:
    def line(level: int, text: str) -> str:
        return f"{indent * (base_level + level)}{text}\n"

    yield line(0, "<releases>")
    for release in releases:
        day = format_release_date(release.date, sentinel=date_sentinel)
        yield line(1, f'<release version="{release.version}" date="{day}">')
        yield line(2, "<description>")
        yield line(3, "<ul>")
        for item in release.items:
            yield line(4, f"<li>{item}</li>")
        yield line(3, "</ul>")
        yield line(2, "</description>")
        yield line(1, "</release>")
    yield line(0, "</releases>")


def render_releases(
    releases: list[Release],
    sink: TextIO,
    *,
    indent: str = DEFAULT_INDENT,
    base_level: int = 0,
    invalid_date: InvalidDatePolicy = "sentinel",
    date_sentinel: str = DEFAULT_DATE_SENTINEL,
) -> None:
    """Write releases to ``sink`` as an indented XML block.

    Args:
        releases: Releases in the order they should appear
        sink: Text stream receiving the output, one write per line
        indent: Indentation unit for each nesting level
        base_level: Extra indentation levels applied to every line
        invalid_date: "sentinel" writes ``date_sentinel`` for releases
            without a valid date, "error" refuses to render them
        date_sentinel: Replacement text for invalid dates

    Raises:
        InvalidReleaseDateError: With the "error" policy, if any release
            lacks a valid date. Nothing is written in that case.
    """
    if invalid_date == "error":
        _check_dates(releases)

    for text in _iter_lines(releases, indent, base_level, date_sentinel):
        sink.write(text)


def render_to_string(releases: list[Release], **options: object) -> str:
    """Render releases and return the XML text.

    Accepts the same keyword options as render_releases.
    """
    buffer = io.StringIO()
    render_releases(releases, buffer, **options)  # type: ignore[arg-type]
    return buffer.getvalue()


def convert(lines: Iterable[str], sink: TextIO, **options: object) -> list[Release]:
    """Read a whole changelog and write its XML rendering.

    Parsing finishes before the first line is written.

    Args:
        lines: Changelog lines
        sink: Text stream receiving the XML
        **options: Keyword options for render_releases

    Returns:
        The parsed releases
    """
    releases = parse_releases(lines)
    render_releases(releases, sink, **options)  # type: ignore[arg-type]
    return releases
