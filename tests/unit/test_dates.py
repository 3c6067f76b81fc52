"""Tests for release date parsing and formatting."""

from __future__ import annotations

from datetime import date

import pytest

from appdata_releases.core.dates import (
    format_release_date,
    parse_release_date,
    strip_ordinals,
)


class TestStripOrdinals:
    """Tests for strip_ordinals()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("January 1st, 2021", "January 1, 2021"),
            ("February 2nd, 2021", "February 2, 2021"),
            ("March 3rd, 2021", "March 3, 2021"),
            ("April 4th, 2021", "April 4, 2021"),
            ("May 21ST, 2021", "May 21, 2021"),
        ],
    )
    def test_suffixes_removed(self, text: str, expected: str):
        """Ordinal suffixes are removed, digits kept."""
        assert strip_ordinals(text) == expected

    def test_words_untouched(self):
        """Suffix letters not preceded by a digit stay."""
        assert strip_ordinals("August the first") == "August the first"

    def test_trims_whitespace(self):
        """Surrounding whitespace is trimmed."""
        assert strip_ordinals("  June 5th, 2020  ") == "June 5, 2020"


class TestParseReleaseDate:
    """Tests for parse_release_date()."""

    def test_ordinal_and_plain_are_equal(self):
        """'January 1st, 2021' and 'January 1, 2021' are the same date."""
        assert parse_release_date("January 1st, 2021") == date(2021, 1, 1)
        assert parse_release_date("January 1, 2021") == date(2021, 1, 1)

    @pytest.mark.parametrize(
        "text",
        ["January 5, 2021", "Jan 5 2021", "5 January 2021", "2021-01-05"],
    )
    def test_free_form_formats(self, text: str):
        """Common changelog date formats are understood."""
        assert parse_release_date(text) == date(2021, 1, 5)

    def test_missing_day_defaults_to_first(self):
        """A month and year give the first day of that month."""
        assert parse_release_date("March 2021") == date(2021, 3, 1)

    def test_timezone_ignored(self):
        """The written calendar date is kept regardless of timezone."""
        assert parse_release_date("2021-01-05T23:30:00-05:00") == date(2021, 1, 5)

    @pytest.mark.parametrize("text", ["", "   ", "whenever 2021", "Smarchuary 40, 2021"])
    def test_unparseable_returns_none(self, text: str):
        """Text that is not a date yields None instead of raising."""
        assert parse_release_date(text) is None


class TestFormatReleaseDate:
    """Tests for format_release_date()."""

    def test_zero_padded(self):
        """Dates are written as YYYY-MM-DD."""
        assert format_release_date(date(2021, 1, 5)) == "2021-01-05"

    def test_default_sentinel(self):
        """Missing dates use the all-zero sentinel."""
        assert format_release_date(None) == "0000-00-00"

    def test_custom_sentinel(self):
        """The sentinel can be customized."""
        assert format_release_date(None, sentinel="unknown") == "unknown"
