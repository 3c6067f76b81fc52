"""Release data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import datetime


@dataclass
class Release:
    """One release entry found in a changelog.

    Attributes:
        version: Version text as captured from the heading line
        date: Release date, or None when the heading text was not a date
        items: Escaped, trimmed bullet descriptions in input order
    """

    version: str
    date: datetime.date | None
    items: list[str] = field(default_factory=list)

    @property
    def has_valid_date(self) -> bool:
        return self.date is not None
