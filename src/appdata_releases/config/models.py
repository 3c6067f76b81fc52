"""Configuration models.

Configuration lives in ``pyproject.toml`` under ``[tool.appdata-releases]``::

    [tool.appdata-releases.output]
    indent_width = 2
    base_level = 1

    [tool.appdata-releases.dates]
    on_invalid = "error"
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class OutputConfig(BaseModel):
    """XML output layout."""

    model_config = ConfigDict(extra="forbid")

    indent_width: int = Field(default=2, ge=0, description="Spaces per nesting level")
    base_level: int = Field(
        default=0,
        ge=0,
        description="Indentation levels added to every line (1 to embed in <component>)",
    )

    @property
    def indent(self) -> str:
        return " " * self.indent_width


class DatesConfig(BaseModel):
    """Handling of release headings whose date cannot be parsed."""

    model_config = ConfigDict(extra="forbid")

    on_invalid: Literal["sentinel", "error"] = "sentinel"
    sentinel: str = "0000-00-00"


class AppdataReleasesConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    output: OutputConfig = Field(default_factory=OutputConfig)
    dates: DatesConfig = Field(default_factory=DatesConfig)

    def render_options(self) -> dict[str, Any]:
        """Keyword options for render_releases."""
        return {
            "indent": self.output.indent,
            "base_level": self.output.base_level,
            "invalid_date": self.dates.on_invalid,
            "date_sentinel": self.dates.sentinel,
        }
