"""Exception hierarchy for appdata-releases.

All errors raised by the package derive from AppdataReleasesError so
callers can catch a single type. Content problems in the changelog
itself (stray prose, orphan bullets, unparseable dates) are not errors
and never show up here, except for invalid dates under the strict
rendering policy.
"""

from __future__ import annotations


class AppdataReleasesError(Exception):
    """Base exception for all appdata-releases errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# Configuration


class ConfigError(AppdataReleasesError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """pyproject.toml (or an explicit config file) does not exist."""


class ConfigValidationError(ConfigError):
    """Configuration values failed validation."""


# Rendering


class RenderError(AppdataReleasesError):
    """The release list could not be rendered."""


class InvalidReleaseDateError(RenderError):
    """A release has no valid date and the strict date policy is active."""

    def __init__(self, message: str, *, version: str) -> None:
        super().__init__(message)
        self.version = version
