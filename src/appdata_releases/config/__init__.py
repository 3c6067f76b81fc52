"""Configuration management for appdata-releases."""

from __future__ import annotations

from appdata_releases.config.loader import load_config
from appdata_releases.config.models import AppdataReleasesConfig, DatesConfig, OutputConfig

__all__ = [
    "AppdataReleasesConfig",
    "DatesConfig",
    "OutputConfig",
    "load_config",
]
