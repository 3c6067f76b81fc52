"""Command line interface for appdata-releases."""

from __future__ import annotations

from appdata_releases.cli.main import app

__all__ = ["app"]
