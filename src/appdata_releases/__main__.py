"""Allow running as ``python -m appdata_releases``."""

from appdata_releases.cli.main import app

app(prog_name="appdata-releases")
