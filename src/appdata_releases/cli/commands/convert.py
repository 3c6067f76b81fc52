"""Implementation of the conversion command.

Reads a changelog, parses it completely, renders the XML into memory
and only then writes it out, so a failure never leaves a truncated
document behind.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from appdata_releases.config import load_config
from appdata_releases.core.parser import parse_releases
from appdata_releases.core.renderer import render_releases
from appdata_releases.exceptions import ConfigError, InvalidReleaseDateError

if TYPE_CHECKING:
    from rich.console import Console

    from appdata_releases.config.models import AppdataReleasesConfig
    from appdata_releases.core.models import Release

STDIO = "-"


def run_convert(
    input_path: str,
    output_path: Path | None,
    config_path: Path | None,
    base_level: int | None,
    indent_width: int | None,
    strict_dates: bool,
    err_console: Console,
) -> None:
    """Run the conversion command.

    Args:
        input_path: Changelog file, or "-" for standard input
        output_path: Destination file; standard output when None
        config_path: Explicit pyproject.toml to read configuration from
        base_level: Override for output.base_level
        indent_width: Override for output.indent_width
        strict_dates: Fail on releases without a valid date
        err_console: Console for error output
    """
    try:
        config = load_config(config_path, explicit=config_path is not None)
    except ConfigError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    config = _apply_overrides(config, base_level, indent_width, strict_dates)

    try:
        releases = _read_releases(input_path)
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error reading {escape(input_path)}:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    buffer = io.StringIO()
    try:
        render_releases(releases, buffer, **config.render_options())
    except InvalidReleaseDateError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    try:
        _write_output(output_path, buffer.getvalue())
    except OSError as e:
        err_console.print(f"[red]Error writing {escape(str(output_path))}:[/] {escape(str(e))}")
        raise SystemExit(1) from e


def _apply_overrides(
    config: AppdataReleasesConfig,
    base_level: int | None,
    indent_width: int | None,
    strict_dates: bool,
) -> AppdataReleasesConfig:
    output_updates: dict[str, int] = {}
    if base_level is not None:
        output_updates["base_level"] = base_level
    if indent_width is not None:
        output_updates["indent_width"] = indent_width

    updates: dict[str, Any] = {}
    if output_updates:
        updates["output"] = config.output.model_copy(update=output_updates)
    if strict_dates:
        updates["dates"] = config.dates.model_copy(update={"on_invalid": "error"})

    return config.model_copy(update=updates) if updates else config


def _read_releases(input_path: str) -> list[Release]:
    if input_path == STDIO:
        return parse_releases(sys.stdin)

    # Undecodable bytes become U+FFFD instead of aborting the conversion
    with Path(input_path).open(encoding="utf-8", errors="replace") as f:
        return parse_releases(f)


def _write_output(output_path: Path | None, text: str) -> None:
    if output_path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
    else:
        output_path.write_text(text, encoding="utf-8")
