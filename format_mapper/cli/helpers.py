"""Shared option handling for the CLI commands."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from ..config import ConfigLoader

if TYPE_CHECKING:
    from pathlib import Path

    from ..config import FormatMapperConfig


def load_config(config_file: Path | None) -> FormatMapperConfig:
    try:
        return ConfigLoader.load(config_file=config_file)
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc


def parse_assignments(values: tuple[str, ...], option: str) -> dict[str, str]:
    """Turn repeated ``COL=NAME`` options into a column -> name mapping."""
    assignments: dict[str, str] = {}
    for raw in values:
        column, sep, name = raw.partition("=")
        column, name = column.strip(), name.strip()
        if not sep or not column or not name:
            raise click.BadParameter(
                f"expected COLUMN=NAME, got {raw!r}", param_hint=option
            )
        if column in assignments:
            raise click.BadParameter(
                f"column {column!r} given more than once", param_hint=option
            )
        assignments[column] = name
    return assignments


def coerce_cli_value(text: str) -> object:
    """Interpret a command-line value as a date, an integer or a float."""
    stripped = text.strip()
    try:
        return date.fromisoformat(stripped)
    except ValueError:
        pass
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError:
        raise click.BadParameter(
            f"{text!r} is neither an ISO date nor a number", param_hint="VALUE"
        ) from None
