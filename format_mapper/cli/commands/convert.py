"""``parse`` and ``render`` commands: convert single values on the command line."""

from pathlib import Path

import click

from ...domain.exceptions import FormatMapperError
from ...registry import build_default_registry
from ..helpers import coerce_cli_value, load_config

config_option = click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a format_mapper.toml config file (default: ./format_mapper.toml)",
)
format_option = click.option(
    "--format",
    "-f",
    "format_name",
    required=True,
    help="Registered format name (see `format-mapper formats`)",
)


@click.command()
@click.argument("texts", nargs=-1, required=True)
@format_option
@config_option
def parse_command(texts: tuple[str, ...], format_name: str, config_file: Path | None) -> None:
    """Read formatted TEXTS back into values, one per line.

    Examples:

    \b
        format-mapper parse '(82.5%)' --format accounting-percent
        format-mapper parse '£1,000.00' '$12.50' --format currency
    """
    registry = build_default_registry(load_config(config_file))
    try:
        definition = registry.get(format_name)
        values = [definition.parse(text) for text in texts]
    except FormatMapperError as exc:
        raise click.ClickException(str(exc)) from exc
    for value in values:
        click.echo(value.isoformat() if hasattr(value, "isoformat") else str(value))


@click.command()
@click.argument("values", nargs=-1, required=True)
@format_option
@config_option
def render_command(
    values: tuple[str, ...], format_name: str, config_file: Path | None
) -> None:
    """Render numbers or ISO dates with a display format, one per line.

    Examples:

    \b
        format-mapper render 1234.5 --format currency
        format-mapper render 2024-01-05 --format date9
    """
    registry = build_default_registry(load_config(config_file))
    raw_values = [coerce_cli_value(value) for value in values]
    try:
        definition = registry.get(format_name)
        rendered = [definition.render(value) for value in raw_values]
    except (FormatMapperError, TypeError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    for text in rendered:
        click.echo(text)
