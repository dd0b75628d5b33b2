from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...registry import build_default_registry
from ..helpers import load_config

console = Console()


@click.command()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a format_mapper.toml config file (default: ./format_mapper.toml)",
)
def list_formats_command(config_file: Path | None) -> None:
    """List the registered display formats."""
    registry = build_default_registry(load_config(config_file))
    table = Table(title="Registered Formats")
    table.add_column("Name", style="cyan")
    table.add_column("Round-trip")
    table.add_column("Description")
    for definition in registry.definitions():
        table.add_row(
            definition.name,
            "lossy" if definition.lossy else "exact",
            escape(definition.description),
        )
    console.print(table)
