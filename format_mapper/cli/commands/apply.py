"""Apply command - run look-ups, bins, informats and formats over a CSV file.

This module is a thin adapter between click and ``FormatFileUseCase``:
it parses the ``COL=NAME`` options, loads the format catalogs, calls the use
case and prints the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import cast

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...application.models import FormatFileRequest, FormatFileResponse
from ...constants import Defaults
from ...domain.entities.format_catalog import FormatCatalog
from ...domain.exceptions import FormatMapperError
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import FormatMapperInfrastructureError
from ...pandas_utils import is_missing_scalar
from ..helpers import load_config, parse_assignments

console = Console()

PREVIEW_ROWS = 10


@dataclass(frozen=True)
class ApplyCommandOptions:
    catalogs: tuple[Path, ...]
    config_file: Path | None
    output: Path | None
    lookups: dict[str, str]
    bins: dict[str, str]
    parses: dict[str, str]
    renders: dict[str, str]
    suffix: str
    fail_safe: bool
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ApplyCommandOptions:
        return cls(
            catalogs=cast("tuple[Path, ...]", options["catalogs"]),
            config_file=cast("Path | None", options.get("config_file")),
            output=cast("Path | None", options.get("output")),
            lookups=parse_assignments(cast("tuple[str, ...]", options["lookups"]), "--lookup"),
            bins=parse_assignments(cast("tuple[str, ...]", options["bins"]), "--bin"),
            parses=parse_assignments(cast("tuple[str, ...]", options["parses"]), "--parse"),
            renders=parse_assignments(cast("tuple[str, ...]", options["renders"]), "--render"),
            suffix=cast("str", options["suffix"]),
            fail_safe=cast("bool", options["fail_safe"]),
            verbose=cast("int", options["verbose"]),
        )


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--catalog",
    "catalogs",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Format catalog (.toml, CNTLIN .csv or .sas7bcat); repeatable",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a format_mapper.toml config file (default: ./format_mapper.toml)",
)
@click.option(
    "--lookup", "lookups", multiple=True, metavar="COL=TABLE",
    help="Replace COL by the values of catalog look-up TABLE",
)
@click.option(
    "--bin", "bins", multiple=True, metavar="COL=SPEC",
    help="Replace COL by the interval labels of catalog bin SPEC",
)
@click.option(
    "--parse", "parses", multiple=True, metavar="COL=FORMAT",
    help="Read the text in COL with informat FORMAT",
)
@click.option(
    "--render", "renders", multiple=True, metavar="COL=FORMAT",
    help="Add a rendered copy of COL using display format FORMAT",
)
@click.option(
    "--suffix",
    default=Defaults.RENDER_SUFFIX,
    show_default=True,
    help="Suffix of the columns written by --render",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the result to this CSV file (default: print a preview)",
)
@click.option(
    "--fail-safe/--fail-fast",
    "fail_safe",
    default=False,
    show_default=True,
    help="Keep going after a step reports unmappable values",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def apply_command(input_file: Path, **options: object) -> None:
    """Apply formats to the columns of a CSV file.

    Steps run in a fixed order: --parse, --lookup, --bin, then --render.

    Examples:

    \b
        # Turn region codes into names and age into age groups
        format-mapper apply people.csv --catalog formats.toml \\
            --lookup REGION=regions --bin AGE=age_groups

    \b
        # Read accounting text and write a currency display column
        format-mapper apply sales.csv --parse AMOUNT=accounting \\
            --render AMOUNT=currency -o sales_fmt.csv
    """
    command_options = ApplyCommandOptions.from_kwargs(dict(options))
    config = load_config(command_options.config_file)
    container = DependencyContainer(
        config=config, verbose=command_options.verbose, console=console
    )

    catalog_paths = list(command_options.catalogs)
    if config.catalog_path is not None and config.catalog_path not in catalog_paths:
        catalog_paths.insert(0, config.catalog_path)
    try:
        catalog = (
            container.create_catalog_repository().load_many(catalog_paths)
            if catalog_paths
            else FormatCatalog()
        )
    except (FormatMapperError, FormatMapperInfrastructureError) as exc:
        raise click.ClickException(str(exc)) from exc

    request = FormatFileRequest(
        input_path=input_file,
        output_path=command_options.output,
        catalog=catalog,
        lookups=command_options.lookups,
        bins=command_options.bins,
        parses=command_options.parses,
        renders=command_options.renders,
        render_suffix=command_options.suffix,
        fail_safe=command_options.fail_safe,
        verbose=command_options.verbose,
    )
    use_case = container.create_format_file_use_case()
    response = use_case.execute(request)
    container.create_logger().log_final_stats()

    if response.error is not None:
        raise click.ClickException(response.error)
    if command_options.output is None:
        _print_preview(response)
    if response.has_errors:
        raise click.ClickException(
            f"{len(response.errors)} step(s) reported values that could not be mapped"
        )


def _print_preview(response: FormatFileResponse) -> None:
    frame = response.dataframe
    if frame is None:
        return
    title = response.input_path.name if response.input_path is not None else None
    table = Table(title=title)
    for column in frame.columns:
        table.add_column(escape(str(column)))
    for row in frame.head(PREVIEW_ROWS).itertuples(index=False):
        table.add_row(*("" if is_missing_scalar(value) else escape(str(value)) for value in row))
    console.print(table)
    if len(frame) > PREVIEW_ROWS:
        console.print(f"[dim]... {len(frame) - PREVIEW_ROWS:,} more rows[/dim]")
