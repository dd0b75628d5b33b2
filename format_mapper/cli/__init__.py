import click

from .commands.apply import apply_command
from .commands.convert import parse_command, render_command
from .commands.formats import list_formats_command


@click.group()
def app() -> None:
    """Display formats, look-up tables and bins for tabular data."""


app.add_command(apply_command, name="apply")
app.add_command(list_formats_command, name="formats")
app.add_command(parse_command, name="parse")
app.add_command(render_command, name="render")

__all__ = ["app"]
