import click

from .commands.combinations import list_combinations_command
from .commands.export import export_command
from .commands.inspect import inspect_command


@click.group()
def app() -> None:
    pass


app.add_command(export_command, name="export")
app.add_command(inspect_command, name="inspect")
app.add_command(list_combinations_command, name="combinations")
__all__ = ["app"]
