import click

from .commands.folder import folder_command
from .commands.formats import formats_command
from .commands.gsheet import gsheet_command
from .commands.load import load_command
from .commands.sheets import sheets_command


@click.group()
def app() -> None:
    """Load external datasets into pandas data frames."""


app.add_command(load_command, name="load")
app.add_command(sheets_command, name="sheets")
app.add_command(gsheet_command, name="gsheet")
app.add_command(folder_command, name="folder")
app.add_command(formats_command, name="formats")
__all__ = ["app"]
