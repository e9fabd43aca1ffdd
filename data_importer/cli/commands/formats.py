import click
from rich.console import Console
from rich.table import Table

from ...constants import SupportedFormats

console = Console()


@click.command()
def formats_command() -> None:
    """List the supported file extensions and the call that reads each."""
    table = Table(title="Supported Formats")
    table.add_column("Extension", style="cyan")
    table.add_column("Format")
    table.add_column("Read with", style="green")
    for extension in SupportedFormats.extensions():
        format_name = SupportedFormats.BY_EXTENSION[extension]
        table.add_row(
            extension, format_name, SupportedFormats.READER_CALLS[format_name]
        )
    console.print(table)
