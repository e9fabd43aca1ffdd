from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import DataSourceError

console = Console()


@click.command()
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
def sheets_command(path: Path) -> None:
    """List the sheets of an Excel workbook."""
    repository = DependencyContainer(console=console).create_dataset_repository()
    try:
        names = repository.list_sheets(path)
    except DataSourceError as exc:
        raise click.ClickException(str(exc)) from exc
    table = Table(title=f"Sheets in {path.name}")
    table.add_column("#", justify="right", style="yellow")
    table.add_column("Name", style="cyan")
    for position, name in enumerate(names):
        table.add_row(str(position), name)
    console.print(table)
