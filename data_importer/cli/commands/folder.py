from pathlib import Path

import click
from rich.console import Console

from ...infrastructure.container import DependencyContainer
from ..helpers import load_runtime_config
from ..presenters.summary import FolderSummaryPresenter

console = Console()


@click.command()
@click.argument(
    "folder", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option(
    "--pattern",
    default="*",
    show_default=True,
    help="Glob pattern selecting files inside the folder",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error when any file fails to load",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a data_importer.toml config file",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def folder_command(
    folder: Path,
    pattern: str,
    strict: bool,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Load every supported data file in FOLDER and summarise the result."""
    config = load_runtime_config(config_file)
    container = DependencyContainer(verbose=verbose, console=console, config=config)
    folder_result = container.create_load_folder_use_case().execute(folder, pattern)
    if not folder_result.results:
        raise click.ClickException(f"No supported data files found in {folder}")
    FolderSummaryPresenter(console).present(folder_result)
    if strict and folder_result.failed:
        raise click.ClickException(
            f"{len(folder_result.failed)} file(s) could not be loaded"
        )
