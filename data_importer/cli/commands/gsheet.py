"""Google Sheets command - load a worksheet straight from Google Drive."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...application.models import LoadRequest
from ...infrastructure.container import DependencyContainer
from ..helpers import load_runtime_config
from ..presenters.dataset import DatasetPresenter, DatasetViewOptions

console = Console()


@click.command()
@click.argument("reference")
@click.option("--worksheet", help="Worksheet title (requires credentials)")
@click.option(
    "--credentials",
    "credentials_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Service account JSON key (default: $GOOGLE_APPLICATION_CREDENTIALS)",
)
@click.option(
    "--rows",
    "preview_rows",
    type=click.IntRange(min=1),
    help="Number of preview rows to print",
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
def gsheet_command(
    reference: str,
    worksheet: str | None,
    credentials_file: Path | None,
    preview_rows: int | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Load a Google Sheet by URL or key.

    Without credentials the sheet must be shared as "anyone with the link";
    it is then downloaded through its CSV export. With a service account
    key the sheet is read through the Sheets API.

    Examples:

    \b
        # Public sheet
        data-importer gsheet "https://docs.google.com/spreadsheets/d/<key>/edit#gid=0"

    \b
        # Private sheet, named worksheet
        data-importer gsheet <key> --credentials key.json --worksheet Results
    """
    config = load_runtime_config(config_file, preview_rows=preview_rows)
    container = DependencyContainer(verbose=verbose, console=console, config=config)
    use_case = container.create_load_dataset_use_case(credentials_file)
    result = use_case.execute(
        LoadRequest(
            source=reference,
            sheet=worksheet,
            is_google_sheet=True,
        )
    )
    if not result.success:
        raise click.ClickException(result.error or f"Failed to load {reference}")
    DatasetPresenter(console).present(
        result, DatasetViewOptions(preview_rows=config.preview_rows)
    )
