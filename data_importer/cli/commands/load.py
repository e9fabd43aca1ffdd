"""Load command - read one data file and show what pandas made of it."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...application.models import LoadRequest
from ...infrastructure.container import DependencyContainer
from ..helpers import load_runtime_config, parse_sheet
from ..presenters.dataset import DatasetPresenter, DatasetViewOptions

console = Console()


@click.command()
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--sheet",
    help="Excel sheet name or 0-based position (default: first sheet)",
)
@click.option(
    "--delimiter",
    help="Field delimiter for text files; use 'auto' to let pandas sniff it",
)
@click.option(
    "--rows",
    "preview_rows",
    type=click.IntRange(min=1),
    help="Number of preview rows to print (default: from config, 10)",
)
@click.option(
    "--value-labels/--no-value-labels",
    "apply_value_formats",
    default=None,
    help="Replace SPSS/Stata codes with their value labels (default: on)",
)
@click.option(
    "--show-labels",
    is_flag=True,
    help="Print the value labels stored in SPSS/Stata/SAS files",
)
@click.option(
    "--types-only",
    is_flag=True,
    help="Only print the column types, without the preview",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a data_importer.toml config file (default: ./data_importer.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def load_command(
    path: Path,
    sheet: str | None,
    delimiter: str | None,
    preview_rows: int | None,
    apply_value_formats: bool | None,
    show_labels: bool,
    types_only: bool,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Load a data file into a data frame and describe its columns.

    The file extension selects the reader:

    \b
    - .csv .txt .tsv .tab    pandas.read_csv
    - .xls .xlsx .xlsm       pandas.read_excel
    - .sav .zsav .por        pyreadstat (SPSS)
    - .dta                   pyreadstat (Stata)
    - .sas7bdat .xpt         pyreadstat (SAS)

    Examples:

    \b
        # Preview a CSV file and its inferred column types
        data-importer load data/heights.csv

    \b
        # Read the second sheet of a workbook
        data-importer load data/survey.xlsx --sheet 1

    \b
        # Keep the numeric codes of an SPSS file
        data-importer load data/survey.sav --no-value-labels --show-labels
    """
    config = load_runtime_config(
        config_file,
        preview_rows=preview_rows,
        apply_value_formats=apply_value_formats,
    )
    container = DependencyContainer(verbose=verbose, console=console, config=config)
    use_case = container.create_load_dataset_use_case()
    result = use_case.execute(
        LoadRequest(
            source=str(path),
            sheet=parse_sheet(sheet),
            delimiter=delimiter,
        )
    )
    if not result.success:
        raise click.ClickException(result.error or f"Failed to load {path}")
    DatasetPresenter(console).present(
        result,
        DatasetViewOptions(
            preview_rows=config.preview_rows,
            show_preview=not types_only,
            show_value_labels=show_labels,
        ),
    )
