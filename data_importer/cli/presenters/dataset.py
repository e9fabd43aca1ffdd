from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd
from rich.markup import escape
from rich.table import Table

from ...constants import Defaults, SupportedFormats

if TYPE_CHECKING:
    from rich.console import Console

    from ...application.models import LoadResult
    from ...domain.entities.column_profile import ColumnProfile
    from ...domain.entities.dataset import LoadedDataset

MISSING_MARKER = "NA"
MAX_PREVIEW_COLUMNS = 12
MAX_CELL_WIDTH = 30


@dataclass(frozen=True, slots=True)
class DatasetViewOptions:
    preview_rows: int = Defaults.PREVIEW_ROWS
    show_preview: bool = True
    show_value_labels: bool = False


def format_cell(value: Any) -> str:
    if value is None:
        return MISSING_MARKER
    try:
        if pd.isna(value):
            return MISSING_MARKER
    except (TypeError, ValueError):
        pass
    text = str(value)
    if len(text) > MAX_CELL_WIDTH:
        return text[: MAX_CELL_WIDTH - 1] + "…"
    return text


class DatasetPresenter:
    """Print a loaded dataset: a header line, a preview and its column types."""

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(
        self, result: LoadResult, options: DatasetViewOptions | None = None
    ) -> None:
        if options is None:
            options = DatasetViewOptions()
        dataset = result.dataset
        if dataset is None:
            return
        self._print_header(dataset)
        if options.show_preview:
            self.console.print(self._build_preview_table(dataset, options.preview_rows))
        self.console.print(self._build_types_table(result.profiles))
        if options.show_value_labels:
            self._print_value_labels(dataset)

    def _print_header(self, dataset: LoadedDataset) -> None:
        call = SupportedFormats.READER_CALLS.get(dataset.format_name, "")
        self.console.print()
        self.console.print(f"[bold]{escape(dataset.display_name)}[/bold]")
        self.console.print(
            f"Format: [cyan]{dataset.format_name}[/cyan] (read with {escape(call)})"
        )
        self.console.print(
            f"Shape: {dataset.row_count:,} rows x {dataset.column_count} columns"
        )
        if dataset.metadata.file_label:
            self.console.print(f"Label: {escape(dataset.metadata.file_label)}")

    def _build_preview_table(self, dataset: LoadedDataset, rows: int) -> Table:
        frame = dataset.frame
        shown_columns = list(frame.columns[:MAX_PREVIEW_COLUMNS])
        table = Table(
            title=f"First {min(rows, len(frame))} rows",
            show_header=True,
            header_style="bold cyan",
        )
        for column in shown_columns:
            table.add_column(escape(str(column)), overflow="fold")
        if len(frame.columns) > MAX_PREVIEW_COLUMNS:
            table.caption = (
                f"{len(frame.columns) - MAX_PREVIEW_COLUMNS} more columns not shown"
            )
        for row in frame.head(rows).itertuples(index=False):
            cells = [format_cell(value) for value in row[: len(shown_columns)]]
            table.add_row(*(escape(cell) for cell in cells))
        return table

    def _build_types_table(self, profiles: list[ColumnProfile]) -> Table:
        table = Table(title="Column types", show_header=True, header_style="bold cyan")
        table.add_column("Column", style="cyan", no_wrap=True)
        table.add_column("Type", style="green")
        table.add_column("dtype", style="dim")
        table.add_column("Non-null", justify="right", style="yellow")
        table.add_column("Missing", justify="right")
        table.add_column("Label", overflow="fold")
        for profile in profiles:
            table.add_row(
                escape(profile.name),
                str(profile.kind),
                profile.dtype,
                f"{profile.non_null:,}",
                f"{profile.null_ratio:.0%}",
                escape(profile.label or ""),
            )
        return table

    def _print_value_labels(self, dataset: LoadedDataset) -> None:
        metadata = dataset.metadata
        labelled = [c for c in metadata.value_labels if metadata.has_value_labels(c)]
        if not labelled:
            return
        self.console.print()
        self.console.print("[bold]Value labels[/bold]")
        for column in labelled:
            mapping = metadata.value_labels[column]
            pairs = ", ".join(
                f"{format_cell(code)}={label}" for code, label in mapping.items()
            )
            self.console.print(f"  [cyan]{escape(column)}[/cyan]: {escape(pairs)}")
