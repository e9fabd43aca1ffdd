from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from ...application.models import FolderLoadResult, LoadResult


class FolderSummaryPresenter:
    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, folder_result: FolderLoadResult) -> None:
        self.console.print()
        self.console.print(self._build_summary_table(folder_result.results))
        self.console.print()
        loaded = len(folder_result.loaded)
        failed = len(folder_result.failed)
        self.console.print(
            f"[bold]Loaded {loaded} of {len(folder_result.results)} files "
            + f"({folder_result.total_rows:,} rows)[/bold]"
        )
        if failed:
            self.console.print(f"[red]{failed} file(s) failed[/red]")
            for result in folder_result.failed:
                self.console.print(
                    f"  [red]✗[/red] {escape(result.source)}: {escape(result.error or '')}"
                )

    def _build_summary_table(self, results: list[LoadResult]) -> Table:
        table = Table(
            title="Import Summary",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
        )
        table.add_column("File", style="cyan", overflow="fold")
        table.add_column("Format", style="white", no_wrap=True)
        table.add_column("Rows", justify="right", style="yellow", no_wrap=True)
        table.add_column("Columns", justify="right", no_wrap=True)
        table.add_column("Status", justify="center", no_wrap=True)
        for result in results:
            dataset = result.dataset
            if dataset is None:
                table.add_row(escape(result.source), "-", "-", "-", "[red]✗[/red]")
                continue
            table.add_row(
                escape(dataset.display_name),
                dataset.format_name,
                f"{dataset.row_count:,}",
                str(dataset.column_count),
                "[green]✓[/green]",
            )
        return table
