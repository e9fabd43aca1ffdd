from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...constants import LogLevels

if TYPE_CHECKING:
    from ...domain.entities.dataset import LoadedDataset


class LogLevel(IntEnum):
    NORMAL = LogLevels.NORMAL
    VERBOSE = LogLevels.VERBOSE
    DEBUG = LogLevels.DEBUG


@dataclass(slots=True)
class LogContext:
    source: str = ""
    format_name: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "files_loaded": 0,
        "rows_loaded": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_load_start(self, source: str, format_name: str | None) -> None:
        self.set_context(source=source, format_name=format_name or "")
        self._context_start()
        label = format_name or "unknown format"
        self.verbose(f"Loading {escape(source)} ({label})")

    @override
    def log_file_loaded(self, dataset: LoadedDataset) -> None:
        self._stats["files_loaded"] += 1
        self._stats["rows_loaded"] += dataset.row_count
        msg = f"Loaded {dataset.row_count:,} rows from {escape(dataset.display_name)}"
        if self.verbosity >= LogLevel.DEBUG:
            msg += f" ({dataset.column_count} columns)"
            if self._context is not None:
                msg += f" in {self._context.elapsed_ms():.0f} ms"
        self.verbose(msg)
        if dataset.metadata.file_label:
            self.debug(f"File label: {escape(dataset.metadata.file_label)}")
        if dataset.metadata.file_encoding:
            self.debug(f"File encoding: {dataset.metadata.file_encoding}")

    @override
    def log_load_failed(self, source: str, reason: str) -> None:
        self.error(f"{escape(source)}: {escape(reason)}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Import Statistics:[/dim]")
            self.console.print(f"[dim]  Files loaded: {self._stats['files_loaded']}[/dim]")
            self.console.print(f"[dim]  Total rows: {self._stats['rows_loaded']:,}[/dim]")
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _context_start(self) -> None:
        if self._context is not None:
            self._context.start_time = datetime.now()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        if self._context.format_name:
            return escape(f"[{self._context.format_name}] ")
        return ""
