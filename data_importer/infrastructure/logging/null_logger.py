from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...domain.entities.dataset import LoadedDataset


class NullLogger(LoggerPort):
    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_load_start(self, source: str, format_name: str | None) -> None:
        return None

    @override
    def log_file_loaded(self, dataset: LoadedDataset) -> None:
        return None

    @override
    def log_load_failed(self, source: str, reason: str) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
