from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.dataset import LoadedDataset


@runtime_checkable
class LoggerPort(Protocol):
    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_load_start(self, source: str, format_name: str | None) -> None: ...

    def log_file_loaded(self, dataset: LoadedDataset) -> None: ...

    def log_load_failed(self, source: str, reason: str) -> None: ...

    def log_final_stats(self) -> None: ...
