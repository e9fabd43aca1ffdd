from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

    from ...domain.entities.dataset import LoadedDataset


@runtime_checkable
class DatasetRepositoryPort(Protocol):
    def read_dataset(
        self, file_path: str | Path, *, sheet: str | int | None = None
    ) -> pd.DataFrame: ...

    def load(
        self,
        file_path: str | Path,
        *,
        sheet: str | int | None = None,
        delimiter: str | None = None,
    ) -> LoadedDataset: ...

    def load_google_sheet(
        self, reference: str, *, worksheet: str | None = None
    ) -> LoadedDataset: ...

    def list_sheets(self, file_path: str | Path) -> list[str]: ...

    def list_data_files(self, folder: Path, pattern: str = "*") -> list[Path]: ...
