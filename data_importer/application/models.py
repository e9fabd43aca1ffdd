from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

    from ..domain.entities.column_profile import ColumnProfile
    from ..domain.entities.dataset import LoadedDataset


def _empty_profiles() -> list[ColumnProfile]:
    return []


def _empty_results() -> list[LoadResult]:
    return []


@dataclass(slots=True)
class LoadRequest:
    source: str
    sheet: str | int | None = None
    delimiter: str | None = None
    is_google_sheet: bool = False


@dataclass(slots=True)
class LoadResult:
    source: str
    dataset: LoadedDataset | None = None
    profiles: list[ColumnProfile] = field(default_factory=_empty_profiles)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None and self.dataset is not None

    @property
    def rows(self) -> int:
        return self.dataset.row_count if self.dataset is not None else 0

    def preview(self, rows: int = Defaults.PREVIEW_ROWS) -> pd.DataFrame | None:
        if self.dataset is None:
            return None
        return self.dataset.frame.head(rows)


@dataclass(slots=True)
class FolderLoadResult:
    folder: Path
    results: list[LoadResult] = field(default_factory=_empty_results)

    @property
    def loaded(self) -> list[LoadResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[LoadResult]:
        return [r for r in self.results if not r.success]

    @property
    def total_rows(self) -> int:
        return sum(r.rows for r in self.loaded)
