from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pandas as pd


def _empty_labels() -> dict[str, str]:
    return {}


def _empty_value_labels() -> dict[str, dict[object, str]]:
    return {}


@dataclass(slots=True)
class DatasetMetadata:
    """Descriptive information stored alongside the data in a source file.

    Only the statistical formats (SPSS, Stata, SAS) carry most of this;
    delimited text and spreadsheets leave everything empty.
    """

    column_labels: dict[str, str] = field(default_factory=_empty_labels)
    value_labels: dict[str, dict[object, str]] = field(
        default_factory=_empty_value_labels
    )
    original_types: dict[str, str] = field(default_factory=_empty_labels)
    file_label: str | None = None
    file_encoding: str | None = None
    declared_rows: int | None = None
    table_name: str | None = None

    def label_for(self, column: str) -> str | None:
        label = self.column_labels.get(column)
        return label or None

    def has_value_labels(self, column: str) -> bool:
        return bool(self.value_labels.get(column))

    @property
    def is_empty(self) -> bool:
        return not (
            self.column_labels
            or self.value_labels
            or self.original_types
            or self.file_label
            or self.table_name
        )


@dataclass(slots=True)
class LoadedDataset:
    frame: pd.DataFrame
    source: str
    format_name: str
    metadata: DatasetMetadata = field(default_factory=DatasetMetadata)
    sheet: str | int | None = None

    @property
    def row_count(self) -> int:
        return len(self.frame)

    @property
    def column_count(self) -> int:
        return self.frame.shape[1]

    @property
    def display_name(self) -> str:
        if self.sheet is None:
            return self.source
        return f"{self.source} [{self.sheet}]"
