"""Data importer package.

Load external datasets into pandas data frames and see what the resulting
columns look like.

Features:
- Delimited text (CSV, TSV) through pandas
- Excel workbooks through pandas and openpyxl
- Google Sheets through gspread or the public CSV export
- SPSS, Stata and SAS files through pyreadstat, with labels
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("data-importer")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from data_importer.domain.entities.dataset import DatasetMetadata, LoadedDataset
from data_importer.domain.services.column_profiler import profile_columns
from data_importer.infrastructure.repositories.dataset_repository import (
    DatasetRepository,
)


def load_dataset(path: str, *, sheet: str | int | None = None) -> LoadedDataset:
    """Load a data file with the default configuration."""
    return DatasetRepository().load(path, sheet=sheet)


__all__ = [
    "__version__",
    "DatasetMetadata",
    "DatasetRepository",
    "LoadedDataset",
    "load_dataset",
    "profile_columns",
]
