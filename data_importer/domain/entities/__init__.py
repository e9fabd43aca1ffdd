"""Domain entities describing loaded datasets and their columns."""

from .column_profile import ColumnKind, ColumnProfile
from .dataset import DatasetMetadata, LoadedDataset

__all__ = [
    "ColumnKind",
    "ColumnProfile",
    "DatasetMetadata",
    "LoadedDataset",
]
