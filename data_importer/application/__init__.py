"""Application layer: use cases that load datasets and describe them."""

from .load_dataset_use_case import (
    LoadDatasetDependencies,
    LoadDatasetUseCase,
    LoadFolderUseCase,
)
from .models import FolderLoadResult, LoadRequest, LoadResult

__all__ = [
    "FolderLoadResult",
    "LoadDatasetDependencies",
    "LoadDatasetUseCase",
    "LoadFolderUseCase",
    "LoadRequest",
    "LoadResult",
]
