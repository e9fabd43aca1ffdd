from __future__ import annotations

from dataclasses import dataclass
import traceback
from typing import TYPE_CHECKING

from ..constants import SupportedFormats
from ..domain.services.column_profiler import profile_columns
from .models import FolderLoadResult, LoadRequest, LoadResult

if TYPE_CHECKING:
    from pathlib import Path

    from .ports.repositories import DatasetRepositoryPort
    from .ports.services import LoggerPort


@dataclass(slots=True)
class LoadDatasetDependencies:
    logger: LoggerPort
    dataset_repository: DatasetRepositoryPort


class LoadDatasetUseCase:
    """Load one source and describe the column types of the result.

    Any failure while reading is logged and stored on the
    ``LoadResult``; the caller decides how to surface it.
    """

    def __init__(self, dependencies: LoadDatasetDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._repository = dependencies.dataset_repository

    def execute(self, request: LoadRequest) -> LoadResult:
        result = LoadResult(source=request.source)
        format_name = (
            "google_sheet"
            if request.is_google_sheet
            else SupportedFormats.format_for(request.source)
        )
        self.logger.log_load_start(request.source, format_name)
        try:
            if request.is_google_sheet:
                sheet = request.sheet if isinstance(request.sheet, str) else None
                dataset = self._repository.load_google_sheet(
                    request.source, worksheet=sheet
                )
            else:
                dataset = self._repository.load(
                    request.source, sheet=request.sheet, delimiter=request.delimiter
                )
        except Exception as exc:
            result.error = str(exc)
            self.logger.log_load_failed(request.source, str(exc))
            self.logger.debug(traceback.format_exc())
            return result
        result.dataset = dataset
        result.profiles = profile_columns(dataset.frame, dataset.metadata)
        self.logger.log_file_loaded(dataset)
        if dataset.row_count == 0:
            self.logger.warning(f"{dataset.display_name} contains no rows")
        return result


class LoadFolderUseCase:
    def __init__(self, dependencies: LoadDatasetDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._repository = dependencies.dataset_repository
        self._load_dataset = LoadDatasetUseCase(dependencies)

    def execute(self, folder: Path, pattern: str = "*") -> FolderLoadResult:
        folder_result = FolderLoadResult(folder=folder)
        files = self._repository.list_data_files(folder, pattern)
        if not files:
            self.logger.warning(f"No supported data files found in {folder}")
            return folder_result
        self.logger.verbose(f"Found {len(files)} data files in {folder}")
        for path in files:
            folder_result.results.append(
                self._load_dataset.execute(LoadRequest(source=str(path)))
            )
        self.logger.log_final_stats()
        return folder_result
