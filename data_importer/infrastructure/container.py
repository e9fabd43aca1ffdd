from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.load_dataset_use_case import (
    LoadDatasetDependencies,
    LoadDatasetUseCase,
    LoadFolderUseCase,
)
from ..config import ImporterConfig
from .io.csv_reader import CSVReader, TSVReader
from .io.excel_reader import ExcelReader
from .io.google_sheets_reader import GoogleSheetsReader
from .io.stats_reader import StatsFileReader
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.dataset_repository import DatasetRepository

if TYPE_CHECKING:
    from pathlib import Path

    from ..application.ports.repositories import DatasetRepositoryPort
    from ..application.ports.services import LoggerPort


class DependencyContainer:
    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: ImporterConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or ImporterConfig()
        self._logger_instance: LoggerPort | None = None
        self._dataset_repository_instance: DatasetRepositoryPort | None = None
        self._sheets_reader_instance: GoogleSheetsReader | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_sheets_reader(
        self, credentials_file: Path | None = None
    ) -> GoogleSheetsReader:
        if credentials_file is not None:
            return GoogleSheetsReader(credentials_file=credentials_file)
        if self._sheets_reader_instance is None:
            self._sheets_reader_instance = GoogleSheetsReader(
                credentials_file=self.config.google_credentials
            )
        return self._sheets_reader_instance

    def create_dataset_repository(
        self, credentials_file: Path | None = None
    ) -> DatasetRepositoryPort:
        if credentials_file is not None:
            return self._build_repository(self.create_sheets_reader(credentials_file))
        if self._dataset_repository_instance is None:
            self._dataset_repository_instance = self._build_repository(
                self.create_sheets_reader()
            )
        return self._dataset_repository_instance

    def create_load_dataset_use_case(
        self, credentials_file: Path | None = None
    ) -> LoadDatasetUseCase:
        return LoadDatasetUseCase(self._dependencies(credentials_file))

    def create_load_folder_use_case(self) -> LoadFolderUseCase:
        return LoadFolderUseCase(self._dependencies(None))

    def _dependencies(self, credentials_file: Path | None) -> LoadDatasetDependencies:
        return LoadDatasetDependencies(
            logger=self.create_logger(),
            dataset_repository=self.create_dataset_repository(credentials_file),
        )

    def _build_repository(self, sheets_reader: GoogleSheetsReader) -> DatasetRepository:
        return DatasetRepository(
            self.config,
            csv_reader=CSVReader(),
            tsv_reader=TSVReader(),
            excel_reader=ExcelReader(),
            stats_reader=StatsFileReader(),
            sheets_reader=sheets_reader,
        )

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_dataset_repository(self, repository: DatasetRepositoryPort) -> None:
        self._dataset_repository_instance = repository

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._dataset_repository_instance = None
        self._sheets_reader_instance = None


def create_default_container(
    verbose: int = 0, config: ImporterConfig | None = None
) -> DependencyContainer:
    return DependencyContainer(verbose=verbose, config=config)
