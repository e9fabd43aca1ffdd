"""Tests for dependency injection container.

These tests verify the container correctly creates and wires up dependencies,
including singleton and transient patterns, configuration injection, and
testing overrides.
"""

from pathlib import Path

from rich.console import Console

from data_importer.application import (
    LoadDatasetUseCase,
    LoadFolderUseCase,
    LoadRequest,
)
from data_importer.application.ports.repositories import DatasetRepositoryPort
from data_importer.application.ports.services import LoggerPort
from data_importer.config import ImporterConfig
from data_importer.infrastructure.container import (
    DependencyContainer,
    create_default_container,
)
from data_importer.infrastructure.io import GoogleSheetsReader
from data_importer.infrastructure.logging import ConsoleLogger, NullLogger
from data_importer.infrastructure.repositories import DatasetRepository


class MockLogger:
    """Mock logger for testing overrides."""

    def __init__(self):
        self.messages = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))

    def verbose(self, message: str) -> None:
        self.messages.append(("verbose", message))

    def log_load_start(self, source, format_name) -> None:
        self.messages.append(("start", source))

    def log_file_loaded(self, dataset) -> None:
        self.messages.append(("loaded", dataset.source))

    def log_load_failed(self, source, reason) -> None:
        self.messages.append(("failed", source))

    def log_final_stats(self) -> None:
        self.messages.append(("stats", ""))


class TestDependencyContainer:
    """Tests for DependencyContainer class."""

    def test_create_container_with_defaults(self):
        container = DependencyContainer()

        assert container.verbose == 0
        assert container.console is not None
        assert container.use_null_logger is False
        assert container.config == ImporterConfig()

    def test_create_container_with_null_logger(self):
        container = DependencyContainer(use_null_logger=True)

        assert isinstance(container.create_logger(), NullLogger)

    def test_create_container_with_custom_console(self):
        custom_console = Console()
        container = DependencyContainer(console=custom_console)

        assert container.console is custom_console

    def test_create_default_container(self):
        config = ImporterConfig(preview_rows=3)
        container = create_default_container(verbose=1, config=config)

        assert container.verbose == 1
        assert container.config is config


class TestLoggerFactory:
    def test_create_logger_returns_console_logger(self):
        logger = DependencyContainer().create_logger()

        assert isinstance(logger, ConsoleLogger)
        assert isinstance(logger, LoggerPort)

    def test_create_logger_is_singleton(self):
        container = DependencyContainer()

        assert container.create_logger() is container.create_logger()

    def test_create_logger_respects_verbose_level(self):
        logger = DependencyContainer(verbose=2).create_logger()

        assert isinstance(logger, ConsoleLogger)
        assert logger.verbosity == 2


class TestRepositoryFactory:
    def test_create_dataset_repository(self):
        repository = DependencyContainer().create_dataset_repository()

        assert isinstance(repository, DatasetRepository)
        assert isinstance(repository, DatasetRepositoryPort)

    def test_create_dataset_repository_is_singleton(self):
        container = DependencyContainer()

        assert container.create_dataset_repository() is container.create_dataset_repository()

    def test_explicit_credentials_give_a_new_repository(self, tmp_path: Path):
        container = DependencyContainer()
        default = container.create_dataset_repository()

        with_credentials = container.create_dataset_repository(tmp_path / "key.json")

        assert with_credentials is not default

    def test_sheets_reader_uses_configured_credentials(self, tmp_path: Path):
        config = ImporterConfig(google_credentials=tmp_path / "key.json")
        reader = DependencyContainer(config=config).create_sheets_reader()

        assert isinstance(reader, GoogleSheetsReader)
        assert reader.is_authenticated

    def test_sheets_reader_without_credentials(self):
        assert not DependencyContainer().create_sheets_reader().is_authenticated


class TestUseCaseFactories:
    def test_create_load_dataset_use_case(self):
        container = DependencyContainer(use_null_logger=True)

        use_case = container.create_load_dataset_use_case()

        assert isinstance(use_case, LoadDatasetUseCase)
        assert use_case.logger is container.create_logger()

    def test_create_load_dataset_use_case_is_transient(self):
        container = DependencyContainer(use_null_logger=True)

        assert (
            container.create_load_dataset_use_case()
            is not container.create_load_dataset_use_case()
        )

    def test_create_load_folder_use_case(self):
        container = DependencyContainer(use_null_logger=True)

        assert isinstance(container.create_load_folder_use_case(), LoadFolderUseCase)


class TestOverrides:
    def test_override_logger(self, csv_file: Path):
        container = DependencyContainer()
        mock_logger = MockLogger()
        container.override_logger(mock_logger)

        use_case = container.create_load_dataset_use_case()
        use_case.execute(LoadRequest(source=str(csv_file)))

        assert ("loaded", str(csv_file)) in mock_logger.messages

    def test_override_dataset_repository(self):
        container = DependencyContainer(use_null_logger=True)
        repository = DatasetRepository()
        container.override_dataset_repository(repository)

        assert container.create_dataset_repository() is repository

    def test_reset_singletons(self):
        container = DependencyContainer()
        logger = container.create_logger()
        repository = container.create_dataset_repository()

        container.reset_singletons()

        assert container.create_logger() is not logger
        assert container.create_dataset_repository() is not repository
