"""Unit tests for logger implementations.

Tests verify that:
1. ConsoleLogger and NullLogger satisfy the LoggerPort protocol
2. ConsoleLogger respects verbosity and keeps import statistics
3. NullLogger stays silent
"""

from io import StringIO
import time
import unittest

import pandas as pd
from rich.console import Console

from data_importer.application.ports.services import LoggerPort
from data_importer.domain.entities import DatasetMetadata, LoadedDataset
from data_importer.infrastructure.logging import (
    ConsoleLogger,
    LogContext,
    LogLevel,
    NullLogger,
)


def _dataset(rows: int = 3, **metadata: str) -> LoadedDataset:
    return LoadedDataset(
        frame=pd.DataFrame({"x": range(rows)}),
        source="data/heights.csv",
        format_name="csv",
        metadata=DatasetMetadata(**metadata),
    )


class TestLoggerPort(unittest.TestCase):
    """Test that logger implementations comply with LoggerPort protocol."""

    def test_console_logger_implements_loggerport(self):
        self.assertIsInstance(ConsoleLogger(), LoggerPort)

    def test_null_logger_implements_loggerport(self):
        self.assertIsInstance(NullLogger(), LoggerPort)

    def test_loggerport_has_required_methods(self):
        required_methods = {
            "info",
            "success",
            "warning",
            "error",
            "debug",
            "verbose",
            "log_load_start",
            "log_file_loaded",
            "log_load_failed",
            "log_final_stats",
        }
        protocol_methods = {
            name for name in dir(LoggerPort) if not name.startswith("_")
        }
        self.assertTrue(required_methods.issubset(protocol_methods))


class TestConsoleLogger(unittest.TestCase):
    def setUp(self):
        self.buffer = StringIO()
        self.console = Console(file=self.buffer, force_terminal=False, width=100)
        self.logger = ConsoleLogger(console=self.console, verbosity=LogLevel.DEBUG)

    def _output(self) -> str:
        return self.buffer.getvalue()

    def test_initialization(self):
        logger = ConsoleLogger()
        self.assertEqual(logger.verbosity, 0)
        self.assertIsNone(logger._context)
        self.assertEqual(logger._stats["files_loaded"], 0)

    def test_info_logging(self):
        self.logger.info("Test message")
        self.assertIn("Test message", self._output())

    def test_success_logging(self):
        self.logger.success("Operation complete")
        self.assertIn("Operation complete", self._output())

    def test_warning_logging(self):
        """warning() should output message and increment warning count."""
        self.logger.warning("Warning message")
        self.assertIn("Warning message", self._output())
        self.assertEqual(self.logger.get_stats()["warnings"], 1)

    def test_error_logging(self):
        self.logger.error("Error message")
        self.assertIn("Error message", self._output())
        self.assertEqual(self.logger.get_stats()["errors"], 1)

    def test_debug_hidden_at_normal_verbosity(self):
        normal_logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        normal_logger.debug("Should not appear")
        normal_logger.verbose("Nor this")
        self.assertEqual(self._output().strip(), "")

    def test_verbose_shown_at_verbose_level(self):
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.VERBOSE)
        logger.verbose("Reading file")
        logger.debug("Hidden detail")
        self.assertIn("Reading file", self._output())
        self.assertNotIn("Hidden detail", self._output())

    def test_context_management(self):
        self.logger.set_context(source="survey.sav", format_name="spss")
        self.assertIsNotNone(self.logger._context)
        self.assertEqual(self.logger._context.source, "survey.sav")
        self.assertEqual(self.logger._context.format_name, "spss")

        self.logger.clear_context()
        self.assertIsNone(self.logger._context)

    def test_debug_prefix_uses_format(self):
        self.logger.set_context(format_name="stata")
        self.logger.debug("Reading labels")
        self.assertIn("[stata] Reading labels", self._output())

    def test_prefix_is_not_parsed_as_markup(self):
        self.logger.set_context(format_name="bold")
        self.logger.debug("Reading labels")
        self.assertIn("[bold] Reading labels", self._output())

    def test_stats_tracking(self):
        self.logger.log_file_loaded(_dataset(rows=100))
        self.logger.log_file_loaded(_dataset(rows=20))
        stats = self.logger.get_stats()
        self.assertEqual(stats["files_loaded"], 2)
        self.assertEqual(stats["rows_loaded"], 120)

        self.logger.reset_stats()
        self.assertEqual(self.logger.get_stats()["files_loaded"], 0)

    def test_log_load_start(self):
        self.logger.log_load_start("data/heights.csv", "csv")
        self.assertIn("Loading data/heights.csv (csv)", self._output())

    def test_log_file_loaded(self):
        self.logger.log_file_loaded(
            _dataset(rows=3, file_label="Health survey", file_encoding="UTF-8")
        )
        output = self._output()
        self.assertIn("Loaded 3 rows from data/heights.csv", output)
        self.assertIn("1 columns", output)
        self.assertIn("File label: Health survey", output)
        self.assertIn("File encoding: UTF-8", output)

    def test_log_load_failed(self):
        self.logger.log_load_failed("broken.sav", "Failed to read SPSS file")
        self.assertIn("broken.sav: Failed to read SPSS file", self._output())
        self.assertEqual(self.logger.get_stats()["errors"], 1)

    def test_markup_in_source_is_escaped(self):
        self.logger.log_load_failed("[red]odd[/red].csv", "bad")
        self.assertIn("[red]odd[/red].csv", self._output())

    def test_log_final_stats(self):
        self.logger.log_file_loaded(_dataset(rows=5))
        self.logger.warning("Empty file")
        self.logger.log_final_stats()
        output = self._output()
        self.assertIn("Import Statistics:", output)
        self.assertIn("Files loaded: 1", output)
        self.assertIn("Total rows: 5", output)
        self.assertIn("Warnings: 1", output)

    def test_final_stats_hidden_at_normal_verbosity(self):
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        logger.log_final_stats()
        self.assertNotIn("Import Statistics", self._output())


class TestNullLogger(unittest.TestCase):
    def test_null_logger_produces_no_output(self):
        """NullLogger should accept every call without raising."""
        logger = NullLogger()

        logger.info("Info message")
        logger.success("Success message")
        logger.warning("Warning message")
        logger.error("Error message")
        logger.debug("Debug message")
        logger.verbose("Verbose message")
        logger.log_load_start("a.csv", "csv")
        logger.log_file_loaded(_dataset())
        logger.log_load_failed("a.csv", "reason")
        logger.log_final_stats()


class TestLogContext(unittest.TestCase):
    def test_log_context_creation(self):
        context = LogContext()
        self.assertEqual(context.source, "")
        self.assertEqual(context.format_name, "")
        self.assertIsNotNone(context.start_time)

    def test_log_context_elapsed_time(self):
        context = LogContext()
        time.sleep(0.01)
        self.assertGreater(context.elapsed_ms(), 5)


if __name__ == "__main__":
    unittest.main()
