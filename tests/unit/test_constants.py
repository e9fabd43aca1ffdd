"""Unit tests for constants module."""

from pathlib import Path
import re

import pytest

from data_importer.constants import (
    Defaults,
    FormatNames,
    GoogleSheets,
    LogLevels,
    Patterns,
    SupportedFormats,
)
from data_importer.infrastructure.logging import LogLevel


class TestDefaults:
    def test_defaults_values(self):
        assert Defaults.ENCODING == "utf-8"
        assert Defaults.PREVIEW_ROWS == 10
        assert Defaults.SHEET == 0
        assert Defaults.APPLY_VALUE_FORMATS is True
        assert Defaults.CONFIG_FILE.endswith(".toml")


class TestSupportedFormats:
    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("heights.csv", FormatNames.CSV),
            ("export.TXT", FormatNames.CSV),
            ("data.tsv", FormatNames.TSV),
            ("book.xlsx", FormatNames.EXCEL),
            ("legacy.xls", FormatNames.EXCEL),
            ("survey.sav", FormatNames.SPSS),
            ("survey.zsav", FormatNames.SPSS),
            ("old.por", FormatNames.SPSS_PORTABLE),
            ("panel.dta", FormatNames.STATA),
            ("trial.sas7bdat", FormatNames.SAS),
            ("dm.xpt", FormatNames.SAS_XPORT),
        ],
    )
    def test_format_for(self, filename: str, expected: str):
        assert SupportedFormats.format_for(Path(filename)) == expected

    def test_unknown_extension(self):
        assert SupportedFormats.format_for("data.json") is None
        assert SupportedFormats.format_for("no_extension") is None

    def test_extensions_are_sorted(self):
        extensions = SupportedFormats.extensions()

        assert extensions == sorted(extensions)
        assert all(ext.startswith(".") for ext in extensions)

    def test_every_format_has_a_reader_call(self):
        for format_name in set(SupportedFormats.BY_EXTENSION.values()):
            assert format_name in SupportedFormats.READER_CALLS

    def test_statistical_formats_use_pyreadstat(self):
        for format_name in SupportedFormats.STATISTICAL:
            assert SupportedFormats.READER_CALLS[format_name].startswith("pyreadstat.")


class TestPatterns:
    def test_sheet_url(self):
        match = re.search(
            Patterns.SHEET_URL,
            "https://docs.google.com/spreadsheets/d/abc_DEF-123/edit#gid=7",
        )

        assert match is not None
        assert match.group(1) == "abc_DEF-123"

    def test_sheet_gid(self):
        assert re.search(Patterns.SHEET_GID, "edit#gid=7").group(1) == "7"
        assert re.search(Patterns.SHEET_GID, "edit?usp=sharing&gid=12").group(1) == "12"

    def test_sheet_key(self):
        assert re.match(Patterns.SHEET_KEY, "1" * 44)
        assert not re.match(Patterns.SHEET_KEY, "short")
        assert not re.match(Patterns.SHEET_KEY, "has spaces in it but is long")

    def test_code_row(self):
        pattern = re.compile(Patterns.CODE_ROW)

        assert pattern.match("USUBJID")
        assert not pattern.match("Subject Identifier")


class TestGoogleSheets:
    def test_export_url(self):
        url = GoogleSheets.EXPORT_URL.format(key="abc", gid=3)

        assert url == "https://docs.google.com/spreadsheets/d/abc/export?format=csv&gid=3"

    def test_scopes_are_read_only(self):
        assert all(scope.endswith(".readonly") for scope in GoogleSheets.SCOPES)


def test_log_levels_match_logger():
    assert LogLevels.NORMAL == LogLevel.NORMAL
    assert LogLevels.VERBOSE == LogLevel.VERBOSE
    assert LogLevels.DEBUG == LogLevel.DEBUG
