from __future__ import annotations

from pathlib import Path
from typing import ClassVar


class Defaults:
    ENCODING = "utf-8"
    PREVIEW_ROWS = 10
    SHEET = 0
    APPLY_VALUE_FORMATS = True
    NORMALIZE_HEADERS = False
    STRICT_NA_HANDLING = False
    CONFIG_FILE = "data_importer.toml"


class FormatNames:
    CSV = "csv"
    TSV = "tsv"
    EXCEL = "excel"
    SPSS = "spss"
    SPSS_PORTABLE = "spss_portable"
    STATA = "stata"
    SAS = "sas"
    SAS_XPORT = "sas_xport"
    GOOGLE_SHEET = "google_sheet"


class SupportedFormats:
    BY_EXTENSION: ClassVar[dict[str, str]] = {
        ".csv": FormatNames.CSV,
        ".txt": FormatNames.CSV,
        ".tsv": FormatNames.TSV,
        ".tab": FormatNames.TSV,
        ".xls": FormatNames.EXCEL,
        ".xlsx": FormatNames.EXCEL,
        ".xlsm": FormatNames.EXCEL,
        ".sav": FormatNames.SPSS,
        ".zsav": FormatNames.SPSS,
        ".por": FormatNames.SPSS_PORTABLE,
        ".dta": FormatNames.STATA,
        ".sas7bdat": FormatNames.SAS,
        ".xpt": FormatNames.SAS_XPORT,
    }
    # Library call behind each format, shown by the CLI and the tutorial.
    READER_CALLS: ClassVar[dict[str, str]] = {
        FormatNames.CSV: "pandas.read_csv",
        FormatNames.TSV: "pandas.read_csv(sep='\\t')",
        FormatNames.EXCEL: "pandas.read_excel",
        FormatNames.SPSS: "pyreadstat.read_sav",
        FormatNames.SPSS_PORTABLE: "pyreadstat.read_por",
        FormatNames.STATA: "pyreadstat.read_dta",
        FormatNames.SAS: "pyreadstat.read_sas7bdat",
        FormatNames.SAS_XPORT: "pyreadstat.read_xport",
        FormatNames.GOOGLE_SHEET: "gspread / pandas.read_csv",
    }
    STATISTICAL: ClassVar[frozenset[str]] = frozenset(
        {
            FormatNames.SPSS,
            FormatNames.SPSS_PORTABLE,
            FormatNames.STATA,
            FormatNames.SAS,
            FormatNames.SAS_XPORT,
        }
    )

    @classmethod
    def format_for(cls, path: str | Path) -> str | None:
        return cls.BY_EXTENSION.get(Path(path).suffix.lower())

    @classmethod
    def extensions(cls) -> list[str]:
        return sorted(cls.BY_EXTENSION)


class Patterns:
    SHEET_URL = r"/spreadsheets/d/([A-Za-z0-9_-]+)"
    SHEET_GID = r"[#&?]gid=(\d+)"
    SHEET_KEY = r"^[A-Za-z0-9_-]{20,}$"
    CODE_ROW = r"^[A-Z][A-Za-z0-9_]*$"


class GoogleSheets:
    EXPORT_URL = "https://docs.google.com/spreadsheets/d/{key}/export?format=csv&gid={gid}"
    SCOPES: ClassVar[tuple[str, ...]] = (
        "https://www.googleapis.com/auth/spreadsheets.readonly",
        "https://www.googleapis.com/auth/drive.readonly",
    )


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
