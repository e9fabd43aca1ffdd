"""Infrastructure I/O layer.

Each module wraps one third-party reader (pandas, openpyxl through pandas,
pyreadstat, gspread) and translates its failures into the exceptions defined
in ``exceptions``.

Architecture note:
- Import from the defining modules inside the package to avoid cycles.
"""

from .csv_reader import CSVReader, CSVReadOptions, TSVReader
from .excel_reader import ExcelReader, ExcelReadOptions
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    ImporterInfrastructureError,
    RemoteSourceError,
    UnsupportedFormatError,
)
from .google_sheets_reader import (
    GoogleSheetsReader,
    SheetReference,
    parse_sheet_reference,
)
from .stats_reader import StatsFileReader, StatsReadOptions

__all__ = [
    "CSVReader",
    "CSVReadOptions",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "ExcelReader",
    "ExcelReadOptions",
    "GoogleSheetsReader",
    "ImporterInfrastructureError",
    "RemoteSourceError",
    "SheetReference",
    "StatsFileReader",
    "StatsReadOptions",
    "TSVReader",
    "UnsupportedFormatError",
    "parse_sheet_reference",
]
