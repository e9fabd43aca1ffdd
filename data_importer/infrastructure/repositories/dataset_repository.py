from __future__ import annotations

from pathlib import Path

import pandas as pd

from ...config import ImporterConfig
from ...constants import FormatNames, SupportedFormats
from ...domain.entities.dataset import DatasetMetadata, LoadedDataset
from ..io.csv_reader import CSVReader, CSVReadOptions, TSVReader
from ..io.excel_reader import ExcelReader, ExcelReadOptions
from ..io.exceptions import (
    DataParseError,
    DataSourceNotFoundError,
    UnsupportedFormatError,
)
from ..io.google_sheets_reader import GoogleSheetsReader
from ..io.stats_reader import StatsFileReader, StatsReadOptions


class DatasetRepository:
    """Load any supported file into a ``LoadedDataset``.

    The file extension picks the reader; see ``SupportedFormats``.
    """

    def __init__(
        self,
        config: ImporterConfig | None = None,
        *,
        csv_reader: CSVReader | None = None,
        tsv_reader: CSVReader | None = None,
        excel_reader: ExcelReader | None = None,
        stats_reader: StatsFileReader | None = None,
        sheets_reader: GoogleSheetsReader | None = None,
    ) -> None:
        super().__init__()
        self._config = config or ImporterConfig()
        self._csv_reader = csv_reader or CSVReader()
        self._tsv_reader = tsv_reader or TSVReader()
        self._excel_reader = excel_reader or ExcelReader()
        self._stats_reader = stats_reader or StatsFileReader()
        self._sheets_reader = sheets_reader or GoogleSheetsReader(
            credentials_file=self._config.google_credentials
        )

    def read_dataset(
        self, file_path: str | Path, *, sheet: str | int | None = None
    ) -> pd.DataFrame:
        return self.load(file_path, sheet=sheet).frame

    def load(
        self,
        file_path: str | Path,
        *,
        sheet: str | int | None = None,
        delimiter: str | None = None,
    ) -> LoadedDataset:
        path = Path(file_path)
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        format_name = SupportedFormats.format_for(path)
        if format_name is None:
            supported = ", ".join(SupportedFormats.extensions())
            raise UnsupportedFormatError(
                f"Unsupported format '{path.suffix.lower()}'. Supported: {supported}"
            )
        if sheet is not None and format_name != FormatNames.EXCEL:
            raise DataParseError(
                f"A sheet can only be selected in Excel workbooks, not {path.name}"
            )
        metadata = DatasetMetadata()
        if format_name in (FormatNames.CSV, FormatNames.TSV):
            frame = self._read_delimited(path, format_name, delimiter)
        elif format_name == FormatNames.EXCEL:
            frame = self._read_excel(path, sheet)
        else:
            frame, metadata = self._read_stats(path, format_name)
        return LoadedDataset(
            frame=frame,
            source=str(path),
            format_name=format_name,
            metadata=metadata,
            sheet=sheet,
        )

    def load_google_sheet(
        self, reference: str, *, worksheet: str | None = None
    ) -> LoadedDataset:
        frame = self._sheets_reader.read(reference, worksheet=worksheet)
        return LoadedDataset(
            frame=frame,
            source=reference,
            format_name=FormatNames.GOOGLE_SHEET,
            sheet=worksheet,
        )

    def list_sheets(self, file_path: str | Path) -> list[str]:
        path = Path(file_path)
        if SupportedFormats.format_for(path) != FormatNames.EXCEL:
            raise UnsupportedFormatError(f"Not an Excel workbook: {path.name}")
        return self._excel_reader.list_sheets(path)

    def list_data_files(self, folder: Path, pattern: str = "*") -> list[Path]:
        if not folder.exists() or not folder.is_dir():
            return []
        return sorted(
            path
            for path in folder.glob(pattern)
            if path.is_file() and SupportedFormats.format_for(path) is not None
        )

    def _read_delimited(
        self, path: Path, format_name: str, delimiter: str | None
    ) -> pd.DataFrame:
        options = CSVReadOptions(
            delimiter=delimiter,
            encoding=self._config.encoding,
            normalize_headers=self._config.normalize_headers,
            strict_na_handling=self._config.strict_na_handling,
        )
        reader = self._tsv_reader if format_name == FormatNames.TSV else self._csv_reader
        return reader.read(path, options)

    def _read_excel(self, path: Path, sheet: str | int | None) -> pd.DataFrame:
        options = ExcelReadOptions()
        if sheet is not None:
            options.sheet = sheet
        return self._excel_reader.read(path, options)

    def _read_stats(
        self, path: Path, format_name: str
    ) -> tuple[pd.DataFrame, DatasetMetadata]:
        options = StatsReadOptions(apply_value_formats=self._config.apply_value_formats)
        return self._stats_reader.read(path, format_name, options)
