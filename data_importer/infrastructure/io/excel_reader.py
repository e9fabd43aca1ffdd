from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

from ...constants import Defaults
from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(slots=True)
class ExcelReadOptions:
    sheet: str | int = Defaults.SHEET
    header_row: int | None = 0
    skip_rows: int = 0
    n_rows: int | None = None
    usecols: str | list[str] | None = None
    na_values: list[str] | None = None


class ExcelReader:
    """Read one worksheet of an ``.xls``/``.xlsx`` workbook with ``pandas.read_excel``.

    Sheets are selected by name or by 0-based position. Cells keep the type
    Excel stored for them, so numeric cells arrive as ``int64``/``float64``,
    date cells as ``datetime64[ns]`` and text as ``object``.
    """

    def read(
        self, path: Path, options: ExcelReadOptions | None = None
    ) -> pd.DataFrame:
        if options is None:
            options = ExcelReadOptions()
        self._check_path(path)
        sheet_names = self.list_sheets(path)
        self._check_sheet(path, options.sheet, sheet_names)
        kwargs: dict[str, Any] = {
            "sheet_name": options.sheet,
            "header": options.header_row,
            "skiprows": options.skip_rows or None,
            "nrows": options.n_rows,
            "usecols": options.usecols,
        }
        if options.na_values:
            kwargs["na_values"] = options.na_values
        try:
            frame = pd.read_excel(path, **kwargs)
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except Exception as e:
            raise DataParseError(f"Failed to read Excel file {path}: {e}") from e
        if frame.shape[1] == 0:
            raise DataParseError(
                f"Sheet {options.sheet!r} in {path.name} has no columns"
            )
        return frame

    def list_sheets(self, path: Path) -> list[str]:
        self._check_path(path)
        try:
            with pd.ExcelFile(path) as workbook:
                return [str(name) for name in workbook.sheet_names]
        except Exception as e:
            raise DataParseError(f"Failed to open Excel file {path}: {e}") from e

    @staticmethod
    def _check_path(path: Path) -> None:
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")

    @staticmethod
    def _check_sheet(path: Path, sheet: str | int, sheet_names: list[str]) -> None:
        available = ", ".join(sheet_names)
        if isinstance(sheet, int):
            if not 0 <= sheet < len(sheet_names):
                raise DataParseError(
                    f"Sheet index {sheet} out of range for {path.name}. "
                    + f"Available sheets: {available}"
                )
            return
        if sheet not in sheet_names:
            raise DataParseError(
                f"Sheet '{sheet}' not found in {path.name}. Available sheets: {available}"
            )
