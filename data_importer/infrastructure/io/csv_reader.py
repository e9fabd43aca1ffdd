from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

from ...constants import Defaults, Patterns
from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

HEADER_SAMPLE_ROWS = 2
HEADER_SPACE_THRESHOLD = 0.5
HEADER_CODE_THRESHOLD = 0.5
AUTO_DELIMITER = "auto"
TAB = "\t"


@dataclass(slots=True)
class CSVReadOptions:
    delimiter: str | None = None
    encoding: str = Defaults.ENCODING
    header_row: int | None = 0
    skip_rows: int = 0
    na_values: list[str] | None = None
    strict_na_handling: bool = Defaults.STRICT_NA_HANDLING
    normalize_headers: bool = Defaults.NORMALIZE_HEADERS
    dtype: Any = None
    detect_header_row: bool = False


class CSVReader:
    """Read delimited text with ``pandas.read_csv``.

    pandas infers a dtype per column: whole numbers become ``int64``,
    decimals ``float64`` and everything else ``object``. Pass ``dtype=str``
    in the options to keep every cell as text instead.
    """

    def __init__(self, default_delimiter: str = ",") -> None:
        super().__init__()
        self.default_delimiter = default_delimiter

    def read(self, path: Path, options: CSVReadOptions | None = None) -> pd.DataFrame:
        if options is None:
            options = CSVReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        read_kwargs = self._build_kwargs(options)
        try:
            header_row = options.header_row
            if options.detect_header_row and header_row == 0:
                header_row = self._detect_header_row(path, read_kwargs)
            df = pd.read_csv(path, header=header_row, **read_kwargs)
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        except Exception as e:
            raise DataParseError(f"Unexpected error reading {path}: {e}") from e
        if df.shape[1] == 0:
            raise DataParseError(f"CSV file has no columns: {path}")
        if options.normalize_headers:
            df = self._normalize_headers(df)
        return df

    def _build_kwargs(self, options: CSVReadOptions) -> dict[str, Any]:
        delimiter = options.delimiter or self.default_delimiter
        kwargs: dict[str, Any] = {
            "encoding": options.encoding,
            "skiprows": options.skip_rows or None,
        }
        if delimiter == AUTO_DELIMITER:
            # The python engine sniffs the separator when sep is None.
            kwargs["sep"] = None
            kwargs["engine"] = "python"
        else:
            kwargs["sep"] = delimiter
        if options.dtype is not None:
            kwargs["dtype"] = options.dtype
        na_values = list(options.na_values or [])
        if options.strict_na_handling:
            kwargs["keep_default_na"] = False
            kwargs["na_values"] = ["", *na_values]
        elif na_values:
            kwargs["na_values"] = na_values
        return kwargs

    def _detect_header_row(self, path: Path, read_kwargs: dict[str, Any]) -> int:
        sample_kwargs = {
            key: value
            for key, value in read_kwargs.items()
            if key in ("sep", "engine", "encoding", "skiprows")
        }
        try:
            sample = pd.read_csv(
                path, nrows=HEADER_SAMPLE_ROWS, header=None, **sample_kwargs
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError):
            return 0
        if sample.empty or len(sample) < HEADER_SAMPLE_ROWS:
            return 0
        first_row = sample.iloc[0].astype(str)
        second_row = sample.iloc[1].astype(str)
        first_has_spaces = first_row.str.contains(r"\s").mean() > HEADER_SPACE_THRESHOLD
        second_is_codes = (
            second_row.str.match(Patterns.CODE_ROW).mean() > HEADER_CODE_THRESHOLD
        )
        if first_has_spaces and second_is_codes:
            return 1
        return 0

    def _normalize_headers(self, df: pd.DataFrame) -> pd.DataFrame:
        df.columns = [str(col).strip() for col in df.columns]
        return df


class TSVReader(CSVReader):
    def __init__(self) -> None:
        super().__init__(default_delimiter=TAB)
