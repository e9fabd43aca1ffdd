"""Readers for statistical-package files (SPSS, Stata, SAS).

All parsing is done by ``pyreadstat``. Besides the data itself these formats
store variable labels, value labels and the original display formats; that
information is returned as a ``DatasetMetadata`` next to the frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pyreadstat

from ...constants import Defaults, FormatNames
from ...domain.entities.dataset import DatasetMetadata
from .exceptions import DataParseError, DataSourceNotFoundError, UnsupportedFormatError

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    import pandas as pd


@dataclass(slots=True)
class StatsReadOptions:
    # Replace coded values with their labels; the columns become categoricals.
    apply_value_formats: bool = Defaults.APPLY_VALUE_FORMATS
    usecols: list[str] | None = None
    row_limit: int = 0
    encoding: str | None = None
    user_missing: bool = False
    catalog_file: Path | None = None


_READER_NAMES: dict[str, str] = {
    FormatNames.SPSS: "read_sav",
    FormatNames.SPSS_PORTABLE: "read_por",
    FormatNames.STATA: "read_dta",
    FormatNames.SAS: "read_sas7bdat",
    FormatNames.SAS_XPORT: "read_xport",
}

# Keyword support differs between the pyreadstat readers.
_SUPPORTS_ENCODING = frozenset(
    {FormatNames.SPSS, FormatNames.STATA, FormatNames.SAS, FormatNames.SAS_XPORT}
)
_SUPPORTS_USER_MISSING = frozenset({FormatNames.SPSS, FormatNames.STATA, FormatNames.SAS})
_SUPPORTS_VALUE_FORMATS = frozenset(
    {FormatNames.SPSS, FormatNames.SPSS_PORTABLE, FormatNames.STATA}
)


class StatsFileReader:
    def read(
        self,
        path: Path,
        format_name: str,
        options: StatsReadOptions | None = None,
    ) -> tuple[pd.DataFrame, DatasetMetadata]:
        """Read a statistical file and its metadata.

        Args:
            path: File to read.
            format_name: One of the statistical ``FormatNames``.
            options: Reader options; defaults apply value labels.

        Returns:
            Tuple of (DataFrame, DatasetMetadata).

        Raises:
            DataSourceNotFoundError: If the file does not exist.
            UnsupportedFormatError: If ``format_name`` is not a statistical format.
            DataParseError: If pyreadstat cannot read the file.
        """
        if options is None:
            options = StatsReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        reader = _resolve_reader(format_name)
        kwargs = self._build_kwargs(format_name, options)
        try:
            frame, meta = reader(str(path), **kwargs)
        except Exception as e:
            raise DataParseError(
                f"Failed to read {format_name.upper()} file {path}: {e}"
            ) from e
        return frame, build_metadata(meta)

    def read_metadata(self, path: Path, format_name: str) -> DatasetMetadata:
        """Read only the file metadata, without loading any rows."""
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        reader = _resolve_reader(format_name)
        try:
            _frame, meta = reader(str(path), metadataonly=True)
        except Exception as e:
            raise DataParseError(f"Failed to read metadata from {path}: {e}") from e
        return build_metadata(meta)

    @staticmethod
    def _build_kwargs(format_name: str, options: StatsReadOptions) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"dates_as_pandas_datetime": True}
        if options.usecols:
            kwargs["usecols"] = options.usecols
        if options.row_limit:
            kwargs["row_limit"] = options.row_limit
        if options.encoding and format_name in _SUPPORTS_ENCODING:
            kwargs["encoding"] = options.encoding
        if options.user_missing and format_name in _SUPPORTS_USER_MISSING:
            kwargs["user_missing"] = True
        if format_name in _SUPPORTS_VALUE_FORMATS:
            kwargs["apply_value_formats"] = options.apply_value_formats
        if format_name == FormatNames.SAS and options.catalog_file is not None:
            kwargs["catalog_file"] = str(options.catalog_file)
        return kwargs


def build_metadata(meta: Any) -> DatasetMetadata:
    """Convert a pyreadstat metadata container into a ``DatasetMetadata``."""
    labels = getattr(meta, "column_names_to_labels", None) or {}
    column_labels = {
        str(name): str(label) for name, label in labels.items() if label
    }
    value_labels = {
        str(name): dict(mapping)
        for name, mapping in (getattr(meta, "variable_value_labels", None) or {}).items()
    }
    original_types = {
        str(name): str(kind)
        for name, kind in (getattr(meta, "original_variable_types", None) or {}).items()
    }
    declared_rows = getattr(meta, "number_rows", None)
    return DatasetMetadata(
        column_labels=column_labels,
        value_labels=value_labels,
        original_types=original_types,
        file_label=getattr(meta, "file_label", None) or None,
        file_encoding=getattr(meta, "file_encoding", None) or None,
        declared_rows=int(declared_rows) if declared_rows is not None else None,
        table_name=getattr(meta, "table_name", None) or None,
    )


def _resolve_reader(format_name: str) -> Callable[..., tuple[pd.DataFrame, Any]]:
    name = _READER_NAMES.get(format_name)
    if name is None:
        raise UnsupportedFormatError(
            f"'{format_name}' is not a statistical file format"
        )
    return getattr(pyreadstat, name)
