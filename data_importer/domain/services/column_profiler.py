"""Describe the column types of a loaded data frame.

pandas decides the dtype of every column while parsing. This module turns
those dtypes into a short, human-readable kind so the result of an import
can be inspected at a glance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pandas as pd

from ..entities.column_profile import ColumnKind, ColumnProfile

if TYPE_CHECKING:
    from ..entities.dataset import DatasetMetadata

# Results of pandas.api.types.infer_dtype for object columns.
_INFERRED_KINDS: dict[str, ColumnKind] = {
    "string": ColumnKind.STRING,
    "bytes": ColumnKind.STRING,
    "integer": ColumnKind.INTEGER,
    "floating": ColumnKind.FLOAT,
    "mixed-integer-float": ColumnKind.FLOAT,
    "decimal": ColumnKind.FLOAT,
    "boolean": ColumnKind.BOOLEAN,
    "datetime": ColumnKind.DATETIME,
    "datetime64": ColumnKind.DATETIME,
    "date": ColumnKind.DATETIME,
    "categorical": ColumnKind.CATEGORICAL,
}


def classify_series(series: pd.Series[Any]) -> ColumnKind:
    dtype = series.dtype
    if isinstance(dtype, pd.CategoricalDtype):
        return ColumnKind.CATEGORICAL
    if pd.api.types.is_bool_dtype(dtype):
        return ColumnKind.BOOLEAN
    if pd.api.types.is_integer_dtype(dtype):
        return ColumnKind.INTEGER
    if pd.api.types.is_float_dtype(dtype):
        return ColumnKind.FLOAT
    if pd.api.types.is_datetime64_any_dtype(dtype):
        return ColumnKind.DATETIME
    if pd.api.types.is_object_dtype(dtype) or pd.api.types.is_string_dtype(dtype):
        inferred = pd.api.types.infer_dtype(series, skipna=True)
        if inferred == "empty":
            return ColumnKind.OTHER
        return _INFERRED_KINDS.get(inferred, ColumnKind.OTHER)
    return ColumnKind.OTHER


def profile_column(
    name: str, series: pd.Series[Any], *, label: str | None = None
) -> ColumnProfile:
    row_count = len(series)
    non_null = int(series.notna().sum())
    unique_non_null = series.nunique(dropna=True)
    unique_ratio = float(unique_non_null / non_null) if non_null else 0.0
    null_ratio = float(1 - non_null / row_count) if row_count else 0.0
    return ColumnProfile(
        name=name,
        dtype=str(series.dtype),
        kind=classify_series(series),
        non_null=non_null,
        null_ratio=null_ratio,
        unique_ratio=unique_ratio,
        label=label,
    )


def profile_columns(
    frame: pd.DataFrame, metadata: DatasetMetadata | None = None
) -> list[ColumnProfile]:
    """Return one profile per column, in frame order.

    Args:
        frame: The loaded data.
        metadata: File metadata; supplies variable labels for SPSS, Stata and
            SAS sources.

    Returns:
        List of ``ColumnProfile`` objects.
    """
    profiles: list[ColumnProfile] = []
    for position, column in enumerate(frame.columns):
        name = str(column)
        label = metadata.label_for(name) if metadata is not None else None
        profiles.append(profile_column(name, frame.iloc[:, position], label=label))
    return profiles


def summarize_kinds(profiles: list[ColumnProfile]) -> dict[ColumnKind, int]:
    counts: dict[ColumnKind, int] = {}
    for profile in profiles:
        counts[profile.kind] = counts.get(profile.kind, 0) + 1
    return counts
