"""Domain services operating on loaded data frames."""

from .column_profiler import (
    classify_series,
    profile_column,
    profile_columns,
    summarize_kinds,
)

__all__ = [
    "classify_series",
    "profile_column",
    "profile_columns",
    "summarize_kinds",
]
