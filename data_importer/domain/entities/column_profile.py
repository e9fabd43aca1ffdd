from dataclasses import dataclass
from enum import StrEnum


class ColumnKind(StrEnum):
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    CATEGORICAL = "categorical"
    STRING = "string"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class ColumnProfile:
    name: str
    dtype: str
    kind: ColumnKind
    non_null: int
    null_ratio: float
    unique_ratio: float
    label: str | None = None

    @property
    def is_numeric(self) -> bool:
        return self.kind in (ColumnKind.INTEGER, ColumnKind.FLOAT)

