from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class ImporterConfig:
    encoding: str = Defaults.ENCODING
    preview_rows: int = Defaults.PREVIEW_ROWS
    normalize_headers: bool = Defaults.NORMALIZE_HEADERS
    strict_na_handling: bool = Defaults.STRICT_NA_HANDLING
    apply_value_formats: bool = Defaults.APPLY_VALUE_FORMATS
    google_credentials: Path | None = None

    def __post_init__(self) -> None:
        if not self.encoding or not self.encoding.strip():
            raise ValueError("encoding must be a non-empty string")
        if self.preview_rows < 1:
            raise ValueError(f"preview_rows must be positive, got {self.preview_rows}")

    @classmethod
    def from_env(cls) -> ImporterConfig:
        raw_credentials = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
        credentials = Path(raw_credentials.strip()) if raw_credentials else None
        return cls(
            encoding=os.getenv("DATA_IMPORTER_ENCODING", Defaults.ENCODING),
            preview_rows=_coerce_int(
                os.getenv("DATA_IMPORTER_PREVIEW_ROWS", str(Defaults.PREVIEW_ROWS)),
                key="DATA_IMPORTER_PREVIEW_ROWS",
            ),
            apply_value_formats=_coerce_bool(
                os.getenv("DATA_IMPORTER_APPLY_VALUE_FORMATS"),
                default=Defaults.APPLY_VALUE_FORMATS,
                key="DATA_IMPORTER_APPLY_VALUE_FORMATS",
            ),
            google_credentials=credentials,
        )


class ConfigLoader:
    """Build an ``ImporterConfig`` from the environment and an optional TOML file.

    Values in the TOML file win over the environment. A file that cannot be
    parsed is reported with a warning and the environment config is used.
    """

    @staticmethod
    def load(config_file: Path | None = None) -> ImporterConfig:
        config = ImporterConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: ImporterConfig) -> ImporterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        read_section = _get_table(data, "read")
        display_section = _get_table(data, "display")
        google_section = _get_table(data, "google")
        encoding = base_config.encoding
        if (value := read_section.get("encoding")) is not None:
            encoding = str(value)
        normalize_headers = base_config.normalize_headers
        if (value := read_section.get("normalize_headers")) is not None:
            normalize_headers = _coerce_bool(
                value, default=normalize_headers, key="read.normalize_headers"
            )
        strict_na_handling = base_config.strict_na_handling
        if (value := read_section.get("strict_na_handling")) is not None:
            strict_na_handling = _coerce_bool(
                value, default=strict_na_handling, key="read.strict_na_handling"
            )
        apply_value_formats = base_config.apply_value_formats
        if (value := read_section.get("apply_value_formats")) is not None:
            apply_value_formats = _coerce_bool(
                value, default=apply_value_formats, key="read.apply_value_formats"
            )
        preview_rows = base_config.preview_rows
        if (value := display_section.get("preview_rows")) is not None:
            preview_rows = _coerce_int(value, key="display.preview_rows")
        google_credentials = base_config.google_credentials
        if value := google_section.get("credentials"):
            google_credentials = Path(str(value))
        return ImporterConfig(
            encoding=encoding,
            preview_rows=preview_rows,
            normalize_headers=normalize_headers,
            strict_na_handling=strict_na_handling,
            apply_value_formats=apply_value_formats,
            google_credentials=google_credentials,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {value!r}") from None
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")


def _coerce_bool(value: object, *, default: bool, key: str) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")
