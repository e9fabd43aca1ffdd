"""Helper functions shared by the CLI commands."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import click

from ..config import ConfigLoader, ImporterConfig

if TYPE_CHECKING:
    from pathlib import Path


def parse_sheet(value: str | None) -> str | int | None:
    """Interpret a ``--sheet`` value: digits select by position, anything else by name."""
    if value is None:
        return None
    text = value.strip()
    if text.isdigit():
        return int(text)
    return text


def load_runtime_config(
    config_file: Path | None,
    *,
    preview_rows: int | None = None,
    apply_value_formats: bool | None = None,
) -> ImporterConfig:
    """Load the config file and apply command-line overrides on top of it."""
    try:
        config = ConfigLoader.load(config_file=config_file)
        if preview_rows is not None:
            config = replace(config, preview_rows=preview_rows)
        if apply_value_formats is not None:
            config = replace(config, apply_value_formats=apply_value_formats)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    return config
