"""Google Sheets reader.

Two access paths are supported:

- Authenticated: a service-account JSON key is turned into credentials with
  ``google-auth`` and the sheet is read through ``gspread``.
- Public: a sheet shared as "anyone with the link" needs no credentials; its
  CSV export URL is read directly with ``pandas.read_csv``.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import TYPE_CHECKING, Any

from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
import gspread
import pandas as pd
import requests

from ...constants import GoogleSheets, Patterns
from .exceptions import (
    DataParseError,
    DataSourceNotFoundError,
    RemoteSourceError,
)

if TYPE_CHECKING:
    from pathlib import Path

_URL_KEY_RE = re.compile(Patterns.SHEET_URL)
_GID_RE = re.compile(Patterns.SHEET_GID)
_BARE_KEY_RE = re.compile(Patterns.SHEET_KEY)

# gspread lets network and token-refresh failures through unwrapped.
_REMOTE_ERRORS = (
    gspread.exceptions.GSpreadException,
    requests.RequestException,
    GoogleAuthError,
)


@dataclass(frozen=True, slots=True)
class SheetReference:
    key: str
    gid: int | None = None

    @property
    def export_url(self) -> str:
        return GoogleSheets.EXPORT_URL.format(key=self.key, gid=self.gid or 0)


def parse_sheet_reference(reference: str) -> SheetReference:
    """Extract the spreadsheet key (and worksheet gid) from a URL or bare key."""
    text = reference.strip()
    match = _URL_KEY_RE.search(text)
    if match:
        gid_match = _GID_RE.search(text)
        gid = int(gid_match.group(1)) if gid_match else None
        return SheetReference(key=match.group(1), gid=gid)
    if _BARE_KEY_RE.match(text):
        return SheetReference(key=text)
    raise DataParseError(f"Not a Google Sheets URL or key: {reference!r}")


class GoogleSheetsReader:
    def __init__(
        self,
        credentials_file: Path | None = None,
        client: gspread.Client | None = None,
    ) -> None:
        super().__init__()
        self._credentials_file = credentials_file
        self._client = client

    @property
    def is_authenticated(self) -> bool:
        return self._client is not None or self._credentials_file is not None

    def read(self, reference: str, worksheet: str | None = None) -> pd.DataFrame:
        sheet_ref = parse_sheet_reference(reference)
        if self.is_authenticated:
            return self._read_with_client(sheet_ref, worksheet)
        if worksheet is not None:
            raise DataParseError(
                "Selecting a worksheet by title needs credentials; "
                + "use a URL containing the worksheet gid for public sheets"
            )
        return self._read_public(sheet_ref)

    def list_worksheets(self, reference: str) -> list[str]:
        sheet_ref = parse_sheet_reference(reference)
        spreadsheet = self._open(sheet_ref)
        try:
            return [ws.title for ws in spreadsheet.worksheets()]
        except _REMOTE_ERRORS as e:
            raise RemoteSourceError(
                f"Failed to list worksheets of {sheet_ref.key}: {e}"
            ) from e

    def _read_public(self, sheet_ref: SheetReference) -> pd.DataFrame:
        try:
            frame = pd.read_csv(sheet_ref.export_url)
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"Google Sheet {sheet_ref.key} is empty") from e
        except pd.errors.ParserError as e:
            raise DataParseError(
                f"Failed to parse Google Sheet {sheet_ref.key}: {e}"
            ) from e
        except OSError as e:
            raise RemoteSourceError(
                f"Could not download Google Sheet {sheet_ref.key}. "
                + f"Is it shared publicly? ({e})"
            ) from e
        return frame

    def _read_with_client(
        self, sheet_ref: SheetReference, worksheet: str | None
    ) -> pd.DataFrame:
        spreadsheet = self._open(sheet_ref)
        try:
            if worksheet is not None:
                ws = spreadsheet.worksheet(worksheet)
            elif sheet_ref.gid is not None:
                ws = spreadsheet.get_worksheet_by_id(sheet_ref.gid)
            else:
                ws = spreadsheet.get_worksheet(0)
            records: list[dict[str, Any]] = ws.get_all_records()
        except gspread.exceptions.WorksheetNotFound as e:
            raise DataSourceNotFoundError(
                f"Worksheet {worksheet or sheet_ref.gid!r} not found in {sheet_ref.key}"
            ) from e
        except _REMOTE_ERRORS as e:
            raise RemoteSourceError(
                f"Failed to read Google Sheet {sheet_ref.key}: {e}"
            ) from e
        frame = pd.DataFrame.from_records(records)
        if frame.shape[1] == 0:
            raise DataParseError(f"Google Sheet {sheet_ref.key} has no data rows")
        return frame

    def _open(self, sheet_ref: SheetReference) -> gspread.Spreadsheet:
        client = self._get_client()
        try:
            return client.open_by_key(sheet_ref.key)
        except gspread.exceptions.SpreadsheetNotFound as e:
            raise DataSourceNotFoundError(
                f"Google Sheet not found or not shared: {sheet_ref.key}"
            ) from e
        except _REMOTE_ERRORS as e:
            raise RemoteSourceError(
                f"Failed to open Google Sheet {sheet_ref.key}: {e}"
            ) from e

    def _get_client(self) -> gspread.Client:
        if self._client is not None:
            return self._client
        if self._credentials_file is None:
            raise RemoteSourceError("Google credentials are required for this operation")
        if not self._credentials_file.is_file():
            raise DataSourceNotFoundError(
                f"Credentials file not found: {self._credentials_file}"
            )
        try:
            credentials = Credentials.from_service_account_file(
                str(self._credentials_file), scopes=list(GoogleSheets.SCOPES)
            )
        except ValueError as e:
            raise RemoteSourceError(
                f"Invalid service account file {self._credentials_file}: {e}"
            ) from e
        self._client = gspread.authorize(credentials)
        return self._client
