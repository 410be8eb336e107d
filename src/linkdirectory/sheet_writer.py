# sheet_writer.py

import logging

import gspread
import requests
from google.auth.exceptions import GoogleAuthError

from .config import ConfigError, Settings

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

# Errors the Sheets round trip can raise, short of programming mistakes
SHEET_ERRORS = (gspread.exceptions.GSpreadException, requests.RequestException, GoogleAuthError)

# ─── Setup Connection to Google Sheet ───────────────────────────────────────────

def connect_to_sheet(settings: Settings) -> "SheetStore":
    """Authorize a gspread client from the parsed credentials and wrap it in a SheetStore."""
    try:
        client = gspread.service_account_from_dict(settings.credentials, scopes=SCOPES)
    except (ValueError, KeyError, GoogleAuthError) as e:
        raise ConfigError(f"Google API credentials in {settings.credentials_path} were rejected: {e}")

    return SheetStore(client, settings.sheet_id, append_range=settings.append_range)


class SheetStore:
    """
    Append-only view over one spreadsheet.

    The spreadsheet is opened on first use and the handle reused afterwards.
    """

    def __init__(self, client, sheet_id: str, append_range: str = "A1"):
        self.client = client
        self.sheet_id = sheet_id
        self.append_range = append_range
        self._spreadsheet = None

    @property
    def spreadsheet(self):
        if self._spreadsheet is None:
            self._spreadsheet = self.client.open_by_key(self.sheet_id)
        return self._spreadsheet

    # ─── Append a Single Row ────────────────────────────────────────────────────

    def append_row(self, row: list) -> bool:
        """
        Appends `row` after the table anchored at `append_range`.

        Returns True on success. Failures are logged and reported as False,
        never raised, so callers decide whether a lost row matters.
        """
        try:
            self.spreadsheet.values_append(
                self.append_range,
                params={"valueInputOption": "USER_ENTERED"},
                body={"values": [row]},
            )
        except SHEET_ERRORS as e:
            logger.error("Error appending to Google Sheet %s: %s", self.sheet_id, e)
            return False

        logger.info("Row appended to Google Sheet %s", self.sheet_id)
        return True

    # ─── Read a Range ───────────────────────────────────────────────────────────

    def get_rows(self, value_range: str) -> list[list[str]]:
        """Fetch every row in `value_range`. Errors propagate to the caller."""
        response = self.spreadsheet.values_get(value_range)
        rows = response.get("values", [])
        logger.debug("Fetched %d rows from %s", len(rows), value_range)
        return rows
