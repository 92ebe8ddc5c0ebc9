"""Google Sheets API client (values endpoints of one spreadsheet)."""

import asyncio
import logging
import re

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"
SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

# "'Creative'!A12:N12" -> 12
_ROW_PATTERN = re.compile(r"!\$?[A-Z]+\$?(\d+)")


class SheetNotFoundError(Exception):
    """The sheet (tab) addressed by a range does not exist."""

    def __init__(self, sheet_range: str):
        self.sheet_range = sheet_range
        sheet = sheet_range.split("!")[0].strip("'")
        super().__init__(f'Sheet "{sheet}" not found. Please create it in Google Sheets.')


def service_account_credentials(email: str, private_key: str, scopes: list[str]) -> Credentials:
    """Build service account credentials from an email + PEM key pair."""
    info = {
        "type": "service_account",
        "client_email": email,
        "private_key": private_key,
        "token_uri": TOKEN_URI,
    }
    return Credentials.from_service_account_info(info, scopes=scopes)


def parse_row_index(updated_range: str) -> int:
    """Extract the 1-indexed row from an append's updatedRange. Returns 0 if malformed."""
    match = _ROW_PATTERN.search(updated_range or "")
    return int(match.group(1)) if match else 0


def _is_missing_sheet(error: HttpError) -> bool:
    return error.resp.status == 400 and "Unable to parse range" in str(error)


class SheetsClient:
    """Async wrapper over the blocking Sheets v4 client.

    Calls run in a worker thread, one at a time: the discovery client's
    HTTP transport is not thread-safe.
    """

    def __init__(self, credentials: Credentials, spreadsheet_id: str, service=None):
        self.spreadsheet_id = spreadsheet_id
        self._service = service or build("sheets", "v4", credentials=credentials, cache_discovery=False)
        self._api_lock = asyncio.Lock()

    async def _execute(self, sheet_range: str, make_request):
        async with self._api_lock:
            try:
                return await asyncio.to_thread(lambda: make_request().execute())
            except HttpError as e:
                if _is_missing_sheet(e):
                    raise SheetNotFoundError(sheet_range) from e
                raise

    async def get_values(self, sheet_range: str, render: str = "FORMATTED_VALUE") -> list[list]:
        """Read a range. Trailing empty rows and cells are omitted by the API."""
        response = await self._execute(
            sheet_range,
            lambda: self._service.spreadsheets().values().get(
                spreadsheetId=self.spreadsheet_id,
                range=sheet_range,
                valueRenderOption=render,
            ),
        )
        return response.get("values", [])

    async def update_values(self, sheet_range: str, values: list[list], input_option: str = "RAW") -> None:
        """Overwrite a range."""
        await self._execute(
            sheet_range,
            lambda: self._service.spreadsheets().values().update(
                spreadsheetId=self.spreadsheet_id,
                range=sheet_range,
                valueInputOption=input_option,
                body={"values": values},
            ),
        )

    async def batch_update_values(self, data: list[tuple[str, list[list]]], input_option: str = "RAW") -> None:
        """Overwrite several ranges in one request."""
        if not data:
            return
        await self._execute(
            data[0][0],
            lambda: self._service.spreadsheets().values().batchUpdate(
                spreadsheetId=self.spreadsheet_id,
                body={
                    "valueInputOption": input_option,
                    "data": [{"range": r, "values": v} for r, v in data],
                },
            ),
        )

    async def append_row(self, sheet_range: str, row: list, input_option: str = "RAW") -> str:
        """Append one row after the last row of the table. Returns the updatedRange."""
        response = await self._execute(
            sheet_range,
            lambda: self._service.spreadsheets().values().append(
                spreadsheetId=self.spreadsheet_id,
                range=sheet_range,
                valueInputOption=input_option,
                insertDataOption="INSERT_ROWS",
                body={"values": [row]},
            ),
        )
        updated_range = response.get("updates", {}).get("updatedRange", "")
        logger.debug(f"Appended to {sheet_range}: {updated_range}")
        return updated_range
