import asyncio
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from creative_naming.clients.drive import DriveClient
from creative_naming.clients.sheets import SheetNotFoundError, SheetsClient


def test_append_row_returns_updated_range():
    service = MagicMock()
    service.spreadsheets().values().append().execute.return_value = {
        "updates": {"updatedRange": "'Creative'!A5:N5"}
    }
    client = SheetsClient(None, "sheet-id", service=service)

    updated = asyncio.run(client.append_row("'Creative'!A:N", ["1"], input_option="USER_ENTERED"))

    assert updated == "'Creative'!A5:N5"
    kwargs = service.spreadsheets().values().append.call_args.kwargs
    assert kwargs["valueInputOption"] == "USER_ENTERED"
    assert kwargs["insertDataOption"] == "INSERT_ROWS"
    assert kwargs["body"] == {"values": [["1"]]}


def test_get_values_defaults_to_empty():
    service = MagicMock()
    service.spreadsheets().values().get().execute.return_value = {}
    client = SheetsClient(None, "sheet-id", service=service)
    assert asyncio.run(client.get_values("'Creative'!A:A")) == []


def test_unparseable_range_means_missing_sheet():
    service = MagicMock()
    error = HttpError(
        httplib2.Response({"status": "400"}),
        b'{"error": {"code": 400, "message": "Unable to parse range: \'Title\'!A1:G1"}}',
    )
    service.spreadsheets().values().get().execute.side_effect = error
    client = SheetsClient(None, "sheet-id", service=service)

    with pytest.raises(SheetNotFoundError) as exc:
        asyncio.run(client.get_values("'Title'!A1:G1"))
    assert str(exc.value) == 'Sheet "Title" not found. Please create it in Google Sheets.'


def test_other_http_errors_propagate():
    service = MagicMock()
    service.spreadsheets().values().update().execute.side_effect = HttpError(
        httplib2.Response({"status": "403"}), b'{"error": {"code": 403, "message": "forbidden"}}'
    )
    client = SheetsClient(None, "sheet-id", service=service)
    with pytest.raises(HttpError):
        asyncio.run(client.update_values("'Creative'!A1:N1", [["V_ID"]]))


def test_drive_upload_makes_file_public():
    service = MagicMock()
    service.files().create().execute.return_value = {"id": "abc123"}
    drive = DriveClient(None, "folder-id", service=service)

    url = asyncio.run(drive.upload_preview(b"png", "image/png", "a.png"))

    assert url == "https://drive.google.com/uc?export=view&id=abc123"
    body = service.files().create.call_args.kwargs["body"]
    assert body["parents"] == ["folder-id"]
    assert body["name"].endswith("_a.png")
    permission = service.permissions().create.call_args.kwargs
    assert permission == {"fileId": "abc123", "body": {"role": "reader", "type": "anyone"}}


def test_drive_upload_without_id_fails():
    service = MagicMock()
    service.files().create().execute.return_value = {}
    drive = DriveClient(None, "folder-id", service=service)
    with pytest.raises(RuntimeError):
        asyncio.run(drive.upload_preview(b"png", "image/png", "a.png"))
