"""Google Drive client for hosting creative previews."""

import asyncio
import time
from io import BytesIO

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build
from googleapiclient.http import MediaIoBaseUpload

DRIVE_SCOPES = [
    "https://www.googleapis.com/auth/drive.file",
    "https://www.googleapis.com/auth/drive",
]


def direct_view_url(file_id: str) -> str:
    """URL that works inside a Sheets =IMAGE() formula."""
    return f"https://drive.google.com/uc?export=view&id={file_id}"


class DriveClient:
    """Upload files into one Drive folder and make them publicly viewable."""

    def __init__(self, credentials: Credentials, folder_id: str, service=None):
        self.folder_id = folder_id
        self._service = service or build("drive", "v3", credentials=credentials, cache_discovery=False)

    def _upload(self, data: bytes, mime_type: str, filename: str) -> str:
        unique_name = f"{int(time.time() * 1000)}_{filename}"
        media = MediaIoBaseUpload(BytesIO(data), mimetype=mime_type, resumable=False)
        created = self._service.files().create(
            body={"name": unique_name, "parents": [self.folder_id]},
            media_body=media,
            fields="id, webViewLink, thumbnailLink",
        ).execute()

        file_id = created.get("id")
        if not file_id:
            raise RuntimeError("Drive upload failed: no file ID returned")

        self._service.permissions().create(
            fileId=file_id,
            body={"role": "reader", "type": "anyone"},
        ).execute()
        return file_id

    async def upload_preview(self, data: bytes, mime_type: str, filename: str) -> str:
        """
        Upload a file and return a publicly dereferenceable image URL.

        Args:
            data: File bytes
            mime_type: MIME type of the file
            filename: Original filename (prefixed with a timestamp in Drive)

        Returns:
            Direct view URL for the uploaded file
        """
        file_id = await asyncio.to_thread(self._upload, data, mime_type, filename)
        return direct_view_url(file_id)
