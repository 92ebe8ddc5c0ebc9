"""Service wiring from configuration."""

from . import config
from .clients import DriveClient, SheetsClient, VisionClient, service_account_credentials
from .clients.drive import DRIVE_SCOPES
from .clients.sheets import SHEETS_SCOPES
from .models.schema import SchemaRevision
from .schemas import get_revision
from .services import (
    ClassificationService,
    CreativeUpdater,
    CreativeWriter,
    LockRegistry,
    TitleWriter,
    UploadService,
)

# Process-wide: one lock per sheet, shared by every request this process serves
LOCKS = LockRegistry()


def load_revision() -> SchemaRevision:
    return get_revision(config.SCHEMA_REVISION, config.CREATIVE_SHEET_NAME, config.TITLE_SHEET_NAME)


def build_sheets_client() -> SheetsClient:
    credentials = service_account_credentials(
        config.GOOGLE_SERVICE_ACCOUNT_EMAIL, config.GOOGLE_PRIVATE_KEY, SHEETS_SCOPES
    )
    return SheetsClient(credentials, config.GOOGLE_SPREADSHEET_ID)


def build_upload_service() -> UploadService:
    """Wire clients and writers for one upload request."""
    revision = load_revision()
    sheets = build_sheets_client()

    vision = VisionClient(
        api_key=config.OPENROUTER_API_KEY,
        model=config.OPENROUTER_MODEL,
        base_url=config.OPENROUTER_BASE_URL,
        timeout=config.VISION_TIMEOUT_S,
    )

    drive = None
    if config.GOOGLE_DRIVE_FOLDER_ID:
        drive_credentials = service_account_credentials(
            config.GOOGLE_SERVICE_ACCOUNT_EMAIL, config.GOOGLE_PRIVATE_KEY, DRIVE_SCOPES
        )
        drive = DriveClient(drive_credentials, config.GOOGLE_DRIVE_FOLDER_ID)

    title_writer = None
    if revision.title is not None:
        title_writer = TitleWriter(sheets, LOCKS, revision.title)

    return UploadService(
        classifier=ClassificationService(vision),
        creative_writer=CreativeWriter(sheets, LOCKS, revision.creative),
        title_writer=title_writer,
        drive=drive,
        max_files=config.MAX_FILES,
        max_file_size=config.MAX_FILE_SIZE,
    )


def build_updater() -> CreativeUpdater:
    return CreativeUpdater(build_sheets_client(), load_revision().creative)
