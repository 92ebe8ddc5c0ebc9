"""API clients for external services."""

from .drive import DriveClient
from .sheets import SheetNotFoundError, SheetsClient, parse_row_index, service_account_credentials
from .vision import ClassificationError, VisionClient

__all__ = [
    "ClassificationError",
    "DriveClient",
    "SheetNotFoundError",
    "SheetsClient",
    "VisionClient",
    "parse_row_index",
    "service_account_credentials",
]
