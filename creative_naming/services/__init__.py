"""Business logic services."""

from .classifier import ClassificationService
from .ids import IdAllocator
from .locks import LockRegistry, RowLock
from .rows import CreativeUpdater, CreativeWriter, TitleWriter
from .upload import UploadService, UploadValidationError

__all__ = [
    "ClassificationService",
    "CreativeUpdater",
    "CreativeWriter",
    "IdAllocator",
    "LockRegistry",
    "RowLock",
    "TitleWriter",
    "UploadService",
    "UploadValidationError",
]
