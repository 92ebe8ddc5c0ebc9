"""Data models."""

from .classification import Classification, VIDEO_DEFAULT, fallback_classification
from .creative import CreativeRecord, TitleRecord, build_link_tag
from .schema import Column, SheetSchema, column_letter
from .upload import BatchResult, FileResult, UploadFile

__all__ = [
    "BatchResult",
    "Classification",
    "Column",
    "CreativeRecord",
    "FileResult",
    "SheetSchema",
    "TitleRecord",
    "UploadFile",
    "VIDEO_DEFAULT",
    "build_link_tag",
    "column_letter",
    "fallback_classification",
]
