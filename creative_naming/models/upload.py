"""Upload batch models."""

from dataclasses import dataclass, field

from .creative import CreativeRecord


@dataclass
class UploadFile:
    """A single uploaded creative file."""
    name: str
    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_video(self) -> bool:
        return self.mime_type.startswith("video/")


@dataclass
class FileResult:
    """Outcome for one successfully written file."""
    name: str
    creative: CreativeRecord
    title_id: int | None = None


@dataclass
class BatchResult:
    """Outcome of an upload batch: ok if at least one file was written."""
    results: list[FileResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
