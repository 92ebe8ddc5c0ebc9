"""Upload batch service - classify each file and write it to the sheets."""

import logging

from ..clients.drive import DriveClient
from ..models import BatchResult, FileResult, UploadFile, fallback_classification
from .classifier import ClassificationService
from .rows import CreativeWriter, TitleWriter

logger = logging.getLogger(__name__)


class UploadValidationError(Exception):
    """The batch violates file count or size limits (client error)."""
    pass


def validate_batch(files: list[UploadFile], max_files: int, max_file_size: int) -> None:
    """Reject the whole batch before any external call."""
    if not files:
        raise UploadValidationError("No files provided")
    if len(files) > max_files:
        raise UploadValidationError(f"Maximum {max_files} files allowed")
    limit_mb = max_file_size // (1024 * 1024)
    for f in files:
        if f.size > max_file_size:
            raise UploadValidationError(f"File {f.name} is too large (max {limit_mb}MB)")


class UploadService:
    """Process an upload batch file by file, in input order."""

    def __init__(
        self,
        classifier: ClassificationService,
        creative_writer: CreativeWriter,
        title_writer: TitleWriter | None = None,
        drive: DriveClient | None = None,
        max_files: int = 20,
        max_file_size: int = 10 * 1024 * 1024,
    ):
        self.classifier = classifier
        self.creative_writer = creative_writer
        self.title_writer = title_writer
        self.drive = drive
        self.max_files = max_files
        self.max_file_size = max_file_size

    async def process(self, files: list[UploadFile]) -> BatchResult:
        """
        Classify and record every file.

        Files are handled one at a time so IDs follow input order. A failed
        file is reported as a warning; the batch fails only if every file
        failed. Raises UploadValidationError before doing any work if the
        batch is out of bounds.
        """
        validate_batch(files, self.max_files, self.max_file_size)

        batch = BatchResult()
        errors = []

        for file in files:
            try:
                batch.results.append(await self._process_file(file, batch.warnings))
            except Exception as e:
                logger.error(f"Error processing file {file.name}: {e}")
                errors.append(f"{file.name}: {e}")

        if not batch.results:
            batch.error = "; ".join(errors) if errors else "Failed to process any files"
            batch.warnings = []
            return batch

        batch.warnings = errors + batch.warnings
        return batch

    async def _process_file(self, file: UploadFile, warnings: list[str]) -> FileResult:
        try:
            classification = await self.classifier.classify(file)
        except Exception as e:
            logger.warning(f"AI analysis error for {file.name}, using defaults: {e}")
            classification = fallback_classification(file.mime_type)

        preview_url = ""
        if self.drive:
            try:
                preview_url = await self.drive.upload_preview(file.data, file.mime_type, file.name)
            except Exception as e:
                logger.warning(f"Drive upload failed for {file.name}, continuing without preview: {e}")

        creative = await self.creative_writer.add_creative(classification, file.name, preview_url)
        result = FileResult(name=file.name, creative=creative)

        if self.title_writer:
            try:
                title = await self.title_writer.add_title(classification)
                result.title_id = title.id
            except Exception as e:
                logger.warning(f"Title row failed for {file.name}: {e}")
                warnings.append(f"{file.name}: title not created: {e}")

        return result
