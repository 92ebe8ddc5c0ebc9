"""Row writers and updater for the Creative and Title sheets."""

import logging

from ..clients.sheets import SheetsClient, parse_row_index
from ..models import Classification, CreativeRecord, TitleRecord, build_link_tag
from ..models.schema import SheetSchema
from .ids import IdAllocator
from .locks import LockRegistry

logger = logging.getLogger(__name__)


def image_formula(url: str) -> str:
    """Sheets formula that renders the image at url inside the cell."""
    return '=IMAGE("{}")'.format(url.replace('"', '""'))


class CreativeWriter:
    """Append classified creatives to the Creative sheet with sequential IDs."""

    def __init__(
        self,
        sheets: SheetsClient,
        locks: LockRegistry,
        schema: SheetSchema,
        allocator: IdAllocator | None = None,
    ):
        self.sheets = sheets
        self.locks = locks
        self.schema = schema
        self.allocator = allocator or IdAllocator(sheets)

    def _build_values(self, creative_id: int, classification: Classification, filename: str, preview_url: str) -> dict[str, str]:
        fields = set(self.schema.fields)
        values = {k: v for k, v in classification.to_fields().items() if k in fields}
        values[self.schema.id_field] = str(creative_id)
        values["filename"] = filename
        if "link" in fields:
            values["link"] = build_link_tag(creative_id, classification.type, classification.hypothesis_name)
        if "preview" in fields:
            values["preview"] = image_formula(preview_url) if preview_url else ""
        return values

    async def add_creative(
        self,
        classification: Classification,
        filename: str,
        preview_url: str = "",
    ) -> CreativeRecord:
        """
        Allocate the next ID and append one row, atomically per sheet.

        Args:
            classification: Field values for the row.
            filename: Original upload filename.
            preview_url: Public image URL; an =IMAGE() cell is written only if set.

        Returns:
            The written record. row_index is 0 if the append response was malformed.
        """
        async with self.locks.hold(self.schema.resource):
            creative_id = await self.allocator.next_id(self.schema)
            values = self._build_values(creative_id, classification, filename, preview_url)
            row = self.schema.build_row(values)

            # USER_ENTERED so the =IMAGE() formula is evaluated
            updated_range = await self.sheets.append_row(
                self.schema.range(1, self.schema.width), row, input_option="USER_ENTERED"
            )
            row_index = parse_row_index(updated_range)

        if row_index == 0:
            logger.warning(f"Could not parse row from append range {updated_range!r} (creative {creative_id})")
        logger.info(f"Creative {creative_id} written to row {row_index} ({filename})")

        return CreativeRecord(
            id=creative_id,
            row_index=row_index,
            filename=filename,
            classification=classification,
            preview_url=preview_url,
        )


class TitleWriter:
    """Append marketing copy rows to the Title sheet with their own sequential IDs."""

    def __init__(
        self,
        sheets: SheetsClient,
        locks: LockRegistry,
        schema: SheetSchema,
        allocator: IdAllocator | None = None,
    ):
        self.sheets = sheets
        self.locks = locks
        self.schema = schema
        self.allocator = allocator or IdAllocator(sheets)

    async def add_title(self, classification: Classification) -> TitleRecord:
        """Append a Title row, then fill its self-referencing formula cells.

        Formula cells reference the row's own absolute row number, which is
        only known once the append has landed.
        """
        async with self.locks.hold(self.schema.resource):
            title_id = await self.allocator.next_id(self.schema)

            values = {
                self.schema.id_field: str(title_id),
                "header_text": classification.header_text,
                "uvp": classification.uvp,
                "product": classification.product,
                "offer": classification.offer,
            }
            if "eng" in self.schema.fields:
                values["eng"] = classification.header_text
            row = self.schema.build_row(values)

            updated_range = await self.sheets.append_row(
                self.schema.range(1, self.schema.width), row, input_option="RAW"
            )
            row_index = parse_row_index(updated_range)

            if row_index > 0 and self.schema.row_formulas:
                data = [
                    (self.schema.cell(name, row_index), [[formula(self.schema, row_index)]])
                    for name, formula in self.schema.row_formulas.items()
                ]
                await self.sheets.batch_update_values(data, input_option="USER_ENTERED")
            elif row_index == 0:
                logger.warning(f"Title {title_id}: unknown row, formula cells left blank ({updated_range!r})")

        logger.info(f"Title {title_id} written to row {row_index}")
        return TitleRecord(
            id=title_id,
            row_index=row_index,
            header_text=classification.header_text,
            uvp=classification.uvp,
            product=classification.product,
            offer=classification.offer,
        )


class CreativeUpdater:
    """Partial updates of an existing Creative row."""

    def __init__(self, sheets: SheetsClient, schema: SheetSchema):
        self.sheets = sheets
        self.schema = schema

    def editable_fields(self) -> list[str]:
        """Fields a caller may patch (derived link excluded)."""
        return [f for f in self.schema.mutable_fields() if f != "link"]

    async def update_creative(self, row_index: int, creative_id: int, fields: dict[str, str]) -> None:
        """
        Merge fields into the row and rewrite the mutable column span.

        Every column in the span that is not patched keeps its current
        content; the link tag is rebuilt from the merged type and hypothesis.

        Args:
            row_index: 1-indexed row captured at creation.
            creative_id: The row's creative ID (used in the link tag).
            fields: Logical field name -> new value.
        """
        if row_index < 2:
            raise ValueError(f"Invalid row index {row_index}: row 1 is the header")
        unknown = set(fields) - set(self.editable_fields())
        if unknown:
            raise ValueError(f"Fields not editable: {', '.join(sorted(unknown))}")

        schema = self.schema
        # FORMULA render returns cell text as entered, not as displayed
        rows = await self.sheets.get_values(schema.row_range(row_index), render="FORMULA")
        cells = [("" if c is None else c) for c in (rows[0] if rows else [])]
        cells = (cells + [""] * schema.width)[:schema.width]

        current = schema.row_to_fields(cells)
        if current.get(schema.id_field) != str(creative_id):
            logger.warning(
                f"Row {row_index} holds ID {current[schema.id_field] or '(empty)'}, expected {creative_id}"
            )

        merged = {**current, **{k: v for k, v in fields.items() if v is not None}}
        if "link" in schema.fields:
            merged["link"] = build_link_tag(creative_id, merged.get("type", ""), merged.get("hypothesis_name", ""))

        for name in schema.mutable_fields():
            cells[schema.position(name) - 1] = merged[name]

        first, last = schema.span(schema.mutable_fields())
        await self.sheets.update_values(
            schema.range(first, last, row_index),
            [cells[first - 1:last]],
            input_option="RAW",
        )
        logger.info(f"Creative {creative_id} updated at row {row_index}: {sorted(fields)}")
