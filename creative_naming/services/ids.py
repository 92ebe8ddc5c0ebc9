"""Sequential ID allocation and header provisioning for a sheet."""

import logging

from ..clients.sheets import SheetsClient
from ..models.schema import SheetSchema

logger = logging.getLogger(__name__)


def _cell_id(cell) -> int | None:
    """Integer value of an ID cell. Unformatted reads return numbers as int or float."""
    if isinstance(cell, bool):
        return None
    if isinstance(cell, float):
        return int(cell) if cell.is_integer() else None
    if isinstance(cell, int):
        return cell
    try:
        return int(str(cell).strip())
    except ValueError:
        return None


def last_numeric_id(column: list[list]) -> int:
    """Scan an ID column from the bottom up, skipping the header row.

    Returns the first cell that parses as a positive integer, or 0 if none.
    This is the last numeric ID in sheet order, not the column maximum.
    """
    for i in range(len(column) - 1, 0, -1):
        cells = column[i]
        if not cells:
            continue
        value = _cell_id(cells[0])
        if value is not None and value > 0:
            return value
    return 0


class IdAllocator:
    """Next-ID computation for a sheet. Callers must hold the sheet's lock
    across next_id() and the append that uses the ID."""

    def __init__(self, sheets: SheetsClient):
        self.sheets = sheets

    async def ensure_header(self, schema: SheetSchema) -> bool:
        """Write the canonical header row unless row 1 already starts with the sentinel.

        Returns True if the header was written. Raises SheetNotFoundError
        if the sheet does not exist.
        """
        header_range = schema.row_range(1)
        rows = await self.sheets.get_values(header_range)
        first_row = rows[0] if rows else []

        if first_row and str(first_row[0]) == schema.sentinel:
            return False

        logger.info(f"Setting {schema.sheet} header row")
        await self.sheets.update_values(header_range, [schema.header_row()], input_option="RAW")
        return True

    async def next_id(self, schema: SheetSchema) -> int:
        """Return last ID + 1 (1 for an empty sheet)."""
        await self.ensure_header(schema)
        # Numeric cells come back as int or float whatever their number format
        column = await self.sheets.get_values(
            schema.column_range(schema.id_field), render="UNFORMATTED_VALUE"
        )
        return last_numeric_id(column) + 1
