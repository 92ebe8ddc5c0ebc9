"""Column maps for spreadsheet sheets."""

from dataclasses import dataclass, field
from typing import Callable


def column_letter(position: int) -> str:
    """Convert a 1-indexed column position to its A1 letter(s).

    Example: 1 -> "A", 26 -> "Z", 27 -> "AA"
    """
    if position < 1:
        raise ValueError(f"Column position must be >= 1, got {position}")
    letters = ""
    while position:
        position, rem = divmod(position - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


@dataclass(frozen=True)
class Column:
    """A logical field bound to a 1-indexed column position."""
    field: str
    position: int
    header: str


# Builds a cell formula for a known absolute row, given the schema for lookups
RowFormula = Callable[["SheetSchema", int], str]


@dataclass
class SheetSchema:
    """Column layout of one sheet. Writers address cells by field name only."""
    resource: str                         # lock key, e.g. "creative"
    sheet: str                            # tab name in the spreadsheet
    columns: list[Column]
    id_field: str = "id"
    immutable: frozenset[str] = frozenset()          # never rewritten by updates
    row_formulas: dict[str, RowFormula] = field(default_factory=dict)  # written after append

    def __post_init__(self):
        positions = [c.position for c in self.columns]
        fields = [c.field for c in self.columns]
        if len(set(positions)) != len(positions):
            raise ValueError(f"{self.resource}: duplicate column positions")
        if len(set(fields)) != len(fields):
            raise ValueError(f"{self.resource}: duplicate field names")
        if any(p < 1 for p in positions):
            raise ValueError(f"{self.resource}: column positions are 1-indexed")
        if 1 not in positions:
            raise ValueError(f"{self.resource}: column A must be mapped")
        if self.id_field not in fields:
            raise ValueError(f"{self.resource}: id field '{self.id_field}' is not mapped")
        for name in list(self.immutable) + list(self.row_formulas):
            if name not in fields:
                raise ValueError(f"{self.resource}: unknown field '{name}'")
        self.columns = sorted(self.columns, key=lambda c: c.position)
        self._by_field = {c.field: c for c in self.columns}

    @property
    def fields(self) -> list[str]:
        return [c.field for c in self.columns]

    @property
    def sentinel(self) -> str:
        """Header label expected in the first column of row 1."""
        return self.columns[0].header

    @property
    def width(self) -> int:
        return self.columns[-1].position

    def position(self, field_name: str) -> int:
        if field_name not in self._by_field:
            raise KeyError(f"{self.resource}: unknown field '{field_name}'")
        return self._by_field[field_name].position

    def letter(self, field_name: str) -> str:
        return column_letter(self.position(field_name))

    def header_row(self) -> list[str]:
        return self.build_row({c.field: c.header for c in self.columns})

    def build_row(self, values: dict[str, str]) -> list[str]:
        """Order values by column position; unmapped gaps become empty cells."""
        row = [""] * self.width
        for name, value in values.items():
            row[self.position(name) - 1] = value
        return row

    def row_to_fields(self, cells: list) -> dict[str, str]:
        """Map a row read from the sheet (starting at column A) to field values."""
        result = {}
        for c in self.columns:
            idx = c.position - 1
            result[c.field] = str(cells[idx]) if idx < len(cells) and cells[idx] is not None else ""
        return result

    def mutable_fields(self) -> list[str]:
        return [
            name for name in self.fields
            if name != self.id_field and name not in self.immutable
        ]

    def span(self, fields: list[str]) -> tuple[int, int]:
        """Minimal (first, last) column positions covering the given fields."""
        if not fields:
            raise ValueError("span requires at least one field")
        positions = [self.position(f) for f in fields]
        return min(positions), max(positions)

    def range(self, first: int, last: int, row: int | None = None) -> str:
        """A1 range for columns first..last, on one row or the whole columns."""
        start, end = column_letter(first), column_letter(last)
        if row is None:
            return f"{quote_sheet(self.sheet)}!{start}:{end}"
        return f"{quote_sheet(self.sheet)}!{start}{row}:{end}{row}"

    def row_range(self, row: int) -> str:
        return self.range(1, self.width, row)

    def column_range(self, field_name: str) -> str:
        pos = self.position(field_name)
        return self.range(pos, pos)

    def cell(self, field_name: str, row: int) -> str:
        return f"{quote_sheet(self.sheet)}!{self.letter(field_name)}{row}"


def quote_sheet(name: str) -> str:
    """Quote a sheet name for use in an A1 range."""
    return "'" + name.replace("'", "''") + "'"


@dataclass
class SchemaRevision:
    """One revision of the spreadsheet layout. title is None when no Title sheet is kept."""
    name: str
    creative: SheetSchema
    title: SheetSchema | None = None
