import asyncio

import pytest

from creative_naming.clients.sheets import SheetNotFoundError, parse_row_index
from creative_naming.services.ids import IdAllocator, last_numeric_id

from fakes import CREATIVE_HEADER, FakeSheetsClient


def test_last_numeric_id_scans_backward():
    column = [["V_ID"], ["1"], ["2"], [], ["bad"], ["4"]]
    assert last_numeric_id(column) == 4


def test_last_numeric_id_is_not_the_maximum():
    assert last_numeric_id([["V_ID"], ["9"], ["3"], ["x"]]) == 3


def test_last_numeric_id_skips_header_and_non_positive():
    assert last_numeric_id([["42"]]) == 0
    assert last_numeric_id([["V_ID"], ["0"], ["-3"]]) == 0
    assert last_numeric_id([]) == 0


def _creative_sheet(ids):
    return [CREATIVE_HEADER] + [[v] for v in ids]


def test_next_id_after_mixed_column(revision):
    sheets = FakeSheetsClient({"Creative": _creative_sheet(["1", "2", "", "bad", "4"])})
    assert asyncio.run(IdAllocator(sheets).next_id(revision.creative)) == 5


def test_next_id_on_empty_sheet_writes_header(revision):
    sheets = FakeSheetsClient({"Creative": []})
    assert asyncio.run(IdAllocator(sheets).next_id(revision.creative)) == 1
    assert sheets.grids["Creative"][0] == CREATIVE_HEADER


def test_next_id_header_only(revision):
    sheets = FakeSheetsClient({"Creative": [CREATIVE_HEADER]})
    assert asyncio.run(IdAllocator(sheets).next_id(revision.creative)) == 1


def test_ensure_header_is_idempotent(revision):
    sheets = FakeSheetsClient({"Creative": []})
    allocator = IdAllocator(sheets)

    assert asyncio.run(allocator.ensure_header(revision.creative)) is True
    writes = len(sheets.writes())
    assert asyncio.run(allocator.ensure_header(revision.creative)) is False
    assert len(sheets.writes()) == writes


def test_ensure_header_overwrites_foreign_first_row(revision):
    sheets = FakeSheetsClient({"Creative": [["something else"], ["1"]]})
    assert asyncio.run(IdAllocator(sheets).ensure_header(revision.creative)) is True
    assert sheets.grids["Creative"][0] == CREATIVE_HEADER
    assert sheets.grids["Creative"][1] == ["1"]


def test_missing_sheet_raises(revision):
    sheets = FakeSheetsClient({"Creative": []})
    with pytest.raises(SheetNotFoundError) as exc:
        asyncio.run(IdAllocator(sheets).next_id(revision.title))
    assert "Title" in str(exc.value)


def test_parse_row_index():
    assert parse_row_index("Creative!A12:N12") == 12
    assert parse_row_index("'My sheet'!A7:G7") == 7
    assert parse_row_index("Title!$A$3:$G$3") == 3
    assert parse_row_index("") == 0
    assert parse_row_index("garbage") == 0


def test_last_numeric_id_accepts_unformatted_numbers():
    assert last_numeric_id([["V_ID"], [1023], [1024.0]]) == 1024
    assert last_numeric_id([["V_ID"], [6], [7.5]]) == 6
    assert last_numeric_id([["V_ID"], [3], [True]]) == 3


def test_next_id_reads_id_column_unformatted(revision):
    sheets = FakeSheetsClient({"Creative": [CREATIVE_HEADER, [1023], [1024.0]]})

    assert asyncio.run(IdAllocator(sheets).next_id(revision.creative)) == 1025
    assert ("get", "'Creative'!A:A", "UNFORMATTED_VALUE") in sheets.options
