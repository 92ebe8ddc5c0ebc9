import asyncio
import logging

import pytest

from creative_naming.services.rows import CreativeUpdater

from fakes import CREATIVE_HEADER, FakeSheetsClient

ROW = [
    "5",
    '=IMAGE("https://drive.example/a.png")',
    "V_id=5;type=static;NameHypoth=city",
    "static",
    "city",
    "not AI",
    "Real",
    "bright",
    "city",
    "Learn maths",
    "FOMO",
    "курс математики",
    "скидка",
    "a.png",
]


@pytest.fixture
def filled(revision):
    sheets = FakeSheetsClient({"Creative": [CREATIVE_HEADER, ["1"], ["2"], ["3"], ["4"], list(ROW)]})
    return sheets, CreativeUpdater(sheets, revision.creative)


def test_patch_keeps_other_fields(filled):
    sheets, updater = filled
    asyncio.run(updater.update_creative(6, 5, {"main_tone": "dark"}))

    row = sheets.grids["Creative"][5]
    assert row[7] == "dark"
    assert row[6] == "Real"
    assert row[2] == "V_id=5;type=static;NameHypoth=city"
    assert row == ROW[:7] + ["dark"] + ROW[8:]


def test_only_mutable_span_is_written(filled):
    sheets, updater = filled
    asyncio.run(updater.update_creative(6, 5, {"offer": "вебинар"}))

    assert sheets.writes() == [("update", "'Creative'!C6:M6")]
    row = sheets.grids["Creative"][5]
    assert row[0] == "5"
    assert row[1] == ROW[1]
    assert row[13] == "a.png"
    assert row[12] == "вебинар"


def test_link_rebuilt_from_type_and_hypothesis(filled):
    sheets, updater = filled
    asyncio.run(updater.update_creative(6, 5, {"type": "video", "hypothesis_name": "room"}))

    row = sheets.grids["Creative"][5]
    assert row[2] == "V_id=5;type=video;NameHypoth=room"
    assert row[3] == "video"
    assert row[4] == "room"


def test_link_uses_caller_id(filled):
    sheets, updater = filled
    asyncio.run(updater.update_creative(6, 9, {}))
    assert sheets.cell("Creative", 6, 3) == "V_id=9;type=static;NameHypoth=city"


def test_unknown_field_rejected(filled):
    sheets, updater = filled
    with pytest.raises(ValueError):
        asyncio.run(updater.update_creative(6, 5, {"filename": "b.png"}))
    with pytest.raises(ValueError):
        asyncio.run(updater.update_creative(6, 5, {"link": "V_id=1"}))
    assert sheets.writes() == []


def test_header_row_rejected(filled):
    sheets, updater = filled
    for row_index in (0, 1):
        with pytest.raises(ValueError):
            asyncio.run(updater.update_creative(row_index, 5, {"style": "3D"}))
    assert sheets.calls == []


def test_short_row_is_padded(revision):
    sheets = FakeSheetsClient({"Creative": [CREATIVE_HEADER, ["1", "", "V_id=1;type=static;NameHypoth=x", "static", "x"]]})
    updater = CreativeUpdater(sheets, revision.creative)

    asyncio.run(updater.update_creative(2, 1, {"style": "Cartoon"}))

    row = sheets.grids["Creative"][1]
    assert row[6] == "Cartoon"
    assert row[5] == ""
    assert row[2] == "V_id=1;type=static;NameHypoth=x"


def test_editable_fields(revision):
    editable = CreativeUpdater(FakeSheetsClient(), revision.creative).editable_fields()
    assert editable == [
        "type", "hypothesis_name", "ai_flag", "style", "main_tone", "main_object",
        "header_text", "uvp", "product", "offer",
    ]


def test_span_written_raw(filled):
    sheets, updater = filled
    asyncio.run(updater.update_creative(6, 5, {"header_text": "+50% скидка"}))

    assert sheets.options[-1] == ("update", "'Creative'!C6:M6", "RAW")
    assert sheets.cell("Creative", 6, 10) == "+50% скидка"


def test_empty_id_cell_is_logged(revision, caplog):
    sheets = FakeSheetsClient({"Creative": [CREATIVE_HEADER, ["1"]]})
    updater = CreativeUpdater(sheets, revision.creative)

    with caplog.at_level(logging.WARNING, logger="creative_naming.services.rows"):
        asyncio.run(updater.update_creative(7, 4, {"style": "3D"}))

    assert "Row 7 holds ID (empty), expected 4" in caplog.text


def test_matching_id_is_not_logged(filled, caplog):
    sheets, updater = filled
    with caplog.at_level(logging.WARNING, logger="creative_naming.services.rows"):
        asyncio.run(updater.update_creative(6, 5, {"style": "3D"}))
    assert "holds ID" not in caplog.text
