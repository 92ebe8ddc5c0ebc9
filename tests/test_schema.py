import pytest

from creative_naming.models.schema import Column, SheetSchema, column_letter, quote_sheet
from creative_naming.schemas import get_revision, list_revisions


def test_column_letters():
    assert column_letter(1) == "A"
    assert column_letter(14) == "N"
    assert column_letter(26) == "Z"
    assert column_letter(27) == "AA"
    assert column_letter(703) == "AAA"
    with pytest.raises(ValueError):
        column_letter(0)


def test_duplicate_positions_rejected():
    with pytest.raises(ValueError):
        SheetSchema("creative", "Creative", [Column("id", 1, "ID"), Column("type", 1, "type")])


def test_duplicate_fields_rejected():
    with pytest.raises(ValueError):
        SheetSchema("creative", "Creative", [Column("id", 1, "ID"), Column("id", 2, "ID2")])


def test_id_field_must_be_mapped():
    with pytest.raises(ValueError):
        SheetSchema("creative", "Creative", [Column("type", 1, "type")])


def test_build_row_fills_gaps():
    schema = SheetSchema(
        "creative", "Creative",
        [Column("id", 1, "ID"), Column("filename", 4, "filename"), Column("type", 2, "type")],
    )
    assert schema.fields == ["id", "type", "filename"]
    assert schema.build_row({"id": "3", "filename": "a.png"}) == ["3", "", "", "a.png"]
    assert schema.header_row() == ["ID", "type", "", "filename"]


def test_span_and_ranges(revision):
    creative = revision.creative
    assert creative.span(creative.mutable_fields()) == (3, 13)
    assert creative.range(3, 13, 12) == "'Creative'!C12:M12"
    assert creative.row_range(1) == "'Creative'!A1:N1"
    assert creative.column_range("id") == "'Creative'!A:A"
    assert revision.title.column_range("id") == "'Title'!B:B"
    assert revision.title.cell("composite_key", 9) == "'Title'!A9"


def test_mutable_fields_exclude_id_preview_filename(revision):
    mutable = revision.creative.mutable_fields()
    assert "id" not in mutable
    assert "preview" not in mutable
    assert "filename" not in mutable
    assert "link" in mutable


def test_row_to_fields_pads_missing_cells(revision):
    fields = revision.creative.row_to_fields(["4", "", "V_id=4;type=static;NameHypoth=x"])
    assert fields["id"] == "4"
    assert fields["style"] == ""
    assert fields["filename"] == ""


def test_quote_sheet_escapes_quotes():
    assert quote_sheet("Bob's ads") == "'Bob''s ads'"


def test_revisions_registered():
    assert set(list_revisions()) >= {"basic", "marketing", "marketing_ru"}
    with pytest.raises(ValueError):
        get_revision("nope")


def test_basic_revision_has_no_title_sheet():
    revision = get_revision("basic")
    assert revision.title is None
    assert revision.creative.sentinel == "V_ID"
    assert "preview" not in revision.creative.fields
    assert revision.creative.span(revision.creative.mutable_fields()) == (2, 8)


def test_title_formulas_reference_own_row():
    title = get_revision("marketing").title
    key = title.row_formulas["composite_key"](title, 5)
    assert key == '=B5&"_"&D5&"_"&E5&"_"&F5&"_"&G5'

    title_ru = get_revision("marketing_ru").title
    assert title_ru.row_formulas["composite_key"](title_ru, 8) == '=B8&"_"&E8&"_"&F8&"_"&G8&"_"&H8'
    assert title_ru.row_formulas["ru"](title_ru, 8) == '=GOOGLETRANSLATE(D8,"en","ru")'
