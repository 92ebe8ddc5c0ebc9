"""First sheet layout: classification only, no preview, no Title sheet."""

from ..models.schema import Column, SchemaRevision, SheetSchema
from . import register


@register("basic")
def build(creative_sheet: str, title_sheet: str) -> SchemaRevision:
    # A: V_ID | B: link | C: type | D: name_of_hypothesis | E: made_ai
    # F: style | G: main_ton | H: main_object | I: filename
    creative = SheetSchema(
        resource="creative",
        sheet=creative_sheet,
        columns=[
            Column("id", 1, "V_ID"),
            Column("link", 2, "link"),
            Column("type", 3, "type"),
            Column("hypothesis_name", 4, "name_of_hypothesis"),
            Column("ai_flag", 5, "made_ai"),
            Column("style", 6, "style"),
            Column("main_tone", 7, "main_ton"),
            Column("main_object", 8, "main_object"),
            Column("filename", 9, "filename"),
        ],
        immutable=frozenset({"filename"}),
    )
    return SchemaRevision(name="basic", creative=creative)
