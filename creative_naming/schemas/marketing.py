"""Sheet layouts with marketing fields and a Title sheet."""

from ..models.schema import Column, SchemaRevision, SheetSchema
from . import register


def composite_key_formula(schema: SheetSchema, row: int) -> str:
    """ID_Header_UVP_Product_Offer, joined by the sheet itself."""
    parts = ["id", "header_text", "uvp", "product", "offer"]
    return "=" + '&"_"&'.join(f"{schema.letter(p)}{row}" for p in parts)


def translate_formula(schema: SheetSchema, row: int) -> str:
    return f'=GOOGLETRANSLATE({schema.letter("eng")}{row},"en","ru")'


def creative_schema(sheet: str) -> SheetSchema:
    # A: V_ID | B: preview | C: link | D: type | E: name_of_hypothesis | F: made_ai
    # G: style | H: main_ton | I: main_object | J: header_text | K: uvp | L: product | M: offer | N: filename
    return SheetSchema(
        resource="creative",
        sheet=sheet,
        columns=[
            Column("id", 1, "V_ID"),
            Column("preview", 2, "preview"),
            Column("link", 3, "link"),
            Column("type", 4, "type"),
            Column("hypothesis_name", 5, "name_of_hypothesis"),
            Column("ai_flag", 6, "made_ai"),
            Column("style", 7, "style"),
            Column("main_tone", 8, "main_ton"),
            Column("main_object", 9, "main_object"),
            Column("header_text", 10, "header_text"),
            Column("uvp", 11, "uvp"),
            Column("product", 12, "product"),
            Column("offer", 13, "offer"),
            Column("filename", 14, "filename"),
        ],
        immutable=frozenset({"preview", "filename"}),
    )


@register("marketing")
def build(creative_sheet: str, title_sheet: str) -> SchemaRevision:
    # A: Text_id (formula) | B: ID | C: Eng | D: Header_text | E: UVP | F: Product | G: Offer
    title = SheetSchema(
        resource="title",
        sheet=title_sheet,
        columns=[
            Column("composite_key", 1, "Text_id"),
            Column("id", 2, "ID"),
            Column("eng", 3, "Eng"),
            Column("header_text", 4, "Header_text"),
            Column("uvp", 5, "UVP"),
            Column("product", 6, "Product"),
            Column("offer", 7, "Offer"),
        ],
        row_formulas={"composite_key": composite_key_formula},
    )
    return SchemaRevision(name="marketing", creative=creative_schema(creative_sheet), title=title)


@register("marketing_ru")
def build_with_translation(creative_sheet: str, title_sheet: str) -> SchemaRevision:
    # A: Text_id (formula) | B: ID | C: RU (translate formula) | D: Eng
    # E: Header_text | F: UVP | G: Product | H: Offer
    title = SheetSchema(
        resource="title",
        sheet=title_sheet,
        columns=[
            Column("composite_key", 1, "Text_id"),
            Column("id", 2, "ID"),
            Column("ru", 3, "RU"),
            Column("eng", 4, "Eng"),
            Column("header_text", 5, "Header_text"),
            Column("uvp", 6, "UVP"),
            Column("product", 7, "Product"),
            Column("offer", 8, "Offer"),
        ],
        row_formulas={
            "composite_key": composite_key_formula,
            "ru": translate_formula,
        },
    )
    return SchemaRevision(name="marketing_ru", creative=creative_schema(creative_sheet), title=title)
