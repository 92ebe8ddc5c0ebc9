"""Creative and Title sheet records."""

from dataclasses import dataclass

from .classification import Classification


def build_link_tag(creative_id: int, creative_type: str, hypothesis_name: str) -> str:
    """Link string format: V_id=<id>;type=<type>;NameHypoth=<hyp>"""
    return f"V_id={creative_id};type={creative_type};NameHypoth={hypothesis_name}"


@dataclass
class CreativeRecord:
    """A row in the Creative sheet. row_index 0 means the position is unknown."""
    id: int
    row_index: int
    filename: str
    classification: Classification
    preview_url: str = ""

    @property
    def link_tag(self) -> str:
        return build_link_tag(self.id, self.classification.type, self.classification.hypothesis_name)


@dataclass
class TitleRecord:
    """A row in the Title sheet, copied from a creative's marketing fields."""
    id: int
    row_index: int
    header_text: str
    uvp: str
    product: str
    offer: str
