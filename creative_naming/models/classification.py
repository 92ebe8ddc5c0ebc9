"""Classification result for one creative."""

from dataclasses import asdict, dataclass


@dataclass
class Classification:
    """Visual and marketing attributes of a creative, each from its closed value set."""
    type: str
    hypothesis_name: str
    ai_flag: str
    style: str
    main_tone: str
    main_object: str
    # Marketing fields (absent from the "basic" sheet layout)
    header_text: str = "none"
    uvp: str = "other"
    product: str = "other"
    offer: str = "other"

    def to_fields(self) -> dict[str, str]:
        """Values keyed by logical sheet field name."""
        return asdict(self)


VIDEO_DEFAULT = Classification(
    type="video",
    hypothesis_name="video content",
    ai_flag="not AI",
    style="Real",
    main_tone="neutral",
    main_object="other",
)


def fallback_classification(mime_type: str = "") -> Classification:
    """Defaults used when the model call fails or its output can't be parsed."""
    return Classification(
        type="video" if mime_type.startswith("video/") else "static",
        hypothesis_name="unknown",
        ai_flag="not AI",
        style="Other",
        main_tone="neutral",
        main_object="other",
    )
