"""Closed value sets for classification fields and the rules that map noisy model output onto them."""

from dataclasses import dataclass

# Options for fields (used for chips UI and AI suggestions)
OPTIONS: dict[str, list[str]] = {
    "type": ["static", "video"],
    "aiFlag": ["made AI", "not AI"],
    "style": ["Real", "3D", "Illustration", "Minecraft style", "Pixar style", "Cartoon", "Other"],
    "mainTone": ["bright", "light", "dark", "soft", "neutral"],
    "mainObject": ["city", "boy", "girl", "boy_girl", "statue", "building", "object", "people", "offline", "none", "other"],
    "uvp": ["прямая продажа", "через боль", "через выгоду", "FOMO", "социальное доказательство", "other"],
    "product": ["курс математики", "курс программирования", "курс английского", "подписка", "other"],
    "offer": ["бесплатный урок", "мастер-класс", "вебинар", "бесплатный курс", "скидка", "пробный период", "other"],
}


@dataclass(frozen=True)
class Candidate:
    """A valid value and the keywords that must all appear in the raw text to select it."""
    value: str
    keywords: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        keywords = self.keywords or (self.value.lower(),)
        return all(k in text for k in keywords)


@dataclass(frozen=True)
class FieldRule:
    """Ordered candidates for one field. First match wins, otherwise default."""
    candidates: tuple[Candidate, ...]
    default: str
    exact: bool = False               # compare whole value instead of substring
    underscore_spaces: bool = False   # "boy girl" -> "boy_girl" before matching

    def apply(self, raw) -> str:
        text = str(raw or "").strip().lower()
        if self.underscore_spaces:
            text = "_".join(text.split())
        for candidate in self.candidates:
            if self.exact:
                if text == candidate.value.lower():
                    return candidate.value
            elif candidate.matches(text):
                return candidate.value
        return self.default


def _plain(values: list[str]) -> tuple[Candidate, ...]:
    return tuple(Candidate(v) for v in values)


# Keys are the snake_case names the vision model returns
NORMALIZATION_RULES: dict[str, FieldRule] = {
    "type": FieldRule(_plain(["video"]), default="static", exact=True),
    "made_ai": FieldRule((Candidate("made AI", ("made", "ai")),), default="not AI"),
    "style": FieldRule(_plain(OPTIONS["style"]), default="Other"),
    "main_ton": FieldRule(_plain(OPTIONS["mainTone"]), default="neutral"),
    "main_object": FieldRule(
        # boy_girl must be tried before its substrings
        _plain(["city", "boy_girl", "boy", "girl", "statue", "building", "object",
                "people", "offline", "none", "other"]),
        default="other",
        underscore_spaces=True,
    ),
    "uvp": FieldRule(_plain(OPTIONS["uvp"]), default="other"),
    "product": FieldRule(_plain(OPTIONS["product"]), default="other"),
    "offer": FieldRule(_plain(OPTIONS["offer"]), default="other"),
}
