"""Creative classification service - vision model call plus normalization."""

import asyncio
import base64
import json
import logging
import re
from dataclasses import replace
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from ..clients.vision import VisionClient
from ..models import Classification, UploadFile, VIDEO_DEFAULT, fallback_classification
from ..models.options import NORMALIZATION_RULES

logger = logging.getLogger(__name__)

# Vision endpoints reject large images; shrink anything bigger before encoding
MAX_IMAGE_BYTES = 3_750_000
MAX_IMAGE_SIDE = 2048

SYSTEM_PROMPT = """You help a User Acquisition manager fill in a creative naming table.

Describe the VISUAL CONCEPT of the ad creative and extract its marketing information.

Rules:
- Describe only what is visually depicted, not what it "communicates"
- Copy the main headline (header_text) exactly as written, in its original language
- Infer uvp, product and offer from visible text and imagery
- Prefer short, reusable category labels; avoid synonyms
- If uncertain, choose the simplest closest category

Return JSON ONLY with exactly these fields:

type - "static" or "video" (an animated GIF counts as video)
name_of_hypothesis - short visual concept label, e.g. city, paper, statue, banner, boy_girl, kids, offline, room, mountain, object, beforeafter
made_ai - "made AI" or "not AI" (if uncertain, "not AI")
style - Real / 3D / Illustration / Minecraft style / Pixar style / Cartoon / Other
main_ton - bright / light / dark / soft / neutral (overall visual tone, not emotion)
main_object - city / boy / girl / boy_girl / statue / building / object / people / offline / none / other (text and UI elements are not objects)
header_text - the main headline visible on the creative, or "none"
uvp - "прямая продажа" / "через боль" / "через выгоду" / "FOMO" / "социальное доказательство" / "other"
product - "курс математики" / "курс программирования" / "курс английского" / "подписка" / "other"
offer - "бесплатный урок" / "мастер-класс" / "вебинар" / "бесплатный курс" / "скидка" / "пробный период" / "other"
"""

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def normalize_classification(raw: dict) -> Classification:
    """Map raw model output onto the closed value sets (first match wins)."""
    rules = NORMALIZATION_RULES
    return Classification(
        type=rules["type"].apply(raw.get("type")),
        hypothesis_name=str(raw.get("name_of_hypothesis") or "unknown").lower().strip(),
        ai_flag=rules["made_ai"].apply(raw.get("made_ai")),
        style=rules["style"].apply(raw.get("style")),
        main_tone=rules["main_ton"].apply(raw.get("main_ton")),
        main_object=rules["main_object"].apply(raw.get("main_object")),
        header_text=str(raw.get("header_text") or "none").strip(),
        uvp=rules["uvp"].apply(raw.get("uvp")),
        product=rules["product"].apply(raw.get("product")),
        offer=rules["offer"].apply(raw.get("offer")),
    )


def parse_model_output(content: str) -> dict:
    """Extract the JSON object from a model response (may be wrapped in prose)."""
    match = _JSON_OBJECT.search(content)
    if not match:
        raise ValueError("No JSON found in response")
    data = json.loads(match.group(0))
    if not isinstance(data, dict):
        raise ValueError("Response JSON is not an object")
    return data


def prepare_image(data: bytes, mime_type: str) -> tuple[bytes, str]:
    """Downscale and re-encode oversized images as JPEG. Small images pass through."""
    if len(data) <= MAX_IMAGE_BYTES:
        return data, mime_type

    try:
        img = Image.open(BytesIO(data))
        img = img.convert("RGB")
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"Could not decode image for resizing, sending as is: {e}")
        return data, mime_type

    img.thumbnail((MAX_IMAGE_SIDE, MAX_IMAGE_SIDE))

    # Start with high quality and reduce if needed
    quality = 85
    while True:
        buf = BytesIO()
        img.save(buf, format="JPEG", quality=quality)
        if buf.tell() <= MAX_IMAGE_BYTES or quality <= 30:
            return buf.getvalue(), "image/jpeg"
        quality -= 10


class ClassificationService:
    """Classify uploaded creatives with a vision model."""

    def __init__(self, vision: VisionClient):
        self.vision = vision

    async def classify(self, file: UploadFile) -> Classification:
        """
        Classify one file.

        Videos skip the model (no frame extraction) and get fixed defaults.
        Unparseable model output falls back to defaults; API errors propagate.
        """
        if file.is_video:
            return replace(VIDEO_DEFAULT)

        data, mime_type = prepare_image(file.data, file.mime_type)
        image_b64 = base64.b64encode(data).decode("ascii")
        user_text = f"Analyze this creative image. Filename: {file.name}. Return JSON only with all required fields."

        content = await asyncio.to_thread(
            self.vision.describe_image,
            SYSTEM_PROMPT,
            image_b64,
            mime_type,
            user_text,
            file.name,
        )

        try:
            return normalize_classification(parse_model_output(content))
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            logger.warning(f"Failed to parse model output for {file.name}: {e}")
            return fallback_classification(file.mime_type)
