"""Vision LLM client. Uses OpenRouter through its OpenAI-compatible API."""

import logging

from openai import OpenAI, OpenAIError

logger = logging.getLogger(__name__)


class ClassificationError(Exception):
    """The vision model call failed."""
    pass


class VisionClient:
    """Send one image plus a prompt to a vision-capable chat model."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://openrouter.ai/api/v1",
        timeout: float = 30.0,
    ):
        self._client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            default_headers={"X-Title": "Creative Naming Tool"},
        )
        self.model = model
        self.total_input_tokens = 0
        self.total_output_tokens = 0

    def describe_image(
        self,
        system_prompt: str,
        image_b64: str,
        mime_type: str,
        user_text: str,
        label: str = "",
    ) -> str:
        """Make a vision call and return the response text.

        Args:
            system_prompt: System prompt.
            image_b64: Base64-encoded image bytes.
            mime_type: Image MIME type for the data URL.
            user_text: Text part of the user message.
            label: Optional label for logging token usage.

        Returns:
            Response text content.
        """
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {
                        "role": "user",
                        "content": [
                            {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{image_b64}"}},
                            {"type": "text", "text": user_text},
                        ],
                    },
                ],
                max_tokens=800,
                temperature=0.1,
            )
        except OpenAIError as e:
            raise ClassificationError(f"Vision API error: {e}") from e

        # Track tokens
        usage = response.usage
        if usage:
            self.total_input_tokens += usage.prompt_tokens
            self.total_output_tokens += usage.completion_tokens
            if label:
                logger.info(f"{label}: input={usage.prompt_tokens}, output={usage.completion_tokens}")

        if not response.choices:
            raise ClassificationError("Vision API returned no choices")
        return (response.choices[0].message.content or "").strip()

    def get_token_totals(self) -> tuple[int, int]:
        """Return accumulated (input, output) tokens."""
        return self.total_input_tokens, self.total_output_tokens
