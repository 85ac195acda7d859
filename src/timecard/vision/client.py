"""Image-understanding client: screenshot bytes in, raw model text out."""
from __future__ import annotations

import base64
from typing import Any, Protocol, runtime_checkable

from timecard.domain.exceptions import VisionCallError

SYSTEM_PROMPT = (
    "You extract structured numeric data from timecard screenshots. "
    "Return ONLY valid JSON. No markdown. No commentary."
)

USER_PROMPT = (
    "From this screenshot, extract the numeric values in the 'Total Hours' column "
    "for each day row. Ignore header rows and summary sections. "
    "Prefer rows that represent worked days; ignore rows where Total Hours is 0.00 "
    "IF they appear to be non-worked days. Return ONLY JSON in this exact shape:\n\n"
    '{\n  "hours": [number, ...],\n  "warnings": [string, ...]\n}\n\n'
    "Rules:\n"
    "- Preserve top-to-bottom order.\n"
    "- Convert to numbers with 2 decimals when possible.\n"
    "- If unsure about a value, still include your best guess and add a warning.\n"
)


@runtime_checkable
class VisionClient(Protocol):
    """Anything that can read a timecard image and return the model's text."""

    def extract_text(self, image: bytes, mime_type: str) -> str:
        ...


def image_data_url(image: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(image).decode("ascii")
    return f"data:{mime_type or 'image/jpeg'};base64,{encoded}"


class OpenAIVisionClient:
    """Adapter over the OpenAI SDK chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout: float = 60.0,
        max_retries: int = 2,
        openai_client: Any | None = None,
    ) -> None:
        if openai_client is not None:
            self._client = openai_client
        else:
            from openai import OpenAI  # lazy import

            self._client = OpenAI(api_key=api_key, timeout=timeout, max_retries=max_retries)
        self._model = model

    def extract_text(self, image: bytes, mime_type: str) -> str:
        from openai import OpenAIError

        messages: list[dict[str, Any]] = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": USER_PROMPT},
                    {
                        "type": "image_url",
                        "image_url": {"url": image_data_url(image, mime_type), "detail": "high"},
                    },
                ],
            },
        ]
        try:
            response = self._client.chat.completions.create(model=self._model, messages=messages)
        except OpenAIError as exc:
            raise VisionCallError(f"Vision call failed: {exc}") from exc
        if not response.choices:
            raise VisionCallError("Vision call returned no choices")
        return (response.choices[0].message.content or "").strip()
