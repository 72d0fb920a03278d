"""Gemini image-model request and response helpers.

Processing flow:
    1. Build the `generateContent` body with the prompt and the square
       `imageConfig` option.
    2. Send it through the shared transport client.
    3. Scan the first candidate for inline image bytes.

Base64:
    Gemini already returns `inlineData.data` base64-encoded, so the payload is
    wrapped into a data URI without decoding.

Error handling strategy:
    - Transport failures raise `TransportError` for `image.service` to absorb.
    - A response without image data is not an error: `extract_image_data_uri`
      returns `None`.
"""

import base64

from ai_vs_professions.llm.provider_config import IMAGE_ASPECT_RATIO, IMAGE_MODEL
from ai_vs_professions.prompting.prompt_builder import build_image_payload


DATA_URI_PREFIX = "data:image/png;base64,"


def send_image_request(client, prompt: str) -> dict:
    """Send one illustration request and return the raw response dict."""
    payload = build_image_payload(prompt, IMAGE_ASPECT_RATIO)
    return client.generate_content(IMAGE_MODEL, payload)


def extract_image_data_uri(response: dict) -> str | None:
    """Return the first inline image of the first candidate as a PNG data URI.

    Edge cases:
        - No candidate, no content, no parts -> `None`.
        - Parts without `inlineData` (for example text commentary) are skipped.
        - Raw `bytes` data (as produced by some SDK fakes) is base64-encoded first.
    """
    candidates = response.get("candidates") or []
    if not candidates:
        return None

    content = candidates[0].get("content") or {}
    for part in content.get("parts") or []:
        if not isinstance(part, dict):
            continue
        inline_data = part.get("inlineData") or part.get("inline_data")
        if not inline_data:
            continue
        data = inline_data.get("data")
        if not data:
            continue
        if isinstance(data, bytes):
            data = base64.b64encode(data).decode("ascii")
        return f"{DATA_URI_PREFIX}{data}"

    return None
