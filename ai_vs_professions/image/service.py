"""Illustration service used by the orchestrator.

Role in pipeline:
    - Receives the `image_prompt` of the current analysis result.
    - Runs the blocking image request in a worker thread.
    - Folds every outcome into an `ImageOutcome`.

Error handling strategy:
    Exceptions never leave this module. Any failure (network, service error,
    missing key) is logged and reported as `ImageOutcome.unavailable()`, the same
    value used for a response that simply carries no image part.
"""

import asyncio
import logging

from ai_vs_professions.core.result_types import ImageOutcome
from ai_vs_professions.image.client import extract_image_data_uri, send_image_request


logger = logging.getLogger(__name__)


async def generate_illustration(client, prompt: str) -> ImageOutcome:
    """Generate the illustration for `prompt`.

    Returns:
        `ImageOutcome.ready(data_uri)` on success, `ImageOutcome.unavailable()`
        otherwise.
    """
    try:
        response = await asyncio.to_thread(send_image_request, client, prompt)
        data_uri = extract_image_data_uri(response)
    except Exception:
        logger.exception("Image generation failed")
        return ImageOutcome.unavailable()

    if data_uri is None:
        logger.warning("Image response carried no inline image data")
        return ImageOutcome.unavailable()

    return ImageOutcome.ready(data_uri)
