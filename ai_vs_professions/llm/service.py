"""Profession analysis adapter.

Architectural role:
    Provides the analysis entrypoint used by the orchestrator. This module bridges
    prompt construction (`prompting.prompt_builder`) to transport
    (`llm.client.GeminiClient`) and turns the raw response into an `AnalysisResult`.

Model call flow:
    profession -> payload construction -> `client.generate_content(...)` in a worker
    thread -> text extraction -> JSON parsing -> schema validation.

Failure scenarios:
    - Transport failures propagate as `TransportError`.
    - Missing text payload -> `NoResponse`.
    - Invalid JSON -> `ParseError`.
    - Missing or mistyped fields -> `SchemaMismatch`.
    No retry and no partial result in any case.
"""

import asyncio
import json
import logging

from pydantic import ValidationError

from ai_vs_professions.core.errors import NoResponse, ParseError, SchemaMismatch
from ai_vs_professions.core.result_types import AnalysisResult
from ai_vs_professions.llm.provider_config import ANALYSIS_MODEL
from ai_vs_professions.prompting.prompt_builder import build_analysis_payload


logger = logging.getLogger(__name__)


def extract_response_text(response: dict) -> str:
    """Concatenate the text parts of the first candidate.

    Returns:
        Joined text, or an empty string when there is no candidate, no content
        or no text part.
    """
    candidates = response.get("candidates") or []
    if not candidates:
        return ""

    content = candidates[0].get("content") or {}
    texts = [
        part["text"]
        for part in content.get("parts") or []
        if isinstance(part, dict) and isinstance(part.get("text"), str)
    ]
    return "".join(texts)


def parse_analysis(text: str) -> AnalysisResult:
    """Parse and validate a JSON text payload into an `AnalysisResult`.

    Raises:
        NoResponse: blank payload.
        ParseError: payload is not valid JSON.
        SchemaMismatch: payload is JSON but not the declared object shape.
    """
    if not text or not text.strip():
        raise NoResponse("No response from AI")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as err:
        raise ParseError(f"Analysis payload is not valid JSON: {err.msg}") from err

    if not isinstance(data, dict):
        raise SchemaMismatch(f"Expected a JSON object, got {type(data).__name__}")

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as err:
        fields = ", ".join(".".join(str(loc) for loc in e["loc"]) for e in err.errors())
        raise SchemaMismatch(f"Analysis payload does not match schema: {fields}") from err


async def analyze_profession(client, profession: str) -> AnalysisResult:
    """Ask the language model whether AI can replace `profession`.

    Args:
        client: Transport exposing `generate_content(model, payload) -> dict`.
        profession: Non-blank profession name (blank input is filtered upstream).

    Returns:
        A freshly built `AnalysisResult`.

    Side effects:
        Exactly one outbound request. Nothing is cached.
    """
    payload = build_analysis_payload(profession)

    logger.info("Analyzing profession=%r model=%s", profession, ANALYSIS_MODEL)
    response = await asyncio.to_thread(client.generate_content, ANALYSIS_MODEL, payload)

    return parse_analysis(extract_response_text(response))
