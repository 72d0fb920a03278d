import asyncio

import pytest
from pydantic import ValidationError

from ai_vs_professions.core.errors import (
    AnalysisFailure,
    NoResponse,
    ParseError,
    SchemaMismatch,
    TransportError,
)
from ai_vs_professions.core.result_types import AnalysisResult
from ai_vs_professions.llm.provider_config import ANALYSIS_MODEL
from ai_vs_professions.llm.service import analyze_profession, extract_response_text, parse_analysis
from ai_vs_professions.prompting.prompt_builder import ANALYSIS_RESPONSE_SCHEMA

from conftest import FakeClient, analysis_response, text_response


def test_canned_payload_round_trips_field_values():
    client = FakeClient(analysis=analysis_response(True, "X", "Y"))

    result = asyncio.run(analyze_profession(client, "Дизайнер"))

    assert result.replaceable is True
    assert result.explanation == "X"
    assert result.image_prompt == "Y"


def test_request_carries_prompt_and_schema():
    client = FakeClient()

    asyncio.run(analyze_profession(client, "Пекарь"))

    assert len(client.calls) == 1
    model, payload = client.calls[0]
    assert model == ANALYSIS_MODEL
    prompt = payload["contents"][0]["parts"][0]["text"]
    assert '"Пекарь"' in prompt
    assert "JSON" in prompt
    config = payload["generationConfig"]
    assert config["responseMimeType"] == "application/json"
    assert config["responseSchema"] == ANALYSIS_RESPONSE_SCHEMA
    assert set(config["responseSchema"]["required"]) == {"replaceable", "explanation", "imagePrompt"}


def test_identical_professions_are_not_cached():
    client = FakeClient()

    asyncio.run(analyze_profession(client, "Врач"))
    asyncio.run(analyze_profession(client, "Врач"))

    assert len(client.calls) == 2


def test_missing_candidates_raise_no_response():
    client = FakeClient(analysis={"candidates": []})

    with pytest.raises(NoResponse):
        asyncio.run(analyze_profession(client, "Врач"))


def test_invalid_json_raises_parse_error():
    client = FakeClient(analysis=text_response("not json {"))

    with pytest.raises(ParseError):
        asyncio.run(analyze_profession(client, "Врач"))


def test_transport_error_propagates():
    client = FakeClient(analysis=TransportError("GEMINI HTTP ERROR (503)", 503))

    with pytest.raises(TransportError) as excinfo:
        asyncio.run(analyze_profession(client, "Врач"))
    assert excinfo.value.status_code == 503


@pytest.mark.parametrize(
    "text",
    [
        '{"replaceable": "true", "explanation": "X", "imagePrompt": "Y"}',
        '{"replaceable": true, "explanation": 5, "imagePrompt": "Y"}',
        '{"replaceable": true, "explanation": "X"}',
        '{"replaceable": true, "explanation": "X", "imagePrompt": null}',
        '["replaceable", true]',
    ],
)
def test_mistyped_payloads_raise_schema_mismatch(text):
    with pytest.raises(SchemaMismatch):
        parse_analysis(text)


def test_every_failure_is_an_analysis_failure():
    for error in (NoResponse, ParseError, SchemaMismatch, TransportError):
        assert issubclass(error, AnalysisFailure)


def test_extract_response_text_joins_text_parts():
    response = {"candidates": [{"content": {"parts": [{"text": '{"a": '}, {"text": "1}"}]}}]}
    assert extract_response_text(response) == '{"a": 1}'
    assert extract_response_text({}) == ""
    assert extract_response_text({"candidates": [{}]}) == ""


def test_analysis_result_is_immutable():
    result = parse_analysis('{"replaceable": false, "explanation": "X", "imagePrompt": "Y"}')

    with pytest.raises(ValidationError):
        result.explanation = "changed"


def test_analysis_result_serializes_wire_names():
    result = AnalysisResult(replaceable=False, explanation="X", image_prompt="Y")
    assert result.model_dump(by_alias=True) == {
        "replaceable": False,
        "explanation": "X",
        "imagePrompt": "Y",
    }
