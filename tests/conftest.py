"""Shared fixtures: a substitute transport client and Gemini response builders."""

import json
from typing import Any, Dict, List, Tuple

import pytest

from ai_vs_professions.llm.provider_config import ANALYSIS_MODEL, IMAGE_MODEL


def text_response(text: str) -> Dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def analysis_response(replaceable=True, explanation="X", image_prompt="Y") -> Dict[str, Any]:
    return text_response(
        json.dumps(
            {
                "replaceable": replaceable,
                "explanation": explanation,
                "imagePrompt": image_prompt,
            },
            ensure_ascii=False,
        )
    )


def image_response(data: str = "QUJD") -> Dict[str, Any]:
    return {
        "candidates": [
            {"content": {"parts": [{"inlineData": {"mimeType": "image/png", "data": data}}]}}
        ]
    }


class FakeClient:
    """Stands in for `GeminiClient`; replies per model and records every call.

    A reply may be a response dict or an exception instance to raise.
    """

    def __init__(self, analysis=None, image=None):
        self.replies = {
            ANALYSIS_MODEL: analysis if analysis is not None else analysis_response(),
            IMAGE_MODEL: image if image is not None else image_response(),
        }
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def generate_content(self, model: str, payload: dict) -> dict:
        self.calls.append((model, payload))
        reply = self.replies[model]
        if isinstance(reply, Exception):
            raise reply
        return reply

    def calls_for(self, model: str) -> List[Dict[str, Any]]:
        return [payload for called, payload in self.calls if called == model]


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()
