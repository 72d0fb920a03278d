import pytest
import requests

from ai_vs_professions.core.errors import TransportError
from ai_vs_professions.llm.client import GeminiClient, _build_sanitized_http_error
from ai_vs_professions.llm.provider_config import load_key


def _response(status_code: int, body: bytes) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    return response


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def post(self, url, headers=None, json=None, timeout=None):
        self.requests.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        pass


def test_generate_content_posts_to_model_endpoint():
    session = FakeSession(_response(200, b'{"candidates": []}'))
    client = GeminiClient("secret", base_url="https://example.test/models/", timeout=5, session=session)

    data = client.generate_content("gemini-2.5-flash", {"contents": []})

    assert data == {"candidates": []}
    (sent,) = session.requests
    assert sent["url"] == "https://example.test/models/gemini-2.5-flash:generateContent"
    assert sent["headers"]["x-goog-api-key"] == "secret"
    assert sent["json"] == {"contents": []}
    assert sent["timeout"] == 5


def test_missing_key_fails_without_request():
    session = FakeSession(_response(200, b"{}"))
    client = GeminiClient(None, session=session)

    with pytest.raises(TransportError):
        client.generate_content("gemini-2.5-flash", {})
    assert session.requests == []


def test_http_error_is_sanitized():
    session = FakeSession(_response(403, b'{"error": {"message": "API key invalid: secret"}}'))
    client = GeminiClient("secret", session=session)

    with pytest.raises(TransportError) as excinfo:
        client.generate_content("gemini-2.5-flash", {})

    assert excinfo.value.status_code == 403
    assert str(excinfo.value) == "GEMINI HTTP ERROR (403)"


def test_network_error_becomes_transport_error():
    session = FakeSession(error=requests.exceptions.ConnectionError("refused"))
    client = GeminiClient("secret", session=session)

    with pytest.raises(TransportError) as excinfo:
        client.generate_content("gemini-2.5-flash", {})

    assert excinfo.value.status_code is None


def test_non_json_body_becomes_transport_error():
    session = FakeSession(_response(200, b"<html>oops</html>"))
    client = GeminiClient("secret", session=session)

    with pytest.raises(TransportError):
        client.generate_content("gemini-2.5-flash", {})


def test_load_key_prefers_environment(tmp_path, monkeypatch):
    key_file = tmp_path / "gemini.key"
    key_file.write_text("from-file\n")

    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    assert load_key(str(key_file)) == "from-file"

    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    assert load_key(str(key_file)) == "from-env"

    assert load_key(None) is None
    monkeypatch.delenv("GEMINI_API_KEY")
    assert load_key(str(tmp_path / "missing.key")) is None


def test_sanitized_error_reports_message_and_status():
    with_response = requests.exceptions.HTTPError(response=_response(429, b"{}"))
    without_response = requests.exceptions.Timeout("slow")

    assert _build_sanitized_http_error(with_response) == ("GEMINI HTTP ERROR (429)", 429)
    assert _build_sanitized_http_error(without_response) == ("GEMINI HTTP ERROR", None)
