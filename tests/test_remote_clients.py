from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from suggestion_engine.config import EngineConfig, OpenAISettings, RemoteAnalyzerSettings
from suggestion_engine.models import Category, RemoteFailure, RemoteFindings
from suggestion_engine.remote import (
    HttpRemoteAnalyzer,
    OpenAIRemoteAnalyzer,
    build_remote_analyzer,
    resolve_openai_api_key,
)
from suggestion_engine.remote import http_client
from suggestion_engine.remote import openai_client as oa_client


class FakeResponse:
    def __init__(self, payload: Any = None, status: int = 200, raw: str | None = None) -> None:
        self._payload = payload
        self.status_code = status
        self._raw = raw

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Any:
        if self._raw is not None:
            return json.loads(self._raw)
        return self._payload


class FakeSession:
    def __init__(self, *responses: Any) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, json: Any = None, timeout: float | None = None) -> FakeResponse:
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        outcome = self._responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _settings(**overrides: Any) -> RemoteAnalyzerSettings:
    base: dict[str, Any] = {"enabled": True, "endpoint_url": "https://analyzer.test/analyze"}
    base.update(overrides)
    return RemoteAnalyzerSettings(**base)


def test_http_analyzer_posts_text_and_parses_findings():
    text = "I is here."
    session = FakeSession(
        FakeResponse(
            {
                "analysisResult": [
                    {"type": "grammar", "originalText": "I is", "suggestions": ["I am"]}
                ],
                "processingTime": 42,
            }
        )
    )
    analyzer = HttpRemoteAnalyzer(_settings(user_type="professional"), session=session)
    result = analyzer.analyze(text)

    assert isinstance(result, RemoteFindings)
    assert result.findings[0].candidates == ("I am",)
    assert session.calls[0]["json"] == {
        "text": text,
        "userType": "professional",
        "documentType": "essay",
    }
    assert session.calls[0]["timeout"] == 15.0


def test_http_analyzer_retries_transient_errors(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(http_client.time, "sleep", lambda _: None)
    session = FakeSession(
        requests.ConnectionError("reset"),
        FakeResponse({"analysisResult": []}),
    )
    result = HttpRemoteAnalyzer(_settings(), session=session).analyze("Fine text.")

    assert isinstance(result, RemoteFindings)
    assert result.findings == ()
    assert len(session.calls) == 2


def test_http_analyzer_reports_failure_after_retries(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(http_client.time, "sleep", lambda _: None)
    session = FakeSession(FakeResponse(status=503), FakeResponse(status=503))
    result = HttpRemoteAnalyzer(_settings(), session=session).analyze("Fine text.")

    assert isinstance(result, RemoteFailure)
    assert "2 attempts" in result.reason


def test_http_analyzer_fails_closed_on_bad_json():
    session = FakeSession(FakeResponse(raw="<html>oops</html>"))
    result = HttpRemoteAnalyzer(_settings(), session=session).analyze("Fine text.")

    assert isinstance(result, RemoteFailure)
    assert len(session.calls) == 1


def test_http_analyzer_requires_endpoint():
    with pytest.raises(ValueError):
        HttpRemoteAnalyzer(RemoteAnalyzerSettings(enabled=True))


def _install_fake_openai(monkeypatch: pytest.MonkeyPatch, outputs: list[Any]) -> dict[str, Any]:
    captured: dict[str, Any] = {"calls": []}

    class DummySegment:
        def __init__(self, text: str) -> None:
            self.text = text

    class DummyOutput:
        def __init__(self, text: str) -> None:
            self.content = [DummySegment(text)]

    class DummyResponse:
        def __init__(self, text: str) -> None:
            self.output = [DummyOutput(text)]

    class DummyResponses:
        def create(self, **kwargs: Any):
            captured["calls"].append(kwargs)
            outcome = outputs.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return DummyResponse(outcome)

    class DummyOpenAI:
        def __init__(self, **kwargs: Any) -> None:
            captured["client_kwargs"] = kwargs
            self.responses = DummyResponses()

    monkeypatch.setattr(oa_client, "OpenAI", DummyOpenAI)
    monkeypatch.setattr(oa_client.time, "sleep", lambda _: None)
    return captured


def test_openai_client_requires_api_key(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(oa_client, "OpenAI", object())
    with pytest.raises(ValueError):
        oa_client.OpenAIAnalysisClient(OpenAISettings(enabled=True), api_key="")


def test_openai_analyzer_parses_fenced_json(monkeypatch: pytest.MonkeyPatch):
    body = {
        "grammar": [{"issue": "Agreement", "original": "I is", "replacement": "I am"}],
        "vocabulary": [],
        "clarity": [],
        "style": [],
    }
    captured = _install_fake_openai(
        monkeypatch, [RuntimeError("transient"), "```json\n" + json.dumps(body) + "\n```"]
    )
    client = oa_client.OpenAIAnalysisClient(OpenAISettings(enabled=True), api_key="token")
    result = OpenAIRemoteAnalyzer(client).analyze("I is tired.")

    assert isinstance(result, RemoteFindings)
    assert result.findings[0].kind is Category.GRAMMAR
    assert result.findings[0].candidates == ("I am",)
    assert len(captured["calls"]) == 2
    assert captured["client_kwargs"]["api_key"] == "token"
    assert "I is tired." in captured["calls"][-1]["input"][1]["content"]


def test_openai_analyzer_fails_closed_on_prose(monkeypatch: pytest.MonkeyPatch):
    _install_fake_openai(monkeypatch, ["Your text looks great!"])
    client = oa_client.OpenAIAnalysisClient(OpenAISettings(enabled=True), api_key="token")
    result = OpenAIRemoteAnalyzer(client).analyze("Fine text.")

    assert isinstance(result, RemoteFailure)


def test_build_remote_analyzer_from_config(monkeypatch: pytest.MonkeyPatch):
    assert build_remote_analyzer(EngineConfig()) is None

    http_cfg = EngineConfig(remote=_settings())
    assert isinstance(build_remote_analyzer(http_cfg), HttpRemoteAnalyzer)

    monkeypatch.setattr(oa_client, "OpenAI", lambda **_: object())
    monkeypatch.setenv("SUGGESTION_TEST_KEY", "from-env")
    openai_cfg = EngineConfig(openai=OpenAISettings(enabled=True, api_key_env="SUGGESTION_TEST_KEY"))
    assert isinstance(build_remote_analyzer(openai_cfg), OpenAIRemoteAnalyzer)

    with pytest.raises(ValueError):
        build_remote_analyzer(EngineConfig(remote=_settings(), openai=OpenAISettings(enabled=True)))


def test_resolve_openai_api_key(monkeypatch: pytest.MonkeyPatch):
    assert resolve_openai_api_key(OpenAISettings(api_key="explicit")) == "explicit"
    monkeypatch.setenv("SUGGESTION_TEST_KEY", "env-key")
    assert resolve_openai_api_key(OpenAISettings(api_key_env="SUGGESTION_TEST_KEY")) == "env-key"
    monkeypatch.delenv("SUGGESTION_TEST_KEY")
    with pytest.raises(RuntimeError):
        resolve_openai_api_key(OpenAISettings(api_key_env="SUGGESTION_TEST_KEY"))
