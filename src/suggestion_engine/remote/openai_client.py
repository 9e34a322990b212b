from __future__ import annotations

import importlib
import json
import logging
import re
import threading
import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator, cast

from ..config import OpenAISettings
from ..models import RemoteAnalysis, RemoteFailure, RemoteFindings
from .adapters import parse_category_buckets
from .base import RemoteAnalyzer, RemoteAnalyzerError

logger = logging.getLogger(__name__)

OpenAI: Callable[..., Any] | None = None

SYSTEM_PROMPT = (
    "You are an expert ESL writing assistant. Analyze text and provide specific, "
    "actionable feedback for grammar, vocabulary, clarity, and style improvements. "
    "Return valid JSON only."
)

USER_PROMPT_TEMPLATE = (
    "Analyze the ACTUAL text below, written by a {user_level} English learner, and "
    "only suggest fixes for problems that actually exist in it.\n"
    "\n"
    "Text to analyze:\n"
    '"{text}"\n'
    "\n"
    "Return a JSON object with the keys grammar, vocabulary, clarity and style. "
    "Each key maps to a list of objects with these fields:\n"
    '  "issue": short description of the problem,\n'
    '  "suggestion": how to fix it,\n'
    '  "original": the problematic text copied exactly, including capitalization,\n'
    '  "replacement": the corrected text (at most a few words),\n'
    '  "confidence": a number between 0 and 1.\n'
    "\n"
    "Use an empty list for a category with no real issues."
)

_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class OpenAIAnalysisClient:
    """Thin wrapper around the OpenAI Responses API with retries and throttling."""

    def __init__(self, settings: OpenAISettings, api_key: str) -> None:
        if not api_key:
            raise ValueError("OpenAI API key is required when OpenAI analysis is enabled.")
        self._settings = settings
        self._api_key = api_key
        self._client_factory: Callable[..., Any] = _load_openai_factory()
        self._client: Any | None = None
        self._semaphore: threading.BoundedSemaphore | None = None
        if settings.parallel_requests > 0:
            self._semaphore = threading.BoundedSemaphore(settings.parallel_requests)
        self._max_attempts = 3

    @property
    def settings(self) -> OpenAISettings:
        return self._settings

    def complete(self, *, system_prompt: str, user_prompt: str) -> str:
        """Send the prompt pair and return the model's text output."""
        attempt = 0
        last_error: Exception | None = None
        while attempt < self._max_attempts:
            attempt += 1
            try:
                with self._acquire_slot():
                    client = self._ensure_client()
                    response: Any = client.responses.create(
                        model=self._settings.model,
                        input=[
                            {"role": "system", "content": system_prompt},
                            {"role": "user", "content": user_prompt},
                        ],
                        temperature=self._settings.temperature,
                        max_output_tokens=self._settings.max_output_tokens,
                        top_p=self._settings.top_p,
                        timeout=self._settings.request_timeout,
                    )
                text = self._extract_text(response)
                logger.debug("OpenAI analysis succeeded (%s chars)", len(text))
                return text
            except Exception as exc:  # pragma: no cover - network-related
                last_error = exc
                logger.warning(
                    "OpenAI analysis failed (attempt %s/%s): %s",
                    attempt,
                    self._max_attempts,
                    exc,
                )
                if attempt >= self._max_attempts:
                    break
                time.sleep(min(2 ** (attempt - 1), 5))
        raise RemoteAnalyzerError("OpenAI analysis failed after retries.") from last_error

    def _ensure_client(self) -> Any:
        if self._client is None:
            self._client = self._client_factory(
                api_key=self._api_key,
                base_url=self._settings.base_url,
                organization=self._settings.organization,
            )
        return self._client

    @contextmanager
    def _acquire_slot(self) -> Iterator[None]:
        if self._semaphore is None:
            yield
            return
        self._semaphore.acquire()
        try:
            yield
        finally:
            self._semaphore.release()

    @staticmethod
    def _extract_text(response: Any) -> str:
        output = getattr(response, "output", None)
        if not output:
            raise RemoteAnalyzerError("OpenAI response is missing output content.")
        first = OpenAIAnalysisClient._materialize_item(output[0])
        content = first.get("content")
        if not content:
            raise RemoteAnalyzerError("OpenAI response has no content segments.")
        segment = OpenAIAnalysisClient._materialize_item(content[0])
        text = segment.get("text")
        if not text:
            raise RemoteAnalyzerError("OpenAI response segment missing text.")
        return text

    @staticmethod
    def _materialize_item(item: Any) -> dict[str, Any]:
        if isinstance(item, dict):
            return cast(dict[str, Any], item)
        if hasattr(item, "model_dump"):
            dumpable: Any = item
            raw_dump: dict[str, Any] = dumpable.model_dump()
            return raw_dump
        if hasattr(item, "__dict__"):
            dumpable: Any = item
            raw_dict: dict[str, Any] = dict(dumpable.__dict__)
            return raw_dict
        raise RemoteAnalyzerError("Unexpected OpenAI response format.")


class OpenAIRemoteAnalyzer(RemoteAnalyzer):
    """Remote analyzer that asks an OpenAI model for categorized issues."""

    name = "openai"

    def __init__(
        self,
        client: OpenAIAnalysisClient,
        *,
        system_prompt: str = SYSTEM_PROMPT,
        user_prompt_template: str = USER_PROMPT_TEMPLATE,
    ) -> None:
        self._client = client
        self._system_prompt = system_prompt
        self._user_prompt_template = user_prompt_template

    def analyze(self, text: str) -> RemoteAnalysis:
        user_prompt = self._user_prompt_template.format(
            user_level=self._client.settings.user_level, text=text
        )
        started = time.perf_counter()
        try:
            raw = self._client.complete(
                system_prompt=self._system_prompt, user_prompt=user_prompt
            )
            payload = decode_json_payload(raw)
        except RemoteAnalyzerError as exc:
            logger.warning("OpenAI analysis unavailable: %s", exc)
            return RemoteFailure(reason=str(exc))
        result = parse_category_buckets(text, payload)
        if isinstance(result, RemoteFindings):
            elapsed = (time.perf_counter() - started) * 1000
            logger.info(
                "OpenAI analysis returned %s findings (%s skipped) in %.0f ms",
                len(result.findings),
                result.skipped,
                elapsed,
            )
            return RemoteFindings(
                findings=result.findings, processing_time=elapsed, skipped=result.skipped
            )
        logger.warning("OpenAI analysis response rejected: %s", result.reason)
        return result


def decode_json_payload(raw: str) -> Any:
    """Parse model output as JSON, tolerating a surrounding Markdown code fence."""
    cleaned = _FENCE_PATTERN.sub("", raw.strip())
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise RemoteAnalyzerError(f"model output is not valid JSON: {exc}") from exc


def _load_openai_factory() -> Callable[..., Any]:
    """Dynamically import the OpenAI client factory to avoid hard dependency at import."""
    global OpenAI
    if OpenAI is not None:
        return OpenAI
    try:  # pragma: no cover - import guard
        module = importlib.import_module("openai")
    except Exception as exc:  # pragma: no cover - handled at runtime
        raise RuntimeError(
            "openai package is not installed. Install extras via 'pip install .[llm-openai]'."
        ) from exc
    openai_cls = getattr(module, "OpenAI", None)
    if openai_cls is None:  # pragma: no cover
        raise RuntimeError(
            "openai.OpenAI client class is unavailable in this environment."
        )
    OpenAI = cast(Callable[..., Any], openai_cls)
    return OpenAI
