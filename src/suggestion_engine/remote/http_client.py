from __future__ import annotations

import logging
import threading
import time
from contextlib import contextmanager
from typing import Any, Iterator

import requests

from ..config import RemoteAnalyzerSettings
from ..models import RemoteAnalysis, RemoteFailure, RemoteFindings
from .adapters import parse_analyze_response
from .base import RemoteAnalyzer, RemoteAnalyzerError

logger = logging.getLogger(__name__)


class HttpRemoteAnalyzer(RemoteAnalyzer):
    """POST text to an analysis endpoint with retries and throttling."""

    name = "http"

    def __init__(
        self,
        settings: RemoteAnalyzerSettings,
        session: requests.Session | None = None,
    ) -> None:
        if not settings.endpoint_url:
            raise ValueError("Remote analyzer endpoint_url is required when enabled.")
        self._settings = settings
        self._session = session or requests.Session()
        self._semaphore: threading.BoundedSemaphore | None = None
        if settings.parallel_requests > 0:
            self._semaphore = threading.BoundedSemaphore(settings.parallel_requests)
        self._max_attempts = max(1, settings.max_attempts)

    @property
    def settings(self) -> RemoteAnalyzerSettings:
        return self._settings

    def analyze(self, text: str) -> RemoteAnalysis:
        try:
            payload = self._post(text)
        except RemoteAnalyzerError as exc:
            logger.warning("Remote analysis failed: %s", exc)
            return RemoteFailure(reason=str(exc))
        result = parse_analyze_response(text, payload)
        if isinstance(result, RemoteFindings):
            logger.info(
                "Remote analysis returned %s findings (%s skipped, server time %s ms)",
                len(result.findings),
                result.skipped,
                result.processing_time,
            )
        else:
            logger.warning("Remote analysis response rejected: %s", result.reason)
        return result

    def _post(self, text: str) -> Any:
        body = {
            "text": text,
            "userType": self._settings.user_type,
            "documentType": self._settings.document_type,
        }
        attempt = 0
        last_error: Exception | None = None
        while attempt < self._max_attempts:
            attempt += 1
            try:
                with self._acquire_slot():
                    response = self._session.post(
                        self._settings.endpoint_url,
                        json=body,
                        timeout=self._settings.request_timeout,
                    )
                response.raise_for_status()
                return response.json()
            except ValueError as exc:
                # Malformed JSON is not retried; the server answered.
                raise RemoteAnalyzerError(f"invalid JSON from remote analyzer: {exc}") from exc
            except requests.RequestException as exc:
                last_error = exc
                logger.warning(
                    "Remote analysis request failed (attempt %s/%s): %s",
                    attempt,
                    self._max_attempts,
                    exc,
                )
                if attempt >= self._max_attempts:
                    break
                time.sleep(min(2 ** (attempt - 1), 5))
        raise RemoteAnalyzerError(
            f"remote analyzer unreachable after {self._max_attempts} attempts: {last_error}"
        ) from last_error

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
