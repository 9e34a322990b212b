from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from typing import Callable, Set

from .models import AnalysisResult, ApplyResult, ApplyStatus, DismissResult
from .pipeline import AnalysisEngine, empty_result

logger = logging.getLogger(__name__)

ResultCallback = Callable[[AnalysisResult], None]


class DocumentSession:
    """
    Owns one document's authoritative text and keeps its analysis current.

    Edits schedule a debounced background pass; a newer edit cancels the pending
    timer and supersedes any pass already running, whose result is discarded on
    completion because its ``text_version`` is no longer current. ``apply`` and
    ``dismiss`` are synchronous and must be called from the thread that created
    the session.
    """

    def __init__(
        self,
        engine: AnalysisEngine,
        text: str = "",
        *,
        debounce_seconds: float | None = None,
        executor: Executor | None = None,
        on_result: ResultCallback | None = None,
    ) -> None:
        self._engine = engine
        self._text = text
        self._version = 0
        self._result = empty_result(0)
        self._debounce = (
            engine.config.debounce_seconds if debounce_seconds is None else debounce_seconds
        )
        self._owns_executor = executor is None
        self._executor: Executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="analysis"
        )
        self._on_result = on_result
        self._owner = threading.get_ident()
        self._lock = threading.RLock()
        self._timer: threading.Timer | None = None
        self._futures: Set[Future[None]] = set()
        self._closed = False

    @property
    def text(self) -> str:
        with self._lock:
            return self._text

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    @property
    def result(self) -> AnalysisResult:
        """Latest installed result; may lag behind ``version`` until a pass completes."""
        with self._lock:
            return self._result

    def update_text(self, text: str) -> int:
        """Replace the text, bump the version and schedule a debounced pass."""
        self._check_owner("update_text")
        with self._lock:
            self._text = text
            self._version += 1
            version = self._version
        self._schedule(version, self._debounce)
        return version

    def analyze_now(self) -> AnalysisResult:
        """Analyze the current text synchronously on the calling thread."""
        with self._lock:
            self._cancel_timer()
            text, version = self._text, self._version
        self._complete(self._engine.analyze(text, version))
        return self.result

    def apply(self, suggestion_id: str, candidate_index: int = 0) -> ApplyResult:
        """Accept a suggestion against the current text and install the projected result."""
        self._check_owner("apply")
        with self._lock:
            if self._result.text_version != self._version:
                logger.info(
                    "Refusing to apply %s: analysis is for version %s, text is at %s",
                    suggestion_id,
                    self._result.text_version,
                    self._version,
                )
                return ApplyResult(
                    status=ApplyStatus.STALE,
                    text=self._text,
                    suggestions=self._result.suggestions,
                    text_version=self._version,
                )
            outcome, projected = self._engine.apply(
                self._text, self._result, suggestion_id, candidate_index
            )
            if not outcome.changed:
                return outcome
            self._cancel_timer()
            self._text = outcome.text
            self._version = outcome.text_version
            self._result = projected
        self._notify(projected)
        if self._engine.config.reanalyze_after_apply:
            self._schedule(outcome.text_version, 0.0)
        return outcome

    def dismiss(self, suggestion_id: str) -> DismissResult:
        self._check_owner("dismiss")
        with self._lock:
            outcome, updated = self._engine.dismiss(self._result, suggestion_id)
            if outcome.status is ApplyStatus.DISMISSED:
                self._result = updated
        return outcome

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until no pass is pending or running; False when ``timeout`` expires."""
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            with self._lock:
                timer = self._timer
                futures = set(self._futures)
            if timer is None and not futures:
                return True
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            if timer is not None:
                timer.join(remaining)
                with self._lock:
                    if self._timer is timer and not timer.is_alive():
                        self._timer = None
            if futures:
                wait(futures, timeout=remaining)
            if deadline is not None and time.monotonic() >= deadline:
                with self._lock:
                    return self._timer is None and not self._futures

    def close(self) -> None:
        with self._lock:
            self._closed = True
            self._cancel_timer()
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "DocumentSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _schedule(self, version: int, delay: float) -> None:
        with self._lock:
            if self._closed:
                return
            self._cancel_timer()
            if delay <= 0:
                self._submit(version)
                return
            timer = threading.Timer(delay, self._submit, args=(version,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _submit(self, version: int) -> None:
        with self._lock:
            if self._timer is not None and self._timer is threading.current_thread():
                self._timer = None
            if self._closed or version != self._version:
                return
            text = self._text
            future = self._executor.submit(self._run, text, version)
            self._futures.add(future)
        future.add_done_callback(self._forget)

    def _forget(self, future: Future[None]) -> None:
        with self._lock:
            self._futures.discard(future)

    def _run(self, text: str, version: int) -> None:
        try:
            result = self._engine.analyze(text, version)
        except Exception:
            logger.exception("Background analysis of version %s failed", version)
            return
        self._complete(result)

    def _complete(self, result: AnalysisResult) -> bool:
        with self._lock:
            if result.text_version != self._version:
                logger.debug(
                    "Discarding analysis for version %s (current %s)",
                    result.text_version,
                    self._version,
                )
                return False
            self._result = result
        self._notify(result)
        return True

    def _notify(self, result: AnalysisResult) -> None:
        if self._on_result is None:
            return
        try:
            self._on_result(result)
        except Exception:
            logger.exception("Result callback failed for version %s", result.text_version)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _check_owner(self, operation: str) -> None:
        if threading.get_ident() != self._owner:
            raise RuntimeError(
                f"DocumentSession.{operation} must be called from the thread that owns the text."
            )
