"""Normalize remote analyzer payloads into canonical findings.

Remote services describe the same concept with different field names. Each
payload shape gets one adapter here, and every adapter fails closed: a payload
that is not shaped as expected becomes a :class:`RemoteFailure`, while single
unusable items are skipped and counted.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from ..models import (
    Category,
    DetectorKind,
    Finding,
    RemoteAnalysis,
    RemoteFailure,
    RemoteFindings,
    Severity,
    TextPosition,
)

logger = logging.getLogger(__name__)

CATEGORY_ALIASES: Mapping[str, Category] = {
    "grammar": Category.GRAMMAR,
    "punctuation": Category.GRAMMAR,
    "spelling": Category.SPELLING,
    "vocabulary": Category.VOCABULARY,
    "word_choice": Category.VOCABULARY,
    "clarity": Category.CLARITY,
    "conciseness": Category.CLARITY,
    "style": Category.STYLE,
    "tone": Category.STYLE,
    "formality": Category.STYLE,
    "academic_tone": Category.STYLE,
}

SEVERITY_ALIASES: Mapping[str, Severity] = {
    "error": Severity.ERROR,
    "warning": Severity.WARNING,
    "info": Severity.SUGGESTION,
    "suggestion": Severity.SUGGESTION,
}

# Confidence assumed per bucket when the model omits one.
BUCKET_DEFAULT_CONFIDENCE: Mapping[str, float] = {
    "grammar": 0.8,
    "vocabulary": 0.7,
    "clarity": 0.6,
    "style": 0.5,
}

DEFAULT_CONFIDENCE = 0.8


def parse_analyze_response(text: str, payload: Any) -> RemoteAnalysis:
    """Adapter for ``{"analysisResult": [...], "processingTime": ms}`` responses."""
    if not isinstance(payload, Mapping):
        return RemoteFailure(reason="response body is not a JSON object")
    items = payload.get("analysisResult")
    if items is None:
        items = payload.get("suggestions")
    if items is None:
        return RemoteFailure(reason="response is missing 'analysisResult'")
    processing_time = _as_float(payload.get("processingTime"))
    return normalize_remote_items(text, items, processing_time=processing_time)


def parse_category_buckets(text: str, payload: Any) -> RemoteAnalysis:
    """Adapter for ``{"grammar": [...], "vocabulary": [...], ...}`` responses."""
    if not isinstance(payload, Mapping):
        return RemoteFailure(reason="response body is not a JSON object")
    if not any(key in payload for key in BUCKET_DEFAULT_CONFIDENCE):
        return RemoteFailure(reason="response has no category buckets")

    items: List[Any] = []
    for bucket, default_confidence in BUCKET_DEFAULT_CONFIDENCE.items():
        entries = payload.get(bucket) or []
        if not isinstance(entries, list):
            return RemoteFailure(reason=f"bucket '{bucket}' is not a list")
        for entry in entries:
            if not isinstance(entry, Mapping):
                items.append(entry)
                continue
            replacement = entry.get("replacement")
            items.append(
                {
                    "type": bucket,
                    "originalText": entry.get("original"),
                    "suggestions": [replacement] if replacement else [],
                    "message": entry.get("issue") or "",
                    "explanation": entry.get("suggestion") or "",
                    "confidence": entry.get("confidence") or default_confidence,
                    "position": entry.get("position"),
                }
            )
    return normalize_remote_items(text, items)


def normalize_remote_items(
    text: str,
    items: Any,
    *,
    processing_time: float | None = None,
) -> RemoteAnalysis:
    """
    Convert suggestion-like dictionaries into findings positioned against ``text``.

    Spans come from a ``position`` (or ``startPosition``/``endPosition``) pair when
    it points at the quoted original text; otherwise the original text is searched
    left to right so repeated quotes land on successive occurrences. Items whose
    text cannot be found, or whose type is unrecognized, are skipped.
    """
    if not isinstance(items, list):
        return RemoteFailure(reason="suggestion list is not a JSON array")

    findings: List[Finding] = []
    skipped = 0
    cursors: Dict[str, int] = {}
    for raw in items:
        finding = _to_finding(text, raw, cursors) if isinstance(raw, Mapping) else None
        if finding is None:
            skipped += 1
            continue
        findings.append(finding)

    if skipped:
        logger.debug("Skipped %s unusable remote items out of %s", skipped, len(items))
    return RemoteFindings(
        findings=tuple(findings), processing_time=processing_time, skipped=skipped
    )


def _to_finding(
    text: str, item: Mapping[str, Any], cursors: Dict[str, int]
) -> Finding | None:
    original = item.get("originalText")
    if original is None:
        original = item.get("original")
    if not isinstance(original, str) or not original:
        return None

    raw_type = item.get("type") or item.get("category") or "grammar"
    category = CATEGORY_ALIASES.get(str(raw_type).strip().lower())
    if category is None:
        return None

    span = _explicit_span(text, item, original) or _search_span(text, original, cursors)
    if span is None:
        return None

    candidates = _candidates(item.get("suggestions", item.get("replacement")))
    severity = SEVERITY_ALIASES.get(
        str(item.get("severity") or "").strip().lower(), Severity.SUGGESTION
    )
    confidence = _as_float(item.get("confidence"))
    if confidence is None:
        confidence = DEFAULT_CONFIDENCE
    return Finding(
        kind=category,
        span=span,
        message=str(item.get("message") or ""),
        explanation=str(item.get("explanation") or ""),
        candidates=candidates,
        severity=severity,
        confidence=min(1.0, max(0.0, confidence)),
        detector=DetectorKind.REMOTE,
        rule=f"remote.{category.value}",
    )


def _explicit_span(
    text: str, item: Mapping[str, Any], original: str
) -> TextPosition | None:
    position = item.get("position")
    if isinstance(position, Mapping):
        start, end = position.get("start"), position.get("end")
    else:
        start, end = item.get("startPosition"), item.get("endPosition")
    if not isinstance(start, int) or not isinstance(end, int):
        return None
    span = TextPosition(start, end)
    if span.is_valid_for(text) and text[start:end] == original:
        return span
    return None


def _search_span(text: str, original: str, cursors: Dict[str, int]) -> TextPosition | None:
    start = text.find(original, cursors.get(original, 0))
    if start < 0:
        start = text.find(original)
    if start < 0:
        return None
    cursors[original] = start + len(original)
    return TextPosition(start, start + len(original))


def _candidates(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        values: Sequence[Any] = [value]
    elif isinstance(value, list):
        values = value
    else:
        return ()
    seen: List[str] = []
    for candidate in values:
        if isinstance(candidate, str) and candidate and candidate not in seen:
            seen.append(candidate)
    return tuple(seen)


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
