from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Sequence

from .models import ApplyResult, ApplyStatus, DismissResult, Suggestion

logger = logging.getLogger(__name__)


def apply_suggestion(
    text: str,
    suggestions: Sequence[Suggestion],
    suggestion_id: str,
    candidate_index: int = 0,
    *,
    text_version: int | None = None,
) -> ApplyResult:
    """
    Accept one suggestion and reconcile every other pending suggestion.

    Suggestions entirely before the edited range are kept as-is, those entirely
    after it are shifted by the length delta, and any that touch the edited
    range are dropped. A suggestion that is unknown, dismissed, computed for a
    different ``text_version`` or whose span no longer fits the text is
    reported as stale and nothing changes.
    """
    current_version = _current_version(suggestions, text_version)
    chosen = _find_active(suggestions, suggestion_id)
    if chosen is None:
        logger.info("Ignoring stale suggestion %s", suggestion_id)
        return _noop(ApplyStatus.STALE, text, suggestions, current_version)
    if text_version is not None and chosen.text_version != text_version:
        logger.info(
            "Ignoring suggestion %s computed for version %s (current %s)",
            suggestion_id,
            chosen.text_version,
            text_version,
        )
        return _noop(ApplyStatus.STALE, text, suggestions, current_version)
    span = chosen.span
    if not span.is_valid_for(text):
        logger.info("Suggestion %s points outside the text", suggestion_id)
        return _noop(ApplyStatus.STALE, text, suggestions, current_version)
    if not 0 <= candidate_index < len(chosen.replacement_candidates):
        return _noop(ApplyStatus.INVALID_CANDIDATE, text, suggestions, current_version)

    replacement = chosen.replacement_candidates[candidate_index]
    delta = len(replacement) - span.length
    new_text = text[: span.start] + replacement + text[span.end :]
    new_version = max(current_version, chosen.text_version) + 1

    survivors: List[Suggestion] = []
    invalidated: List[str] = []
    for suggestion in suggestions:
        if suggestion is chosen:
            continue
        other = suggestion.span
        if other.end <= span.start:
            survivors.append(replace(suggestion, text_version=new_version))
        elif other.start >= span.end:
            survivors.append(
                replace(suggestion, span=other.shifted(delta), text_version=new_version)
            )
        else:
            invalidated.append(suggestion.id)

    logger.info(
        "Applied %s (%r -> %r), delta=%s, invalidated=%s",
        chosen.id,
        chosen.original_text,
        replacement,
        delta,
        len(invalidated),
    )
    return ApplyResult(
        status=ApplyStatus.APPLIED,
        text=new_text,
        suggestions=tuple(survivors),
        text_version=new_version,
        applied=chosen,
        replacement=replacement,
        invalidated=tuple(invalidated),
    )


def dismiss_suggestion(
    suggestions: Sequence[Suggestion], suggestion_id: str
) -> DismissResult:
    """Mark one suggestion dismissed; dismissing twice reports stale."""
    target = _find_active(suggestions, suggestion_id)
    if target is None:
        return DismissResult(status=ApplyStatus.STALE, suggestions=tuple(suggestions))
    return DismissResult(
        status=ApplyStatus.DISMISSED,
        suggestions=tuple(
            replace(s, dismissed=True) if s is target else s for s in suggestions
        ),
    )


def _find_active(suggestions: Sequence[Suggestion], suggestion_id: str) -> Suggestion | None:
    for suggestion in suggestions:
        if suggestion.id == suggestion_id and not suggestion.dismissed:
            return suggestion
    return None


def _current_version(suggestions: Sequence[Suggestion], text_version: int | None) -> int:
    if text_version is not None:
        return text_version
    return max((s.text_version for s in suggestions), default=0)


def _noop(
    status: ApplyStatus, text: str, suggestions: Sequence[Suggestion], version: int
) -> ApplyResult:
    return ApplyResult(
        status=status, text=text, suggestions=tuple(suggestions), text_version=version
    )
