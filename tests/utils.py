from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence

from suggestion_engine.lexicon import Lexicon, build_default_lexicon
from suggestion_engine.models import (
    Category,
    DetectorKind,
    Finding,
    Severity,
    Suggestion,
    TextPosition,
)
from suggestion_engine.pipeline import AnalysisEngine, build_engine_from_config


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """Built-in lexicon, shared across tests because it is immutable."""
    return build_default_lexicon()


@lru_cache(maxsize=1)
def default_engine() -> AnalysisEngine:
    return build_engine_from_config()


def make_suggestion(
    suggestion_id: str,
    start: int,
    end: int,
    original_text: str,
    candidates: Sequence[str] = (),
    *,
    text_version: int = 0,
    category: Category = Category.SPELLING,
    confidence: float = 0.9,
) -> Suggestion:
    return Suggestion(
        id=suggestion_id,
        category=category,
        span=TextPosition(start, end),
        text_version=text_version,
        original_text=original_text,
        replacement_candidates=tuple(candidates),
        confidence=confidence,
        severity=Severity.ERROR,
    )


def make_finding(
    start: int,
    end: int,
    *,
    confidence: float = 0.8,
    detector: DetectorKind = DetectorKind.GRAMMAR_PATTERN,
    category: Category = Category.GRAMMAR,
    candidates: Sequence[str] = ("x",),
    rule: str = "test.rule",
) -> Finding:
    return Finding(
        kind=category,
        span=TextPosition(start, end),
        message="message",
        explanation="explanation",
        candidates=tuple(candidates),
        severity=Severity.WARNING,
        confidence=confidence,
        detector=detector,
        rule=rule,
    )


def assert_no_overlaps(suggestions: Iterable[Suggestion]) -> None:
    """No two active suggestions may claim the same offset."""
    active = [s for s in suggestions if not s.dismissed]
    for idx, first in enumerate(active):
        for second in active[idx + 1 :]:
            assert not first.span.conflicts_with(second.span), (first, second)


def assert_spans_valid(suggestions: Iterable[Suggestion], text: str) -> None:
    for suggestion in suggestions:
        assert suggestion.span.is_valid_for(text), suggestion
