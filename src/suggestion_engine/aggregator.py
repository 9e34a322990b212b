from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from .models import Finding, Suggestion

logger = logging.getLogger(__name__)


def aggregate(
    findings: Iterable[Finding], *, text: str, text_version: int = 0
) -> List[Suggestion]:
    """
    Resolve raw findings into a non-overlapping, position-ordered suggestion list.

    Ids are assigned in input order before sorting, so the same findings always
    receive the same ids. Findings whose span does not fit ``text`` are dropped.
    """
    indexed: List[Tuple[int, Finding]] = []
    for seq, finding in enumerate(findings):
        if not finding.span.is_valid_for(text):
            logger.warning(
                "Dropping %s finding with out-of-range span %s-%s (text length %s)",
                finding.detector.value,
                finding.span.start,
                finding.span.end,
                len(text),
            )
            continue
        indexed.append((seq, finding))

    indexed.sort(key=lambda item: (item[1].span.start, item[1].span.end, item[0]))

    kept: List[Tuple[int, Finding]] = []
    current: Tuple[int, Finding] | None = None
    for item in indexed:
        if current is None:
            current = item
        elif current[1].span.conflicts_with(item[1].span):
            current = _prefer(current, item)
        else:
            kept.append(current)
            current = item
    if current is not None:
        kept.append(current)

    kept.sort(key=lambda item: (item[1].span.start, item[1].span.end))
    return [_to_suggestion(seq, finding, text, text_version) for seq, finding in kept]


def _prefer(
    current: Tuple[int, Finding], challenger: Tuple[int, Finding]
) -> Tuple[int, Finding]:
    """Pick the survivor of two conflicting findings."""
    a, b = current[1], challenger[1]
    # An insertion strictly inside a range always yields to the range.
    if a.span.is_insertion != b.span.is_insertion:
        return challenger if a.span.is_insertion else current
    a_conf, b_conf = _clamp(a.confidence), _clamp(b.confidence)
    if a_conf != b_conf:
        return current if a_conf > b_conf else challenger
    if a.detector.priority != b.detector.priority:
        return current if a.detector.priority < b.detector.priority else challenger
    return current


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


def _to_suggestion(seq: int, finding: Finding, text: str, text_version: int) -> Suggestion:
    rule = finding.rule or finding.detector.value
    return Suggestion(
        id=f"{rule}:{text_version}:{seq}",
        category=finding.kind,
        span=finding.span,
        text_version=text_version,
        original_text=text[finding.span.start : finding.span.end],
        replacement_candidates=tuple(finding.candidates),
        confidence=_clamp(finding.confidence),
        severity=finding.severity,
        message=finding.message,
        explanation=finding.explanation,
        detector=finding.detector,
        rule=finding.rule,
    )
