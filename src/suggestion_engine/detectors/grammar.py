from __future__ import annotations

import re
from typing import List, Mapping, Tuple

from ..lexicon.rules import (
    A_BEFORE_VOWEL_LETTER,
    AN_BEFORE_CONSONANT_LETTER,
    AUXILIARY_VERBS,
    GRAMMAR_PATTERNS,
    NEGATIONS,
    NEGATIVE_OBJECTS,
)
from ..models import Category, DetectorKind, Finding, Severity, TextPosition
from ..tokenization import match_case
from .base import Detector, compile_phrase_pattern

DOUBLE_NEGATIVE_PATTERN = re.compile(
    r"\b(?:"
    + "|".join(re.escape(word) for word in NEGATIONS)
    + r")\s+\w*\s+(?:"
    + "|".join(NEGATIVE_OBJECTS)
    + r")\b",
    re.IGNORECASE,
)
COMMA_SPLICE_PATTERN = re.compile(
    r"\b\w+\s*,\s*\w+\s+(?:" + "|".join(AUXILIARY_VERBS) + r")\b",
    re.IGNORECASE,
)
ARTICLE_PATTERN = re.compile(r"\b(a|an)\s+([A-Za-z]+)", re.IGNORECASE)


def expected_article(word: str) -> str:
    lowered = word.lower()
    if lowered in A_BEFORE_VOWEL_LETTER:
        return "a"
    if lowered in AN_BEFORE_CONSONANT_LETTER:
        return "an"
    return "an" if lowered[:1] in "aeiou" else "a"


class GrammarPatternDetector(Detector):
    """Fixed wrong-to-right phrase map plus a few pattern rules."""

    kind = DetectorKind.GRAMMAR_PATTERN
    name = "grammar_pattern"

    def __init__(
        self,
        patterns: Mapping[str, Tuple[str, float]] = GRAMMAR_PATTERNS,
        *,
        comma_splice_enabled: bool = True,
        article_agreement_enabled: bool = True,
    ) -> None:
        self._patterns = {phrase.lower(): value for phrase, value in patterns.items()}
        self._phrase_pattern = compile_phrase_pattern(self._patterns)
        self._comma_splice_enabled = comma_splice_enabled
        self._article_agreement_enabled = article_agreement_enabled

    def detect(self, text: str) -> List[Finding]:
        findings = self._phrase_findings(text)
        findings.extend(self._double_negatives(text))
        if self._comma_splice_enabled:
            findings.extend(self._comma_splices(text))
        if self._article_agreement_enabled:
            findings.extend(self._article_agreement(text))
        return findings

    def _phrase_findings(self, text: str) -> List[Finding]:
        if self._phrase_pattern is None:
            return []
        findings: List[Finding] = []
        for match in self._phrase_pattern.finditer(text):
            phrase = match.group()
            entry = self._patterns.get(phrase.lower())
            if entry is None:
                continue
            correction, confidence = entry
            replacement = match_case(phrase, correction)
            findings.append(
                Finding(
                    kind=Category.GRAMMAR,
                    span=TextPosition(match.start(), match.end()),
                    message=f'Grammar error: "{phrase}"',
                    explanation=f'"{phrase}" should be "{replacement}"',
                    candidates=(replacement,),
                    severity=Severity.ERROR,
                    confidence=confidence,
                    detector=self.kind,
                    rule="grammar.phrase",
                )
            )
        return findings

    def _double_negatives(self, text: str) -> List[Finding]:
        return [
            Finding(
                kind=Category.GRAMMAR,
                span=TextPosition(match.start(), match.end()),
                message="Double negative detected",
                explanation=(
                    "Double negatives can be confusing. Use either the positive "
                    "form or a single negative."
                ),
                candidates=(),
                severity=Severity.WARNING,
                confidence=0.75,
                detector=self.kind,
                rule="grammar.double_negative",
            )
            for match in DOUBLE_NEGATIVE_PATTERN.finditer(text)
        ]

    def _comma_splices(self, text: str) -> List[Finding]:
        return [
            Finding(
                kind=Category.GRAMMAR,
                span=TextPosition(match.start(), match.end()),
                message="Possible comma splice",
                explanation=(
                    "Two independent clauses may need a semicolon, a conjunction "
                    "or separate sentences."
                ),
                candidates=(),
                severity=Severity.SUGGESTION,
                confidence=0.5,
                detector=self.kind,
                rule="grammar.comma_splice",
            )
            for match in COMMA_SPLICE_PATTERN.finditer(text)
        ]

    def _article_agreement(self, text: str) -> List[Finding]:
        findings: List[Finding] = []
        for match in ARTICLE_PATTERN.finditer(text):
            article, word = match.group(1), match.group(2)
            expected = expected_article(word)
            if article.lower() == expected:
                continue
            replacement = match_case(article, expected)
            findings.append(
                Finding(
                    kind=Category.GRAMMAR,
                    span=TextPosition(match.start(1), match.end(1)),
                    message=f'Use "{replacement}" before "{word}"',
                    explanation=(
                        f'"{expected}" is the article that fits the sound of "{word}".'
                    ),
                    candidates=(replacement,),
                    severity=Severity.ERROR,
                    confidence=0.85,
                    detector=self.kind,
                    rule="grammar.article",
                )
            )
        return findings
