from __future__ import annotations

import re
from typing import List, Sequence

from ..lexicon.rules import GREETINGS
from ..models import Category, DetectorKind, Finding, Severity, TextPosition
from ..tokenization import has_terminal_punctuation, split_sentences
from .base import Detector

MULTIPLE_SPACES_PATTERN = re.compile(r" {2,}")
GREETING_FOLLOWERS_WITHOUT_COMMA = frozenset({"there", "and", "or", "to", "for"})


class PunctuationDetector(Detector):
    """Capitalization, spacing, greeting commas and terminal punctuation."""

    kind = DetectorKind.PUNCTUATION
    name = "punctuation"

    def __init__(self, greetings: Sequence[str] = GREETINGS) -> None:
        words = "|".join(re.escape(word) for word in greetings if word != "thanks")
        self._greeting_pattern = re.compile(
            rf"(?P<greeting>{words})\b(?=[ \t]+(?P<next>[A-Za-z]+))", re.IGNORECASE
        )

    def detect(self, text: str) -> List[Finding]:
        findings: List[Finding] = []
        for sentence in split_sentences(text):
            start = sentence.start_char
            at_boundary = start == 0 or text[start - 1].isspace()
            first = sentence.text[:1]
            if at_boundary and first.isalpha() and first.islower():
                findings.append(
                    Finding(
                        kind=Category.GRAMMAR,
                        span=TextPosition(start, start + 1),
                        message="Sentence should start with a capital letter",
                        explanation="Sentences should begin with a capital letter.",
                        candidates=(first.upper(),),
                        severity=Severity.WARNING,
                        confidence=0.8,
                        detector=self.kind,
                        rule="punctuation.capitalization",
                    )
                )
            greeting = self._greeting_pattern.match(sentence.text)
            if greeting and greeting.group("next").lower() not in GREETING_FOLLOWERS_WITHOUT_COMMA:
                word = greeting.group("greeting")
                findings.append(
                    Finding(
                        kind=Category.GRAMMAR,
                        span=TextPosition(start, start + len(word)),
                        message=f'Add a comma after "{word}"',
                        explanation="A greeting at the start of a sentence is followed by a comma.",
                        candidates=(word + ",",),
                        severity=Severity.SUGGESTION,
                        confidence=0.7,
                        detector=self.kind,
                        rule="punctuation.greeting_comma",
                    )
                )

        for match in MULTIPLE_SPACES_PATTERN.finditer(text):
            findings.append(
                Finding(
                    kind=Category.STYLE,
                    span=TextPosition(match.start(), match.end()),
                    message="Multiple spaces found",
                    explanation="Use a single space between words.",
                    candidates=(" ",),
                    severity=Severity.SUGGESTION,
                    confidence=0.9,
                    detector=self.kind,
                    rule="punctuation.multiple_spaces",
                )
            )

        stripped = text.rstrip()
        if stripped and not has_terminal_punctuation(stripped):
            end = len(stripped)
            findings.append(
                Finding(
                    kind=Category.GRAMMAR,
                    span=TextPosition(end, end),
                    message="Missing punctuation at end",
                    explanation="Sentences should end with proper punctuation.",
                    candidates=(".",),
                    severity=Severity.WARNING,
                    confidence=0.7,
                    detector=self.kind,
                    rule="punctuation.terminal",
                )
            )
        return findings
