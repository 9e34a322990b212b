from __future__ import annotations

import re
from typing import List

from ..lexicon import Lexicon
from ..models import Category, DetectorKind, Finding, Severity, TextPosition
from ..speller import EditDistanceSpeller
from ..tokenization import match_case, tokenize_words
from .base import Detector, compile_phrase_pattern

PROPER_NOUN_MIN_LENGTH = 3
NEGATIVE_CONTRACTION_SUFFIX = re.compile(r"['’]t\b", re.IGNORECASE)


def looks_like_proper_noun(word: str) -> bool:
    """Capitalized words longer than two letters are assumed to be names."""
    return word[:1].isupper() and len(word) >= PROPER_NOUN_MIN_LENGTH


class MisspellingDetector(Detector):
    """Flags words found in the fixed misspelling map."""

    kind = DetectorKind.MISSPELLING
    name = "misspelling"

    def __init__(self, lexicon: Lexicon) -> None:
        self._lexicon = lexicon
        self._pattern = compile_phrase_pattern(lexicon.misspellings)

    def detect(self, text: str) -> List[Finding]:
        if self._pattern is None:
            return []
        findings: List[Finding] = []
        for match in self._pattern.finditer(text):
            word = match.group()
            correction = self._lexicon.misspelling_of(word)
            if correction is None:
                continue
            replacement = match_case(word, correction)
            findings.append(
                Finding(
                    kind=Category.SPELLING,
                    span=TextPosition(match.start(), match.end()),
                    message=f'"{word}" is misspelled',
                    explanation=f'Did you mean "{replacement}"?',
                    candidates=(replacement,),
                    severity=Severity.ERROR,
                    confidence=0.95 if " " in correction else 0.99,
                    detector=self.kind,
                    rule="spelling.misspelling",
                )
            )
        return findings


class UnknownWordDetector(Detector):
    """Flags words missing from the lexicon that have close dictionary matches."""

    kind = DetectorKind.UNKNOWN_WORD
    name = "unknown_word"

    def __init__(
        self,
        lexicon: Lexicon,
        speller: EditDistanceSpeller | None = None,
        min_word_length: int = 3,
    ) -> None:
        self._lexicon = lexicon
        self._speller = speller or EditDistanceSpeller()
        self._min_word_length = min_word_length

    def detect(self, text: str) -> List[Finding]:
        findings: List[Finding] = []
        for token in tokenize_words(text):
            word = token.text
            if len(word) < self._min_word_length or looks_like_proper_noun(word):
                continue
            # Stems of "n't" contractions ("don", "isn") are not words on their own.
            if NEGATIVE_CONTRACTION_SUFFIX.match(text, token.end_char):
                continue
            if self._lexicon.is_known(word) or self._lexicon.misspelling_of(word):
                continue
            candidates = self._speller.candidates(word, self._lexicon)
            if not candidates:
                continue
            best = candidates[0]
            replacements = tuple(match_case(word, c.word) for c in candidates)
            findings.append(
                Finding(
                    kind=Category.SPELLING,
                    span=TextPosition(token.start_char, token.end_char),
                    message=f'"{word}" may be misspelled',
                    explanation="Possible corrections: " + ", ".join(replacements[:2]),
                    candidates=replacements,
                    severity=Severity.WARNING,
                    confidence=min(0.7, max(0.5, best.confidence + 0.1)),
                    detector=self.kind,
                    rule=f"spelling.{best.source}",
                )
            )
        return findings
