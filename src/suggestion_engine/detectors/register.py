from __future__ import annotations

from typing import List, Mapping, Tuple

from ..lexicon.rules import INFORMAL_WORDS, REGISTER_WORDS
from ..models import Category, DetectorKind, Finding, Severity, TextPosition
from ..tokenization import match_case
from .base import Detector, compile_phrase_pattern

REGISTER_CONFIDENCE = 0.7
INFORMAL_CONFIDENCE = 0.65


class RegisterDetector(Detector):
    """Suggests formal replacements for inappropriate or slang words."""

    kind = DetectorKind.REGISTER
    name = "register"

    def __init__(
        self,
        register_words: Mapping[str, Tuple[str, Tuple[str, ...]]] = REGISTER_WORDS,
        informal_words: Mapping[str, str] = INFORMAL_WORDS,
    ) -> None:
        self._register = {word.lower(): value for word, value in register_words.items()}
        self._informal = {word.lower(): value for word, value in informal_words.items()}
        self._register_pattern = compile_phrase_pattern(self._register)
        self._informal_pattern = compile_phrase_pattern(self._informal)

    def detect(self, text: str) -> List[Finding]:
        findings: List[Finding] = []
        if self._register_pattern is not None:
            for match in self._register_pattern.finditer(text):
                word = match.group()
                formal, alternatives = self._register[word.lower()]
                candidates = tuple(
                    match_case(word, option) for option in (formal, *alternatives)
                )
                findings.append(
                    Finding(
                        kind=Category.VOCABULARY,
                        span=TextPosition(match.start(), match.end()),
                        message=(
                            f'Consider replacing "{word}" with more appropriate language'
                        ),
                        explanation=(
                            f'You can use "{formal}" for formal writing, or choose: '
                            + ", ".join(alternatives)
                        ),
                        candidates=candidates,
                        severity=Severity.SUGGESTION,
                        confidence=REGISTER_CONFIDENCE,
                        detector=self.kind,
                        rule="register.inappropriate",
                    )
                )
        if self._informal_pattern is not None:
            for match in self._informal_pattern.finditer(text):
                word = match.group()
                formal = match_case(word, self._informal[word.lower()])
                findings.append(
                    Finding(
                        kind=Category.STYLE,
                        span=TextPosition(match.start(), match.end()),
                        message=f'"{word}" is informal',
                        explanation=f'Formal writing prefers "{formal}".',
                        candidates=(formal,),
                        severity=Severity.SUGGESTION,
                        confidence=INFORMAL_CONFIDENCE,
                        detector=self.kind,
                        rule="register.informal",
                    )
                )
        return findings
