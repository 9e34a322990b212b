from __future__ import annotations

from typing import List

from ..models import Category, DetectorKind, Finding, Severity, TextPosition
from ..tokenization import Sentence, split_sentences
from .base import Detector


class StructureDetector(Detector):
    """
    Sentence-level heuristics: overly long sentences, run-ons and fragments.

    The run-on test counts pieces produced by splitting on " and " / " but ",
    which also fires on long legitimate lists. The thresholds are configurable
    for that reason.
    """

    kind = DetectorKind.STRUCTURE
    name = "structure"

    def __init__(
        self,
        long_sentence_words: int = 30,
        run_on_and_splits: int = 3,
        run_on_but_splits: int = 2,
        fragment_max_words: int = 3,
    ) -> None:
        self._long_sentence_words = long_sentence_words
        self._run_on_and_splits = run_on_and_splits
        self._run_on_but_splits = run_on_but_splits
        self._fragment_max_words = fragment_max_words

    def detect(self, text: str) -> List[Finding]:
        findings: List[Finding] = []
        for sentence in split_sentences(text):
            word_count = sentence.word_count
            if word_count > self._long_sentence_words:
                findings.append(
                    self._finding(
                        sentence,
                        category=Category.CLARITY,
                        message="Very long sentence detected",
                        explanation=(
                            f"This sentence has {word_count} words. Shorter "
                            "sentences are often clearer."
                        ),
                        severity=Severity.SUGGESTION,
                        confidence=0.6,
                        rule="structure.long_sentence",
                    )
                )
            if self._is_run_on(sentence):
                findings.append(
                    self._finding(
                        sentence,
                        category=Category.CLARITY,
                        message="Possible run-on sentence",
                        explanation=(
                            "This sentence may have too many clauses. Consider "
                            "breaking it up or using semicolons."
                        ),
                        severity=Severity.SUGGESTION,
                        confidence=0.55,
                        rule="structure.run_on",
                    )
                )
            if word_count < self._fragment_max_words and not sentence.terminator:
                findings.append(
                    self._finding(
                        sentence,
                        category=Category.GRAMMAR,
                        message="Possible sentence fragment",
                        explanation="This may be an incomplete sentence.",
                        severity=Severity.WARNING,
                        confidence=0.6,
                        rule="structure.fragment",
                    )
                )
        return findings

    def _is_run_on(self, sentence: Sentence) -> bool:
        body = sentence.body
        return (
            len(body.split(" and ")) > self._run_on_and_splits
            or len(body.split(" but ")) > self._run_on_but_splits
        )

    def _finding(
        self,
        sentence: Sentence,
        *,
        category: Category,
        message: str,
        explanation: str,
        severity: Severity,
        confidence: float,
        rule: str,
    ) -> Finding:
        return Finding(
            kind=category,
            span=TextPosition(sentence.start_char, sentence.end_char),
            message=message,
            explanation=explanation,
            candidates=(),
            severity=severity,
            confidence=confidence,
            detector=self.kind,
            rule=rule,
        )
