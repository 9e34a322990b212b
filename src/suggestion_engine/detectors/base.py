from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterable, List

from ..models import DetectorKind, Finding


class Detector(ABC):
    """
    A pure function of the input text and immutable rule tables.

    Implementations must not keep per-call state on ``self`` so that one
    instance can serve concurrent passes.
    """

    kind: DetectorKind
    name: str

    @abstractmethod
    def detect(self, text: str) -> List[Finding]:
        """Return every finding for ``text``."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def compile_phrase_pattern(phrases: Iterable[str]) -> re.Pattern[str] | None:
    """
    Build one case-insensitive, word-boundary anchored alternation.

    Longer phrases come first so they win over their own prefixes.
    """
    ordered = sorted(set(phrases), key=lambda phrase: (-len(phrase), phrase))
    if not ordered:
        return None
    alternation = "|".join(re.escape(phrase) for phrase in ordered)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)
