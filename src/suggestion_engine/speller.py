from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import Levenshtein

from .lexicon import Lexicon
from .lexicon.rules import PHONETIC_SUBSTITUTIONS

SUBSTITUTION_CONFIDENCE = 0.5
EXACT_MATCH_CONFIDENCE = 0.95


@dataclass(slots=True)
class SpellCandidate:
    """A proposed correction and how it was found."""

    word: str
    confidence: float
    distance: int | None = None
    source: str = "edit_distance"


def distance_confidence(distance: int) -> float:
    """Distance 1 maps to 0.6 and distance 2 to 0.4."""
    return round(max(0.0, 0.8 - 0.2 * distance), 2)


class EditDistanceSpeller:
    """Propose dictionary words close to an unknown word."""

    def __init__(
        self,
        max_distance: int = 2,
        max_candidates: int = 3,
        substitutions: Sequence[Tuple[str, str]] = PHONETIC_SUBSTITUTIONS,
        min_candidate_length: int = 3,
    ) -> None:
        self._max_distance = max_distance
        self._max_candidates = max_candidates
        self._substitutions = tuple(substitutions)
        self._min_candidate_length = min_candidate_length

    def suggest(self, word: str, lexicon: Lexicon) -> List[str]:
        """Return at most ``max_candidates`` correction strings."""
        return [candidate.word for candidate in self.candidates(word, lexicon)]

    def candidates(self, word: str, lexicon: Lexicon) -> List[SpellCandidate]:
        """
        Rank candidates: fixed misspelling map first, then edit-distance hits by
        ascending distance with basic words first on ties, then phonetic
        substitution hits.
        """
        lowered = word.lower()
        ranked: List[SpellCandidate] = []

        exact = lexicon.misspelling_of(lowered)
        if exact:
            ranked.append(
                SpellCandidate(exact, EXACT_MATCH_CONFIDENCE, None, "misspelling")
            )

        hits: List[Tuple[int, str]] = []
        for entry in lexicon.entries_near_length(len(lowered), self._max_distance):
            if len(entry) < self._min_candidate_length or entry == lowered:
                continue
            distance = Levenshtein.distance(
                lowered, entry, score_cutoff=self._max_distance
            )
            if distance <= self._max_distance:
                hits.append((distance, entry))
        hits.sort(key=lambda hit: (hit[0], not lexicon.is_basic(hit[1]), hit[1]))
        ranked.extend(
            SpellCandidate(entry, distance_confidence(distance), distance)
            for distance, entry in hits
        )

        for source, target in self._substitutions:
            if source not in lowered:
                continue
            variant = lowered.replace(source, target, 1)
            if variant != lowered and lexicon.is_known(variant):
                ranked.append(
                    SpellCandidate(variant, SUBSTITUTION_CONFIDENCE, None, "substitution")
                )

        unique: List[SpellCandidate] = []
        seen: set[str] = set()
        for candidate in ranked:
            if candidate.word in seen:
                continue
            seen.add(candidate.word)
            unique.append(candidate)
            if len(unique) >= self._max_candidates:
                break
        return unique
