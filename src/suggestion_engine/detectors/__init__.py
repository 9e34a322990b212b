from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..config import DEFAULT_DETECTORS
from ..speller import EditDistanceSpeller
from .base import Detector
from .grammar import GrammarPatternDetector
from .punctuation import PunctuationDetector
from .register import RegisterDetector
from .spelling import MisspellingDetector, UnknownWordDetector
from .structure import StructureDetector

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import EngineConfig
    from ..lexicon import Lexicon

__all__ = [
    "DETECTOR_NAMES",
    "Detector",
    "GrammarPatternDetector",
    "MisspellingDetector",
    "PunctuationDetector",
    "RegisterDetector",
    "StructureDetector",
    "UnknownWordDetector",
    "create_detector",
    "build_detector_from_config",
]

# Default execution order; matches the overlap tie-break order.
DETECTOR_NAMES = DEFAULT_DETECTORS


def create_detector(name: str, lexicon: "Lexicon", **kwargs: Any) -> Detector:
    """Factory for building detectors by name."""
    normalized = name.lower().strip().replace("-", "_")
    if normalized == "misspelling":
        return MisspellingDetector(lexicon)
    if normalized == "unknown_word":
        return UnknownWordDetector(lexicon, **kwargs)
    if normalized == "grammar_pattern":
        return GrammarPatternDetector(**kwargs)
    if normalized == "register":
        return RegisterDetector(**kwargs)
    if normalized == "structure":
        return StructureDetector(**kwargs)
    if normalized == "punctuation":
        return PunctuationDetector(**kwargs)
    raise ValueError(f"Unknown detector '{name}'.")


def build_detector_from_config(
    name: str, lexicon: "Lexicon", config: "EngineConfig"
) -> Detector:
    """Convenience helper that threads EngineConfig thresholds into a detector."""
    normalized = name.lower().strip().replace("-", "_")
    if normalized == "unknown_word":
        speller = EditDistanceSpeller(
            max_distance=config.max_edit_distance,
            max_candidates=config.max_spelling_candidates,
        )
        return create_detector(
            name, lexicon, speller=speller, min_word_length=config.min_word_length
        )
    if normalized == "grammar_pattern":
        return create_detector(
            name,
            lexicon,
            comma_splice_enabled=config.comma_splice_enabled,
            article_agreement_enabled=config.article_agreement_enabled,
        )
    if normalized == "structure":
        return create_detector(
            name,
            lexicon,
            long_sentence_words=config.long_sentence_words,
            run_on_and_splits=config.run_on_and_splits,
            run_on_but_splits=config.run_on_but_splits,
            fragment_max_words=config.fragment_max_words,
        )
    return create_detector(name, lexicon)
