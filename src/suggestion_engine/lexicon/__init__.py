"""
Immutable word sets and misspelling lookups shared by every analysis pass.
"""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from .rules import INFORMAL_WORDS, MISSPELLINGS, REGISTER_WORDS
from .words import ACRONYMS, BASIC_WORDS, CALENDAR_TERMS, EXTENDED_WORDS, PROPER_NOUNS

__all__ = [
    "DictionaryLoadError",
    "Lexicon",
    "build_default_lexicon",
    "load_word_list",
]


class DictionaryLoadError(RuntimeError):
    """Raised when a custom word list cannot be read."""


class Lexicon:
    """
    Read-only dictionary view.

    Every set is normalized to lowercase at construction time and never
    mutated afterwards, so one instance can be shared across threads.
    """

    __slots__ = (
        "_basic",
        "_known",
        "_misspellings",
        "_by_length",
        "_entries",
    )

    def __init__(
        self,
        basic: Iterable[str],
        extended: Iterable[str] = (),
        proper_nouns: Iterable[str] = (),
        acronyms: Iterable[str] = (),
        calendar_terms: Iterable[str] = (),
        informal: Iterable[str] = (),
        misspellings: Mapping[str, str] | None = None,
    ) -> None:
        fixes = {
            key.lower(): value for key, value in (misspellings or {}).items()
        }
        basic_words = frozenset(word.lower() for word in basic)
        dictionary = set(basic_words)
        dictionary.update(word.lower() for word in extended)
        # Corrections are always valid words themselves.
        for correction in fixes.values():
            dictionary.update(part.lower() for part in correction.split())
        known = set(dictionary)
        for group in (proper_nouns, acronyms, calendar_terms, informal):
            known.update(word.lower() for word in group)

        self._basic = basic_words
        self._known = frozenset(known)
        self._misspellings: Mapping[str, str] = MappingProxyType(fixes)
        self._entries: Tuple[str, ...] = tuple(sorted(dictionary))
        grouped: Dict[int, list[str]] = defaultdict(list)
        for word in self._entries:
            grouped[len(word)].append(word)
        self._by_length: Mapping[int, Tuple[str, ...]] = MappingProxyType(
            {length: tuple(words) for length, words in grouped.items()}
        )

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_known(word)

    def __len__(self) -> int:
        return len(self._known)

    def is_known(self, word: str) -> bool:
        """Case-insensitive exact match against every word set."""
        return word.lower() in self._known

    def is_basic(self, word: str) -> bool:
        return word.lower() in self._basic

    def misspelling_of(self, word: str) -> str | None:
        """Return the fixed correction for a known misspelling, if any."""
        return self._misspellings.get(word.lower())

    @property
    def misspellings(self) -> Mapping[str, str]:
        return self._misspellings

    @property
    def entries(self) -> Tuple[str, ...]:
        """Sorted dictionary words usable as spelling candidates."""
        return self._entries

    def entries_near_length(self, length: int, tolerance: int) -> Iterable[str]:
        """Yield dictionary words whose length is within ``tolerance`` of ``length``."""
        for size in range(max(1, length - tolerance), length + tolerance + 1):
            yield from self._by_length.get(size, ())

    def with_words(self, words: Iterable[str]) -> "Lexicon":
        """Return a new lexicon extended with ``words`` as dictionary entries."""
        extra = [word.strip().lower() for word in words if word.strip()]
        return Lexicon(
            basic=self._basic,
            extended=set(self._entries).union(extra),
            proper_nouns=self._known.difference(self._entries),
            misspellings=self._misspellings,
        )


def load_word_list(path: str | Path) -> list[str]:
    """Read a newline-delimited word list, skipping blanks and ``#`` comments."""
    source = Path(path)
    if not source.exists():
        raise DictionaryLoadError(f"Word list not found: {source}")
    try:
        lines = source.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"Unable to read word list {source}: {exc}") from exc
    return [
        line.strip().lower()
        for line in lines
        if line.strip() and not line.lstrip().startswith("#")
    ]


def build_default_lexicon(custom_dictionary_path: str | Path | None = None) -> Lexicon:
    """Construct the built-in lexicon, optionally extended with a custom word list."""
    lexicon = Lexicon(
        basic=BASIC_WORDS,
        extended=EXTENDED_WORDS,
        proper_nouns=PROPER_NOUNS,
        acronyms=ACRONYMS,
        calendar_terms=CALENDAR_TERMS,
        informal=[*REGISTER_WORDS, *INFORMAL_WORDS],
        misspellings=MISSPELLINGS,
    )
    if custom_dictionary_path:
        lexicon = lexicon.with_words(load_word_list(custom_dictionary_path))
    return lexicon
