from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

WORD_PATTERN = re.compile(r"[A-Za-z]+")
SENTENCE_TERMINATOR_PATTERN = re.compile(r"[.!?]+")
TERMINAL_PUNCTUATION_PATTERN = re.compile(r"[.!?][\"'\)\]]*$")


@dataclass(slots=True)
class Token:
    """A word and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


@dataclass(slots=True)
class Sentence:
    """
    A sentence body with surrounding whitespace trimmed.

    ``end_char`` covers the terminator when one is present.
    """

    text: str
    start_char: int
    end_char: int
    terminator: str

    @property
    def body(self) -> str:
        if self.terminator:
            return self.text[: -len(self.terminator)]
        return self.text

    @property
    def word_count(self) -> int:
        return len(self.body.split())


def tokenize_words(text: str) -> List[Token]:
    """Tokenize text into alphabetic word tokens with character offsets."""
    tokens: List[Token] = []
    for match in WORD_PATTERN.finditer(text):
        tokens.append(
            Token(text=match.group(), start_char=match.start(), end_char=match.end())
        )
    return tokens


def split_sentences(text: str) -> List[Sentence]:
    """Split text on runs of ``.``, ``!`` and ``?`` keeping offsets."""
    sentences: List[Sentence] = []
    cursor = 0
    for match in SENTENCE_TERMINATOR_PATTERN.finditer(text):
        _append_sentence(sentences, text, cursor, match.start(), match.group())
        cursor = match.end()
    _append_sentence(sentences, text, cursor, len(text), "")
    return sentences


def _append_sentence(
    sentences: List[Sentence], text: str, start: int, end: int, terminator: str
) -> None:
    segment = text[start:end]
    stripped = segment.strip()
    if not stripped:
        return
    body_start = start + (len(segment) - len(segment.lstrip()))
    body_end = body_start + len(stripped)
    if terminator:
        body_end = end + len(terminator)
    sentences.append(
        Sentence(
            text=text[body_start:body_end],
            start_char=body_start,
            end_char=body_end,
            terminator=terminator,
        )
    )


def count_words(text: str) -> int:
    """Whitespace-delimited word count."""
    return len(text.split())


def has_terminal_punctuation(text: str) -> bool:
    return bool(TERMINAL_PUNCTUATION_PATTERN.search(text.rstrip()))


def match_case(original: str, replacement: str) -> str:
    """Carry the capitalization of ``original`` over to ``replacement``."""
    if not original or not replacement:
        return replacement
    if len(original) > 1 and original.isupper():
        return replacement.upper()
    if original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement
