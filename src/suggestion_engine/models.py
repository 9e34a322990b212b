from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union


class Category(str, Enum):
    """User-facing suggestion categories."""

    GRAMMAR = "grammar"
    SPELLING = "spelling"
    VOCABULARY = "vocabulary"
    CLARITY = "clarity"
    STYLE = "style"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class DetectorKind(str, Enum):
    """Detector families, declared in overlap tie-break order."""

    MISSPELLING = "misspelling"
    GRAMMAR_PATTERN = "grammar_pattern"
    UNKNOWN_WORD = "unknown_word"
    STRUCTURE = "structure"
    PUNCTUATION = "punctuation"
    REGISTER = "register"
    REMOTE = "remote"

    @property
    def priority(self) -> int:
        """Lower values win confidence ties."""
        return _PRIORITY[self]


_PRIORITY = {kind: idx for idx, kind in enumerate(DetectorKind)}


@dataclass(frozen=True, slots=True)
class TextPosition:
    """Half-open [start, end) character offsets into one text snapshot."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end

    def is_valid_for(self, text: str) -> bool:
        return 0 <= self.start <= self.end <= len(text)

    def strictly_contains(self, offset: int) -> bool:
        return self.start < offset < self.end

    def conflicts_with(self, other: "TextPosition") -> bool:
        """
        Return True when two spans cannot both be offered to the user.

        Ranges conflict when they share an offset. An insertion conflicts with a
        range only when it falls strictly inside it, and with another insertion
        only at the same offset.
        """
        if self.is_insertion and other.is_insertion:
            return self.start == other.start
        if self.is_insertion:
            return other.strictly_contains(self.start)
        if other.is_insertion:
            return self.strictly_contains(other.start)
        return self.start < other.end and other.start < self.end

    def shifted(self, delta: int) -> "TextPosition":
        return TextPosition(self.start + delta, self.end + delta)


@dataclass(frozen=True, slots=True)
class Finding:
    """Raw detector output, consumed by the aggregator within one pass."""

    kind: Category
    span: TextPosition
    message: str
    explanation: str
    candidates: Tuple[str, ...]
    severity: Severity
    confidence: float
    detector: DetectorKind
    rule: str = ""


@dataclass(frozen=True, slots=True)
class Suggestion:
    """Canonical, positioned correction or advisory for one text version."""

    id: str
    category: Category
    span: TextPosition
    text_version: int
    original_text: str
    replacement_candidates: Tuple[str, ...]
    confidence: float
    severity: Severity
    message: str = ""
    explanation: str = ""
    detector: DetectorKind = DetectorKind.REMOTE
    rule: str = ""
    dismissed: bool = False

    @property
    def is_advisory(self) -> bool:
        return not self.replacement_candidates

    @property
    def is_active(self) -> bool:
        return not self.dismissed


class RemoteStatus(str, Enum):
    NOT_REQUESTED = "not_requested"
    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Complete output of one analysis pass over a text snapshot."""

    suggestions: Tuple[Suggestion, ...]
    score: int
    word_count: int
    text_version: int
    remote_status: RemoteStatus = RemoteStatus.NOT_REQUESTED
    failed_detectors: Tuple[str, ...] = ()

    @property
    def active_suggestions(self) -> Tuple[Suggestion, ...]:
        return tuple(s for s in self.suggestions if s.is_active)

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_detectors) or self.remote_status is RemoteStatus.FAILED

    def get(self, suggestion_id: str) -> Suggestion | None:
        for suggestion in self.suggestions:
            if suggestion.id == suggestion_id:
                return suggestion
        return None


class ApplyStatus(str, Enum):
    APPLIED = "applied"
    DISMISSED = "dismissed"
    STALE = "stale"
    INVALID_CANDIDATE = "invalid_candidate"


@dataclass(frozen=True, slots=True)
class ApplyResult:
    """New text plus the reconciled suggestion list after an accept."""

    status: ApplyStatus
    text: str
    suggestions: Tuple[Suggestion, ...]
    text_version: int
    applied: Suggestion | None = None
    replacement: str | None = None
    invalidated: Tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        return self.status is ApplyStatus.APPLIED


@dataclass(frozen=True, slots=True)
class DismissResult:
    status: ApplyStatus
    suggestions: Tuple[Suggestion, ...]


@dataclass(frozen=True, slots=True)
class RemoteFindings:
    """Well-formed remote response, normalized into findings."""

    findings: Tuple[Finding, ...]
    processing_time: float | None = None
    skipped: int = 0


@dataclass(frozen=True, slots=True)
class RemoteFailure:
    """Remote analysis did not produce usable findings."""

    reason: str
    details: dict = field(default_factory=dict)


RemoteAnalysis = Union[RemoteFindings, RemoteFailure]
