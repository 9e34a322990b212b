from typing import List

from suggestion_engine.detectors import Detector, MisspellingDetector, PunctuationDetector
from suggestion_engine.models import (
    Category,
    DetectorKind,
    Finding,
    RemoteFailure,
    RemoteFindings,
    RemoteStatus,
    Severity,
    TextPosition,
)
from suggestion_engine.pipeline import analyze_text
from suggestion_engine.remote import CallableRemoteAnalyzer
from suggestion_engine.rule_bank import RuleBank
from tests.utils import assert_no_overlaps, assert_spans_valid, default_engine, default_lexicon


class ExplodingDetector(Detector):
    kind = DetectorKind.STRUCTURE
    name = "exploding"

    def detect(self, text: str) -> List[Finding]:
        raise ValueError("malformed input")


def test_misspelling_round_trip():
    """"recieve" is flagged, applying it yields "receive" and nothing remains."""
    engine = default_engine()
    text = "I will recieve the letter."
    result = engine.analyze(text)

    spelling = [s for s in result.suggestions if s.category is Category.SPELLING]
    assert len(spelling) == 1
    assert spelling[0].original_text == "recieve"
    assert spelling[0].replacement_candidates[0] == "receive"

    outcome, projected = engine.apply(text, result, spelling[0].id)
    assert outcome.text == "I will receive the letter."
    assert projected.text_version == 1

    reanalyzed = engine.analyze(outcome.text, text_version=projected.text_version)
    assert not [s for s in reanalyzed.suggestions if "receive" in s.original_text.lower()]
    assert reanalyzed.suggestions == ()


def test_greeting_scenario_has_one_suggestion_per_span():
    """The comma after "Hello" is reported once and "Bob" is left alone."""
    text = "Hello my name is Bob"
    result = default_engine().analyze(text)

    on_hello = [s for s in result.suggestions if s.span.conflicts_with(TextPosition(0, 5))]
    assert len(on_hello) == 1
    assert on_hello[0].replacement_candidates == ("Hello,",)
    assert not [s for s in result.suggestions if s.span.conflicts_with(TextPosition(17, 20))]
    spans = [(s.span.start, s.span.end) for s in result.suggestions]
    assert len(spans) == len(set(spans))
    assert [s.rule for s in result.suggestions] == [
        "punctuation.greeting_comma",
        "punctuation.terminal",
    ]


def test_negative_contractions_are_not_misspellings():
    engine = default_engine()
    for text in (
        "I don't know what happened.",
        "It isn't ready yet.",
        "She doesn't like it.",
        "We haven't seen the report.",
    ):
        result = engine.analyze(text)
        assert not [s for s in result.suggestions if s.category is Category.SPELLING], text


def test_comparative_than_is_not_a_grammar_error():
    result = default_engine().analyze("She is taller than you.")

    assert not [s for s in result.suggestions if s.category is Category.GRAMMAR]


def test_fragment_scenario():
    """"Yes." is complete; "Yes" is a fragment."""
    engine = default_engine()
    assert engine.analyze("Yes.").suggestions == ()

    rules = [s.rule for s in engine.analyze("Yes").suggestions]
    assert "structure.fragment" in rules


def test_empty_and_non_string_input_give_perfect_score():
    bank = RuleBank([MisspellingDetector(default_lexicon())])
    for value in ("", "   \n", None, 42):
        result = analyze_text(value, bank, text_version=3)
        assert result.suggestions == ()
        assert result.score == 100
        assert result.word_count == 0
        assert result.text_version == 3


def test_detector_failure_is_isolated():
    bank = RuleBank([ExplodingDetector(), MisspellingDetector(default_lexicon())])
    result = analyze_text("I recieve mail.", bank)

    assert result.failed_detectors == ("exploding",)
    assert result.is_partial
    assert [s.replacement_candidates for s in result.suggestions] == [("receive",)]


def test_parallel_rule_bank_matches_sequential():
    text = "hello  there. i recieve alot of mail"
    detectors = [MisspellingDetector(default_lexicon()), PunctuationDetector()]
    sequential = analyze_text(text, RuleBank(detectors))
    parallel = analyze_text(text, RuleBank(detectors, max_workers=4))

    assert parallel.suggestions == sequential.suggestions


def test_remote_failure_keeps_local_findings():
    bank = RuleBank([MisspellingDetector(default_lexicon())])
    remote = CallableRemoteAnalyzer(lambda text: RemoteFailure(reason="timeout"))
    result = analyze_text("I recieve mail.", bank, remote=remote)

    assert result.remote_status is RemoteStatus.FAILED
    assert result.is_partial
    assert len(result.suggestions) == 1


def test_raising_remote_is_reported_as_failure():
    def boom(text: str):
        raise ConnectionError("offline")

    bank = RuleBank([MisspellingDetector(default_lexicon())])
    result = analyze_text("I recieve mail.", bank, remote=CallableRemoteAnalyzer(boom))

    assert result.remote_status is RemoteStatus.FAILED
    assert len(result.suggestions) == 1


def test_remote_findings_are_aggregated_with_local_ones():
    remote_finding = Finding(
        kind=Category.VOCABULARY,
        span=TextPosition(10, 14),
        message="Be specific",
        explanation="",
        candidates=("letters",),
        severity=Severity.SUGGESTION,
        confidence=0.8,
        detector=DetectorKind.REMOTE,
        rule="remote.vocabulary",
    )
    remote = CallableRemoteAnalyzer(lambda text: RemoteFindings(findings=(remote_finding,)))
    bank = RuleBank([MisspellingDetector(default_lexicon())])
    result = analyze_text("I recieve mail.", bank, remote=remote)

    assert result.remote_status is RemoteStatus.OK
    assert [s.rule for s in result.suggestions] == ["spelling.misspelling", "remote.vocabulary"]
    assert result.score == 100 - 8 - 6


def test_messy_text_respects_overlap_and_span_invariants():
    text = (
        "hello  my freind. i is gonna go to teh park and we ran and they sang and "
        "I slept and it rained, we were wet an cat could of helped"
    )
    result = default_engine().analyze(text)

    assert result.suggestions
    assert_no_overlaps(result.suggestions)
    assert_spans_valid(result.suggestions, text)
    assert result.word_count == len(text.split())
    assert 0 <= result.score <= 100


def test_engine_dismiss_updates_score():
    engine = default_engine()
    result = engine.analyze("She could of gone  home.")
    grammar = next(s for s in result.suggestions if s.category is Category.GRAMMAR)

    outcome, updated = engine.dismiss(result, grammar.id)
    assert updated.score == 98
    assert updated.get(grammar.id).dismissed
    assert engine.dismiss(updated, grammar.id)[0].status.value == "stale"
