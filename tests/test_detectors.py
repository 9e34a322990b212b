import pytest

from suggestion_engine.config import EngineConfig
from suggestion_engine.detectors import (
    DETECTOR_NAMES,
    GrammarPatternDetector,
    MisspellingDetector,
    PunctuationDetector,
    RegisterDetector,
    StructureDetector,
    UnknownWordDetector,
    build_detector_from_config,
    create_detector,
)
from suggestion_engine.detectors.grammar import expected_article
from suggestion_engine.lexicon import Lexicon
from suggestion_engine.models import Category, Severity
from tests.utils import default_lexicon


def _rules(findings):
    return [finding.rule for finding in findings]


def test_misspelling_detector_flags_map_entries_with_case():
    text = "I will recieve it. Alot happened."
    findings = MisspellingDetector(default_lexicon()).detect(text)

    assert [(f.span.start, f.span.end) for f in findings] == [(7, 14), (19, 23)]
    first, second = findings
    assert first.candidates == ("receive",)
    assert first.kind is Category.SPELLING
    assert first.severity is Severity.ERROR
    assert first.confidence == 0.99
    assert second.candidates == ("A lot",)
    assert second.confidence == 0.95


def test_misspelling_detector_respects_word_boundaries():
    findings = MisspellingDetector(default_lexicon()).detect("Stehtehs are fine.")
    assert findings == []


def test_unknown_word_detector_uses_speller_candidates():
    lexicon = Lexicon(basic=["the", "cat", "sat", "mat", "on"])
    findings = UnknownWordDetector(lexicon).detect("the caat sat on the mat")

    assert len(findings) == 1
    finding = findings[0]
    assert (finding.span.start, finding.span.end) == (4, 8)
    assert finding.candidates[0] == "cat"
    assert finding.severity is Severity.WARNING
    assert 0.5 <= finding.confidence <= 0.7


def test_unknown_word_detector_skips_short_words_and_proper_nouns():
    lexicon = Lexicon(basic=["the", "cat", "sat"])
    detector = UnknownWordDetector(lexicon)

    assert detector.detect("Zorblax sat") == []
    assert detector.detect("xq sat") == []


def test_unknown_word_detector_stays_silent_without_candidates():
    lexicon = Lexicon(basic=["elephant"])
    assert UnknownWordDetector(lexicon).detect("qwzxv") == []


def test_grammar_phrases_are_replaced_with_matching_case():
    findings = GrammarPatternDetector().detect("Could of been worse. She could of gone.")

    phrases = [f for f in findings if f.rule == "grammar.phrase"]
    assert [f.candidates for f in phrases] == [("Could have",), ("could have",)]
    assert phrases[1].span.start == 25
    assert all(f.severity is Severity.ERROR for f in phrases)


def test_grammar_subject_verb_phrases():
    findings = GrammarPatternDetector().detect("I is happy and they is too.")
    assert [f.candidates[0] for f in findings if f.rule == "grammar.phrase"] == [
        "I am",
        "they are",
    ]


def test_double_negative_is_advisory():
    findings = GrammarPatternDetector().detect("I don't have nothing.")
    double = [f for f in findings if f.rule == "grammar.double_negative"]

    assert len(double) == 1
    assert (double[0].span.start, double[0].span.end) == (2, 20)
    assert double[0].candidates == ()
    assert double[0].severity is Severity.WARNING


def test_comma_splice_can_be_disabled():
    text = "It rained, we were wet."
    assert "grammar.comma_splice" in _rules(GrammarPatternDetector().detect(text))
    disabled = GrammarPatternDetector(comma_splice_enabled=False)
    assert "grammar.comma_splice" not in _rules(disabled.detect(text))


def test_article_agreement_targets_only_the_article():
    findings = GrammarPatternDetector().detect("I ate a apple and an cat. An hour passed.")
    articles = [f for f in findings if f.rule == "grammar.article"]

    assert [(f.span.start, f.span.end, f.candidates) for f in articles] == [
        (6, 7, ("an",)),
        (18, 20, ("a",)),
    ]


def test_expected_article_exceptions():
    assert expected_article("university") == "a"
    assert expected_article("hour") == "an"
    assert expected_article("Elephant") == "an"
    assert expected_article("dog") == "a"


def test_register_detector_offers_formal_alternatives():
    findings = RegisterDetector().detect("That plan is stupid and I'm gonna say so.")

    vocab = [f for f in findings if f.kind is Category.VOCABULARY]
    style = [f for f in findings if f.kind is Category.STYLE]
    assert vocab[0].candidates[0] == "unwise"
    assert len(vocab[0].candidates) > 1
    assert vocab[0].severity is Severity.SUGGESTION
    assert style[0].candidates == ("going to",)


def test_structure_detector_long_sentence():
    long_sentence = " ".join(["word"] * 31) + "."
    findings = StructureDetector().detect(long_sentence)
    assert _rules(findings) == ["structure.long_sentence"]
    assert findings[0].candidates == ()
    assert findings[0].kind is Category.CLARITY


def test_structure_detector_run_on():
    text = "I ran and I jumped and I swam and I slept."
    assert _rules(StructureDetector().detect(text)) == ["structure.run_on"]
    relaxed = StructureDetector(run_on_and_splits=4)
    assert relaxed.detect(text) == []


def test_structure_detector_fragment_requires_missing_punctuation():
    """"Yes." is a complete reply; "Yes" without punctuation is a fragment."""
    detector = StructureDetector()
    assert detector.detect("Yes.") == []

    findings = detector.detect("Yes")
    assert _rules(findings) == ["structure.fragment"]
    assert findings[0].severity is Severity.WARNING
    assert (findings[0].span.start, findings[0].span.end) == (0, 3)


def test_punctuation_capitalization_and_spaces():
    text = "hello there. the  cat sat."
    findings = PunctuationDetector().detect(text)

    capitals = [f for f in findings if f.rule == "punctuation.capitalization"]
    assert [(f.span.start, f.candidates) for f in capitals] == [(0, ("H",)), (13, ("T",))]
    spaces = [f for f in findings if f.rule == "punctuation.multiple_spaces"]
    assert [(f.span.start, f.span.end) for f in spaces] == [(16, 18)]
    assert "punctuation.greeting_comma" not in _rules(findings)
    assert "punctuation.terminal" not in _rules(findings)


def test_punctuation_greeting_comma_and_terminal_insertion():
    text = "Hello my name is Bob"
    findings = PunctuationDetector().detect(text)

    greeting = [f for f in findings if f.rule == "punctuation.greeting_comma"]
    assert [(f.span.start, f.span.end, f.candidates) for f in greeting] == [
        (0, 5, ("Hello,",))
    ]
    terminal = [f for f in findings if f.rule == "punctuation.terminal"]
    assert len(terminal) == 1
    assert terminal[0].span.is_insertion
    assert terminal[0].span.start == len(text)
    assert terminal[0].candidates == (".",)


def test_create_detector_rejects_unknown_names():
    with pytest.raises(ValueError):
        create_detector("telepathy", default_lexicon())


def test_build_detector_from_config_threads_thresholds():
    config = EngineConfig(run_on_and_splits=10, comma_splice_enabled=False)
    structure = build_detector_from_config("structure", default_lexicon(), config)
    grammar = build_detector_from_config("grammar-pattern", default_lexicon(), config)

    assert structure.detect("a and b and c and d and e.") == []
    assert grammar.detect("It rained, we were wet.") == []
    assert [
        build_detector_from_config(name, default_lexicon(), config).name
        for name in DETECTOR_NAMES
    ] == list(DETECTOR_NAMES)


def test_unknown_word_detector_skips_negative_contraction_stems():
    lexicon = Lexicon(basic=["know", "what", "done", "dog", "down", "inn", "ready"])
    detector = UnknownWordDetector(lexicon)

    assert detector.detect("I don't know what happened") == []
    assert detector.detect("It isn’t ready") == []
    assert [f.span.start for f in detector.detect("I dont know")] == [2]
