from suggestion_engine.models import Category, RemoteFailure, RemoteFindings, Severity, TextPosition
from suggestion_engine.remote.adapters import (
    normalize_remote_items,
    parse_analyze_response,
    parse_category_buckets,
)


def test_analyze_response_is_normalized_into_findings():
    text = "I'm gonna finish the essay."
    payload = {
        "analysisResult": [
            {
                "type": "tone",
                "severity": "info",
                "originalText": "gonna",
                "suggestions": ["going to", "about to"],
                "message": "Informal wording",
                "explanation": "Use formal register in essays.",
                "confidence": 0.7,
            }
        ],
        "processingTime": 120,
    }
    result = parse_analyze_response(text, payload)

    assert isinstance(result, RemoteFindings)
    assert result.processing_time == 120.0
    finding = result.findings[0]
    assert finding.kind is Category.STYLE
    assert finding.severity is Severity.SUGGESTION
    assert finding.span == TextPosition(4, 9)
    assert finding.candidates == ("going to", "about to")
    assert finding.message == "Informal wording"
    assert finding.rule == "remote.style"


def test_repeated_quotes_land_on_successive_occurrences():
    text = "the cat and the cat"
    items = [
        {"type": "spelling", "originalText": "cat", "suggestions": ["cats"]},
        {"type": "spelling", "originalText": "cat", "suggestions": ["cats"]},
    ]
    result = normalize_remote_items(text, items)
    assert [f.span for f in result.findings] == [TextPosition(4, 7), TextPosition(16, 19)]


def test_explicit_position_is_used_only_when_it_matches_the_text():
    text = "the cat and the cat"
    items = [
        {"type": "grammar", "originalText": "cat", "position": {"start": 16, "end": 19}},
        {"type": "grammar", "originalText": "and", "startPosition": 0, "endPosition": 3},
    ]
    result = normalize_remote_items(text, items)
    assert [f.span for f in result.findings] == [TextPosition(16, 19), TextPosition(8, 11)]


def test_unusable_items_are_skipped_and_counted():
    text = "Some text here."
    items = [
        {"type": "grammar", "originalText": "missing"},
        {"type": "astrology", "originalText": "text"},
        {"type": "grammar", "originalText": ""},
        "not a dict",
        {"originalText": "text", "suggestions": "texts", "confidence": 7},
        {"type": "clarity", "original": "here", "confidence": "high"},
    ]
    result = normalize_remote_items(text, items)

    assert isinstance(result, RemoteFindings)
    assert result.skipped == 4
    grammar, clarity = result.findings
    assert grammar.kind is Category.GRAMMAR
    assert grammar.candidates == ("texts",)
    assert grammar.confidence == 1.0
    assert clarity.kind is Category.CLARITY
    assert clarity.confidence == 0.8


def test_malformed_payloads_fail_closed():
    assert isinstance(parse_analyze_response("x", "not json object"), RemoteFailure)
    assert isinstance(parse_analyze_response("x", {"processingTime": 3}), RemoteFailure)
    assert isinstance(parse_analyze_response("x", {"analysisResult": "oops"}), RemoteFailure)
    assert isinstance(normalize_remote_items("x", None), RemoteFailure)


def test_category_buckets_use_bucket_defaults():
    text = "I is ready but I'm gonna wait."
    payload = {
        "grammar": [
            {
                "issue": "Subject-verb agreement",
                "suggestion": "Use am with I",
                "original": "I is",
                "replacement": "I am",
            }
        ],
        "vocabulary": [],
        "style": [{"issue": "Informal", "original": "gonna", "replacement": "going to", "confidence": 0.6}],
    }
    result = parse_category_buckets(text, payload)

    assert isinstance(result, RemoteFindings)
    grammar, style = result.findings
    assert grammar.span == TextPosition(0, 4)
    assert grammar.confidence == 0.8
    assert grammar.message == "Subject-verb agreement"
    assert grammar.explanation == "Use am with I"
    assert style.kind is Category.STYLE
    assert style.confidence == 0.6
    assert style.candidates == ("going to",)


def test_category_buckets_fail_closed():
    assert isinstance(parse_category_buckets("x", ["grammar"]), RemoteFailure)
    assert isinstance(parse_category_buckets("x", {"summary": "fine"}), RemoteFailure)
    assert isinstance(parse_category_buckets("x", {"grammar": "none"}), RemoteFailure)
