"""Minimal example: local analysis merged with OpenAI-backed remote findings."""

from __future__ import annotations

from suggestion_engine.config import EngineConfig
from suggestion_engine.pipeline import build_engine_from_config
from suggestion_engine.remote import resolve_openai_api_key


def main() -> None:
    config = EngineConfig()
    config.openai.enabled = True
    # Fails early with a clear message when no key is configured.
    resolve_openai_api_key(config.openai)
    engine = build_engine_from_config(config)

    sample_text = (
        "hello my name is Sam and i is gonna recieve alot of letters  today and "
        "my freind could of helped"
    )
    result = engine.analyze(sample_text)
    print(f"Score: {result.score} (remote: {result.remote_status.value})")
    for suggestion in result.active_suggestions:
        print(
            f"{suggestion.span.start:>4}-{suggestion.span.end:<4} "
            f"{suggestion.category.value:<10} {suggestion.original_text!r} -> "
            f"{list(suggestion.replacement_candidates)}"
        )

    first = next((s for s in result.active_suggestions if not s.is_advisory), None)
    if first is not None:
        outcome, projected = engine.apply(sample_text, result, first.id)
        print("\nAfter applying", first.id)
        print(outcome.text)
        print(f"Score: {projected.score}, invalidated: {list(outcome.invalidated)}")


if __name__ == "__main__":
    main()
