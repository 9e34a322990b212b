from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Type, TypeVar

import yaml

DEFAULT_DETECTORS = (
    "misspelling",
    "grammar_pattern",
    "unknown_word",
    "structure",
    "punctuation",
    "register",
)

DEFAULT_PENALTY_WEIGHTS = {
    "grammar": 10,
    "spelling": 8,
    "vocabulary": 6,
    "clarity": 4,
    "style": 2,
}


@dataclass(slots=True)
class RemoteAnalyzerSettings:
    """Configuration block for the HTTP analysis service."""

    enabled: bool = False
    endpoint_url: str | None = None
    user_type: str = "student"
    document_type: str = "essay"
    request_timeout: float = 15.0
    max_attempts: int = 2
    parallel_requests: int = 1


@dataclass(slots=True)
class OpenAISettings:
    """Configuration block for OpenAI-powered analysis."""

    enabled: bool = False
    model: str = "gpt-4.1-mini"
    api_key: str | None = None
    api_key_env: str = "OPENAI_API_KEY"
    base_url: str | None = None
    organization: str | None = None
    temperature: float = 0.1
    max_output_tokens: int = 1500
    top_p: float = 0.95
    request_timeout: float = 60.0
    parallel_requests: int = 1
    user_level: str = "intermediate"


@dataclass(slots=True)
class EngineConfig:
    """Configuration options for the suggestion engine."""

    detectors: List[str] = field(default_factory=lambda: list(DEFAULT_DETECTORS))
    min_word_length: int = 3
    max_edit_distance: int = 2
    max_spelling_candidates: int = 3
    long_sentence_words: int = 30
    run_on_and_splits: int = 3
    run_on_but_splits: int = 2
    fragment_max_words: int = 3
    comma_splice_enabled: bool = True
    article_agreement_enabled: bool = True
    penalty_weights: Dict[str, int] = field(
        default_factory=lambda: dict(DEFAULT_PENALTY_WEIGHTS)
    )
    detector_workers: int = 1
    debounce_seconds: float = 1.25
    reanalyze_after_apply: bool = True
    custom_dictionary_path: str | None = None
    remote: RemoteAnalyzerSettings = field(default_factory=RemoteAnalyzerSettings)
    openai: OpenAISettings = field(default_factory=OpenAISettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


_Settings = TypeVar("_Settings", RemoteAnalyzerSettings, OpenAISettings)

_NESTED_BLOCKS: Dict[str, Type[Any]] = {
    "remote": RemoteAnalyzerSettings,
    "openai": OpenAISettings,
}


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(EngineConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for key, settings_cls in _NESTED_BLOCKS.items():
        if key not in data:
            continue
        value = data[key]
        if isinstance(value, settings_cls):
            kwargs[key] = value
        elif isinstance(value, Mapping):
            kwargs[key] = _build_settings(settings_cls, value)
        else:
            kwargs.pop(key, None)
    if "penalty_weights" in kwargs:
        weights = dict(DEFAULT_PENALTY_WEIGHTS)
        weights.update(
            {str(k).lower(): int(v) for k, v in dict(kwargs["penalty_weights"]).items()}
        )
        kwargs["penalty_weights"] = weights
    if "detectors" in kwargs:
        kwargs["detectors"] = [str(name) for name in kwargs["detectors"]]
    return kwargs


def _build_settings(settings_cls: Type[_Settings], data: Mapping[str, Any]) -> _Settings:
    allowed = {field.name for field in fields(settings_cls)}
    filtered = {key: data[key] for key in data if key in allowed}
    return settings_cls(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> EngineConfig:
    """Build an EngineConfig from a dictionary-like input."""
    if data is None:
        return EngineConfig()
    return EngineConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> EngineConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EngineConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return EngineConfig()
    return config_from_yaml(path)
