from __future__ import annotations

import os

from ..config import EngineConfig, OpenAISettings
from .adapters import normalize_remote_items, parse_analyze_response, parse_category_buckets
from .base import CallableRemoteAnalyzer, RemoteAnalyzer, RemoteAnalyzerError
from .http_client import HttpRemoteAnalyzer
from .openai_client import OpenAIAnalysisClient, OpenAIRemoteAnalyzer

__all__ = [
    "CallableRemoteAnalyzer",
    "HttpRemoteAnalyzer",
    "OpenAIAnalysisClient",
    "OpenAIRemoteAnalyzer",
    "RemoteAnalyzer",
    "RemoteAnalyzerError",
    "build_remote_analyzer",
    "normalize_remote_items",
    "parse_analyze_response",
    "parse_category_buckets",
    "resolve_openai_api_key",
]


def build_remote_analyzer(config: EngineConfig) -> RemoteAnalyzer | None:
    """Instantiate the configured remote analyzer, or None when none is enabled."""
    if config.remote.enabled and config.openai.enabled:
        raise ValueError("Enable either the HTTP remote analyzer or OpenAI, not both.")
    if config.remote.enabled:
        return HttpRemoteAnalyzer(config.remote)
    if config.openai.enabled:
        api_key = resolve_openai_api_key(config.openai)
        return OpenAIRemoteAnalyzer(OpenAIAnalysisClient(config.openai, api_key=api_key))
    return None


def resolve_openai_api_key(settings: OpenAISettings) -> str:
    """Resolve the API key from explicit config or the configured environment variable."""
    if settings.api_key:
        return settings.api_key
    env_name = settings.api_key_env or "OPENAI_API_KEY"
    # Read at runtime so secrets need not live in config files.
    if env_name in os.environ and os.environ[env_name]:
        return os.environ[env_name]
    raise RuntimeError(
        "OpenAI API key not provided. Use --openai-api-key or set the configured environment variable."
    )
