"""
suggestion_engine package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .aggregator import aggregate
from .apply import apply_suggestion, dismiss_suggestion
from .config import EngineConfig, config_from_dict, config_from_yaml, load_config
from .lexicon import Lexicon, build_default_lexicon
from .models import AnalysisResult, ApplyResult, ApplyStatus, Suggestion, TextPosition
from .pipeline import AnalysisEngine, analyze_text, build_engine_from_config
from .rule_bank import RuleBank, build_rule_bank_from_config
from .scoring import compute_score
from .session import DocumentSession

__all__ = [
    "AnalysisEngine",
    "AnalysisResult",
    "ApplyResult",
    "ApplyStatus",
    "DocumentSession",
    "EngineConfig",
    "Lexicon",
    "RuleBank",
    "Suggestion",
    "TextPosition",
    "aggregate",
    "analyze_text",
    "apply_suggestion",
    "build_default_lexicon",
    "build_engine_from_config",
    "build_rule_bank_from_config",
    "compute_score",
    "config_from_dict",
    "config_from_yaml",
    "dismiss_suggestion",
    "load_config",
]

__version__ = "0.1.0"
