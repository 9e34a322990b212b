from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Any, List, Mapping, Tuple

from .aggregator import aggregate
from .apply import apply_suggestion, dismiss_suggestion
from .config import EngineConfig
from .lexicon import Lexicon, build_default_lexicon
from .models import (
    AnalysisResult,
    ApplyResult,
    DismissResult,
    Finding,
    RemoteFindings,
    RemoteStatus,
)
from .remote import RemoteAnalyzer, build_remote_analyzer
from .rule_bank import RuleBank, build_rule_bank_from_config
from .scoring import compute_score
from .tokenization import count_words

logger = logging.getLogger(__name__)


def analyze_text(
    text: Any,
    rule_bank: RuleBank,
    *,
    text_version: int = 0,
    penalty_weights: Mapping[str, int] | None = None,
    remote: RemoteAnalyzer | None = None,
) -> AnalysisResult:
    """
    Run one full analysis pass over a text snapshot.

    Empty or non-string input yields an empty result with a perfect score. A
    failing detector or remote analyzer only removes its own findings.
    """
    if not isinstance(text, str) or not text.strip():
        return empty_result(text_version)

    started = time.perf_counter()
    run = rule_bank.run(text)
    findings: List[Finding] = list(run.findings)

    remote_status = RemoteStatus.NOT_REQUESTED
    if remote is not None:
        remote_status = _collect_remote(remote, text, findings)

    suggestions = aggregate(findings, text=text, text_version=text_version)
    result = AnalysisResult(
        suggestions=tuple(suggestions),
        score=compute_score(suggestions, penalty_weights),
        word_count=count_words(text),
        text_version=text_version,
        remote_status=remote_status,
        failed_detectors=run.failed,
    )
    logger.debug(
        "Analyzed version %s: %s findings -> %s suggestions, score=%s in %.1f ms",
        text_version,
        len(findings),
        len(suggestions),
        result.score,
        (time.perf_counter() - started) * 1000,
    )
    return result


def empty_result(text_version: int = 0) -> AnalysisResult:
    return AnalysisResult(suggestions=(), score=100, word_count=0, text_version=text_version)


def rebuild_result(
    apply_result: ApplyResult,
    previous: AnalysisResult,
    penalty_weights: Mapping[str, int] | None = None,
) -> AnalysisResult:
    """Project an apply outcome into a new result without re-running detectors."""
    return AnalysisResult(
        suggestions=apply_result.suggestions,
        score=compute_score(apply_result.suggestions, penalty_weights),
        word_count=count_words(apply_result.text),
        text_version=apply_result.text_version,
        remote_status=previous.remote_status,
        failed_detectors=previous.failed_detectors,
    )


def _collect_remote(remote: RemoteAnalyzer, text: str, findings: List[Finding]) -> RemoteStatus:
    try:
        outcome = remote.analyze(text)
    except Exception:
        logger.warning("Remote analyzer %s raised; using local findings only.", remote.name, exc_info=True)
        return RemoteStatus.FAILED
    if isinstance(outcome, RemoteFindings):
        findings.extend(outcome.findings)
        return RemoteStatus.OK
    logger.warning("Remote analysis unavailable (%s); using local findings only.", outcome.reason)
    return RemoteStatus.FAILED


class AnalysisEngine:
    """
    Immutable analysis entry point: a lexicon, a rule bank and optional remote analyzer.

    The engine keeps no per-document state, so one instance can serve many
    documents and concurrent passes.
    """

    def __init__(
        self,
        rule_bank: RuleBank,
        *,
        lexicon: Lexicon | None = None,
        config: EngineConfig | None = None,
        remote: RemoteAnalyzer | None = None,
    ) -> None:
        self._rule_bank = rule_bank
        self._lexicon = lexicon
        self._config = config or EngineConfig()
        self._remote = remote

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def lexicon(self) -> Lexicon | None:
        return self._lexicon

    @property
    def rule_bank(self) -> RuleBank:
        return self._rule_bank

    @property
    def remote(self) -> RemoteAnalyzer | None:
        return self._remote

    def analyze(self, text: Any, text_version: int = 0) -> AnalysisResult:
        return analyze_text(
            text,
            self._rule_bank,
            text_version=text_version,
            penalty_weights=self._config.penalty_weights,
            remote=self._remote,
        )

    def apply(
        self,
        text: str,
        result: AnalysisResult,
        suggestion_id: str,
        candidate_index: int = 0,
    ) -> Tuple[ApplyResult, AnalysisResult]:
        """Accept one suggestion; the previous result is returned unchanged on a no-op."""
        outcome = apply_suggestion(
            text,
            result.suggestions,
            suggestion_id,
            candidate_index,
            text_version=result.text_version,
        )
        if not outcome.changed:
            return outcome, result
        return outcome, rebuild_result(outcome, result, self._config.penalty_weights)

    def dismiss(
        self, result: AnalysisResult, suggestion_id: str
    ) -> Tuple[DismissResult, AnalysisResult]:
        outcome = dismiss_suggestion(result.suggestions, suggestion_id)
        updated = replace(
            result,
            suggestions=outcome.suggestions,
            score=compute_score(outcome.suggestions, self._config.penalty_weights),
        )
        return outcome, updated


def build_engine_from_config(
    config: EngineConfig | None = None, *, remote: RemoteAnalyzer | None = None
) -> AnalysisEngine:
    """Convenience helper that wires lexicon, rule bank and remote analyzer from config."""
    cfg = config or EngineConfig()
    lexicon = build_default_lexicon(cfg.custom_dictionary_path)
    rule_bank = build_rule_bank_from_config(cfg, lexicon)
    if remote is None:
        remote = build_remote_analyzer(cfg)
    return AnalysisEngine(rule_bank, lexicon=lexicon, config=cfg, remote=remote)
