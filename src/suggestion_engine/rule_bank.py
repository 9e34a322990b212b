from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .config import EngineConfig
from .detectors import Detector, build_detector_from_config
from .lexicon import Lexicon
from .models import Finding

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DetectorRun:
    """Findings gathered from one rule-bank pass."""

    findings: Tuple[Finding, ...]
    failed: Tuple[str, ...] = ()


class RuleBank:
    """
    Ordered, immutable collection of detectors.

    Each detector runs in isolation: an exception from one is logged and
    recorded while the others' findings are kept. Results are always collected
    in rule-bank order so parallel execution stays deterministic.
    """

    def __init__(self, detectors: Sequence[Detector], max_workers: int = 1) -> None:
        self._detectors: Tuple[Detector, ...] = tuple(detectors)
        self._max_workers = max(1, max_workers)

    @property
    def detectors(self) -> Tuple[Detector, ...]:
        return self._detectors

    def run(self, text: str) -> DetectorRun:
        """Run every detector over the full text."""
        started = time.perf_counter()
        if self._max_workers > 1 and len(self._detectors) > 1:
            outcomes = self._run_parallel(text)
        else:
            outcomes = [_run_isolated(detector, text) for detector in self._detectors]

        findings: List[Finding] = []
        failed: List[str] = []
        for detector, result in zip(self._detectors, outcomes):
            if result is None:
                failed.append(detector.name)
            else:
                findings.extend(result)
        logger.debug(
            "Rule bank produced %s findings from %s detectors in %.1f ms (failed=%s)",
            len(findings),
            len(self._detectors),
            (time.perf_counter() - started) * 1000,
            failed,
        )
        return DetectorRun(findings=tuple(findings), failed=tuple(failed))

    def _run_parallel(self, text: str) -> List[List[Finding] | None]:
        workers = min(self._max_workers, len(self._detectors))
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="detector"
        ) as pool:
            futures: List[Future[List[Finding] | None]] = [
                pool.submit(_run_isolated, detector, text)
                for detector in self._detectors
            ]
            return [future.result() for future in futures]


def _run_isolated(detector: Detector, text: str) -> List[Finding] | None:
    try:
        return list(detector.detect(text))
    except Exception:
        logger.warning("Detector %s failed; continuing without it.", detector.name, exc_info=True)
        return None


def build_rule_bank_from_config(config: EngineConfig, lexicon: Lexicon) -> RuleBank:
    """Instantiate the configured detectors in their configured order."""
    detectors = [
        build_detector_from_config(name, lexicon, config) for name in config.detectors
    ]
    return RuleBank(detectors, max_workers=config.detector_workers)
