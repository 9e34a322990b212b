from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from ..models import RemoteAnalysis, RemoteFailure

logger = logging.getLogger(__name__)


class RemoteAnalyzerError(RuntimeError):
    """Raised inside remote clients when a request or payload cannot be used."""


class RemoteAnalyzer(ABC):
    """
    External analysis service treated as one more source of findings.

    ``analyze`` never raises: every transport, decoding or schema problem is
    reported as a :class:`RemoteFailure` so local findings are never lost.
    """

    name = "remote"

    @abstractmethod
    def analyze(self, text: str) -> RemoteAnalysis:
        """Return normalized findings for ``text`` or a failure marker."""
        raise NotImplementedError


class CallableRemoteAnalyzer(RemoteAnalyzer):
    """Adapt an arbitrary callable into the RemoteAnalyzer interface."""

    def __init__(self, func: Callable[[str], RemoteAnalysis], name: str = "callable") -> None:
        self._func = func
        self.name = name

    def analyze(self, text: str) -> RemoteAnalysis:
        try:
            return self._func(text)
        except Exception as exc:
            logger.warning("Remote analyzer %s raised: %s", self.name, exc, exc_info=True)
            return RemoteFailure(reason=f"{self.name} analyzer raised: {exc}")
