from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Mapping

from .config import DEFAULT_PENALTY_WEIGHTS
from .models import Category, Suggestion

PENALTY_WEIGHTS: Mapping[Category, int] = {
    Category(name): weight for name, weight in DEFAULT_PENALTY_WEIGHTS.items()
}


def count_by_category(suggestions: Iterable[Suggestion]) -> Dict[Category, int]:
    """Count non-dismissed suggestions per category."""
    counts: Counter[Category] = Counter(
        suggestion.category for suggestion in suggestions if not suggestion.dismissed
    )
    return {category: counts.get(category, 0) for category in Category}


def compute_score(
    suggestions: Iterable[Suggestion],
    weights: Mapping[str, int] | Mapping[Category, int] | None = None,
) -> int:
    """
    Map suggestion counts to a 0-100 document score.

    ``weights`` may be keyed by Category or by category name; missing categories
    fall back to the default penalty for that category.
    """
    resolved = _resolve_weights(weights)
    penalty = sum(
        resolved[category] * count
        for category, count in count_by_category(suggestions).items()
    )
    return max(0, 100 - penalty)


def _resolve_weights(
    weights: Mapping[str, int] | Mapping[Category, int] | None,
) -> Dict[Category, int]:
    resolved = dict(PENALTY_WEIGHTS)
    if weights:
        for key, value in weights.items():
            resolved[Category(key)] = int(value)
    return resolved
