"""Threshold lookups on likelihood/impact scales.

A scale entry applies to every score at or above its own score, so lookup
walks the entries from the highest score down and takes the first one that
does not exceed the given score. This is a different scheme from the
inclusive [min, max] bands used for risk levels in
``riskmatrix.core.risk_matrix``; the two are kept separate on purpose and
should not be merged without a product decision.
"""
import logging
from typing import List, Optional, Sequence, Union

from riskmatrix.schemas.risk_matrix import CalculationMethod, ScaleEntry

logger = logging.getLogger(__name__)


def find_scale_entry_for_score(score: float, entries: Sequence[ScaleEntry]) -> Optional[ScaleEntry]:
    """
    Highest scale entry whose score does not exceed ``score``.

    Args:
        score: Score to classify
        entries: Impact or likelihood scale entries, any order

    Returns:
        The matching entry, or None when ``score`` is below every entry.
    """
    for entry in sorted(entries, key=lambda e: e.score, reverse=True):
        if entry.score <= score:
            return entry
    return None


def scale_label(value: float, entries: Sequence[ScaleEntry]) -> str:
    """
    Label of the entry scored exactly ``value``.

    Falls back to ``Level N`` when the scale has no such entry.
    """
    for entry in entries:
        if entry.score == value:
            return entry.label
    return f"Level {_format_value(value)}"


def _format_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def calculate_criteria_score(
    criteria_scores: Sequence[float],
    method: Union[CalculationMethod, str] = CalculationMethod.AVERAGE,
) -> float:
    """
    Combine per-criterion impact scores into one score.

    Args:
        criteria_scores: One score per assessed criterion
        method: ``max`` takes the worst criterion; anything else averages

    Returns:
        Combined score, 0 when no criteria were scored.
    """
    scores: List[float] = list(criteria_scores)
    if not scores:
        return 0

    method_value = method.value if isinstance(method, CalculationMethod) else str(method).lower()
    if method_value == CalculationMethod.MAX.value:
        return max(scores)

    if method_value == CalculationMethod.PRODUCT.value:
        logger.info("Criteria scores do not support product; averaging instead")

    return sum(scores) / len(scores)
