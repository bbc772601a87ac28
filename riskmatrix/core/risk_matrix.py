"""Risk matrix scoring logic.

Implements:
- Score calculation for a (likelihood, impact) pair
- Banded level lookup for a score
- Default level generation for a matrix size
- Continuous color ramp across level bands

All functions are pure. Callers are expected to pass likelihood and impact
values inside the matrix bounds; nothing here clamps them.
"""
import logging
from typing import List, Optional, Sequence, Union

from riskmatrix.core.colors import NEUTRAL_COLOR, SEVERITY_COLOR_RAMP, interpolate_color
from riskmatrix.schemas.risk_matrix import CalculationMethod, RiskLevel

logger = logging.getLogger(__name__)

Score = Union[int, float]


# ============================================================================
# Level Names
# ============================================================================

CURATED_LEVEL_NAMES = {
    3: ["Low", "Medium", "High"],
    4: ["Low", "Medium", "High", "Extreme"],
    5: ["Low", "Medium", "High", "Extreme", "Critical"],
}

ORDINAL_LEVEL_NAMES = [
    "Very Low",
    "Low",
    "Low-Medium",
    "Medium",
    "Medium-High",
    "High",
    "Very High",
    "Extreme",
    "Critical",
    "Catastrophic",
]


def get_level_names(num_levels: int) -> List[str]:
    """
    Names for a level count.

    3, 4 and 5 levels have curated names; any other count takes the first
    ``num_levels`` ordinal names, then falls back to ``Level N``.

    Examples:
        >>> get_level_names(3)
        ['Low', 'Medium', 'High']
        >>> get_level_names(2)
        ['Very Low', 'Low']
    """
    base = CURATED_LEVEL_NAMES.get(num_levels, ORDINAL_LEVEL_NAMES)
    return [
        base[i] if i < len(base) else f"Level {i + 1}"
        for i in range(num_levels)
    ]


# ============================================================================
# Score Calculation
# ============================================================================

def calculate_score(
    likelihood: Score,
    impact: Score,
    method: Union[CalculationMethod, str] = CalculationMethod.PRODUCT,
) -> Score:
    """
    Calculate the raw risk score of a cell.

    Args:
        likelihood: Likelihood value, 1..rows
        impact: Impact value, 1..columns
        method: product (likelihood x impact), max, or average

    Returns:
        The score. ``average`` may return a fractional value.

    Raises:
        ValueError: If ``method`` is not a known calculation method.

    Examples:
        >>> calculate_score(3, 4)
        12
        >>> calculate_score(3, 4, "max")
        4
        >>> calculate_score(3, 4, "average")
        3.5
    """
    method = _coerce_method(method)

    if method is CalculationMethod.PRODUCT:
        return likelihood * impact
    if method is CalculationMethod.MAX:
        return max(likelihood, impact)
    return (likelihood + impact) / 2


def _coerce_method(method: Union[CalculationMethod, str]) -> CalculationMethod:
    if isinstance(method, CalculationMethod):
        return method
    normalized = str(method).strip().lower()
    if normalized == "avg":
        return CalculationMethod.AVERAGE
    try:
        return CalculationMethod(normalized)
    except ValueError:
        raise ValueError(
            f"Unknown calculation method {method!r}. "
            f"Valid values: {[m.value for m in CalculationMethod]}"
        ) from None


# ============================================================================
# Level Lookup
# ============================================================================

def _ordered(levels: Sequence[RiskLevel]) -> List[RiskLevel]:
    return sorted(levels, key=lambda level: level.order)


def find_level_for_score(score: Score, levels: Sequence[RiskLevel]) -> Optional[RiskLevel]:
    """
    Find the band containing a score.

    Levels are scanned in ascending ``order`` and the first band with
    ``min <= score <= max`` wins, so overlapping bands resolve to the lower
    ranked one. Fractional scores are compared against the inclusive bounds.

    Args:
        score: Score to classify
        levels: Score bands of the configuration

    Returns:
        The matching level, or None if no band contains the score.
    """
    for level in _ordered(levels):
        if level.min <= score <= level.max:
            return level

    logger.debug(f"No risk level contains score {score}")
    return None


# ============================================================================
# Default Levels
# ============================================================================

def generate_default_levels(num_levels: int, max_score: int) -> List[RiskLevel]:
    """
    Generate evenly spaced score bands covering [1, max_score].

    Band ``i`` ends at ``floor((i + 1) * max_score / num_levels)``. The last
    band always ends at ``max_score`` and the first always starts at 1; every
    other band starts right after the previous one ends.

    With more levels than scores some bands come out empty (min > max). They
    keep their place in the ordering so the level count never changes.

    Args:
        num_levels: Number of bands to produce
        max_score: Highest score of the matrix (rows * columns)

    Returns:
        Levels ordered 1..num_levels, colored from the severity ramp.

    Raises:
        ValueError: If num_levels or max_score is below 1.

    Examples:
        >>> [(l.name, l.min, l.max) for l in generate_default_levels(3, 9)]
        [('Low', 1, 3), ('Medium', 4, 6), ('High', 7, 9)]
    """
    if num_levels < 1:
        raise ValueError(f"num_levels must be at least 1, got {num_levels}")
    if max_score < 1:
        raise ValueError(f"max_score must be at least 1, got {max_score}")

    names = get_level_names(num_levels)
    levels = []
    previous_max = 0

    for i in range(num_levels):
        if i == num_levels - 1:
            upper = max_score
        else:
            # Integer floor of (i + 1) * (max_score / num_levels)
            upper = (i + 1) * max_score // num_levels
        lower = 1 if i == 0 else previous_max + 1

        levels.append(RiskLevel(
            name=names[i],
            color=SEVERITY_COLOR_RAMP[min(i, len(SEVERITY_COLOR_RAMP) - 1)],
            min=lower,
            max=upper,
            order=i + 1,
        ))
        previous_max = upper

    return levels


# ============================================================================
# Color Ramp
# ============================================================================

def get_color_for_score(score: Score, levels: Sequence[RiskLevel]) -> str:
    """
    Color for a continuous score.

    Inside a band the color moves from that band's color towards the next
    band's color as the score goes from ``min`` to ``max``, giving a smooth
    ramp instead of hard edges. The last band is drawn flat.

    Unlike ``find_level_for_score`` this never reports absence: a score
    outside every band gets the first level's color, and an empty level list
    gets the neutral gray.
    """
    ordered = _ordered(levels)
    if not ordered:
        return NEUTRAL_COLOR

    for i, level in enumerate(ordered):
        if level.min <= score <= level.max:
            if i == len(ordered) - 1:
                return level.color

            span = level.max - level.min
            progress = (score - level.min) / span if span else 0.0
            return interpolate_color(level.color, ordered[i + 1].color, progress)

    return ordered[0].color
