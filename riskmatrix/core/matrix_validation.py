"""Save-time validation of risk matrix configurations.

Lookups never reject a configuration; a gap or overlap only shows up as
"Unknown" cells. The editor runs these checks before persisting so that an
invalid set of bands is never stored in the first place.
"""
import logging
from typing import List, Sequence

from riskmatrix.schemas.risk_matrix import LevelValidationIssue, RiskLevel, RiskMatrixConfiguration

logger = logging.getLogger(__name__)


class RiskMatrixValidationError(ValueError):
    """Raised when a configuration is saved with invalid score bands."""

    def __init__(self, issues: List[LevelValidationIssue]):
        self.issues = issues
        super().__init__("; ".join(issue.message for issue in issues))


def validate_levels(levels: Sequence[RiskLevel], max_score: int) -> List[LevelValidationIssue]:
    """
    Check that bands cover [1, max_score] contiguously without overlap.

    Args:
        levels: Score bands, any order
        max_score: Highest score of the matrix (rows * columns)

    Returns:
        List of issues, empty when the bands are valid.
    """
    if not levels:
        return [LevelValidationIssue(code="no_levels", message="At least one risk level is required")]

    issues: List[LevelValidationIssue] = []
    ordered = sorted(levels, key=lambda level: level.order)

    seen_orders = set()
    for level in ordered:
        if level.order in seen_orders:
            issues.append(LevelValidationIssue(
                code="duplicate_order",
                message=f"Order {level.order} is used by more than one level",
                level_order=level.order,
            ))
        seen_orders.add(level.order)

        if level.min > level.max:
            issues.append(LevelValidationIssue(
                code="inverted_bounds",
                message=f"Level '{level.name}' has min {level.min} greater than max {level.max}",
                level_order=level.order,
            ))

    first, last = ordered[0], ordered[-1]
    if first.min != 1:
        issues.append(LevelValidationIssue(
            code="first_min",
            message=f"First level '{first.name}' must start at 1, starts at {first.min}",
            level_order=first.order,
        ))
    if last.max != max_score:
        issues.append(LevelValidationIssue(
            code="last_max",
            message=f"Last level '{last.name}' must end at {max_score}, ends at {last.max}",
            level_order=last.order,
        ))

    for previous, current in zip(ordered, ordered[1:]):
        if current.min <= previous.max:
            issues.append(LevelValidationIssue(
                code="overlap",
                message=f"Levels '{previous.name}' and '{current.name}' overlap at {current.min}",
                level_order=current.order,
            ))
        elif current.min > previous.max + 1:
            issues.append(LevelValidationIssue(
                code="gap",
                message=(
                    f"Scores {previous.max + 1}-{current.min - 1} between "
                    f"'{previous.name}' and '{current.name}' have no level"
                ),
                level_order=current.order,
            ))

    return issues


def validate_configuration(config: RiskMatrixConfiguration) -> List[LevelValidationIssue]:
    """Validate a configuration's bands against its own max score."""
    return validate_levels(config.levels, config.max_score)


def ensure_valid_configuration(config: RiskMatrixConfiguration) -> RiskMatrixConfiguration:
    """
    Return ``config`` unchanged if its bands are valid.

    Raises:
        RiskMatrixValidationError: With every issue found.
    """
    issues = validate_configuration(config)
    if issues:
        logger.warning(
            f"Rejected risk matrix {config.name!r}: "
            f"{len(issues)} issue(s) - {[issue.code for issue in issues]}"
        )
        raise RiskMatrixValidationError(issues)
    return config
