"""Risk matrix engine bound to one configuration."""
import logging
from typing import Dict, List, Optional

from riskmatrix.core.config import settings
from riskmatrix.core.matrix_cells import CellInfoCache, get_cell_info, iter_cells
from riskmatrix.core.risk_matrix import (
    Score,
    calculate_score,
    find_level_for_score,
    generate_default_levels,
    get_color_for_score,
)
from riskmatrix.core.scale_lookup import find_scale_entry_for_score, scale_label
from riskmatrix.schemas.risk_matrix import CellInfo, RiskAssessment, RiskLevel, RiskMatrixConfiguration

logger = logging.getLogger(__name__)


def default_configuration(
    rows: Optional[int] = None,
    columns: Optional[int] = None,
    num_levels: Optional[int] = None,
    name: str = "Default Risk Matrix",
) -> RiskMatrixConfiguration:
    """Configuration seeded with generated levels; unset sizes come from settings."""
    rows = rows or settings.DEFAULT_ROWS
    columns = columns or settings.DEFAULT_COLUMNS
    num_levels = num_levels or settings.DEFAULT_LEVEL_COUNT

    return RiskMatrixConfiguration(
        name=name,
        rows=rows,
        columns=columns,
        calculation_method=settings.DEFAULT_CALCULATION_METHOD,
        levels=generate_default_levels(num_levels, rows * columns),
    )


class RiskMatrixEngine:
    """Scoring, level and color lookups for a single configuration.

    The engine never mutates its configuration. ``reset_levels`` returns a
    new configuration instead; assigning it to ``config`` drops every cached
    cell.
    """

    def __init__(self, config: RiskMatrixConfiguration):
        self._config = config
        self._cells = CellInfoCache()

    @property
    def config(self) -> RiskMatrixConfiguration:
        return self._config

    @config.setter
    def config(self, config: RiskMatrixConfiguration) -> None:
        self._config = config
        self._cells.clear()

    @property
    def max_score(self) -> int:
        return self.config.max_score

    def calculate(self, likelihood: Score, impact: Score) -> Score:
        return calculate_score(likelihood, impact, self.config.calculation_method)

    def level_for_score(self, score: Score) -> Optional[RiskLevel]:
        return find_level_for_score(score, self.config.levels)

    def level_for_cell(self, likelihood: int, impact: int) -> Optional[RiskLevel]:
        return self.cell_info(likelihood, impact).level

    def color_for_score(self, score: Score) -> str:
        return get_color_for_score(score, self.config.levels)

    def cell_info(self, likelihood: int, impact: int) -> CellInfo:
        return get_cell_info(self.config, likelihood, impact, self._cells)

    def assess(self, likelihood: Score, impact: Score) -> RiskAssessment:
        """
        Score a likelihood/impact pair and resolve its scale entries.

        Args:
            likelihood: Likelihood (probability) score
            impact: Impact score

        Returns:
            RiskAssessment with the score, its level, the threshold-matched
            likelihood and impact entries, and their display labels.
        """
        score = self.calculate(likelihood, impact)
        return RiskAssessment(
            likelihood=likelihood,
            impact=impact,
            score=score,
            level=self.level_for_score(score),
            likelihood_entry=find_scale_entry_for_score(likelihood, self.config.likelihoods),
            impact_entry=find_scale_entry_for_score(impact, self.config.impacts),
            likelihood_label=scale_label(likelihood, self.config.likelihoods),
            impact_label=scale_label(impact, self.config.impacts),
        )

    def axis_labels(self) -> Dict[str, List[str]]:
        """Row and column labels, likelihood from the top row down."""
        return {
            "likelihood": [
                scale_label(value, self.config.likelihoods)
                for value in range(self.config.rows, 0, -1)
            ],
            "impact": [
                scale_label(value, self.config.impacts)
                for value in range(1, self.config.columns + 1)
            ],
        }

    def level_map(self) -> Dict[int, Optional[str]]:
        """Level name for every integer score from 1 to max_score."""
        levels = {}
        for score in range(1, self.max_score + 1):
            level = self.level_for_score(score)
            levels[score] = level.name if level else None
        return levels

    def cells(self) -> List[CellInfo]:
        return list(iter_cells(self.config, self._cells))

    def clear_cache(self) -> None:
        self._cells.clear()

    def reset_levels(self, num_levels: Optional[int] = None) -> RiskMatrixConfiguration:
        """Copy of the configuration with generated default levels."""
        count = num_levels or len(self.config.levels) or settings.DEFAULT_LEVEL_COUNT
        logger.info(f"Resetting {self.config.name!r} to {count} default levels")
        return self.config.model_copy(
            update={"levels": generate_default_levels(count, self.max_score)}
        )
