"""Cell lookup for risk matrix surfaces.

Tooltips and click handlers work in cell terms: a (likelihood, impact) pair
with its score and level. The grid is drawn with the highest likelihood on
the top row and impact increasing left to right.
"""
import logging
from typing import Dict, Iterator, Optional, Tuple

from riskmatrix.core.risk_matrix import calculate_score, find_level_for_score
from riskmatrix.schemas.risk_matrix import CellInfo, RiskMatrixConfiguration

logger = logging.getLogger(__name__)


def cell_key(likelihood: int, impact: int) -> str:
    return f"{likelihood}-{impact}"


class CellInfoCache:
    """Memo of computed cells keyed by ``"likelihood-impact"``.

    Only a speed-up; results are identical with or without it. Clear it when
    the configuration it was filled from changes.
    """

    def __init__(self):
        self._cells: Dict[str, CellInfo] = {}

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, key: str) -> bool:
        return key in self._cells

    def get(self, key: str) -> Optional[CellInfo]:
        return self._cells.get(key)

    def put(self, info: CellInfo) -> None:
        self._cells[cell_key(info.likelihood, info.impact)] = info

    def clear(self) -> None:
        logger.debug(f"Clearing {len(self._cells)} cached cells")
        self._cells.clear()


def get_cell_info(
    config: RiskMatrixConfiguration,
    likelihood: int,
    impact: int,
    cache: Optional[CellInfoCache] = None,
) -> CellInfo:
    """Score and level of one cell, using ``cache`` when given."""
    key = cell_key(likelihood, impact)
    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            return cached

    score = calculate_score(likelihood, impact, config.calculation_method)
    info = CellInfo(
        likelihood=likelihood,
        impact=impact,
        score=score,
        level=find_level_for_score(score, config.levels),
    )

    if cache is not None:
        cache.put(info)
    return info


def cell_at_point(
    x: float,
    y: float,
    width: float,
    height: float,
    rows: int,
    columns: int,
) -> Optional[Tuple[int, int]]:
    """
    Map a point on a drawn matrix to its cell.

    Args:
        x, y: Point in surface coordinates, origin top-left
        width, height: Surface size
        rows, columns: Matrix size

    Returns:
        (likelihood, impact), or None if the point is outside the grid.
    """
    if width <= 0 or height <= 0:
        return None

    cell_width = width / columns
    cell_height = height / rows
    col = int(x // cell_width)
    row = int(y // cell_height)

    if 0 <= col < columns and 0 <= row < rows:
        return rows - row, col + 1
    return None


def iter_cells(config: RiskMatrixConfiguration, cache: Optional[CellInfoCache] = None) -> Iterator[CellInfo]:
    """All cells, top row (highest likelihood) first, left to right."""
    for likelihood in range(config.rows, 0, -1):
        for impact in range(1, config.columns + 1):
            yield get_cell_info(config, likelihood, impact, cache)
