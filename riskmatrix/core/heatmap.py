"""Heat map pixel buffer for a risk matrix.

Each pixel takes the score of its cell blended bilinearly with the cells to
the right and below (clamped at the grid edge), then colors that continuous
score with ``get_color_for_score``. The result is an RGBA buffer any image
surface can blit.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from riskmatrix.core.colors import parse_hex_color
from riskmatrix.core.config import settings
from riskmatrix.core.risk_matrix import calculate_score, get_color_for_score
from riskmatrix.schemas.risk_matrix import RiskMatrixConfiguration

logger = logging.getLogger(__name__)


@dataclass
class HeatmapBuffer:
    """Row-major RGBA pixels, four bytes per pixel."""
    width: int
    height: int
    data: bytearray

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        index = (y * self.width + x) * 4
        return tuple(self.data[index:index + 4])

    def hex_at(self, x: int, y: int) -> str:
        r, g, b, _ = self.pixel(x, y)
        return f"#{r:02x}{g:02x}{b:02x}"


def _corner_scores(config: RiskMatrixConfiguration, row: int, col: int) -> Tuple[float, float, float, float]:
    """Scores of a cell and its right, lower and lower-right neighbours."""
    method = config.calculation_method
    likelihood = config.rows - row
    impact = col + 1
    likelihood_next = max(1, config.rows - row - 1)
    impact_next = min(config.columns, col + 2)

    return (
        calculate_score(likelihood, impact, method),
        calculate_score(likelihood, impact_next, method),
        calculate_score(likelihood_next, impact, method),
        calculate_score(likelihood_next, impact_next, method),
    )


def interpolated_score(config: RiskMatrixConfiguration, x: float, y: float, width: int, height: int,
                       corners: Optional[Dict[Tuple[int, int], Tuple[float, float, float, float]]] = None) -> float:
    """Continuous score at pixel (x, y) of a ``width`` x ``height`` surface."""
    cell_width = width / config.columns
    cell_height = height / config.rows

    col = min(int(x // cell_width), config.columns - 1)
    row = min(int(y // cell_height), config.rows - 1)
    cell_x = (x % cell_width) / cell_width
    cell_y = (y % cell_height) / cell_height

    key = (row, col)
    if corners is not None and key in corners:
        top_left, top_right, bottom_left, bottom_right = corners[key]
    else:
        top_left, top_right, bottom_left, bottom_right = _corner_scores(config, row, col)
        if corners is not None:
            corners[key] = (top_left, top_right, bottom_left, bottom_right)

    top = top_left + (top_right - top_left) * cell_x
    bottom = bottom_left + (bottom_right - bottom_left) * cell_x
    return top + (bottom - top) * cell_y


def render_heatmap(
    config: RiskMatrixConfiguration,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> HeatmapBuffer:
    """
    Render the continuous color field of a matrix.

    Args:
        config: Matrix to render
        width: Buffer width in pixels (defaults to settings.HEATMAP_WIDTH)
        height: Buffer height in pixels (defaults to settings.HEATMAP_HEIGHT)

    Returns:
        HeatmapBuffer with fully opaque pixels

    Raises:
        ValueError: If either dimension is not positive.
    """
    width = settings.HEATMAP_WIDTH if width is None else width
    height = settings.HEATMAP_HEIGHT if height is None else height
    if width <= 0 or height <= 0:
        raise ValueError(f"Heat map dimensions must be positive, got {width}x{height}")

    if not config.levels:
        logger.warning(f"Risk matrix {config.name!r} has no levels; heat map will be neutral")

    data = bytearray(width * height * 4)
    corners: Dict[Tuple[int, int], Tuple[float, float, float, float]] = {}
    colors: Dict[float, Tuple[int, int, int]] = {}

    for py in range(height):
        for px in range(width):
            score = interpolated_score(config, px, py, width, height, corners)
            rgb = colors.get(score)
            if rgb is None:
                rgb = parse_hex_color(get_color_for_score(score, config.levels))
                colors[score] = rgb

            index = (py * width + px) * 4
            data[index] = rgb[0]
            data[index + 1] = rgb[1]
            data[index + 2] = rgb[2]
            data[index + 3] = 255

    logger.debug(
        f"Rendered {width}x{height} heat map for {config.name!r} "
        f"({len(colors)} distinct scores)"
    )
    return HeatmapBuffer(width=width, height=height, data=data)
