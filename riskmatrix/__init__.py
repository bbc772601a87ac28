"""Risk matrix scoring package."""
from riskmatrix.schemas.risk_matrix import (
    CalculationMethod,
    CellInfo,
    LevelValidationIssue,
    RiskAssessment,
    RiskLevel,
    RiskMatrixConfiguration,
    ScaleEntry,
)
from riskmatrix.core.colors import get_text_color, interpolate_color
from riskmatrix.core.risk_matrix import (
    calculate_score,
    find_level_for_score,
    generate_default_levels,
    get_color_for_score,
)
from riskmatrix.core.scale_lookup import calculate_criteria_score, find_scale_entry_for_score, scale_label
from riskmatrix.core.matrix_cells import CellInfoCache, cell_at_point, get_cell_info
from riskmatrix.core.heatmap import HeatmapBuffer, render_heatmap
from riskmatrix.core.matrix_validation import (
    RiskMatrixValidationError,
    ensure_valid_configuration,
    validate_configuration,
    validate_levels,
)
from riskmatrix.core.engine import RiskMatrixEngine, default_configuration

__all__ = [
    # Schemas
    "CalculationMethod",
    "CellInfo",
    "LevelValidationIssue",
    "RiskAssessment",
    "RiskLevel",
    "RiskMatrixConfiguration",
    "ScaleEntry",
    # Scoring
    "calculate_score",
    "find_level_for_score",
    "generate_default_levels",
    "get_color_for_score",
    "interpolate_color",
    "get_text_color",
    # Scales
    "calculate_criteria_score",
    "find_scale_entry_for_score",
    "scale_label",
    # Cells and rendering
    "CellInfoCache",
    "cell_at_point",
    "get_cell_info",
    "HeatmapBuffer",
    "render_heatmap",
    # Validation
    "RiskMatrixValidationError",
    "ensure_valid_configuration",
    "validate_configuration",
    "validate_levels",
    # Engine
    "RiskMatrixEngine",
    "default_configuration",
]
