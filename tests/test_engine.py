"""Tests for RiskMatrixEngine and default configurations."""
import pytest

from riskmatrix.core.engine import RiskMatrixEngine, default_configuration
from riskmatrix.schemas.risk_matrix import CalculationMethod, RiskMatrixConfiguration, ScaleEntry


class TestDefaultConfiguration:
    """Tests for default_configuration."""

    def test_settings_defaults(self):
        config = default_configuration()
        assert (config.rows, config.columns) == (5, 5)
        assert config.calculation_method is CalculationMethod.PRODUCT
        assert [level.name for level in config.levels] == ["Low", "Medium", "High", "Extreme"]

    def test_custom_size(self):
        config = default_configuration(rows=3, columns=4, num_levels=3)
        assert config.max_score == 12
        assert [(l.min, l.max) for l in config.levels] == [(1, 4), (5, 8), (9, 12)]


class TestRiskMatrixEngine:
    """Tests for RiskMatrixEngine."""

    def test_calculate_uses_configured_method(self, four_levels):
        engine = RiskMatrixEngine(
            RiskMatrixConfiguration(calculation_method="average", levels=four_levels)
        )
        assert engine.calculate(3, 4) == 3.5

    def test_cell_3_4(self, matrix_5x5):
        engine = RiskMatrixEngine(matrix_5x5)
        info = engine.cell_info(3, 4)
        assert info.score == 12
        assert info.level_name == "Medium"
        assert engine.level_for_cell(3, 4).name == "Medium"

    def test_level_and_color_for_score(self, matrix_5x5):
        engine = RiskMatrixEngine(matrix_5x5)
        assert engine.level_for_score(20).name == "Extreme"
        assert engine.level_for_score(0) is None
        assert engine.color_for_score(20) == "#f97316"

    def test_level_map_covers_every_score(self, matrix_5x5):
        level_map = RiskMatrixEngine(matrix_5x5).level_map()
        assert list(level_map) == list(range(1, 26))
        assert level_map[6] == "Low"
        assert level_map[7] == "Medium"
        assert level_map[25] == "Extreme"

    def test_level_map_reports_gaps(self, gapped_levels):
        config = RiskMatrixConfiguration(rows=3, columns=3, levels=gapped_levels)
        level_map = RiskMatrixEngine(config).level_map()
        assert level_map[5] is None
        assert level_map[6] is None

    def test_cells_are_cached(self, matrix_5x5):
        engine = RiskMatrixEngine(matrix_5x5)
        cells = engine.cells()
        assert len(cells) == 25
        assert engine.cell_info(5, 5) is cells[4]

        engine.clear_cache()
        assert engine.cell_info(5, 5) is not cells[4]

    def test_reset_levels_returns_copy(self, gapped_levels):
        config = RiskMatrixConfiguration(rows=3, columns=3, levels=gapped_levels)
        engine = RiskMatrixEngine(config)

        reset = engine.reset_levels(3)

        assert [(l.name, l.min, l.max) for l in reset.levels] == [
            ("Low", 1, 3), ("Medium", 4, 6), ("High", 7, 9)
        ]
        assert engine.config.levels == gapped_levels

    def test_reset_keeps_level_count(self, matrix_5x5):
        reset = RiskMatrixEngine(matrix_5x5).reset_levels()
        assert reset.levels == matrix_5x5.levels

    def test_assigning_config_clears_cached_cells(self, matrix_5x5):
        engine = RiskMatrixEngine(matrix_5x5)
        assert engine.cell_info(3, 4).level_name == "Medium"

        engine.config = engine.reset_levels(5)

        # 5 levels over 25: 1-5, 6-10, 11-15, 16-20, 21-25
        assert engine.cell_info(3, 4).level_name == "High"
        assert engine.level_for_cell(3, 4).name == "High"

    def test_config_setter_rebinds_scoring(self, matrix_5x5):
        engine = RiskMatrixEngine(matrix_5x5)
        engine.cells()

        engine.config = matrix_5x5.model_copy(update={"calculation_method": CalculationMethod.MAX})

        assert engine.cell_info(3, 4).score == 4
        assert engine.cell_info(3, 4).level_name == "Low"


@pytest.fixture
def labelled_matrix(four_levels):
    """5x5 product matrix with a partial likelihood scale and a 3-step impact scale."""
    return RiskMatrixConfiguration(
        rows=5,
        columns=5,
        levels=four_levels,
        likelihoods=[
            ScaleEntry(label="Rare", score=1, order=1),
            ScaleEntry(label="Possible", score=3, order=2),
            ScaleEntry(label="Almost Certain", score=5, order=3),
        ],
        impacts=[
            ScaleEntry(label="Minor", score=1, order=1),
            ScaleEntry(label="Moderate", score=2, order=2),
            ScaleEntry(label="Major", score=3, order=3),
        ],
    )


class TestAssess:
    """Tests for RiskMatrixEngine.assess and axis labels."""

    def test_score_level_and_labels(self, labelled_matrix):
        result = RiskMatrixEngine(labelled_matrix).assess(3, 2)
        assert result.score == 6
        assert result.level_name == "Low"
        assert result.likelihood_entry.label == "Possible"
        assert result.impact_entry.label == "Moderate"
        assert result.likelihood_label == "Possible"
        assert result.impact_label == "Moderate"

    def test_threshold_entry_between_scale_steps(self, labelled_matrix):
        """Likelihood 4 sits above "Possible" and below "Almost Certain"."""
        result = RiskMatrixEngine(labelled_matrix).assess(4, 5)
        assert result.score == 20
        assert result.level_name == "Extreme"
        assert result.likelihood_entry.label == "Possible"
        assert result.impact_entry.label == "Major"
        assert result.likelihood_label == "Level 4"
        assert result.impact_label == "Level 5"

    def test_without_scales(self, matrix_5x5):
        result = RiskMatrixEngine(matrix_5x5).assess(3, 4)
        assert result.score == 12
        assert result.level_name == "Medium"
        assert result.likelihood_entry is None
        assert result.impact_entry is None
        assert (result.likelihood_label, result.impact_label) == ("Level 3", "Level 4")

    def test_score_below_every_entry(self, labelled_matrix):
        config = labelled_matrix.model_copy(
            update={"impacts": [ScaleEntry(label="Major", score=3, order=1)]}
        )
        result = RiskMatrixEngine(config).assess(1, 2)
        assert result.impact_entry is None
        assert result.impact_label == "Level 2"

    def test_axis_labels(self, labelled_matrix):
        labels = RiskMatrixEngine(labelled_matrix).axis_labels()
        assert labels["likelihood"] == ["Almost Certain", "Level 4", "Possible", "Level 2", "Rare"]
        assert labels["impact"] == ["Minor", "Moderate", "Major", "Level 4", "Level 5"]
