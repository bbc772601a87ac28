"""Pytest fixtures for risk matrix tests."""
import pytest

from riskmatrix.core.risk_matrix import generate_default_levels
from riskmatrix.schemas.risk_matrix import RiskLevel, RiskMatrixConfiguration


@pytest.fixture
def four_levels():
    """Default 4-level bands for a 5x5 matrix: 1-6, 7-12, 13-18, 19-25."""
    return generate_default_levels(4, 25)


@pytest.fixture
def matrix_5x5(four_levels):
    """5x5 product matrix with default 4-level bands."""
    return RiskMatrixConfiguration(
        name="Enterprise Risk Matrix",
        rows=5,
        columns=5,
        calculation_method="product",
        levels=four_levels,
    )


@pytest.fixture
def matrix_2x2():
    """Smallest matrix: scores 1-4 split into two bands."""
    return RiskMatrixConfiguration(
        name="Tiny",
        rows=2,
        columns=2,
        levels=generate_default_levels(2, 4),
    )


@pytest.fixture
def gapped_levels():
    """Bands with nothing covering scores 5-6."""
    return [
        RiskLevel(name="Low", color="#22c55e", min=1, max=4, order=1),
        RiskLevel(name="High", color="#ef4444", min=7, max=9, order=2),
    ]


@pytest.fixture
def overlapping_levels():
    """Bands that both claim scores 4-5."""
    return [
        RiskLevel(name="Low", color="#22c55e", min=1, max=5, order=1),
        RiskLevel(name="High", color="#ef4444", min=4, max=9, order=2),
    ]
