"""Risk matrix schemas."""
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from riskmatrix.core.colors import NEUTRAL_COLOR, is_hex_color
from riskmatrix.core.config import MAX_SCALE_SIZE, MIN_SCALE_SIZE, settings


class CalculationMethod(str, Enum):
    """How a (likelihood, impact) pair becomes a raw score."""
    PRODUCT = "product"
    MAX = "max"
    AVERAGE = "average"


class RiskLevel(BaseModel):
    """A qualitative score band with inclusive integer bounds."""
    name: str = Field(..., min_length=1, description="Display label for the band")
    color: str = Field(..., description="Band color as #rrggbb")
    min: int = Field(..., description="Lowest score in the band (inclusive)")
    max: int = Field(..., description="Highest score in the band (inclusive)")
    order: int = Field(..., ge=1, description="1-based rank, ascending severity")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='before')
    @classmethod
    def accept_label_alias(cls, data: Any) -> Any:
        """Score levels are stored with ``label`` rather than ``name``."""
        if isinstance(data, dict) and "name" not in data and "label" in data:
            data = dict(data)
            data["name"] = data.pop("label")
        return data

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        if not is_hex_color(v):
            raise ValueError(f"Color must be a #rrggbb hex string, got {v!r}")
        return v.lower()


class ScaleEntry(BaseModel):
    """One step of a likelihood (probability) or impact scale."""
    label: str
    score: float
    order: int = Field(..., ge=1)
    color: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not is_hex_color(v):
            raise ValueError(f"Color must be a #rrggbb hex string, got {v!r}")
        return v.lower()


class RiskMatrixConfiguration(BaseModel):
    """A rows x columns risk matrix with its score bands.

    Bands are expected to be contiguous and non-overlapping over
    [1, rows * columns]. That invariant is checked by the editor before a
    configuration is saved, not here, so a malformed configuration still
    loads and simply yields "Unknown" lookups.

    Example:
    {
        "name": "Default Risk Matrix",
        "rows": 5,
        "columns": 5,
        "calculation_method": "product",
        "levels": [
            {"name": "Low", "color": "#22c55e", "min": 1, "max": 6, "order": 1},
            ...
        ]
    }
    """
    name: str = Field(default="Default Risk Matrix")
    rows: int = Field(
        default=5, ge=MIN_SCALE_SIZE, le=MAX_SCALE_SIZE,
        description="Likelihood scale size"
    )
    columns: int = Field(
        default=5, ge=MIN_SCALE_SIZE, le=MAX_SCALE_SIZE,
        description="Impact scale size"
    )
    calculation_method: CalculationMethod = Field(default=CalculationMethod.PRODUCT)
    levels: List[RiskLevel] = Field(default_factory=list)
    likelihoods: List[ScaleEntry] = Field(
        default_factory=list,
        description="Optional labelled likelihood scale"
    )
    impacts: List[ScaleEntry] = Field(
        default_factory=list,
        description="Optional labelled impact scale"
    )
    is_active: bool = True

    @field_validator("calculation_method", mode="before")
    @classmethod
    def normalize_calculation_method(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            if v == "avg":
                return CalculationMethod.AVERAGE
        return v

    @field_validator("levels")
    @classmethod
    def sort_levels(cls, v: List[RiskLevel]) -> List[RiskLevel]:
        return sorted(v, key=lambda level: level.order)

    @field_validator("likelihoods", "impacts")
    @classmethod
    def sort_scale(cls, v: List[ScaleEntry]) -> List[ScaleEntry]:
        return sorted(v, key=lambda entry: entry.order)

    @computed_field
    @property
    def max_score(self) -> int:
        return self.rows * self.columns


class CellInfo(BaseModel):
    """Score and level of one matrix cell, as shown in a tooltip."""
    likelihood: int
    impact: int
    score: Union[int, float]
    level: Optional[RiskLevel] = None

    model_config = ConfigDict(frozen=True)

    @property
    def level_name(self) -> str:
        return self.level.name if self.level else settings.UNKNOWN_LEVEL_LABEL

    @property
    def color(self) -> str:
        if self.level:
            return self.level.color
        return settings.UNKNOWN_LEVEL_COLOR or NEUTRAL_COLOR


class RiskAssessment(BaseModel):
    """
    A scored (likelihood, impact) pair with its band and scale labels.

    ``likelihood_entry`` and ``impact_entry`` come from the threshold lookup
    over the configuration's scales; the labels fall back to "Level N" when
    no scale entry has exactly that score.
    """
    likelihood: Union[int, float]
    impact: Union[int, float]
    score: Union[int, float]
    level: Optional[RiskLevel] = None
    likelihood_entry: Optional[ScaleEntry] = None
    impact_entry: Optional[ScaleEntry] = None
    likelihood_label: str
    impact_label: str

    model_config = ConfigDict(frozen=True)

    @property
    def level_name(self) -> str:
        return self.level.name if self.level else settings.UNKNOWN_LEVEL_LABEL


class LevelValidationIssue(BaseModel):
    """A problem found while validating score bands."""
    code: str
    message: str
    level_order: Optional[int] = None
