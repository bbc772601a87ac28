"""Risk matrix configuration defaults."""
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from riskmatrix.core.colors import is_hex_color


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

# UI constraint on likelihood/impact scale sizes and level counts
MIN_SCALE_SIZE = 2
MAX_SCALE_SIZE = 10
MIN_LEVEL_COUNT = 2
MAX_LEVEL_COUNT = 10


class Settings(BaseSettings):
    DEFAULT_ROWS: int = 5
    DEFAULT_COLUMNS: int = 5
    DEFAULT_LEVEL_COUNT: int = 4
    DEFAULT_CALCULATION_METHOD: str = "product"

    # Shown by callers when a score falls outside every band
    UNKNOWN_LEVEL_LABEL: str = "Unknown"
    UNKNOWN_LEVEL_COLOR: str = "#6b7280"

    HEATMAP_WIDTH: int = 600
    HEATMAP_HEIGHT: int = 600

    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="RISK_MATRIX_", env_file=".env", extra="ignore")

    @field_validator("DEFAULT_ROWS", "DEFAULT_COLUMNS")
    @classmethod
    def validate_scale_size(cls, v: int) -> int:
        if v < MIN_SCALE_SIZE or v > MAX_SCALE_SIZE:
            raise ValueError(f"Scale size must be between {MIN_SCALE_SIZE} and {MAX_SCALE_SIZE}, got {v}")
        return v

    @field_validator("DEFAULT_LEVEL_COUNT")
    @classmethod
    def validate_level_count(cls, v: int) -> int:
        if v < MIN_LEVEL_COUNT or v > MAX_LEVEL_COUNT:
            raise ValueError(f"Level count must be between {MIN_LEVEL_COUNT} and {MAX_LEVEL_COUNT}, got {v}")
        return v

    @field_validator("DEFAULT_CALCULATION_METHOD")
    @classmethod
    def validate_calculation_method(cls, v: str) -> str:
        v = v.lower()
        if v == "avg":
            v = "average"
        if v not in ("product", "max", "average"):
            raise ValueError(f"Calculation method must be product, max or average, got {v!r}")
        return v

    @field_validator("HEATMAP_WIDTH", "HEATMAP_HEIGHT")
    @classmethod
    def validate_heatmap_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Heat map dimensions must be positive")
        return v

    @field_validator("UNKNOWN_LEVEL_COLOR")
    @classmethod
    def validate_unknown_level_color(cls, v: str) -> str:
        if not is_hex_color(v):
            raise ValueError(f"Unknown level color must be a #rrggbb hex string, got {v!r}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return v

    def configure_logging(self) -> None:
        """Apply LOG_LEVEL to the package logger."""
        logging.getLogger("riskmatrix").setLevel(self.LOG_LEVEL.upper())


settings = Settings()
