"""Configuration management for Axiology."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseSettings):
    """Policy constants used by the satisfaction checker and scorer."""

    model_config = SettingsConfigDict(env_prefix="AXIOLOGY_")

    # Fairness settings
    disparate_impact_floor: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Minimum disparate impact ratio that passes (the 80% rule)",
    )
    similarity_threshold: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Pairs above this similarity count as similar individuals",
    )

    # Welfare settings
    egalitarian_variance_scale: float = Field(
        default=0.25,
        gt=0.0,
        description="Utility variance at which egalitarian welfare scores 0.0",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")


# Process-wide config - created on first use
_config_state: dict[str, ScoringConfig | None] = {"config": None}


def get_config() -> ScoringConfig:
    """Get the process-wide scoring configuration."""
    config = _config_state["config"]
    if config is None:
        config = ScoringConfig()
        _config_state["config"] = config
    return config


def set_config(config: ScoringConfig | None) -> None:
    """Replace the process-wide scoring configuration (None resets to env defaults)."""
    _config_state["config"] = config
