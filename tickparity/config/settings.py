"""
PURPOSE: Configuration settings for the tickparity prediction engine.

This module uses Pydantic Settings to manage configuration from environment
variables and .env files. All settings are validated and typed. Nested model
settings are addressed with a double underscore, e.g.
TICKPARITY_STRATEGY__MIN_CONFIDENCE=70.
"""

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tickparity.config.constants import EnsembleMethod, ModelKind, WeightMethod


class StatisticalConfig(BaseModel):
    """Statistical estimator parameters."""

    enabled: bool = True
    lookback_period: int = Field(default=100, ge=1)
    ema_alpha: float = Field(default=0.1, ge=0.0, le=1.0)


class PatternConfig(BaseModel):
    """Pattern matcher parameters."""

    enabled: bool = True
    min_pattern_length: int = Field(default=3, ge=1)
    max_pattern_length: int = Field(default=10, ge=1)
    similarity_threshold: float = Field(default=0.7, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_lengths(self) -> "PatternConfig":
        """Query length must fit inside the extracted window."""
        if self.min_pattern_length > self.max_pattern_length:
            raise ValueError(
                f"min_pattern_length ({self.min_pattern_length}) exceeds "
                f"max_pattern_length ({self.max_pattern_length})"
            )
        return self


class RuleBasedConfig(BaseModel):
    """Rule engine parameters."""

    enabled: bool = True
    streak_threshold: int = Field(default=3, ge=1)
    reversal_confidence: float = Field(default=0.7, ge=0.0, le=1.0)


class AdaptiveConfig(BaseModel):
    """Adaptive learner (Q-learning) parameters."""

    enabled: bool = False
    learning_rate: float = Field(default=0.1, ge=0.0, le=1.0)
    discount_factor: float = Field(default=0.95, ge=0.0, le=1.0)
    exploration_rate: float = Field(default=0.1, ge=0.0, le=1.0)


class StrategyConfig(BaseModel):
    """
    Ensemble weighting and fusion parameters.

    weight_method and ensemble_method are free strings: unknown weight methods
    fall back to equal weighting, and ensemble methods other than "weighted"
    leave the Monte Carlo gate inactive.
    """

    weight_method: str = WeightMethod.PERFORMANCE.value
    ensemble_method: str = EnsembleMethod.WEIGHTED.value
    min_confidence: float = Field(default=60.0, ge=0.0, le=100.0)
    monte_carlo_iterations: int = Field(default=100, ge=0)


class EngineSettings(BaseSettings):
    """
    PURPOSE: Central configuration class for the parity engine.

    Holds per-model parameters, ensemble strategy, and the ambient settings
    for logging and state persistence. Passed explicitly into ParityEngine.
    """

    model_config = SettingsConfigDict(
        env_prefix="TICKPARITY_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    statistical: StatisticalConfig = Field(default_factory=StatisticalConfig)
    pattern: PatternConfig = Field(default_factory=PatternConfig)
    rule_based: RuleBasedConfig = Field(default_factory=RuleBasedConfig)
    adaptive: AdaptiveConfig = Field(default_factory=AdaptiveConfig)
    strategy: StrategyConfig = Field(default_factory=StrategyConfig)

    # System Settings
    LOG_LEVEL: str = "INFO"
    # Writable directory for the JSON state store (value table, model stats)
    STATE_DIR: str = "./data/tickparity"
    REDIS_URL: str = "redis://localhost:6379/0"

    def is_model_enabled(self, kind: str) -> bool:
        """
        PURPOSE: Report whether a model kind is switched on.

        Args:
            kind: ModelKind value (e.g. "pattern").

        Returns:
            bool: The model section's enabled flag, False for unknown kinds.
        """
        try:
            name = ModelKind(kind).value
        except ValueError:
            return False
        return bool(getattr(self, name).enabled)


settings: EngineSettings = EngineSettings()
