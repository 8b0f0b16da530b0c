"""
PURPOSE: Export configuration settings and constants for tickparity.

This module centralizes access to all configuration settings and constants
used throughout the prediction engine.
"""

from .constants import (
    EnsembleMethod,
    ModelKind,
    Parity,
    TradeResult,
    WeightMethod,
)
from .presets import STRATEGY_PRESETS, apply_preset
from .settings import (
    AdaptiveConfig,
    EngineSettings,
    PatternConfig,
    RuleBasedConfig,
    StatisticalConfig,
    StrategyConfig,
    settings,
)

__all__ = [
    "settings",
    "EngineSettings",
    "StatisticalConfig",
    "PatternConfig",
    "RuleBasedConfig",
    "AdaptiveConfig",
    "StrategyConfig",
    "STRATEGY_PRESETS",
    "apply_preset",
    "Parity",
    "ModelKind",
    "WeightMethod",
    "EnsembleMethod",
    "TradeResult",
]
