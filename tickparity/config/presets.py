"""
PURPOSE: Named strategy presets that tune how readily the engine trades.

Each preset sets the minimum fused confidence (percent) required before a
decision is allowed to trade. "custom" leaves the configuration untouched.
"""

from tickparity.config.settings import EngineSettings
from tickparity.utils.logger import get_logger

logger = get_logger("config.presets")

STRATEGY_PRESETS: dict[str, dict] = {
    "conservative": {"min_confidence": 75.0},
    "moderate": {"min_confidence": 60.0},
    "aggressive": {"min_confidence": 50.0},
}


def apply_preset(config: EngineSettings, name: str) -> EngineSettings:
    """
    PURPOSE: Return a copy of config with a strategy preset applied.

    Args:
        config: Base engine settings (not modified).
        name: Preset name (conservative, moderate, aggressive, custom).

    Returns:
        EngineSettings: New settings object with the preset's strategy values,
            or config itself for "custom" and unknown names.
    """
    preset = STRATEGY_PRESETS.get(name.strip().lower())
    if preset is None:
        if name.strip().lower() != "custom":
            logger.warning("strategy_preset_unknown", preset=name)
        return config

    strategy = config.strategy.model_copy(update=preset)
    logger.info("strategy_preset_applied", preset=name, **preset)
    return config.model_copy(update={"strategy": strategy})
