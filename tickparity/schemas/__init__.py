"""
PURPOSE: Schema exports for tickparity.
"""

from tickparity.schemas.prediction import (
    Decision,
    FusionScores,
    ModelPrediction,
    MonteCarloResult,
)
from tickparity.schemas.records import ModelAccuracyRecord, TradeRecord, TradeSummary
from tickparity.schemas.tick import Tick

__all__ = [
    "Tick",
    "ModelPrediction",
    "FusionScores",
    "MonteCarloResult",
    "Decision",
    "ModelAccuracyRecord",
    "TradeRecord",
    "TradeSummary",
]
