"""
PURPOSE: tickparity, ensemble prediction of the next tick's terminal-digit parity.

Four independent models (statistical, pattern, rule-based, adaptive) vote on
whether the next tick's last digit is even or odd; a weighting and fusion
stage turns the votes into a single trade/no-trade decision.
"""

from tickparity.config.constants import ModelKind, Parity
from tickparity.config.settings import EngineSettings
from tickparity.engine.engine import ParityEngine
from tickparity.schemas.prediction import Decision, ModelPrediction
from tickparity.schemas.tick import Tick

__version__ = "1.0.0"

__all__ = [
    "ParityEngine",
    "EngineSettings",
    "Decision",
    "ModelPrediction",
    "Tick",
    "Parity",
    "ModelKind",
]
