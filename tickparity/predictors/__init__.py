"""
PURPOSE: Predictor exports for tickparity.

Exports the BasePredictor contract and the four model implementations.
"""

from tickparity.predictors.adaptive import AdaptivePredictor
from tickparity.predictors.base import BasePredictor
from tickparity.predictors.pattern import PatternPredictor
from tickparity.predictors.rule_based import RuleBasedPredictor
from tickparity.predictors.statistical import StatisticalPredictor

__all__ = [
    "BasePredictor",
    "StatisticalPredictor",
    "PatternPredictor",
    "RuleBasedPredictor",
    "AdaptivePredictor",
]
