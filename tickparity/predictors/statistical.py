"""
PURPOSE: Statistical parity estimator.

Estimates the probability of an even digit from recent frequency, shrunk
toward the fair-coin prior, then blends in an exponential moving average of
the parity signal to follow short-term drift.

CALLED BY: engine/engine.py
"""

from typing import Sequence

from tickparity.config.constants import (
    EMA_WINDOW,
    MIN_HISTORY_STATISTICAL,
    PRIOR_PROBABILITY,
    PRIOR_WEIGHT,
    ModelKind,
    Parity,
)
from tickparity.config.settings import StatisticalConfig
from tickparity.predictors.base import BasePredictor
from tickparity.schemas.prediction import ModelPrediction
from tickparity.schemas.tick import Tick
from tickparity.utils.math_utils import calculate_ema


class StatisticalPredictor(BasePredictor):
    """
    PURPOSE: Bayesian-shrunk parity frequency with an EMA trend adjustment.

    Both parities are shrunk independently, so before the EMA blend they
    need not sum to 1.
    """

    kind = ModelKind.STATISTICAL
    min_history = MIN_HISTORY_STATISTICAL

    def __init__(self, config: StatisticalConfig):
        super().__init__(config)

    def _predict(self, history: Sequence[Tick]) -> ModelPrediction:
        lookback = min(len(history), self._config.lookback_period)
        recent = history[-lookback:]

        even_count = sum(1 for t in recent if t.is_even)
        odd_count = lookback - even_count

        even_prob = even_count / lookback
        odd_prob = odd_count / lookback

        even_prob = even_prob * (1 - PRIOR_WEIGHT) + PRIOR_PROBABILITY * PRIOR_WEIGHT
        odd_prob = odd_prob * (1 - PRIOR_WEIGHT) + PRIOR_PROBABILITY * PRIOR_WEIGHT

        signal = [1 if t.is_even else 0 for t in recent[-min(EMA_WINDOW, lookback):]]
        ema = calculate_ema(signal, self._config.ema_alpha)

        if ema is not None:
            even_prob = (even_prob + ema) / 2
            odd_prob = 1 - even_prob

        prediction = Parity.EVEN if even_prob > odd_prob else Parity.ODD
        confidence = max(even_prob, odd_prob)

        return self._vote(
            prediction,
            confidence,
            even_prob=round(even_prob, 3),
            odd_prob=round(odd_prob, 3),
            even_count=even_count,
            odd_count=odd_count,
            ema=round(ema, 3) if ema is not None else None,
        )
