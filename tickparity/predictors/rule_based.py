"""
PURPOSE: Ordered heuristic rule chain over parity streaks and digit properties.

Rules run in a fixed order and a later rule may overwrite an earlier one:
streak reversal, short-streak continuation, the Fibonacci digit trigger, and
a default alternation call. The output records which rules fired.

CALLED BY: engine/engine.py
"""

from typing import Optional, Sequence

from tickparity.config.constants import (
    DEFAULT_ALTERNATION_CONFIDENCE,
    FIBONACCI_CONFIDENCE,
    FIBONACCI_DIGITS,
    MIN_HISTORY_RULE_BASED,
    SHORT_STREAK_CONFIDENCE,
    SHORT_STREAK_LENGTH,
    STREAK_WINDOW,
    ModelKind,
    Parity,
)
from tickparity.config.settings import RuleBasedConfig
from tickparity.predictors.base import BasePredictor
from tickparity.schemas.prediction import ModelPrediction
from tickparity.schemas.tick import Tick


def current_streak(ticks: Sequence[Tick]) -> tuple[int, Parity]:
    """
    PURPOSE: Length and parity of the run ending at the newest tick.

    Args:
        ticks: Non-empty tick window, oldest first.

    Returns:
        tuple: (streak length, streak parity).
    """
    streak_type = ticks[-1].parity
    count = 1
    for tick in reversed(ticks[:-1]):
        if tick.parity != streak_type:
            break
        count += 1
    return count, streak_type


class RuleBasedPredictor(BasePredictor):
    """PURPOSE: Apply the ordered streak and digit rules to the last ticks."""

    kind = ModelKind.RULE_BASED
    min_history = MIN_HISTORY_RULE_BASED

    def __init__(self, config: RuleBasedConfig):
        super().__init__(config)

    def _predict(self, history: Sequence[Tick]) -> ModelPrediction:
        recent = history[-STREAK_WINDOW:]
        last = recent[-1]
        streak_count, streak_type = current_streak(recent)

        prediction: Optional[Parity] = None
        confidence = 0.5
        rules: list[str] = []

        # Mean reversion after a long streak
        if streak_count >= self._config.streak_threshold:
            prediction = streak_type.opposite()
            confidence = self._config.reversal_confidence
            rules.append(f"Streak reversal ({streak_count} {streak_type.value})")

        # Continuation on a short streak
        if streak_count == SHORT_STREAK_LENGTH:
            prediction = streak_type
            confidence = SHORT_STREAK_CONFIDENCE
            rules.append(f"Short streak continuation ({streak_count})")

        if last.digit in FIBONACCI_DIGITS:
            if prediction is None or confidence < FIBONACCI_CONFIDENCE:
                prediction = last.parity.opposite()
                confidence = FIBONACCI_CONFIDENCE
                rules.append("Fibonacci number detected")

        if prediction is None:
            prediction = last.parity.opposite()
            confidence = DEFAULT_ALTERNATION_CONFIDENCE
            rules.append("Default alternation")

        return self._vote(
            prediction,
            confidence,
            streak_count=streak_count,
            streak_type=streak_type.value,
            last_digit=last.digit,
            rules_applied=rules,
        )
