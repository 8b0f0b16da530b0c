"""
PURPOSE: Historical pattern matcher with a streak anomaly detector.

Looks for earlier stretches of the tick history whose digits resemble the
most recent ones and predicts the parity that most often followed them.
Confidence is discounted when the recent window is a one-sided run, which
the matcher treats as an anomaly.

CALLED BY: engine/engine.py
"""

from typing import Sequence

from tickparity.config.constants import (
    ANOMALY_CONFIDENCE_FACTOR,
    ANOMALY_WINDOW,
    MIN_HISTORY_PATTERN,
    ModelKind,
    Parity,
)
from tickparity.config.settings import PatternConfig
from tickparity.predictors.base import BasePredictor
from tickparity.schemas.prediction import ModelPrediction
from tickparity.schemas.tick import Tick
from tickparity.utils.logger import get_logger
from tickparity.utils.math_utils import pattern_similarity

logger = get_logger("predictors.pattern")


def find_similar_patterns(
    history: Sequence[Tick],
    target: Sequence[int],
    threshold: float,
) -> list[dict]:
    """
    PURPOSE: Scan history for windows similar to the target digit sequence.

    Window starts run from 0 to len(history) - len(target) - 2, so the
    newest window and the one just before it are never candidates.

    Args:
        history: Full tick history, oldest first.
        target: Digit sequence to look for.
        threshold: Minimum similarity for a window to count as a match.

    Returns:
        list[dict]: One entry per match with index, similarity, and the
            digit that followed the window.
    """
    digits = [t.digit for t in history]
    length = len(target)
    matches = []

    for i in range(len(digits) - length - 1):
        candidate = digits[i:i + length]
        similarity = pattern_similarity(target, candidate)
        if similarity >= threshold:
            matches.append({
                "index": i,
                "similarity": similarity,
                "following": digits[i + length],
            })

    return matches


def detect_anomaly(history: Sequence[Tick]) -> bool:
    """
    PURPOSE: Flag a one-sided recent window.

    Returns:
        bool: True if the last ANOMALY_WINDOW ticks are all even or all odd.
            False for shorter histories.
    """
    if len(history) < ANOMALY_WINDOW:
        return False

    recent = history[-ANOMALY_WINDOW:]
    return all(t.is_even for t in recent) or not any(t.is_even for t in recent)


class PatternPredictor(BasePredictor):
    """PURPOSE: Predict parity from what followed similar historical digit windows."""

    kind = ModelKind.PATTERN
    min_history = MIN_HISTORY_PATTERN

    def __init__(self, config: PatternConfig):
        super().__init__(config)

    def _predict(self, history: Sequence[Tick]) -> ModelPrediction:
        recent_pattern = [t.digit for t in history[-self._config.max_pattern_length:]]
        current_sequence = recent_pattern[-self._config.min_pattern_length:]

        matches = find_similar_patterns(
            history, current_sequence, self._config.similarity_threshold
        )

        if not matches:
            logger.debug("pattern_no_matches", sequence=current_sequence)
            return self._vote(None, 0.0, matches_found=0)

        following = [m["following"] for m in matches]
        even_following = sum(1 for d in following if d % 2 == 0)
        odd_following = len(following) - even_following

        even_prob = even_following / len(following)
        odd_prob = odd_following / len(following)

        is_anomaly = detect_anomaly(history)
        confidence = max(even_prob, odd_prob)
        if is_anomaly:
            confidence *= ANOMALY_CONFIDENCE_FACTOR

        prediction = Parity.EVEN if even_prob > odd_prob else Parity.ODD

        return self._vote(
            prediction,
            confidence,
            matches_found=len(matches),
            even_following=even_following,
            odd_following=odd_following,
            is_anomaly=is_anomaly,
        )
