"""
PURPOSE: Enumerations and fixed constants shared across the parity engine.
"""

from enum import Enum


class Parity(str, Enum):
    """Parity of a tick's terminal digit."""

    EVEN = "EVEN"
    ODD = "ODD"

    @classmethod
    def of(cls, digit: int) -> "Parity":
        """Return the parity of a digit."""
        return cls.EVEN if digit % 2 == 0 else cls.ODD

    def opposite(self) -> "Parity":
        """Return the other parity."""
        return Parity.ODD if self is Parity.EVEN else Parity.EVEN


class ModelKind(str, Enum):
    """
    The closed set of prediction models. Declaration order is the order in
    which the engine runs them and reports them in a decision breakdown.
    """

    STATISTICAL = "statistical"
    PATTERN = "pattern"
    RULE_BASED = "rule_based"
    ADAPTIVE = "adaptive"


class WeightMethod(str, Enum):
    EQUAL = "equal"
    PERFORMANCE = "performance"
    CONFIDENCE = "confidence"


class EnsembleMethod(str, Enum):
    """Only WEIGHTED activates the Monte Carlo gate."""

    VOTING = "voting"
    WEIGHTED = "weighted"
    STACKING = "stacking"


class TradeResult(str, Enum):
    WIN = "win"
    LOSS = "loss"


# Minimum history each model needs before it will vote
MIN_HISTORY_STATISTICAL = 10
MIN_HISTORY_PATTERN = 20
MIN_HISTORY_RULE_BASED = 5
MIN_HISTORY_ADAPTIVE = 20

# Statistical estimator
PRIOR_WEIGHT = 0.1
PRIOR_PROBABILITY = 0.5
EMA_WINDOW = 20

# Pattern matcher
ANOMALY_WINDOW = 10
ANOMALY_CONFIDENCE_FACTOR = 0.7

# Rule engine
STREAK_WINDOW = 10
SHORT_STREAK_LENGTH = 2
SHORT_STREAK_CONFIDENCE = 0.6
FIBONACCI_DIGITS = frozenset({0, 1, 2, 3, 5, 8})
FIBONACCI_CONFIDENCE = 0.65
DEFAULT_ALTERNATION_CONFIDENCE = 0.52

# Adaptive learner
LEARNER_STATE_WINDOW = 5
LEARNER_CONFIDENCE_SCALE = 10.0

# Weighting and fusion
DEFAULT_MODEL_ACCURACY = 0.5
MONTE_CARLO_MIN_WIN_PROBABILITY = 0.5
