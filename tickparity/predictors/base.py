"""
PURPOSE: Abstract base class for all parity prediction models.

Defines the BasePredictor contract every model implements: a single
predict(history) call returning a ModelPrediction. Handles the shared
minimum-history check and the confidence clamp so subclasses only encode
their own estimate.

CALLED BY: engine/engine.py
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from tickparity.config.constants import ModelKind, Parity
from tickparity.schemas.prediction import ModelPrediction
from tickparity.schemas.tick import Tick
from tickparity.utils.logger import get_logger
from tickparity.utils.math_utils import clamp

logger = get_logger("predictors.base")


class BasePredictor(ABC):
    """
    PURPOSE: Abstract base class for all prediction models.

    Subclasses set `kind` and `min_history` and implement `_predict`, which
    only runs once the history is long enough.

    Attributes:
        kind: ModelKind this predictor reports as.
        min_history: Ticks required before the model votes.
        _config: Model-specific configuration section.
    """

    kind: ModelKind
    min_history: int = 1

    def __init__(self, config: Any):
        self._config = config

    @property
    def config(self) -> Any:
        return self._config

    def predict(self, history: Sequence[Tick]) -> ModelPrediction:
        """
        PURPOSE: Produce this model's vote for the next tick's parity.

        Args:
            history: Tick history, oldest first. Never mutated.

        Returns:
            ModelPrediction: Vote, or an explicit abstention when the history
                is shorter than min_history.

        CALLED BY: engine/engine.py → ParityEngine.predict()
        """
        if len(history) < self.min_history:
            logger.debug(
                "predictor_insufficient_history",
                model=self.kind.value,
                history=len(history),
                required=self.min_history,
            )
            return ModelPrediction.abstain(self.kind)
        return self._predict(history)

    @abstractmethod
    def _predict(self, history: Sequence[Tick]) -> ModelPrediction:
        """Compute the vote; history is at least min_history long."""

    def _vote(
        self,
        prediction: Optional[Parity],
        confidence: float,
        **details: Any,
    ) -> ModelPrediction:
        """Build a ModelPrediction with confidence clamped into [0, 1]."""
        if prediction is None:
            return ModelPrediction.abstain(self.kind, **details)
        return ModelPrediction(
            model=self.kind,
            prediction=prediction,
            confidence=clamp(confidence),
            details=details,
        )
