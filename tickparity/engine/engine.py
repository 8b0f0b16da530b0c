"""
PURPOSE: Ensemble orchestrator for tickparity.

ParityEngine runs every enabled prediction model over a tick history,
isolates model failures, fuses the surviving votes into a Decision, and
routes post-trade feedback to the adaptive learner and the model accuracy
tracker.

The engine holds no learned state between calls: the value table and
accuracy records are read from the state store on every use. It adds no
locking, so callers must not run feedback and prediction for the same state
concurrently.

CALLED BY: the feed/trading loop → predict() per tick, settle() per settled wager
"""

import random
from typing import Optional, Sequence

from tickparity.brain.performance import ModelPerformanceTracker
from tickparity.brain.value_table import LearnerState
from tickparity.config.constants import ModelKind, Parity, WeightMethod
from tickparity.config.settings import EngineSettings
from tickparity.engine.fusion import fuse_decisions
from tickparity.predictors.adaptive import AdaptivePredictor
from tickparity.predictors.base import BasePredictor
from tickparity.predictors.pattern import PatternPredictor
from tickparity.predictors.rule_based import RuleBasedPredictor
from tickparity.predictors.statistical import StatisticalPredictor
from tickparity.schemas.prediction import Decision, ModelPrediction
from tickparity.schemas.records import ModelAccuracyRecord
from tickparity.schemas.tick import Tick
from tickparity.storage.base import StateStore
from tickparity.utils.logger import get_logger

logger = get_logger("engine.engine")

WIN_REWARD = 1.0
LOSS_REWARD = -1.0


class ParityEngine:
    """
    PURPOSE: Run the prediction ensemble and fuse its output.

    Attributes:
        _config: Engine settings passed at construction.
        _store: State store for the value table and accuracy records.
        _rng: Random source shared by exploration and the Monte Carlo gate.
        _learner: Adaptive learner, built even when disabled so feedback
            keeps training it.
        _predictors: Enabled predictors in ModelKind order.
        _tracker: Model accuracy tracker.
    """

    def __init__(
        self,
        config: EngineSettings,
        store: StateStore,
        rng: Optional[random.Random] = None,
    ):
        self._config = config
        self._store = store
        self._rng = rng or random.Random()
        self._learner = AdaptivePredictor(config.adaptive, store, self._rng)
        self._tracker = ModelPerformanceTracker(store)

        available: dict[ModelKind, BasePredictor] = {
            ModelKind.STATISTICAL: StatisticalPredictor(config.statistical),
            ModelKind.PATTERN: PatternPredictor(config.pattern),
            ModelKind.RULE_BASED: RuleBasedPredictor(config.rule_based),
            ModelKind.ADAPTIVE: self._learner,
        }
        self._predictors: list[BasePredictor] = [
            available[kind] for kind in ModelKind if config.is_model_enabled(kind)
        ]

        logger.info(
            "engine_initialized",
            models=[p.kind.value for p in self._predictors],
            weight_method=config.strategy.weight_method,
            ensemble_method=config.strategy.ensemble_method,
            min_confidence=config.strategy.min_confidence,
        )

    @property
    def config(self) -> EngineSettings:
        return self._config

    @property
    def enabled_models(self) -> list[ModelKind]:
        return [p.kind for p in self._predictors]

    # ------------------------------------------------------------------ #
    #  Prediction
    # ------------------------------------------------------------------ #

    def run_models(self, history: Sequence[Tick]) -> list[ModelPrediction]:
        """
        PURPOSE: Run each enabled model in isolation.

        A model that raises is logged and left out of this cycle.

        Args:
            history: Tick history, oldest first.

        Returns:
            list[ModelPrediction]: Outputs of the models that completed.
        """
        predictions: list[ModelPrediction] = []
        for predictor in self._predictors:
            try:
                prediction = predictor.predict(history)
            except Exception as e:
                logger.error(
                    "model_failed",
                    model=predictor.kind.value,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                continue
            if prediction is not None:
                predictions.append(prediction)
        return predictions

    def predict(self, history: Sequence[Tick]) -> Decision:
        """
        PURPOSE: Produce the fused trade/no-trade decision for the next tick.

        Args:
            history: Tick history, oldest first. Never mutated.

        Returns:
            Decision: Fused decision; degradation is reported in the decision
                rather than raised.
        """
        predictions = self.run_models(history)
        accuracy_records = self._accuracy_records() if predictions else None
        decision = fuse_decisions(
            predictions,
            self._config.strategy,
            accuracy_records=accuracy_records,
            rng=self._rng,
        )

        logger.info(
            "decision_made",
            history=len(history),
            models=len(predictions),
            prediction=decision.final_prediction.value if decision.final_prediction else None,
            confidence=round(decision.confidence, 4),
            should_trade=decision.should_trade,
            reason=decision.reason,
        )
        return decision

    def _accuracy_records(self) -> Optional[dict[str, ModelAccuracyRecord]]:
        """Read accuracy records for performance weighting; None on store failure."""
        if self._config.strategy.weight_method != WeightMethod.PERFORMANCE.value:
            return None
        try:
            return self._store.read_model_accuracy()
        except Exception as e:
            logger.warning("model_accuracy_read_failed", error=str(e))
            return None

    # ------------------------------------------------------------------ #
    #  Feedback
    # ------------------------------------------------------------------ #

    @staticmethod
    def state_for(history: Sequence[Tick]) -> LearnerState:
        """Return the learner state for the most recent ticks of history."""
        return LearnerState.from_ticks(history)

    def apply_outcome(
        self,
        prior_state: LearnerState,
        action: Parity,
        reward: float,
        next_state: LearnerState,
    ) -> float:
        """
        PURPOSE: Feed one settled wager back into the adaptive learner.

        Args:
            prior_state: State when the wager was placed.
            action: Parity wagered on.
            reward: +1 for a win, -1 for a loss.
            next_state: State after settlement.

        Returns:
            float: Updated action value.

        Raises:
            RuntimeError: If the value table cannot be persisted.
        """
        return self._learner.apply_outcome(prior_state, action, reward, next_state)

    def settle(
        self,
        decision: Decision,
        history_before: Sequence[Tick],
        history_after: Sequence[Tick],
        won: bool,
        actual: Parity,
    ) -> None:
        """
        PURPOSE: Apply all post-trade updates for a settled wager.

        Scores every model in the decision breakdown against the actual
        parity, then trains the learner on the wager when the adaptive model
        is enabled and the decision made a call.

        Args:
            decision: Decision the wager was placed on.
            history_before: Tick history when the wager was placed.
            history_after: Tick history after settlement.
            won: Whether the wager won.
            actual: Parity of the settling tick.

        Raises:
            RuntimeError: If the store fails to persist an update.
        """
        self._tracker.record_many(
            [(p.model, p.prediction) for p in decision.model_breakdown],
            actual,
        )

        if decision.final_prediction is None:
            return
        if not self._config.is_model_enabled(ModelKind.ADAPTIVE):
            return

        self.apply_outcome(
            self.state_for(history_before),
            decision.final_prediction,
            WIN_REWARD if won else LOSS_REWARD,
            self.state_for(history_after),
        )
