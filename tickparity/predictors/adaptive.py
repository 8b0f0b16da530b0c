"""
PURPOSE: Adaptive learner for parity prediction using tabular Q-learning.

The learner maps the last few ticks to a LearnerState, picks EVEN or ODD
epsilon-greedily from the value table, and learns from settled wagers via a
temporal-difference update. The value table is owned by the state store: it is
read on every call and written back after each update, never cached here.

CALLED BY: engine/engine.py → predict() on every cycle, apply_outcome() after settlement
"""

import random
from typing import Optional, Sequence

from tickparity.brain.value_table import LearnerState
from tickparity.config.constants import (
    LEARNER_CONFIDENCE_SCALE,
    MIN_HISTORY_ADAPTIVE,
    ModelKind,
    Parity,
)
from tickparity.config.settings import AdaptiveConfig
from tickparity.predictors.base import BasePredictor
from tickparity.schemas.prediction import ModelPrediction
from tickparity.schemas.tick import Tick
from tickparity.storage.base import StateStore
from tickparity.utils.logger import get_logger

logger = get_logger("predictors.adaptive")


class AdaptivePredictor(BasePredictor):
    """
    PURPOSE: Epsilon-greedy Q-learning over discretized recent-tick states.

    Reported confidence is max(row) / 10 clamped to [0, 1], a rough scale of
    the learned value rather than a calibrated probability.

    Attributes:
        _store: State store holding the value table.
        _rng: Random source for exploration.
    """

    kind = ModelKind.ADAPTIVE
    min_history = MIN_HISTORY_ADAPTIVE

    def __init__(
        self,
        config: AdaptiveConfig,
        store: StateStore,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(config)
        self._store = store
        self._rng = rng or random.Random()

    def _predict(self, history: Sequence[Tick]) -> ModelPrediction:
        table = self._store.read_value_table()
        state = LearnerState.from_ticks(history)
        is_new_state = state not in table
        row = table.row(state)

        explored = self._rng.random() < self._config.exploration_rate
        if explored:
            prediction = Parity.EVEN if self._rng.random() < 0.5 else Parity.ODD
        else:
            # Ties go to EVEN
            prediction = (
                Parity.EVEN
                if row[Parity.EVEN.value] >= row[Parity.ODD.value]
                else Parity.ODD
            )

        confidence = max(row.values()) / LEARNER_CONFIDENCE_SCALE

        return self._vote(
            prediction,
            confidence,
            state=state.to_key(),
            q_values=dict(row),
            explored=explored,
            new_state=is_new_state,
        )

    def apply_outcome(
        self,
        prior_state: LearnerState,
        action: Parity,
        reward: float,
        next_state: LearnerState,
    ) -> float:
        """
        PURPOSE: Apply one temporal-difference update for a settled wager.

        Q(s, a) += alpha * (reward + gamma * max(Q(s', .)) - Q(s, a))

        Both rows are created at {0, 0} if missing. The whole table is
        written back before returning.

        Args:
            prior_state: State when the wager was placed.
            action: Parity that was wagered on.
            reward: +1 for a win, -1 for a loss.
            next_state: State after the wager settled.

        Returns:
            float: Updated value for (prior_state, action).

        Raises:
            RuntimeError: If the store fails to persist the table.

        CALLED BY: engine/engine.py → ParityEngine.apply_outcome()
        """
        action = Parity(action)
        table = self._store.read_value_table()
        table.row(prior_state)
        table.row(next_state)

        alpha = self._config.learning_rate
        gamma = self._config.discount_factor

        current_q = table.value(prior_state, action)
        max_next_q = table.best_value(next_state)
        updated_q = current_q + alpha * (reward + gamma * max_next_q - current_q)
        table.set_value(prior_state, action, updated_q)

        self._store.write_value_table(table)

        logger.info(
            "value_table_updated",
            state=prior_state.to_key(),
            action=action.value,
            reward=reward,
            previous=round(current_q, 6),
            updated=round(updated_q, 6),
            table_size=len(table),
        )
        return updated_q
