"""
PURPOSE: Tests for the Q-learning adaptive learner.

Covers:
- Greedy and exploratory action selection
- Confidence scaling and clamping
- Temporal-difference update and persistence through the state store
"""

import pytest
from unittest.mock import Mock

from tickparity.brain.value_table import LearnerState, ValueTable
from tickparity.config.constants import ModelKind, Parity
from tickparity.config.settings import AdaptiveConfig
from tickparity.predictors.adaptive import AdaptivePredictor
from tickparity.storage.memory_store import InMemoryStateStore

# State of the last five alternating ticks [2, 7, 4, 1, 6]
ALTERNATING_STATE = LearnerState(last_digit=6, even_count=3, pattern=(1, 0, 1, 0, 1))


def greedy_learner(store, **overrides):
    config = AdaptiveConfig(enabled=True, exploration_rate=0.0, **overrides)
    return AdaptivePredictor(config, store, rng=Mock(random=Mock(return_value=0.99)))


def store_with_row(even, odd):
    table = ValueTable()
    table.set_value(ALTERNATING_STATE, Parity.EVEN, even)
    table.set_value(ALTERNATING_STATE, Parity.ODD, odd)
    return InMemoryStateStore(value_table=table)


class TestAdaptivePrediction:
    """Test action selection."""

    def test_insufficient_history_abstains(self, make_ticks, memory_store):
        """Test that 19 ticks abstain."""
        result = greedy_learner(memory_store).predict(make_ticks([1] * 19))
        assert result.model == ModelKind.ADAPTIVE
        assert result.prediction is None
        assert result.confidence == 0.0

    def test_unseen_state_breaks_tie_to_even(self, alternating_history, memory_store):
        """Test that a fresh state predicts EVEN with zero confidence."""
        result = greedy_learner(memory_store).predict(alternating_history)
        assert result.prediction == Parity.EVEN
        assert result.confidence == 0.0
        assert result.details["state"] == "6|3|10101"
        assert result.details["new_state"] is True
        assert result.details["explored"] is False

    def test_predict_does_not_persist(self, alternating_history, memory_store):
        """Test that predicting never writes the value table."""
        greedy_learner(memory_store).predict(alternating_history)
        assert memory_store.writes == 0
        assert len(memory_store.read_value_table()) == 0

    def test_greedy_picks_higher_value(self, alternating_history):
        """Test that the larger action value wins and scales confidence by 1/10."""
        result = greedy_learner(store_with_row(0.2, 0.5)).predict(alternating_history)
        assert result.prediction == Parity.ODD
        assert result.confidence == pytest.approx(0.05)
        assert result.details["new_state"] is False
        assert result.details["q_values"] == {"EVEN": 0.2, "ODD": 0.5}

    def test_confidence_clamped_to_one(self, alternating_history):
        """Test that values above 10 still report confidence 1."""
        result = greedy_learner(store_with_row(15.0, 2.0)).predict(alternating_history)
        assert result.prediction == Parity.EVEN
        assert result.confidence == 1.0

    def test_negative_values_clamp_to_zero(self, alternating_history):
        """Test that an all-negative row still votes with confidence 0."""
        result = greedy_learner(store_with_row(-0.5, -0.2)).predict(alternating_history)
        assert result.prediction == Parity.ODD
        assert result.confidence == 0.0

    def test_exploration_draws_random_action(self, alternating_history):
        """Test that a draw below epsilon explores and a second draw picks ODD."""
        rng = Mock()
        rng.random.side_effect = [0.05, 0.7]
        learner = AdaptivePredictor(
            AdaptiveConfig(enabled=True, exploration_rate=0.1),
            store_with_row(0.9, 0.1),
            rng=rng,
        )
        result = learner.predict(alternating_history)
        assert result.prediction == Parity.ODD
        assert result.details["explored"] is True
        assert rng.random.call_count == 2


class TestAdaptiveUpdate:
    """Test the temporal-difference update."""

    def test_first_win_on_unseen_state(self, memory_store):
        """Test Q = 0 + 0.1 * (1 + 0.95 * 0 - 0) = 0.1."""
        next_state = LearnerState(last_digit=3, even_count=2, pattern=(0, 1, 0, 1, 0))
        updated = greedy_learner(memory_store).apply_outcome(
            ALTERNATING_STATE, Parity.EVEN, 1.0, next_state
        )
        assert updated == pytest.approx(0.1)

        table = memory_store.read_value_table()
        assert table.value(ALTERNATING_STATE, Parity.EVEN) == pytest.approx(0.1)
        assert table.value(ALTERNATING_STATE, Parity.ODD) == 0.0
        assert next_state in table
        assert memory_store.writes == 1

    def test_loss_uses_best_next_value(self):
        """Test Q = 0.1 + 0.1 * (-1 + 0.95 * 0.5 - 0.1) = 0.0375."""
        next_state = LearnerState(last_digit=3, even_count=2, pattern=(0, 1, 0, 1, 0))
        table = ValueTable()
        table.set_value(ALTERNATING_STATE, Parity.EVEN, 0.1)
        table.set_value(next_state, Parity.EVEN, 0.5)
        table.set_value(next_state, Parity.ODD, 0.2)
        store = InMemoryStateStore(value_table=table)

        updated = greedy_learner(store).apply_outcome(
            ALTERNATING_STATE, Parity.EVEN, -1.0, next_state
        )
        assert updated == pytest.approx(0.0375)

    def test_update_changes_next_prediction(self, alternating_history, memory_store):
        """Test that a rewarded ODD wager makes ODD the greedy choice."""
        learner = greedy_learner(memory_store)
        learner.apply_outcome(ALTERNATING_STATE, Parity.ODD, 1.0, ALTERNATING_STATE)
        result = learner.predict(alternating_history)
        assert result.prediction == Parity.ODD
        assert result.confidence == pytest.approx(0.01)

    def test_write_failure_propagates(self):
        """Test that a failed table write raises RuntimeError."""
        store = InMemoryStateStore()
        store.write_value_table = Mock(side_effect=RuntimeError("disk full"))
        with pytest.raises(RuntimeError):
            greedy_learner(store).apply_outcome(
                ALTERNATING_STATE, Parity.EVEN, 1.0, ALTERNATING_STATE
            )
