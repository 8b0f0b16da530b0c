"""
PURPOSE: Tests for LearnerState and ValueTable.
"""

import pytest

from tickparity.brain.value_table import LearnerState, ValueTable
from tickparity.config.constants import Parity


class TestLearnerState:
    """Test state discretization and keys."""

    def test_from_ticks_uses_last_five(self, alternating_history):
        """Test the state of the alternating history."""
        state = LearnerState.from_ticks(alternating_history)
        assert state == LearnerState(last_digit=6, even_count=3, pattern=(1, 0, 1, 0, 1))

    def test_from_short_history(self, make_ticks):
        """Test that fewer than five ticks use what exists."""
        state = LearnerState.from_ticks(make_ticks([3, 8]))
        assert state.pattern == (0, 1)
        assert state.even_count == 1
        assert state.last_digit == 8

    def test_from_empty_history_raises(self):
        """Test that an empty history is rejected."""
        with pytest.raises(ValueError):
            LearnerState.from_ticks([])

    def test_key_format(self):
        """Test the serialized key and its inverse."""
        state = LearnerState(last_digit=7, even_count=2, pattern=(1, 1, 0, 0, 0))
        assert state.to_key() == "7|2|11000"
        assert LearnerState.from_key("7|2|11000") == state

    @pytest.mark.parametrize("key", ["", "7|2", "7|2|12000", "x|2|11000"])
    def test_malformed_key_raises(self, key):
        """Test that malformed keys raise ValueError."""
        with pytest.raises(ValueError):
            LearnerState.from_key(key)


class TestValueTable:
    """Test lazy rows and serialization."""

    def test_row_created_lazily(self):
        """Test that reading an unseen state creates a zero row."""
        table = ValueTable()
        state = LearnerState(1, 0, (0,))
        assert state not in table
        assert table.row(state) == {"EVEN": 0.0, "ODD": 0.0}
        assert state in table
        assert len(table) == 1

    def test_set_and_best_value(self):
        """Test value updates and the row maximum."""
        table = ValueTable()
        state = LearnerState(1, 0, (0,))
        table.set_value(state, Parity.ODD, -0.3)
        assert table.value(state, Parity.ODD) == -0.3
        assert table.best_value(state) == 0.0

    def test_dict_form(self):
        """Test to_dict keys and from_dict restoration with missing actions filled."""
        state = LearnerState(4, 1, (0, 1))
        table = ValueTable.from_dict({"4|1|01": {"ODD": 0.25}})
        assert table.row(state) == {"EVEN": 0.0, "ODD": 0.25}
        assert table.to_dict() == {"4|1|01": {"EVEN": 0.0, "ODD": 0.25}}
