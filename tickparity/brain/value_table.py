"""
PURPOSE: Discretized learner state and the action-value table it indexes.

LearnerState compresses the most recent ticks into a small hashable key.
ValueTable maps each state to estimated values for wagering EVEN or ODD and
converts to and from the JSON-safe form the state stores persist.

CALLED BY: predictors/adaptive.py, storage/*
"""

from typing import Iterator, NamedTuple, Optional, Sequence

from tickparity.config.constants import LEARNER_STATE_WINDOW, Parity
from tickparity.schemas.tick import Tick


class LearnerState(NamedTuple):
    """
    Order-sensitive summary of the last few ticks.

    Attributes:
        last_digit: Terminal digit of the newest tick.
        even_count: Number of even ticks in the window.
        pattern: Parity bits oldest to newest, 1 for even.
    """

    last_digit: int
    even_count: int
    pattern: tuple[int, ...]

    @classmethod
    def from_ticks(cls, ticks: Sequence[Tick]) -> "LearnerState":
        """
        PURPOSE: Build the state for the most recent LEARNER_STATE_WINDOW ticks.

        Args:
            ticks: Tick history, oldest first. Shorter histories use what exists.

        Returns:
            LearnerState: State key for the window.

        Raises:
            ValueError: If ticks is empty.
        """
        if not ticks:
            raise ValueError("Cannot build a learner state from an empty history")

        recent = list(ticks[-LEARNER_STATE_WINDOW:])
        pattern = tuple(1 if t.is_even else 0 for t in recent)
        return cls(last_digit=recent[-1].digit, even_count=sum(pattern), pattern=pattern)

    def to_key(self) -> str:
        """Serialize as "<last_digit>|<even_count>|<bits>"."""
        bits = "".join(str(b) for b in self.pattern)
        return f"{self.last_digit}|{self.even_count}|{bits}"

    @classmethod
    def from_key(cls, key: str) -> "LearnerState":
        """
        Parse a key produced by to_key.

        Raises:
            ValueError: If key is malformed.
        """
        parts = key.split("|")
        if len(parts) != 3 or not all(c in "01" for c in parts[2]):
            raise ValueError(f"Malformed learner state key: '{key}'")
        return cls(
            last_digit=int(parts[0]),
            even_count=int(parts[1]),
            pattern=tuple(int(c) for c in parts[2]),
        )


def _empty_row() -> dict[str, float]:
    return {Parity.EVEN.value: 0.0, Parity.ODD.value: 0.0}


class ValueTable:
    """
    PURPOSE: Action values per learner state, populated lazily.

    Rows are created on first access with both actions at 0.0 and are
    never removed.
    """

    def __init__(self, rows: Optional[dict[LearnerState, dict[str, float]]] = None):
        self._rows: dict[LearnerState, dict[str, float]] = {}
        for state, row in (rows or {}).items():
            self._rows[state] = {**_empty_row(), **{str(k): float(v) for k, v in row.items()}}

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, state: object) -> bool:
        return state in self._rows

    def __iter__(self) -> Iterator[LearnerState]:
        return iter(self._rows)

    def row(self, state: LearnerState) -> dict[str, float]:
        """Return the mutable row for state, creating it at {0, 0} if absent."""
        if state not in self._rows:
            self._rows[state] = _empty_row()
        return self._rows[state]

    def value(self, state: LearnerState, action: Parity) -> float:
        return self.row(state)[Parity(action).value]

    def set_value(self, state: LearnerState, action: Parity, value: float) -> None:
        self.row(state)[Parity(action).value] = float(value)

    def best_value(self, state: LearnerState) -> float:
        """Largest action value in the state's row."""
        return max(self.row(state).values())

    def to_dict(self) -> dict[str, dict[str, float]]:
        """Serialize to a JSON-safe dict keyed by LearnerState.to_key()."""
        return {state.to_key(): dict(row) for state, row in self._rows.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "ValueTable":
        """
        Restore a table from to_dict() output.

        Raises:
            ValueError: If a key or value cannot be parsed.
        """
        return cls({LearnerState.from_key(key): row for key, row in data.items()})
