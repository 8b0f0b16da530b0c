"""
PURPOSE: Pytest fixtures for tickparity tests.

Provides shared test data and collaborators including:
- Tick factory building histories from digit lists
- Fixed 25-tick alternating history
- Engine settings with defaults
- In-memory state store and seeded random source
- Dict-backed mock Redis client
"""

import random

import pytest
from unittest.mock import MagicMock

from tickparity.config.settings import EngineSettings
from tickparity.schemas.tick import Tick
from tickparity.storage.memory_store import InMemoryStateStore

# Even digits at even positions, ending on an even 6
ALTERNATING_DIGITS = [
    2, 7, 4, 1, 6, 3, 8, 5, 0, 9,
    2, 7, 4, 1, 6, 3, 8, 5, 0, 9,
    2, 7, 4, 1, 6,
]


def ticks_from_digits(digits):
    """Build a tick list whose quotes end in the given digits."""
    return [
        Tick(
            digit=d,
            is_even=d % 2 == 0,
            quote=float(f"1234.5{d}"),
            timestamp=1_700_000_000 + i,
        )
        for i, d in enumerate(digits)
    ]


@pytest.fixture
def make_ticks():
    """
    PURPOSE: Factory fixture turning a digit list into a tick history.

    Returns:
        Callable[[list[int]], list[Tick]]
    """
    return ticks_from_digits


@pytest.fixture
def alternating_history():
    """
    PURPOSE: 25 ticks alternating even/odd, starting and ending even.

    Returns:
        list[Tick]: History built from ALTERNATING_DIGITS.
    """
    return ticks_from_digits(ALTERNATING_DIGITS)


@pytest.fixture
def engine_settings():
    """
    PURPOSE: Engine settings with library defaults.

    Returns:
        EngineSettings: Fresh settings object tests may copy and adjust.
    """
    return EngineSettings()


@pytest.fixture
def memory_store():
    """In-memory state store starting empty."""
    return InMemoryStateStore()


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(42)


@pytest.fixture
def mock_redis():
    """
    PURPOSE: Mock Redis client backed by a plain dict.

    Returns:
        MagicMock: Client whose get/set read and write `mock.data`.
    """
    client = MagicMock()
    client.data = {}
    client.get = MagicMock(side_effect=lambda key: client.data.get(key))

    def _set(key, value):
        client.data[key] = value
        return True

    client.set = MagicMock(side_effect=_set)
    return client
