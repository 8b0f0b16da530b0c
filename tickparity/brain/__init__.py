"""
PURPOSE: Learning state and performance tracking for tickparity.

Performance tracking lives in tickparity.brain.performance and is imported
from there directly, since it depends on the storage package.
"""

from tickparity.brain.value_table import LearnerState, ValueTable

__all__ = [
    "LearnerState",
    "ValueTable",
]
