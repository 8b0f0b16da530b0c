"""
PURPOSE: Persistence contract between the engine and its state store.

The engine reads and writes the learner's value table and per-model accuracy
records only through StateStore. Calls are synchronous; a write either
completes or raises RuntimeError before returning.

CALLED BY: predictors/adaptive.py, brain/performance.py, engine/engine.py
"""

from abc import ABC, abstractmethod

from tickparity.brain.value_table import ValueTable
from tickparity.schemas.records import ModelAccuracyRecord


class StateStore(ABC):
    """PURPOSE: Abstract key-value store for engine state."""

    @abstractmethod
    def read_value_table(self) -> ValueTable:
        """Return the current value table (empty if none stored)."""

    @abstractmethod
    def write_value_table(self, table: ValueTable) -> None:
        """Persist the whole value table. Raises RuntimeError on failure."""

    @abstractmethod
    def read_model_accuracy(self) -> dict[str, ModelAccuracyRecord]:
        """Return accuracy records keyed by model id (empty if none stored)."""

    @abstractmethod
    def write_model_accuracy(self, records: dict[str, ModelAccuracyRecord]) -> None:
        """Persist all accuracy records. Raises RuntimeError on failure."""


def accuracy_to_dict(records: dict[str, ModelAccuracyRecord]) -> dict[str, dict]:
    """Serialize accuracy records to a JSON-safe dict."""
    return {model: record.model_dump() for model, record in records.items()}


def accuracy_from_dict(data: dict) -> dict[str, ModelAccuracyRecord]:
    """Restore accuracy records from accuracy_to_dict() output."""
    return {model: ModelAccuracyRecord(**record) for model, record in data.items()}
