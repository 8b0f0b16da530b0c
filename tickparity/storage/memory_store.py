"""
PURPOSE: In-process state store.

Keeps serialized copies of the value table and accuracy records so callers
never share mutable objects with the store, matching the read/modify/write
behaviour of the persistent stores.
"""

from typing import Optional

from tickparity.brain.value_table import ValueTable
from tickparity.schemas.records import ModelAccuracyRecord
from tickparity.storage.base import StateStore, accuracy_from_dict, accuracy_to_dict


class InMemoryStateStore(StateStore):
    """PURPOSE: Dict-backed StateStore for tests and single-process runs."""

    def __init__(
        self,
        value_table: Optional[ValueTable] = None,
        model_accuracy: Optional[dict[str, ModelAccuracyRecord]] = None,
    ):
        self._value_table: dict = value_table.to_dict() if value_table else {}
        self._model_accuracy: dict = accuracy_to_dict(model_accuracy or {})
        self.writes = 0

    def read_value_table(self) -> ValueTable:
        return ValueTable.from_dict(self._value_table)

    def write_value_table(self, table: ValueTable) -> None:
        self._value_table = table.to_dict()
        self.writes += 1

    def read_model_accuracy(self) -> dict[str, ModelAccuracyRecord]:
        return accuracy_from_dict(self._model_accuracy)

    def write_model_accuracy(self, records: dict[str, ModelAccuracyRecord]) -> None:
        self._model_accuracy = accuracy_to_dict(records)
        self.writes += 1
