"""
PURPOSE: JSON file state store.

Persists the value table and model accuracy records as two JSON files under a
state directory. Writes go to a temporary file that atomically replaces the
target, so a crash mid-write never leaves a truncated file behind.

Layout:
    <state_dir>/value_table.json  {"_saved_at": ..., "rows": {state_key: {EVEN, ODD}}}
    <state_dir>/model_stats.json  {"_saved_at": ..., "models": {model_id: record}}
"""

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from tickparity.brain.value_table import ValueTable
from tickparity.config.settings import settings
from tickparity.schemas.records import ModelAccuracyRecord
from tickparity.storage.base import StateStore, accuracy_from_dict, accuracy_to_dict
from tickparity.utils.logger import get_logger

logger = get_logger("storage.json_store")

VALUE_TABLE_FILENAME = "value_table.json"
MODEL_STATS_FILENAME = "model_stats.json"


class JsonFileStateStore(StateStore):
    """
    PURPOSE: StateStore backed by JSON files in a directory.

    Corrupt or missing files read as empty state (logged); failed writes
    raise RuntimeError.
    """

    def __init__(self, state_dir: Optional[str] = None):
        self._dir = Path(state_dir or settings.STATE_DIR)

    @property
    def value_table_path(self) -> Path:
        return self._dir / VALUE_TABLE_FILENAME

    @property
    def model_stats_path(self) -> Path:
        return self._dir / MODEL_STATS_FILENAME

    # ------------------------------------------------------------------ #
    #  Load / Save
    # ------------------------------------------------------------------ #

    def _load(self, path: Path, section: str) -> dict:
        """
        PURPOSE: Read one section of a state file.

        Returns:
            dict: The section, or {} when the file is missing or unreadable.
        """
        if not path.exists():
            logger.info("state_file_not_found", path=str(path))
            return {}

        try:
            with open(path, "r") as f:
                data = json.load(f)
            return data.get(section, {})
        except (OSError, json.JSONDecodeError, AttributeError) as e:
            logger.error("state_file_load_failed", path=str(path), error=str(e))
            return {}

    def _save(self, path: Path, section: str, payload: dict) -> None:
        """
        PURPOSE: Atomically write one section to a state file.

        Raises:
            RuntimeError: If the directory or file cannot be written.
        """
        data = {
            section: payload,
            "_saved_at": datetime.now(timezone.utc).isoformat(),
        }
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error("state_file_save_failed", path=str(path), error=str(e))
            raise RuntimeError(f"Failed to persist {path.name}: {e}") from e

        logger.debug("state_file_saved", path=str(path), entries=len(payload))

    # ------------------------------------------------------------------ #
    #  StateStore
    # ------------------------------------------------------------------ #

    def read_value_table(self) -> ValueTable:
        rows = self._load(self.value_table_path, "rows")
        try:
            return ValueTable.from_dict(rows)
        except (TypeError, ValueError, AttributeError) as e:
            logger.error("value_table_parse_failed", path=str(self.value_table_path), error=str(e))
            return ValueTable()

    def write_value_table(self, table: ValueTable) -> None:
        self._save(self.value_table_path, "rows", table.to_dict())

    def read_model_accuracy(self) -> dict[str, ModelAccuracyRecord]:
        models = self._load(self.model_stats_path, "models")
        try:
            return accuracy_from_dict(models)
        except (TypeError, ValueError, AttributeError) as e:
            logger.error("model_stats_parse_failed", path=str(self.model_stats_path), error=str(e))
            return {}

    def write_model_accuracy(self, records: dict[str, ModelAccuracyRecord]) -> None:
        self._save(self.model_stats_path, "models", accuracy_to_dict(records))
