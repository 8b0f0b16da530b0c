"""
PURPOSE: Redis-backed state store.

Stores the value table and model accuracy records as JSON strings under two
keys so several processes (feed handler, settlement worker) share the same
learned state. Callers must still serialize updates to the same state key;
the store adds no locking.
"""

import json
from datetime import datetime, timezone
from typing import Optional

import redis

from tickparity.brain.value_table import ValueTable
from tickparity.config.settings import settings
from tickparity.schemas.records import ModelAccuracyRecord
from tickparity.storage.base import StateStore, accuracy_from_dict, accuracy_to_dict
from tickparity.utils.logger import get_logger

logger = get_logger("storage.redis_store")

VALUE_TABLE_REDIS_KEY = "tickparity:value_table"
MODEL_STATS_REDIS_KEY = "tickparity:model_stats"


class RedisStateStore(StateStore):
    """
    PURPOSE: StateStore persisting JSON payloads in Redis.

    Read failures fall back to empty state (logged); write failures raise
    RuntimeError.
    """

    def __init__(self, url: Optional[str] = None, client: Optional[redis.Redis] = None):
        self._url = url or settings.REDIS_URL
        self._client = client

    def _get_redis(self) -> redis.Redis:
        """Return a synchronous Redis connection using the configured URL."""
        if self._client is None:
            self._client = redis.Redis.from_url(self._url, decode_responses=True)
        return self._client

    def _load(self, key: str) -> dict:
        try:
            raw = self._get_redis().get(key)
            if not raw:
                return {}
            return json.loads(raw)
        except (redis.RedisError, json.JSONDecodeError, TypeError) as e:
            logger.warning("redis_state_load_failed", key=key, error=str(e))
            return {}

    def _save(self, key: str, payload: dict) -> None:
        try:
            self._get_redis().set(key, json.dumps(payload))
        except redis.RedisError as e:
            logger.error("redis_state_save_failed", key=key, error=str(e))
            raise RuntimeError(f"Failed to persist {key}: {e}") from e
        logger.debug(
            "redis_state_saved",
            key=key,
            entries=len(payload),
            saved_at=datetime.now(timezone.utc).isoformat(),
        )

    def read_value_table(self) -> ValueTable:
        try:
            return ValueTable.from_dict(self._load(VALUE_TABLE_REDIS_KEY))
        except (TypeError, ValueError, AttributeError) as e:
            logger.error("value_table_parse_failed", key=VALUE_TABLE_REDIS_KEY, error=str(e))
            return ValueTable()

    def write_value_table(self, table: ValueTable) -> None:
        self._save(VALUE_TABLE_REDIS_KEY, table.to_dict())

    def read_model_accuracy(self) -> dict[str, ModelAccuracyRecord]:
        try:
            return accuracy_from_dict(self._load(MODEL_STATS_REDIS_KEY))
        except (TypeError, ValueError, AttributeError) as e:
            logger.error("model_stats_parse_failed", key=MODEL_STATS_REDIS_KEY, error=str(e))
            return {}

    def write_model_accuracy(self, records: dict[str, ModelAccuracyRecord]) -> None:
        self._save(MODEL_STATS_REDIS_KEY, accuracy_to_dict(records))
