"""
PURPOSE: State store exports for tickparity.
"""

from tickparity.storage.base import StateStore
from tickparity.storage.json_store import JsonFileStateStore
from tickparity.storage.memory_store import InMemoryStateStore
from tickparity.storage.redis_store import RedisStateStore

__all__ = [
    "StateStore",
    "InMemoryStateStore",
    "JsonFileStateStore",
    "RedisStateStore",
]
