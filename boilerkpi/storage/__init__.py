__all__ = [
    "JSONFileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
]

from .store import JSONFileKeyValueStore, KeyValueStore, MemoryKeyValueStore
