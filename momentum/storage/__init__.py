"""Storage backends for momentum collections."""

from momentum.storage.base import StorageBackend
from momentum.storage.json_file import JsonFileStorage
from momentum.storage.memory import MemoryStorage

__all__ = ["StorageBackend", "JsonFileStorage", "MemoryStorage"]
