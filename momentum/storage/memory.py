"""Process-local storage backend."""

import copy
from typing import Dict, List

from momentum.storage.base import Record, StorageBackend


class MemoryStorage(StorageBackend):
    """Keeps collections in a dict; records are deep-copied on the way in and out."""

    def __init__(self, initial: Dict[str, List[Record]] | None = None):
        self._collections: Dict[str, List[Record]] = copy.deepcopy(initial or {})

    async def load_collection(self, key: str) -> List[Record]:
        return copy.deepcopy(self._collections.get(key, []))

    async def save_collection(self, key: str, items: List[Record]) -> None:
        self._collections[key] = copy.deepcopy(items)

    def keys(self) -> List[str]:
        return list(self._collections)
