"""Persistence collaborator contract."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

Record = Dict[str, Any]


class StorageBackend(ABC):
    """Key/value document store holding one collection per key.

    Each call is treated as atomic; the stores never rely on partial
    writes being recoverable.
    """

    @abstractmethod
    async def load_collection(self, key: str) -> List[Record]:
        """Return every record stored under ``key`` (empty if none).

        Raises:
            StorageUnavailableError: the collection could not be read
        """

    @abstractmethod
    async def save_collection(self, key: str, items: List[Record]) -> None:
        """Replace the collection stored under ``key``.

        Raises:
            StorageUnavailableError: the collection could not be written
        """
