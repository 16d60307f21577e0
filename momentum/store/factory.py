"""Build the three stores from configuration."""

from dataclasses import dataclass

from loguru import logger

from momentum.config.schema import Config
from momentum.storage import JsonFileStorage, MemoryStorage, StorageBackend
from momentum.store.context_store import ContextStore
from momentum.store.social_event_store import SocialEventStore
from momentum.store.task_store import TaskStore


@dataclass
class Stores:
    tasks: TaskStore
    contexts: ContextStore
    social_events: SocialEventStore

    async def load_all(self) -> None:
        await self.tasks.load_all()
        await self.contexts.load_all()
        await self.social_events.load_all()


def create_storage(config: Config) -> StorageBackend:
    if config.storage.backend == "memory":
        return MemoryStorage()
    return JsonFileStorage(config.storage.data_path)


def create_stores(config: Config, storage: StorageBackend | None = None) -> Stores:
    """One store per entity family, all sharing a storage backend."""
    storage = storage or create_storage(config)
    options = {
        "key_prefix": config.storage.key_prefix,
        "enforce_transitions": config.lifecycle.enforce_transitions,
    }
    logger.debug(f"Creating stores on {type(storage).__name__} (prefix={config.storage.key_prefix})")
    return Stores(
        tasks=TaskStore(storage, **options),
        contexts=ContextStore(storage, **options),
        social_events=SocialEventStore(storage, **options),
    )
