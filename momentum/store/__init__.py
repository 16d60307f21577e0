"""Entity stores."""

from momentum.store.base import EntityStore
from momentum.store.context_store import ContextStore
from momentum.store.social_event_store import SocialEventStore
from momentum.store.task_store import TaskStore

__all__ = ["EntityStore", "ContextStore", "SocialEventStore", "TaskStore"]
