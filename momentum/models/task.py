"""Task records tracked by the task store."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from momentum.models.base import UNSET, UpdateInput, from_iso, to_iso


class TaskStatus(str, Enum):
    """Status of a task."""
    DRAFT = "draft"               # Being defined
    ACTIVE = "active"             # Being worked on
    PENDING = "pending"           # Blocked / waiting on something
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Priority(str, Enum):
    """Priority levels shared by tasks and social events."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self]


PRIORITY_RANK = {
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
    Priority.URGENT: 4,
}


class TaskCategory(str, Enum):
    SOCIAL = "social"
    SHOPPING = "shopping"
    WORK = "work"
    PERSONAL = "personal"
    OTHER = "other"


@dataclass
class Task:
    """A unit of work the user wants to act on.

    Tasks are created from captured context or added by hand, and move
    through draft -> active -> completed/cancelled.
    """
    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.DRAFT
    priority: Priority = Priority.MEDIUM
    category: TaskCategory = TaskCategory.OTHER
    tags: List[str] = field(default_factory=list)
    deadline: Optional[datetime] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    # Provenance and follow-up
    source_context_id: Optional[str] = None
    parent_task_id: Optional[str] = None
    notes: Optional[str] = None
    reminder_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    notified: bool = False

    @property
    def primary_date(self) -> Optional[datetime]:
        return self.deadline

    def search_fields(self) -> List[str]:
        return [self.title, self.description or "", *self.tags]

    def is_open(self) -> bool:
        return self.status not in (TaskStatus.COMPLETED, TaskStatus.CANCELLED)

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        """Check if the deadline has passed while the task is still open."""
        if not self.deadline or not self.is_open():
            return False
        return self.deadline < (now or datetime.now())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "category": self.category.value,
            "tags": list(self.tags),
            "deadline": to_iso(self.deadline),
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
            "source_context_id": self.source_context_id,
            "parent_task_id": self.parent_task_id,
            "notes": self.notes,
            "reminder_at": to_iso(self.reminder_at),
            "completed_at": to_iso(self.completed_at),
            "notified": self.notified,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        created_at = from_iso(data.get("created_at")) or datetime.now()
        return cls(
            id=data.get("id") or str(uuid.uuid4()),
            title=data.get("title", ""),
            description=data.get("description"),
            status=TaskStatus(data.get("status", "draft")),
            priority=Priority(data.get("priority", "medium")),
            category=TaskCategory(data.get("category", "other")),
            tags=list(data.get("tags") or []),
            deadline=from_iso(data.get("deadline")),
            created_at=created_at,
            updated_at=from_iso(data.get("updated_at")) or created_at,
            source_context_id=data.get("source_context_id"),
            parent_task_id=data.get("parent_task_id"),
            notes=data.get("notes"),
            reminder_at=from_iso(data.get("reminder_at")),
            completed_at=from_iso(data.get("completed_at")),
            notified=bool(data.get("notified", False)),
        )


@dataclass
class TaskCreateInput:
    title: str
    description: Optional[str] = None
    status: Optional[TaskStatus] = None      # defaults to draft
    priority: Optional[Priority] = None      # defaults to medium
    category: Optional[TaskCategory] = None  # defaults to other
    tags: Optional[List[str]] = None
    deadline: Optional[datetime] = None
    source_context_id: Optional[str] = None
    parent_task_id: Optional[str] = None
    notes: Optional[str] = None
    reminder_at: Optional[datetime] = None


@dataclass
class TaskUpdateInput(UpdateInput):
    title: Any = UNSET
    description: Any = UNSET
    status: Any = UNSET
    priority: Any = UNSET
    category: Any = UNSET
    tags: Any = UNSET
    deadline: Any = UNSET
    notes: Any = UNSET
    reminder_at: Any = UNSET
    completed_at: Any = UNSET
    notified: Any = UNSET
