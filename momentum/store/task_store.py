"""Task store."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from momentum.defaults import TASK_ENUM_FIELDS, apply_task_defaults, validate_task
from momentum.errors import ValidationError
from momentum.models.task import Task, TaskCreateInput, TaskStatus, TaskUpdateInput
from momentum.stats import TaskStatistics, task_statistics
from momentum.store.base import EntityStore, records_errors


class TaskStore(EntityStore[Task, TaskCreateInput, TaskUpdateInput]):
    """Tasks captured from context or added by hand."""

    entity_name = "task"
    collection_name = "tasks"
    record_type = Task
    enum_fields = TASK_ENUM_FIELDS

    def apply_defaults(self, data: TaskCreateInput, *, record_id: str, now: datetime) -> Task:
        return apply_task_defaults(data, record_id=record_id, now=now)

    def validate(self, record: Task) -> None:
        validate_task(record)

    def prepare_changes(self, record: Task, changes: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        if "tags" in changes and changes["tags"] is None:
            changes["tags"] = []
        # completed_at follows the status unless the caller set it explicitly
        status = changes.get("status")
        if status is not None and status != record.status and "completed_at" not in changes:
            changes["completed_at"] = now if status == TaskStatus.COMPLETED else None
        return changes

    @records_errors
    async def toggle_complete(self, task_id: str) -> Task:
        """Flip an active task to completed, or a completed task back to active."""
        task = self.get(task_id)
        if task.status == TaskStatus.ACTIVE:
            target = TaskStatus.COMPLETED
        elif task.status == TaskStatus.COMPLETED:
            target = TaskStatus.ACTIVE
        else:
            raise ValidationError(
                f"task {task_id}: only active or completed tasks can be toggled (is {task.status.value})"
            )
        return await self.update(task_id, TaskUpdateInput(status=target))

    def get_statistics(self, now: Optional[datetime] = None) -> TaskStatistics:
        return task_statistics(self._records, now or self._now())
