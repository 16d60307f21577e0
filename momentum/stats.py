"""Summary counts for dashboards."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, Iterable, Optional

from momentum.models.social_event import SocialEvent, SocialEventStatus, SocialEventType
from momentum.models.task import Priority, Task, TaskCategory, TaskStatus

DUE_SOON_WINDOW = timedelta(hours=24)


@dataclass
class TaskStatistics:
    total: int = 0
    by_status: Dict[TaskStatus, int] = field(default_factory=lambda: dict.fromkeys(TaskStatus, 0))
    by_priority: Dict[Priority, int] = field(default_factory=lambda: dict.fromkeys(Priority, 0))
    by_category: Dict[TaskCategory, int] = field(default_factory=lambda: dict.fromkeys(TaskCategory, 0))
    overdue: int = 0
    due_soon: int = 0     # deadline within the next 24 hours


@dataclass
class SocialEventStatistics:
    total_events: int = 0
    status_counts: Dict[SocialEventStatus, int] = field(
        default_factory=lambda: dict.fromkeys(SocialEventStatus, 0)
    )
    type_counts: Dict[SocialEventType, int] = field(
        default_factory=lambda: dict.fromkeys(SocialEventType, 0)
    )
    expected_gift_expense: int = 0
    total_gift_sent: int = 0
    pending_gift_amount: int = 0


def task_statistics(tasks: Iterable[Task], now: Optional[datetime] = None) -> TaskStatistics:
    now = now or datetime.now()
    stats = TaskStatistics()

    for task in tasks:
        stats.total += 1
        stats.by_status[task.status] += 1
        stats.by_priority[task.priority] += 1
        stats.by_category[task.category] += 1

        if task.deadline and task.is_open():
            if task.deadline < now:
                stats.overdue += 1
            elif task.deadline <= now + DUE_SOON_WINDOW:
                stats.due_soon += 1

    return stats


def social_event_statistics(events: Iterable[SocialEvent]) -> SocialEventStatistics:
    stats = SocialEventStatistics()

    for event in events:
        stats.total_events += 1
        stats.status_counts[event.status] += 1
        stats.type_counts[event.type] += 1

        if event.gift_amount:
            if event.gift_sent:
                stats.total_gift_sent += event.gift_amount
            else:
                stats.pending_gift_amount += event.gift_amount
                stats.expected_gift_expense += event.gift_amount

    return stats
