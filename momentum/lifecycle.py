"""Status transition tables for each entity family.

The stores consult these tables on every status change. By default a
move outside the table is only logged; with ``enforce_transitions``
enabled it is rejected as a validation error.
"""

from enum import Enum
from typing import Dict, FrozenSet, Mapping

from momentum.models.context import ContextStatus
from momentum.models.social_event import SocialEventStatus
from momentum.models.task import TaskStatus

TASK_TRANSITIONS: Dict[TaskStatus, FrozenSet[TaskStatus]] = {
    TaskStatus.DRAFT: frozenset({TaskStatus.ACTIVE, TaskStatus.PENDING, TaskStatus.CANCELLED}),
    TaskStatus.ACTIVE: frozenset({TaskStatus.COMPLETED, TaskStatus.CANCELLED, TaskStatus.PENDING}),
    TaskStatus.PENDING: frozenset({TaskStatus.ACTIVE, TaskStatus.CANCELLED}),
    TaskStatus.COMPLETED: frozenset({TaskStatus.ACTIVE}),  # toggle back
    TaskStatus.CANCELLED: frozenset(),
}

CONTEXT_TRANSITIONS: Dict[ContextStatus, FrozenSet[ContextStatus]] = {
    ContextStatus.PENDING: frozenset({ContextStatus.PROCESSING}),
    ContextStatus.PROCESSING: frozenset({ContextStatus.COMPLETED, ContextStatus.FAILED}),
    ContextStatus.COMPLETED: frozenset(),
    ContextStatus.FAILED: frozenset(),
}

SOCIAL_EVENT_TRANSITIONS: Dict[SocialEventStatus, FrozenSet[SocialEventStatus]] = {
    SocialEventStatus.PENDING: frozenset({SocialEventStatus.CONFIRMED, SocialEventStatus.CANCELLED}),
    SocialEventStatus.CONFIRMED: frozenset({SocialEventStatus.COMPLETED, SocialEventStatus.CANCELLED}),
    SocialEventStatus.COMPLETED: frozenset(),
    SocialEventStatus.CANCELLED: frozenset(),
}

_TABLES: Dict[type, Mapping] = {
    TaskStatus: TASK_TRANSITIONS,
    ContextStatus: CONTEXT_TRANSITIONS,
    SocialEventStatus: SOCIAL_EVENT_TRANSITIONS,
}


def can_transition(current: Enum, target: Enum) -> bool:
    """Return True if ``current -> target`` is a legal move.

    Staying in the same status is always allowed.
    """
    if type(current) is not type(target):
        raise TypeError(f"Cannot compare {type(current).__name__} with {type(target).__name__}")
    if current == target:
        return True
    table = _TABLES[type(current)]
    return target in table[current]


def is_terminal(status: Enum) -> bool:
    return not _TABLES[type(status)][status]
