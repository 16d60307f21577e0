"""Create-time defaulting and record validation.

``apply_*_defaults`` turn a create-input into a full record draft without
touching storage; ``validate_*`` check the required fields and the
cross-field invariants of a record and raise ``ValidationError``.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from momentum.errors import ValidationError
from momentum.models.context import (
    CONTEXT_DATA_TYPES,
    Context,
    ContextCreateInput,
    ContextStatus,
    LocationData,
)
from momentum.models.entity import Entity
from momentum.models.social_event import (
    EventContact,
    EventLocation,
    SocialEvent,
    SocialEventCreateInput,
    SocialEventStatus,
    SocialEventType,
)
from momentum.models.task import Priority, Task, TaskCategory, TaskCreateInput, TaskStatus

E = TypeVar("E", bound=Enum)

TASK_ENUM_FIELDS: Dict[str, Type[Enum]] = {
    "status": TaskStatus,
    "priority": Priority,
    "category": TaskCategory,
}
CONTEXT_ENUM_FIELDS: Dict[str, Type[Enum]] = {"status": ContextStatus}
SOCIAL_EVENT_ENUM_FIELDS: Dict[str, Type[Enum]] = {
    "type": SocialEventType,
    "status": SocialEventStatus,
    "priority": Priority,
}


def coerce_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    """Accept an enum member or its string value."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name}: '{value}' is not one of {allowed}") from None


def coerce_changes(changes: Dict[str, Any], enum_fields: Dict[str, Type[Enum]]) -> Dict[str, Any]:
    """Coerce enum-valued entries of an update-input's changes."""
    coerced = dict(changes)
    for name, enum_cls in enum_fields.items():
        if name not in coerced:
            continue
        if coerced[name] is None:
            raise ValidationError(f"{name} cannot be cleared")
        coerced[name] = coerce_enum(enum_cls, coerced[name], name)
    return coerced


def _or_default(enum_cls: Type[E], value: Any, default: E, field_name: str) -> E:
    return default if value is None else coerce_enum(enum_cls, value, field_name)


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

def apply_task_defaults(data: TaskCreateInput, *, record_id: str, now: datetime) -> Task:
    return Task(
        id=record_id,
        title=data.title,
        description=data.description,
        status=_or_default(TaskStatus, data.status, TaskStatus.DRAFT, "status"),
        priority=_or_default(Priority, data.priority, Priority.MEDIUM, "priority"),
        category=_or_default(TaskCategory, data.category, TaskCategory.OTHER, "category"),
        tags=list(data.tags or []),
        deadline=data.deadline,
        created_at=now,
        updated_at=now,
        source_context_id=data.source_context_id,
        parent_task_id=data.parent_task_id,
        notes=data.notes,
        reminder_at=data.reminder_at,
    )


def apply_context_defaults(data: ContextCreateInput, *, record_id: str, now: datetime) -> Context:
    return Context(
        id=record_id,
        data=data.data,
        entities=copy_entities(data.entities),
        status=_or_default(ContextStatus, data.status, ContextStatus.PENDING, "status"),
        created_at=now,
        updated_at=now,
    )


def apply_social_event_defaults(
    data: SocialEventCreateInput, *, record_id: str, now: datetime
) -> SocialEvent:
    if data.type is None or data.type == "":
        raise ValidationError("type is required")
    return SocialEvent(
        id=record_id,
        type=coerce_enum(SocialEventType, data.type, "type"),
        title=data.title,
        event_date=data.event_date,
        status=_or_default(SocialEventStatus, data.status, SocialEventStatus.PENDING, "status"),
        priority=_or_default(Priority, data.priority, Priority.MEDIUM, "priority"),
        description=data.description,
        location=coerce_location(data.location),
        contact=coerce_contact(data.contact),
        gift_amount=data.gift_amount,
        notes=data.notes,
        created_at=now,
        updated_at=now,
    )


def coerce_location(value: Any) -> Optional[EventLocation]:
    """Accept an EventLocation or its dict form."""
    if value is None or isinstance(value, EventLocation):
        return value
    if isinstance(value, dict):
        try:
            return EventLocation(**value)
        except TypeError as e:
            raise ValidationError(f"location: {e}") from None
    raise ValidationError("location must be an EventLocation")


def coerce_contact(value: Any) -> Optional[EventContact]:
    """Accept an EventContact or its dict form."""
    if value is None or isinstance(value, EventContact):
        return value
    if isinstance(value, dict):
        try:
            return EventContact(**value)
        except TypeError as e:
            raise ValidationError(f"contact: {e}") from None
    raise ValidationError("contact must be an EventContact")


def copy_entities(entities: Optional[List[Entity]]) -> List[Entity]:
    """Copy extraction results so the context owns them by value."""
    if any(not isinstance(e, Entity) for e in entities or []):
        raise ValidationError("entities must be Entity records")
    return [
        Entity(
            id=e.id,
            type=e.type,
            value=e.value,
            raw_text=e.raw_text,
            confidence=e.confidence,
            metadata=dict(e.metadata),
        )
        for e in entities or []
    ]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _check_timestamps(record: Any, errors: List[str]) -> None:
    if record.updated_at < record.created_at:
        errors.append("updated_at must not be earlier than created_at")


def validate_task(task: Task) -> None:
    errors: List[str] = []
    if _is_blank(task.title):
        errors.append("title is required")
    if task.deadline is not None and not isinstance(task.deadline, datetime):
        errors.append("deadline must be a datetime")
    if not isinstance(task.tags, list):
        errors.append("tags must be a list")
    elif any(not isinstance(tag, str) for tag in task.tags):
        errors.append("tags must be strings")
    _check_timestamps(task, errors)
    if errors:
        raise ValidationError(errors)


def validate_entity(entity: Entity) -> List[str]:
    errors: List[str] = []
    if _is_blank(entity.id):
        errors.append("entity id is required")
    if _is_blank(entity.raw_text):
        errors.append("entity raw_text is required")
    if not isinstance(entity.confidence, (int, float)) or not 0 <= entity.confidence <= 1:
        errors.append("entity confidence must be between 0 and 1")
    return errors


def validate_context(context: Context) -> None:
    errors: List[str] = []
    data = context.data
    if not isinstance(data, CONTEXT_DATA_TYPES):
        errors.append("data must be one of the five context variants")
    elif not isinstance(data.timestamp, datetime):
        errors.append("data.timestamp must be a datetime")
    if isinstance(data, LocationData):
        coords = (data.latitude, data.longitude)
        if any(isinstance(c, bool) or not isinstance(c, (int, float)) for c in coords):
            errors.append("location coordinates must be numbers")
        elif not (-90 <= data.latitude <= 90 and -180 <= data.longitude <= 180):
            errors.append("location coordinates are out of range")
    for entity in context.entities:
        errors.extend(validate_entity(entity))
    _check_timestamps(context, errors)
    if errors:
        raise ValidationError(errors)


def validate_social_event(event: SocialEvent) -> None:
    errors: List[str] = []
    if _is_blank(event.title):
        errors.append("title is required")
    if not isinstance(event.event_date, datetime):
        errors.append("event_date is required")
    if event.gift_amount is not None and (
        not isinstance(event.gift_amount, int) or event.gift_amount < 0
    ):
        errors.append("gift_amount must be a non-negative whole amount")
    if event.location is not None and not isinstance(event.location, EventLocation):
        errors.append("location must be an EventLocation")
    if event.contact is not None and not isinstance(event.contact, EventContact):
        errors.append("contact must be an EventContact")
    if event.gift_sent_date is not None and not event.gift_sent:
        errors.append("gift_sent_date requires gift_sent")
    if event.reminder_date is not None and not event.reminder_set:
        errors.append("reminder_date requires reminder_set")
    _check_timestamps(event, errors)
    if errors:
        raise ValidationError(errors)
