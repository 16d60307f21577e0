"""Record models for tasks, captured contexts and social events."""

from momentum.models.base import UNSET
from momentum.models.context import (
    Address,
    Attachment,
    ChatData,
    Context,
    ContextCreateInput,
    ContextData,
    ContextSource,
    ContextStatus,
    ContextUpdateInput,
    LocationData,
    ManualData,
    ScreenshotData,
    VoiceData,
    context_text,
)
from momentum.models.entity import Entity, EntityType
from momentum.models.social_event import (
    EventContact,
    EventLocation,
    Relationship,
    SocialEvent,
    SocialEventCreateInput,
    SocialEventStatus,
    SocialEventType,
    SocialEventUpdateInput,
)
from momentum.models.task import (
    Priority,
    Task,
    TaskCategory,
    TaskCreateInput,
    TaskStatus,
    TaskUpdateInput,
)

__all__ = [
    "UNSET",
    "Address",
    "Attachment",
    "ChatData",
    "Context",
    "ContextCreateInput",
    "ContextData",
    "ContextSource",
    "ContextStatus",
    "ContextUpdateInput",
    "LocationData",
    "ManualData",
    "ScreenshotData",
    "VoiceData",
    "context_text",
    "Entity",
    "EntityType",
    "EventContact",
    "EventLocation",
    "Relationship",
    "SocialEvent",
    "SocialEventCreateInput",
    "SocialEventStatus",
    "SocialEventType",
    "SocialEventUpdateInput",
    "Priority",
    "Task",
    "TaskCategory",
    "TaskCreateInput",
    "TaskStatus",
    "TaskUpdateInput",
]
