"""Social obligation records (weddings, funerals, birthdays...)."""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from momentum.models.base import UNSET, UpdateInput, from_iso, to_iso
from momentum.models.task import Priority


class SocialEventType(str, Enum):
    WEDDING = "wedding"
    FUNERAL = "funeral"
    FIRST_BIRTHDAY = "first_birthday"
    SIXTIETH_BIRTHDAY = "sixtieth_birthday"
    BIRTHDAY = "birthday"
    GRADUATION = "graduation"
    ETC = "etc"


class SocialEventStatus(str, Enum):
    PENDING = "pending"           # Details still being gathered
    CONFIRMED = "confirmed"       # Date and attendance settled
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Relationship(str, Enum):
    """How the user is related to the event's contact."""
    FAMILY = "family"
    RELATIVE = "relative"
    FRIEND = "friend"
    COLLEGE_FRIEND = "college_friend"
    HIGH_SCHOOL_FRIEND = "high_school_friend"
    COLLEAGUE = "colleague"
    BOSS = "boss"
    BUSINESS_CLIENT = "business_client"
    NEIGHBOR = "neighbor"
    ETC = "etc"


@dataclass
class EventLocation:
    name: str
    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass
class EventContact:
    name: str
    phone: str
    relationship: str = Relationship.ETC.value


@dataclass
class SocialEvent:
    """A social obligation and the gift/reminder bookkeeping around it."""
    id: str
    type: SocialEventType
    title: str
    event_date: datetime
    status: SocialEventStatus = SocialEventStatus.PENDING
    priority: Priority = Priority.MEDIUM
    description: Optional[str] = None
    location: Optional[EventLocation] = None
    contact: Optional[EventContact] = None
    gift_amount: Optional[int] = None       # whole currency units
    gift_sent: bool = False
    gift_sent_date: Optional[datetime] = None
    reminder_set: bool = False
    reminder_date: Optional[datetime] = None
    calendar_event_id: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def primary_date(self) -> Optional[datetime]:
        return self.event_date

    def search_fields(self) -> List[str]:
        return [self.title, self.description or "", self.notes or ""]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "status": self.status.value,
            "priority": self.priority.value,
            "title": self.title,
            "description": self.description,
            "event_date": to_iso(self.event_date),
            "location": asdict(self.location) if self.location else None,
            "contact": asdict(self.contact) if self.contact else None,
            "gift_amount": self.gift_amount,
            "gift_sent": self.gift_sent,
            "gift_sent_date": to_iso(self.gift_sent_date),
            "reminder_set": self.reminder_set,
            "reminder_date": to_iso(self.reminder_date),
            "calendar_event_id": self.calendar_event_id,
            "notes": self.notes,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SocialEvent":
        created_at = from_iso(data.get("created_at")) or datetime.now()
        location = data.get("location")
        contact = data.get("contact")
        return cls(
            id=data.get("id") or str(uuid.uuid4()),
            type=SocialEventType(data["type"]),
            status=SocialEventStatus(data.get("status", "pending")),
            priority=Priority(data.get("priority", "medium")),
            title=data.get("title", ""),
            description=data.get("description"),
            event_date=from_iso(data["event_date"]),
            location=EventLocation(**location) if location else None,
            contact=EventContact(**contact) if contact else None,
            gift_amount=data.get("gift_amount"),
            gift_sent=bool(data.get("gift_sent", False)),
            gift_sent_date=from_iso(data.get("gift_sent_date")),
            reminder_set=bool(data.get("reminder_set", False)),
            reminder_date=from_iso(data.get("reminder_date")),
            calendar_event_id=data.get("calendar_event_id"),
            notes=data.get("notes"),
            created_at=created_at,
            updated_at=from_iso(data.get("updated_at")) or created_at,
        )


@dataclass
class SocialEventCreateInput:
    type: SocialEventType
    title: str
    event_date: datetime
    description: Optional[str] = None
    status: Optional[SocialEventStatus] = None    # defaults to pending
    priority: Optional[Priority] = None           # defaults to medium
    location: Optional[EventLocation] = None
    contact: Optional[EventContact] = None
    gift_amount: Optional[int] = None
    notes: Optional[str] = None


@dataclass
class SocialEventUpdateInput(UpdateInput):
    type: Any = UNSET
    status: Any = UNSET
    priority: Any = UNSET
    title: Any = UNSET
    description: Any = UNSET
    event_date: Any = UNSET
    location: Any = UNSET
    contact: Any = UNSET
    gift_amount: Any = UNSET
    gift_sent: Any = UNSET
    gift_sent_date: Any = UNSET
    reminder_set: Any = UNSET
    reminder_date: Any = UNSET
    calendar_event_id: Any = UNSET
    notes: Any = UNSET
