"""Captured context records.

A Context wraps exactly one of five data variants, selected by its
``source`` discriminator:

- screenshot: OCR output of a captured image
- chat: a message observed in a messenger conversation
- location: a place the user was at
- voice: a transcribed voice note
- manual: a note typed by the user
"""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union

from momentum.models.base import UNSET, UpdateInput, from_iso, to_iso
from momentum.models.entity import Entity


class ContextSource(str, Enum):
    """Capture source discriminator."""
    SCREENSHOT = "screenshot"
    CHAT = "chat"
    LOCATION = "location"
    VOICE = "voice"
    MANUAL = "manual"


class ContextStatus(str, Enum):
    """Extraction progress of a context."""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class ScreenshotData:
    image_path: str
    extracted_text: str
    timestamp: datetime
    package_name: Optional[str] = None   # app that was on screen
    screen_title: Optional[str] = None

    source: ClassVar[ContextSource] = ContextSource.SCREENSHOT


@dataclass(frozen=True)
class Attachment:
    type: str  # image, video, file
    uri: str


@dataclass(frozen=True)
class ChatData:
    platform: str          # kakao, whatsapp, telegram...
    sender: str
    message: str
    conversation_id: str
    timestamp: datetime
    attachments: tuple[Attachment, ...] = ()

    source: ClassVar[ContextSource] = ContextSource.CHAT


@dataclass(frozen=True)
class Address:
    street: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None


@dataclass(frozen=True)
class LocationData:
    location_name: str
    latitude: float
    longitude: float
    timestamp: datetime
    address: Optional[Address] = None

    source: ClassVar[ContextSource] = ContextSource.LOCATION


@dataclass(frozen=True)
class VoiceData:
    audio_path: str
    duration: float        # seconds
    transcript: str
    timestamp: datetime
    language: Optional[str] = None  # ISO 639-1

    source: ClassVar[ContextSource] = ContextSource.VOICE


@dataclass(frozen=True)
class ManualData:
    content: str
    timestamp: datetime
    tags: tuple[str, ...] = ()

    source: ClassVar[ContextSource] = ContextSource.MANUAL


ContextData = Union[ScreenshotData, ChatData, LocationData, VoiceData, ManualData]

CONTEXT_DATA_TYPES: tuple[type, ...] = (
    ScreenshotData, ChatData, LocationData, VoiceData, ManualData,
)


def context_text(data: ContextData) -> str:
    """Return the human-readable text carried by a context payload."""
    match data:
        case ScreenshotData():
            return data.extracted_text
        case ChatData():
            return data.message
        case LocationData():
            return data.location_name
        case VoiceData():
            return data.transcript
        case ManualData():
            return data.content
        case _:
            raise TypeError(f"Unknown context data variant: {type(data).__name__}")


def context_data_to_dict(data: ContextData) -> Dict[str, Any]:
    """Serialize a payload, tagging it with its source."""
    base: Dict[str, Any] = {"source": data.source.value, "timestamp": to_iso(data.timestamp)}
    match data:
        case ScreenshotData():
            base.update(
                image_path=data.image_path,
                extracted_text=data.extracted_text,
                package_name=data.package_name,
                screen_title=data.screen_title,
            )
        case ChatData():
            base.update(
                platform=data.platform,
                sender=data.sender,
                message=data.message,
                conversation_id=data.conversation_id,
                attachments=[{"type": a.type, "uri": a.uri} for a in data.attachments],
            )
        case LocationData():
            base.update(
                location_name=data.location_name,
                latitude=data.latitude,
                longitude=data.longitude,
                address=asdict(data.address) if data.address else None,
            )
        case VoiceData():
            base.update(
                audio_path=data.audio_path,
                duration=data.duration,
                transcript=data.transcript,
                language=data.language,
            )
        case ManualData():
            base.update(content=data.content, tags=list(data.tags))
        case _:
            raise TypeError(f"Unknown context data variant: {type(data).__name__}")
    return base


def context_data_from_dict(data: Dict[str, Any]) -> ContextData:
    """Rebuild a payload from its serialized form, dispatching on ``source``."""
    source = ContextSource(data["source"])
    timestamp = from_iso(data["timestamp"])
    match source:
        case ContextSource.SCREENSHOT:
            return ScreenshotData(
                image_path=data["image_path"],
                extracted_text=data.get("extracted_text", ""),
                timestamp=timestamp,
                package_name=data.get("package_name"),
                screen_title=data.get("screen_title"),
            )
        case ContextSource.CHAT:
            return ChatData(
                platform=data["platform"],
                sender=data["sender"],
                message=data["message"],
                conversation_id=data["conversation_id"],
                timestamp=timestamp,
                attachments=tuple(
                    Attachment(type=a["type"], uri=a["uri"])
                    for a in data.get("attachments") or []
                ),
            )
        case ContextSource.LOCATION:
            address = data.get("address")
            return LocationData(
                location_name=data["location_name"],
                latitude=float(data["latitude"]),
                longitude=float(data["longitude"]),
                timestamp=timestamp,
                address=Address(**address) if address else None,
            )
        case ContextSource.VOICE:
            return VoiceData(
                audio_path=data["audio_path"],
                duration=float(data["duration"]),
                transcript=data.get("transcript", ""),
                timestamp=timestamp,
                language=data.get("language"),
            )
        case ContextSource.MANUAL:
            return ManualData(
                content=data["content"],
                timestamp=timestamp,
                tags=tuple(data.get("tags") or ()),
            )


@dataclass
class Context:
    """A captured snippet plus the entities extracted from it."""
    id: str
    data: ContextData
    entities: List[Entity] = field(default_factory=list)
    status: ContextStatus = ContextStatus.PENDING
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def source(self) -> ContextSource:
        return self.data.source

    @property
    def primary_date(self) -> Optional[datetime]:
        return self.created_at

    def search_fields(self) -> List[str]:
        fields_ = [context_text(self.data)]
        if isinstance(self.data, ManualData):
            fields_.extend(self.data.tags)
        return fields_

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "data": context_data_to_dict(self.data),
            "entities": [e.to_dict() for e in self.entities],
            "status": self.status.value,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Context":
        created_at = from_iso(data.get("created_at")) or datetime.now()
        return cls(
            id=data.get("id") or str(uuid.uuid4()),
            data=context_data_from_dict(data["data"]),
            entities=[Entity.from_dict(e) for e in data.get("entities") or []],
            status=ContextStatus(data.get("status", "pending")),
            created_at=created_at,
            updated_at=from_iso(data.get("updated_at")) or created_at,
        )


@dataclass
class ContextCreateInput:
    data: ContextData
    entities: List[Entity] = field(default_factory=list)
    status: Optional[ContextStatus] = None


@dataclass
class ContextUpdateInput(UpdateInput):
    data: Any = UNSET           # must keep the same source
    entities: Any = UNSET
    status: Any = UNSET
