"""Entities extracted from captured context (dates, amounts, people...)."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class EntityType(str, Enum):
    """Kinds of entity the extraction collaborator reports."""
    DATE = "date"
    TIME = "time"
    LOCATION = "location"
    AMOUNT = "amount"
    PERSON = "person"


@dataclass
class Entity:
    """A typed span of text pulled out of a context payload."""
    type: EntityType
    value: str                    # normalized value (ISO date, amount, name...)
    raw_text: str                 # original span
    confidence: float = 1.0       # 0.0-1.0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "value": self.value,
            "raw_text": self.raw_text,
            "confidence": self.confidence,
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entity":
        return cls(
            id=data.get("id") or str(uuid.uuid4()),
            type=EntityType(data["type"]),
            value=str(data.get("value", "")),
            raw_text=data.get("raw_text", ""),
            confidence=float(data.get("confidence", 1.0)),
            metadata=dict(data.get("metadata") or {}),
        )
