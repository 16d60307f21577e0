"""Gift amount recommendations for social events.

Amounts are whole currency units. The base amount for the event type is
scaled by how close the relationship is and rounded half-up to the
nearest 10,000.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Optional

from momentum.models.social_event import Relationship, SocialEvent, SocialEventType

ROUNDING_UNIT = 10_000
DEFAULT_BASE_AMOUNT = 50_000
DEFAULT_MULTIPLIER = 1.0

BASE_AMOUNTS = {
    SocialEventType.WEDDING: 100_000,
    SocialEventType.FUNERAL: 50_000,
    SocialEventType.FIRST_BIRTHDAY: 50_000,
    SocialEventType.SIXTIETH_BIRTHDAY: 100_000,
    SocialEventType.BIRTHDAY: 30_000,
    SocialEventType.GRADUATION: 50_000,
    SocialEventType.ETC: 50_000,
}

RELATIONSHIP_MULTIPLIERS = {
    Relationship.FAMILY: 1.5,
    Relationship.RELATIVE: 1.2,
    Relationship.FRIEND: 1.0,
    Relationship.COLLEGE_FRIEND: 1.0,
    Relationship.HIGH_SCHOOL_FRIEND: 1.0,
    Relationship.COLLEAGUE: 1.2,
    Relationship.BOSS: 1.5,
    Relationship.NEIGHBOR: 0.8,
    Relationship.ETC: 0.5,
}

_BASE_BY_VALUE = {k.value: v for k, v in BASE_AMOUNTS.items()}
_MULTIPLIER_BY_VALUE = {k.value: v for k, v in RELATIONSHIP_MULTIPLIERS.items()}


def _key(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def recommend(event_type: Any, relationship: Any) -> int:
    """Suggested gift amount; unknown inputs fall back to the defaults."""
    base = _BASE_BY_VALUE.get(_key(event_type), DEFAULT_BASE_AMOUNT)
    multiplier = _MULTIPLIER_BY_VALUE.get(_key(relationship), DEFAULT_MULTIPLIER)
    units = math.floor(base * multiplier / ROUNDING_UNIT + 0.5)
    return units * ROUNDING_UNIT


def recommend_for_event(event: SocialEvent, relationship: Optional[Any] = None) -> int:
    """Recommendation for an event, using its contact's relationship by default."""
    if relationship is None and event.contact is not None:
        relationship = event.contact.relationship
    return recommend(event.type, relationship)
