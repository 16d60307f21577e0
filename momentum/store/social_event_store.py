"""Social event store."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from momentum.defaults import (
    SOCIAL_EVENT_ENUM_FIELDS,
    apply_social_event_defaults,
    coerce_contact,
    coerce_location,
    validate_social_event,
)
from momentum.models.social_event import (
    SocialEvent,
    SocialEventCreateInput,
    SocialEventUpdateInput,
)
from momentum.stats import SocialEventStatistics, social_event_statistics
from momentum.store.base import EntityStore


class SocialEventStore(EntityStore[SocialEvent, SocialEventCreateInput, SocialEventUpdateInput]):
    """Weddings, funerals, birthdays and the gifts and reminders around them."""

    entity_name = "social event"
    collection_name = "social_events"
    record_type = SocialEvent
    enum_fields = SOCIAL_EVENT_ENUM_FIELDS

    def apply_defaults(
        self, data: SocialEventCreateInput, *, record_id: str, now: datetime
    ) -> SocialEvent:
        return apply_social_event_defaults(data, record_id=record_id, now=now)

    def validate(self, record: SocialEvent) -> None:
        validate_social_event(record)

    def prepare_changes(
        self, record: SocialEvent, changes: Dict[str, Any], now: datetime
    ) -> Dict[str, Any]:
        if "location" in changes:
            changes["location"] = coerce_location(changes["location"])
        if "contact" in changes:
            changes["contact"] = coerce_contact(changes["contact"])
        return changes

    async def mark_gift_sent(
        self,
        event_id: str,
        amount: Optional[int] = None,
        sent_date: Optional[datetime] = None,
    ) -> SocialEvent:
        update = SocialEventUpdateInput(gift_sent=True, gift_sent_date=sent_date or self._now())
        if amount is not None:
            update.gift_amount = amount
        return await self.update(event_id, update)

    async def set_reminder(self, event_id: str, when: datetime) -> SocialEvent:
        return await self.update(
            event_id, SocialEventUpdateInput(reminder_set=True, reminder_date=when)
        )

    async def clear_reminder(self, event_id: str) -> SocialEvent:
        return await self.update(
            event_id, SocialEventUpdateInput(reminder_set=False, reminder_date=None)
        )

    def get_statistics(self) -> SocialEventStatistics:
        return social_event_statistics(self._records)
