"""Tests for the context store."""

from datetime import datetime

import pytest

from momentum.errors import ValidationError
from momentum.models import (
    ChatData,
    ContextCreateInput,
    ContextSource,
    ContextStatus,
    ContextUpdateInput,
    Entity,
    EntityType,
    LocationData,
    ManualData,
    ScreenshotData,
)
from momentum.query import QueryOptions
from momentum.store import ContextStore

CAPTURED = datetime(2025, 1, 1, 8, 30)


def chat(message="Wedding on 3월 15일 at noon"):
    return ChatData(
        platform="kakao",
        sender="Jiho",
        message=message,
        conversation_id="room-1",
        timestamp=CAPTURED,
    )


class TestContextAdd:

    @pytest.mark.asyncio
    async def test_defaults_to_pending(self, context_store):
        """Test that a new context starts pending."""
        context = await context_store.add(ContextCreateInput(data=chat()))

        assert context.status == ContextStatus.PENDING
        assert context.source == ContextSource.CHAT
        assert context.entities == []
        assert context.created_at == context.updated_at

    @pytest.mark.asyncio
    async def test_entities_are_copied(self, context_store):
        """Test that later changes to the caller's entity list do not leak in."""
        entity = Entity(type=EntityType.DATE, value="2025-03-15", raw_text="3월 15일", confidence=0.85)
        entities = [entity]

        context = await context_store.add(ContextCreateInput(data=chat(), entities=entities))
        entities.append(Entity(type=EntityType.PERSON, value="Jiho", raw_text="Jiho"))
        entity.metadata["touched"] = True

        stored = context_store.get(context.id)
        assert len(stored.entities) == 1
        assert stored.entities[0].metadata == {}
        assert stored.entities[0].value == "2025-03-15"

    @pytest.mark.asyncio
    async def test_rejects_bad_confidence(self, context_store):
        """Test that entity confidence must lie in [0, 1]."""
        entity = Entity(type=EntityType.AMOUNT, value="50000", raw_text="5만원", confidence=1.5)

        with pytest.raises(ValidationError) as exc_info:
            await context_store.add(ContextCreateInput(data=chat(), entities=[entity]))
        assert "confidence" in str(exc_info.value)
        assert len(context_store) == 0

    @pytest.mark.asyncio
    async def test_rejects_bad_coordinates(self, context_store):
        """Test that location payloads are range-checked."""
        data = LocationData(location_name="Nowhere", latitude=123.0, longitude=0.0, timestamp=CAPTURED)
        with pytest.raises(ValidationError):
            await context_store.add(ContextCreateInput(data=data))

    @pytest.mark.asyncio
    async def test_rejects_non_numeric_coordinates(self, context_store):
        """Test that string coordinates are a validation error, not a crash."""
        data = LocationData(location_name="Office", latitude="37.5", longitude="127.0", timestamp=CAPTURED)

        with pytest.raises(ValidationError) as exc_info:
            await context_store.add(ContextCreateInput(data=data))
        assert "numbers" in str(exc_info.value)
        assert isinstance(context_store.error, ValidationError)

    @pytest.mark.asyncio
    async def test_rejects_raw_entity_dicts(self, context_store):
        """Test that entities must be Entity records."""
        context = await context_store.add(ContextCreateInput(data=chat()))

        with pytest.raises(ValidationError):
            await context_store.update(context.id, {"entities": [{"type": "date"}]})
        assert context_store.get(context.id).entities == []

    @pytest.mark.asyncio
    async def test_rejects_non_variant_payload(self, context_store):
        """Test that data must be one of the known payload types."""
        with pytest.raises(ValidationError):
            await context_store.add(ContextCreateInput(data={"message": "hi"}))


class TestContextUpdate:

    @pytest.mark.asyncio
    async def test_update_status(self, context_store):
        """Test pending -> processing -> completed."""
        context = await context_store.add(ContextCreateInput(data=chat()))

        processing = await context_store.update_status(context.id, ContextStatus.PROCESSING)
        assert processing.status == ContextStatus.PROCESSING

        done = await context_store.update_status(context.id, "completed")
        assert done.status == ContextStatus.COMPLETED
        assert done.updated_at > context.updated_at

    @pytest.mark.asyncio
    async def test_replace_data_same_source(self, context_store):
        """Test that a payload of the same source can replace the old one."""
        context = await context_store.add(ContextCreateInput(data=chat()))

        updated = await context_store.update(context.id, ContextUpdateInput(data=chat("Moved to Sunday")))

        assert updated.data.message == "Moved to Sunday"
        assert updated.source == ContextSource.CHAT

    @pytest.mark.asyncio
    async def test_source_is_fixed(self, context_store):
        """Test that switching to a different payload variant is rejected."""
        context = await context_store.add(ContextCreateInput(data=chat()))
        screenshot = ScreenshotData(image_path="/tmp/s.png", extracted_text="hello", timestamp=CAPTURED)

        with pytest.raises(ValidationError):
            await context_store.update(context.id, ContextUpdateInput(data=screenshot))
        assert context_store.get(context.id).source == ContextSource.CHAT

    @pytest.mark.asyncio
    async def test_update_entities(self, context_store):
        """Test that extraction results can be attached after capture."""
        context = await context_store.add(ContextCreateInput(data=chat()))
        entity = Entity(type=EntityType.DATE, value="2025-03-15", raw_text="3월 15일")

        updated = await context_store.update(context.id, ContextUpdateInput(entities=[entity]))

        assert [e.value for e in updated.entities] == ["2025-03-15"]


class TestContextQuery:

    @pytest.mark.asyncio
    async def test_filter_by_source_and_search(self, context_store):
        """Test source filtering plus search over the payload text."""
        await context_store.add(ContextCreateInput(data=chat("Dinner with the team")))
        await context_store.add(
            ContextCreateInput(data=ManualData(content="Buy a gift", timestamp=CAPTURED, tags=("dinner",)))
        )

        chats = context_store.query(QueryOptions(source=ContextSource.CHAT))
        assert len(chats) == 1

        hits = context_store.query(QueryOptions(search="DINNER"))
        assert len(hits) == 2

    @pytest.mark.asyncio
    async def test_round_trip_through_storage(self, storage, clock, context_store):
        """Test that every payload survives persistence."""
        entity = Entity(type=EntityType.LOCATION, value="Seoul", raw_text="서울", confidence=0.7)
        await context_store.add(ContextCreateInput(data=chat(), entities=[entity]))
        await context_store.add(
            ContextCreateInput(
                data=LocationData(location_name="Office", latitude=37.5, longitude=127.0, timestamp=CAPTURED)
            )
        )

        reloaded = ContextStore(storage, clock=clock)
        await reloaded.load_all()

        assert list(reloaded.items) == list(context_store.items)
