"""Context store."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from momentum.defaults import (
    CONTEXT_ENUM_FIELDS,
    apply_context_defaults,
    copy_entities,
    validate_context,
)
from momentum.errors import ValidationError
from momentum.models.context import (
    Context,
    ContextCreateInput,
    ContextStatus,
    ContextUpdateInput,
)
from momentum.store.base import EntityStore


class ContextStore(EntityStore[Context, ContextCreateInput, ContextUpdateInput]):
    """Raw snippets handed over by the capture collaborators."""

    entity_name = "context"
    collection_name = "contexts"
    record_type = Context
    enum_fields = CONTEXT_ENUM_FIELDS

    def apply_defaults(self, data: ContextCreateInput, *, record_id: str, now: datetime) -> Context:
        return apply_context_defaults(data, record_id=record_id, now=now)

    def validate(self, record: Context) -> None:
        validate_context(record)

    def prepare_changes(self, record: Context, changes: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        if "data" in changes:
            new_source = getattr(changes["data"], "source", None)
            if new_source != record.source:
                raise ValidationError(
                    f"context {record.id}: source is fixed at {record.source.value}"
                )
        if "entities" in changes:
            changes["entities"] = copy_entities(changes["entities"])
        return changes

    async def update_status(self, context_id: str, status: ContextStatus | str) -> Context:
        """Record extraction progress reported by the extraction collaborator."""
        return await self.update(context_id, ContextUpdateInput(status=status))
