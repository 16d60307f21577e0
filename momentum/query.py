"""Filter/sort engine for store collections.

``query()`` never mutates its input. Filters compose with AND, and an
option left at ``None`` places no constraint on its field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from momentum.models.task import PRIORITY_RANK, Priority

T = TypeVar("T")


class SortField(str, Enum):
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    DEADLINE = "deadline"
    PRIORITY = "priority"
    EVENT_DATE = "eventDate"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class DateRange:
    """Inclusive bounds on a record's primary date. Either side may be open."""
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def contains(self, value: Optional[datetime]) -> bool:
        if value is None:
            return False
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True


@dataclass
class QueryOptions:
    status: Any = None
    type: Any = None              # social events
    category: Any = None          # tasks
    source: Any = None            # contexts
    priority: Any = None
    date_range: Optional[DateRange] = None
    search: Optional[str] = None
    tags: List[str] = field(default_factory=list)   # match any
    gift_not_sent: bool = False
    reminder_not_set: bool = False
    sort_by: Any = None
    sort_order: Any = None        # defaults to desc when sort_by is set
    limit: Optional[int] = None
    offset: int = 0


def _value(v: Any) -> Any:
    return v.value if isinstance(v, Enum) else v


def _matches(record: Any, attr: str, wanted: Any) -> bool:
    return _value(getattr(record, attr, None)) == _value(wanted)


def _search_hit(record: Any, needle: str) -> bool:
    needle = needle.casefold()
    return any(needle in (text or "").casefold() for text in record.search_fields())


def _sort_key(sort_by: SortField) -> Callable[[Any], Any]:
    if sort_by is SortField.PRIORITY:
        def by_priority(record: Any) -> Optional[int]:
            priority = getattr(record, "priority", None)
            return PRIORITY_RANK[Priority(_value(priority))] if priority is not None else None
        return by_priority

    attr = {
        SortField.CREATED_AT: "created_at",
        SortField.UPDATED_AT: "updated_at",
        SortField.DEADLINE: "deadline",
        SortField.EVENT_DATE: "event_date",
    }[sort_by]
    return lambda record: getattr(record, attr, None)


def sort_records(records: Sequence[T], sort_by: Any, sort_order: Any = None) -> List[T]:
    """Stable sort; records without the key go last in original order."""
    sort_by = SortField(_value(sort_by))
    order = SortOrder(_value(sort_order) or SortOrder.DESC.value)
    key = _sort_key(sort_by)

    present = [r for r in records if key(r) is not None]
    missing = [r for r in records if key(r) is None]
    # sorted() stays stable with reverse=True
    present = sorted(present, key=key, reverse=order is SortOrder.DESC)
    return present + missing


def query(collection: Sequence[T], options: Optional[QueryOptions] = None) -> List[T]:
    """Project a collection into a filtered, ordered list."""
    options = options or QueryOptions()
    results = list(collection)

    if options.status is not None:
        results = [r for r in results if _matches(r, "status", options.status)]
    if options.type is not None:
        results = [r for r in results if _matches(r, "type", options.type)]
    if options.category is not None:
        results = [r for r in results if _matches(r, "category", options.category)]
    if options.source is not None:
        results = [r for r in results if _matches(r, "source", options.source)]
    if options.priority is not None:
        results = [r for r in results if _matches(r, "priority", options.priority)]
    if options.date_range is not None:
        results = [r for r in results if options.date_range.contains(r.primary_date)]
    if options.search is not None and options.search.strip():
        results = [r for r in results if _search_hit(r, options.search.strip())]
    if options.tags:
        wanted = set(options.tags)
        results = [r for r in results if wanted.intersection(getattr(r, "tags", None) or ())]
    if options.gift_not_sent:
        results = [r for r in results if not getattr(r, "gift_sent", False)]
    if options.reminder_not_set:
        results = [r for r in results if not getattr(r, "reminder_set", False)]

    if options.sort_by is not None:
        results = sort_records(results, options.sort_by, options.sort_order)

    if options.offset:
        results = results[options.offset:]
    if options.limit is not None:
        results = results[: options.limit]
    return results
