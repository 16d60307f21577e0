"""Shared helpers for record models."""

from __future__ import annotations

from dataclasses import fields
from datetime import datetime
from typing import Any, Dict, Optional


class _Unset:
    """Marker for update-input fields that were not provided."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def from_iso(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string (or pass through a datetime)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


class UpdateInput:
    """Mixin for dataclass update-inputs whose fields default to UNSET."""

    def changes(self) -> Dict[str, Any]:
        """Return only the fields that were explicitly provided."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if getattr(self, f.name) is not UNSET
        }
