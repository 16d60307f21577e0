"""Best-effort date extraction from free text.

Patterns are tried in a fixed order and the first hit wins:

1. ``YYYY-MM-DD``             confidence 0.95
2. ``M월 D일`` (this year)     confidence 0.85
3. ``내일`` (tomorrow)          confidence 0.6
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

ISO_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
KOREAN_MONTH_DAY_PATTERN = re.compile(r"(\d{1,2})월\s*(\d{1,2})일")
TOMORROW_TOKEN = "내일"

ISO_CONFIDENCE = 0.95
MONTH_DAY_CONFIDENCE = 0.85
TOMORROW_CONFIDENCE = 0.6


@dataclass(frozen=True)
class ParsedDate:
    iso_date: str        # YYYY-MM-DD
    raw_text: str        # the matched span
    confidence: float

    def to_date(self) -> date:
        return date.fromisoformat(self.iso_date)


def _build(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date(text: Optional[str], today: Optional[date] = None) -> Optional[ParsedDate]:
    """Extract the first recognisable date from ``text``, or None."""
    if not text or not text.strip():
        return None
    today = today or date.today()

    match = ISO_PATTERN.search(text)
    if match:
        parsed = _build(int(match.group(1)), int(match.group(2)), int(match.group(3)))
        if parsed:
            return ParsedDate(parsed.isoformat(), match.group(0), ISO_CONFIDENCE)

    match = KOREAN_MONTH_DAY_PATTERN.search(text)
    if match:
        parsed = _build(today.year, int(match.group(1)), int(match.group(2)))
        if parsed:
            return ParsedDate(parsed.isoformat(), match.group(0), MONTH_DAY_CONFIDENCE)

    if TOMORROW_TOKEN in text:
        tomorrow = today + timedelta(days=1)
        return ParsedDate(tomorrow.isoformat(), TOMORROW_TOKEN, TOMORROW_CONFIDENCE)

    return None
