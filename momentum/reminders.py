"""Reminder scheduling intent for social events.

Only the dates are computed here; delivering the alert is the
notification collaborator's job.
"""

from datetime import datetime, time, timedelta
from typing import List

SAME_DAY_REMINDER_TIME = time(9, 0)
QUIET_HOURS_START = 21
QUIET_HOURS_END = 8


def reminder_before(event_date: datetime, days: int) -> datetime:
    return event_date - timedelta(days=days)


def same_day_reminder(event_date: datetime) -> datetime:
    return datetime.combine(event_date.date(), SAME_DAY_REMINDER_TIME, tzinfo=event_date.tzinfo)


def reminder_schedule(event_date: datetime) -> List[datetime]:
    """D-7, D-1 and 09:00 on the day."""
    return [
        reminder_before(event_date, 7),
        reminder_before(event_date, 1),
        same_day_reminder(event_date),
    ]


def is_quiet_hour(when: datetime) -> bool:
    """True between 21:00 and 08:00, when no alert should fire."""
    return when.hour >= QUIET_HOURS_START or when.hour < QUIET_HOURS_END
