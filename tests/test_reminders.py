"""Tests for reminder scheduling helpers."""

from datetime import datetime

import pytest

from momentum.reminders import is_quiet_hour, reminder_schedule


class TestReminderSchedule:

    def test_schedule(self):
        """Test D-7, D-1 and 09:00 on the day."""
        event_date = datetime(2025, 3, 15, 12, 30)
        assert reminder_schedule(event_date) == [
            datetime(2025, 3, 8, 12, 30),
            datetime(2025, 3, 14, 12, 30),
            datetime(2025, 3, 15, 9, 0),
        ]

    def test_schedule_across_month(self):
        schedule = reminder_schedule(datetime(2025, 3, 3, 18, 0))
        assert schedule[0] == datetime(2025, 2, 24, 18, 0)


class TestQuietHours:

    @pytest.mark.parametrize("hour", [21, 23, 0, 7])
    def test_quiet(self, hour):
        assert is_quiet_hour(datetime(2025, 1, 1, hour, 0))

    @pytest.mark.parametrize("hour", [8, 12, 20])
    def test_not_quiet(self, hour):
        assert not is_quiet_hour(datetime(2025, 1, 1, hour, 59))
