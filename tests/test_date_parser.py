"""Tests for free-text date extraction."""

from datetime import date

import pytest

from momentum.utils.date_parser import parse_date

TODAY = date(2025, 6, 10)


class TestParseDate:

    def test_iso(self):
        parsed = parse_date("Meeting on 2025-03-15 at the office", today=TODAY)
        assert parsed.iso_date == "2025-03-15"
        assert parsed.raw_text == "2025-03-15"
        assert parsed.confidence == 0.95

    def test_korean_month_day_uses_current_year(self):
        parsed = parse_date("3월 5일 결혼식", today=TODAY)
        assert parsed.iso_date == "2025-03-05"
        assert parsed.raw_text == "3월 5일"
        assert parsed.confidence == 0.85

    def test_korean_month_day_without_space(self):
        parsed = parse_date("12월25일", today=TODAY)
        assert parsed.iso_date == "2025-12-25"

    def test_tomorrow(self):
        parsed = parse_date("내일 점심 약속", today=TODAY)
        assert parsed.iso_date == "2025-06-11"
        assert parsed.raw_text == "내일"
        assert parsed.confidence == 0.6

    def test_tomorrow_crosses_year(self):
        assert parse_date("내일", today=date(2025, 12, 31)).iso_date == "2026-01-01"

    def test_iso_wins_over_later_patterns(self):
        """Test that patterns are tried in order and the first hit wins."""
        parsed = parse_date("내일 or 3월 5일 or 2025-04-01", today=TODAY)
        assert parsed.iso_date == "2025-04-01"

    def test_invalid_iso_falls_through(self):
        """Test that an impossible calendar date is skipped."""
        parsed = parse_date("2025-13-40 내일", today=TODAY)
        assert parsed.iso_date == "2025-06-11"

    def test_invalid_month_day(self):
        assert parse_date("2월 30일", today=TODAY) is None

    @pytest.mark.parametrize("text", [None, "", "   ", "see you soon"])
    def test_no_date(self, text):
        assert parse_date(text, today=TODAY) is None

    def test_to_date(self):
        assert parse_date("2025-03-15", today=TODAY).to_date() == date(2025, 3, 15)
