"""Tests for status transition tables."""

import pytest

from momentum.lifecycle import can_transition, is_terminal
from momentum.models import ContextStatus, SocialEventStatus, TaskStatus


class TestTransitions:

    @pytest.mark.parametrize(
        "current,target",
        [
            (TaskStatus.DRAFT, TaskStatus.ACTIVE),
            (TaskStatus.ACTIVE, TaskStatus.COMPLETED),
            (TaskStatus.COMPLETED, TaskStatus.ACTIVE),
            (TaskStatus.PENDING, TaskStatus.CANCELLED),
            (ContextStatus.PENDING, ContextStatus.PROCESSING),
            (ContextStatus.PROCESSING, ContextStatus.FAILED),
            (SocialEventStatus.PENDING, SocialEventStatus.CONFIRMED),
            (SocialEventStatus.CONFIRMED, SocialEventStatus.COMPLETED),
        ],
    )
    def test_legal(self, current, target):
        assert can_transition(current, target)

    @pytest.mark.parametrize(
        "current,target",
        [
            (TaskStatus.CANCELLED, TaskStatus.ACTIVE),
            (TaskStatus.DRAFT, TaskStatus.COMPLETED),
            (ContextStatus.PENDING, ContextStatus.COMPLETED),
            (ContextStatus.COMPLETED, ContextStatus.PENDING),
            (SocialEventStatus.COMPLETED, SocialEventStatus.PENDING),
        ],
    )
    def test_illegal(self, current, target):
        assert not can_transition(current, target)

    def test_same_status_allowed(self):
        """Test that re-saving a status is never a transition error."""
        assert can_transition(TaskStatus.CANCELLED, TaskStatus.CANCELLED)

    def test_mixed_families(self):
        """Test that comparing statuses of different families is a programming error."""
        with pytest.raises(TypeError):
            can_transition(TaskStatus.DRAFT, ContextStatus.PENDING)

    def test_terminal(self):
        assert is_terminal(TaskStatus.CANCELLED)
        assert is_terminal(ContextStatus.FAILED)
        assert not is_terminal(TaskStatus.COMPLETED)
        assert not is_terminal(SocialEventStatus.CONFIRMED)
