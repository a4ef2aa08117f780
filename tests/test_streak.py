"""Tests for streak evaluation."""

from datetime import date

import pytest

from cadence.core.agenda import AgendaItem
from cadence.core.recurrence import DailyRule
from cadence.core.streak import StreakState, all_complete, update_streak
from cadence.core.tasks import Task


def item(title: str, done: bool) -> AgendaItem:
    task = Task(id=title, title=title, recurrence=DailyRule(), created_at=date(2024, 1, 1))
    return AgendaItem(task=task, is_complete=done)


@pytest.fixture
def checked_yesterday():
    return StreakState(streak=5, last_check=date(2024, 1, 1))


class TestUpdateStreak:
    def test_first_run_records_date_only(self):
        state = update_streak(StreakState(streak=3, last_check=None), [item("a", False)], date(2024, 1, 2))
        assert state == StreakState(streak=3, last_check=date(2024, 1, 2))

    def test_same_day_is_noop(self, checked_yesterday):
        state = update_streak(checked_yesterday, [item("a", False)], date(2024, 1, 1))
        assert state is checked_yesterday

    def test_last_check_in_future_is_noop(self, checked_yesterday):
        state = update_streak(checked_yesterday, [], date(2023, 12, 30))
        assert state is checked_yesterday

    def test_next_day_all_complete_increments(self, checked_yesterday):
        agenda = [item("a", True), item("b", True)]
        state = update_streak(checked_yesterday, agenda, date(2024, 1, 2))
        assert state == StreakState(streak=6, last_check=date(2024, 1, 2))

    def test_next_day_one_incomplete_resets(self, checked_yesterday):
        agenda = [item("a", True), item("b", False)]
        state = update_streak(checked_yesterday, agenda, date(2024, 1, 2))
        assert state == StreakState(streak=0, last_check=date(2024, 1, 2))

    def test_next_day_nothing_due_increments(self, checked_yesterday):
        state = update_streak(checked_yesterday, [], date(2024, 1, 2))
        assert state.streak == 6

    def test_gap_resets_regardless_of_completion(self, checked_yesterday):
        state = update_streak(checked_yesterday, [item("a", True)], date(2024, 1, 5))
        assert state == StreakState(streak=0, last_check=date(2024, 1, 5))

    def test_second_call_same_day_does_not_double_count(self, checked_yesterday):
        agenda = [item("a", True)]
        once = update_streak(checked_yesterday, agenda, date(2024, 1, 2))
        twice = update_streak(once, agenda, date(2024, 1, 2))
        assert twice.streak == 6


class TestAllComplete:
    def test_vacuously_true(self):
        assert all_complete([]) is True

    def test_false_with_any_incomplete(self):
        assert all_complete([item("a", True), item("b", False)]) is False
