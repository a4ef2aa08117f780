"""Tests for agenda building."""

from datetime import date

import pytest

from cadence.core.agenda import (
    agenda_for,
    completion_summary,
    find_completion,
    pending_task_ids,
    split_agenda,
)
from cadence.core.recurrence import (
    DailyRule,
    DayOfMonthRule,
    FirstLastDayRule,
    MonthPosition,
    WeeklyRule,
)
from cadence.core.tasks import Completion, Task


@pytest.fixture
def today():
    return date(2024, 1, 31)  # Wednesday


def make_task(task_id, title, rule, created=date(2024, 1, 1)):
    return Task(id=task_id, title=title, recurrence=rule, created_at=created)


@pytest.fixture
def sample_tasks():
    return [
        make_task("1", "Water the plants", DailyRule()),
        make_task("2", "Submit weekly report", WeeklyRule(5)),  # Friday
        make_task("3", "Midweek review", WeeklyRule(3)),  # Wednesday
        make_task("4", "Pay rent", DayOfMonthRule(31)),
        make_task("5", "Close the books", FirstLastDayRule(MonthPosition.LAST)),
        make_task("6", "Meditate", DailyRule()),
    ]


class TestAgendaFor:
    def test_filters_to_due_tasks(self, sample_tasks, today):
        items = agenda_for(sample_tasks, [], today)
        ids = {i.task.id for i in items}
        assert ids == {"1", "3", "4", "5", "6"}

    def test_sorted_by_title(self, sample_tasks, today):
        items = agenda_for(sample_tasks, [], today)
        assert [i.task.title for i in items] == [
            "Close the books",
            "Meditate",
            "Midweek review",
            "Pay rent",
            "Water the plants",
        ]

    def test_apple_before_banana(self, today):
        tasks = [make_task("b", "Banana", DailyRule()), make_task("a", "Apple", DailyRule())]
        assert [i.task.title for i in agenda_for(tasks, [], today)] == ["Apple", "Banana"]

    def test_lowercase_titles_sort_alongside_uppercase(self, today):
        tasks = [
            make_task("1", "banana", DailyRule()),
            make_task("2", "Cherry", DailyRule()),
            make_task("3", "apple", DailyRule()),
        ]
        assert [i.task.title for i in agenda_for(tasks, [], today)] == ["apple", "banana", "Cherry"]

    def test_lowercase_before_uppercase_on_case_tie(self, today):
        tasks = [make_task("1", "Apple", DailyRule()), make_task("2", "apple", DailyRule())]
        assert [i.task.title for i in agenda_for(tasks, [], today)] == ["apple", "Apple"]

    def test_equal_titles_keep_insertion_order(self, today):
        tasks = [make_task("x", "Same", DailyRule()), make_task("y", "Same", DailyRule())]
        assert [i.task.id for i in agenda_for(tasks, [], today)] == ["x", "y"]

    def test_duplicate_task_appears_once(self, today):
        task = make_task("1", "Dup", DailyRule())
        assert len(agenda_for([task, task], [], today)) == 1

    def test_marks_completed_tasks(self, sample_tasks, today):
        completions = [Completion(task_id="1", completion_date="2024-01-31")]
        items = {i.task.id: i.is_complete for i in agenda_for(sample_tasks, completions, today)}
        assert items["1"] is True
        assert items["6"] is False

    def test_completion_on_other_day_ignored(self, sample_tasks, today):
        completions = [Completion(task_id="1", completion_date="2024-01-30")]
        items = {i.task.id: i.is_complete for i in agenda_for(sample_tasks, completions, today)}
        assert items["1"] is False

    def test_empty_task_list(self, today):
        assert agenda_for([], [], today) == []


class TestSplitAgenda:
    def test_partitions_daily_and_scheduled(self, sample_tasks, today):
        habits, scheduled = split_agenda(agenda_for(sample_tasks, [], today))
        assert [i.task.title for i in habits] == ["Meditate", "Water the plants"]
        assert [i.task.title for i in scheduled] == ["Close the books", "Midweek review", "Pay rent"]


class TestCompletionHelpers:
    def test_find_completion(self, today):
        target = Completion(task_id="2", completion_date="2024-01-31", id="c2")
        completions = [Completion(task_id="1", completion_date="2024-01-31"), target]
        assert find_completion(completions, "2", today) is target
        assert find_completion(completions, "3", today) is None

    def test_completion_summary(self, sample_tasks, today):
        completions = [
            Completion(task_id="1", completion_date="2024-01-31"),
            Completion(task_id="4", completion_date="2024-01-31"),
        ]
        assert completion_summary(agenda_for(sample_tasks, completions, today)) == (2, 5)

    def test_pending_task_ids(self, sample_tasks, today):
        completions = [Completion(task_id="1", completion_date="2024-01-31")]
        assert pending_task_ids(sample_tasks, completions, today) == ["5", "6", "3", "4"]
