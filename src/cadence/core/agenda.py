"""Agenda building - which tasks are due on a day and whether they're done."""

from dataclasses import dataclass
from datetime import date

from .tasks import Completion, Task


@dataclass(frozen=True)
class AgendaItem:
    """A task due on the viewed day, paired with its completion state."""

    task: Task
    is_complete: bool


def title_sort_key(title: str) -> tuple[str, str]:
    """Locale-style ordering: case-insensitive first, then lowercase before uppercase."""
    return (title.casefold(), title.swapcase())


def find_completion(completions: list[Completion], task_id: str, day: date) -> Completion | None:
    """Return the completion for (task, day), if any."""
    return next((c for c in completions if c.matches(task_id, day)), None)


def agenda_for(tasks: list[Task], completions: list[Completion], day: date) -> list[AgendaItem]:
    """
    Build the agenda for a day.

    Keeps tasks that are due on the day (once per task id), marks each one
    complete if a completion exists for that date, and sorts by title.
    Ties keep their input order.

    Pure function - no I/O.
    """
    date_string = day.isoformat()
    completed_ids = {c.task_id for c in completions if c.completion_date == date_string}

    seen: set[str] = set()
    items = []
    for task in tasks:
        if task.id in seen or not task.is_due(day):
            continue
        seen.add(task.id)
        items.append(AgendaItem(task=task, is_complete=task.id in completed_ids))

    return sorted(items, key=lambda item: title_sort_key(item.task.title))


def split_agenda(items: list[AgendaItem]) -> tuple[list[AgendaItem], list[AgendaItem]]:
    """
    Split agenda items into daily habits and scheduled tasks.

    Returns: (daily_habits, scheduled)
    """
    habits = [i for i in items if i.task.is_daily_habit]
    scheduled = [i for i in items if not i.task.is_daily_habit]
    return habits, scheduled


def completion_summary(items: list[AgendaItem]) -> tuple[int, int]:
    """Returns: (completed, total)"""
    return sum(1 for i in items if i.is_complete), len(items)


def pending_task_ids(tasks: list[Task], completions: list[Completion], day: date) -> list[str]:
    """Ids of tasks due on the day that have no completion yet, in agenda order."""
    return [item.task.id for item in agenda_for(tasks, completions, day) if not item.is_complete]
