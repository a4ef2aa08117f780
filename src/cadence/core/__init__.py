"""Functional core - pure business logic with no I/O."""

from .recurrence import (
    RecurrenceError,
    RecurrenceRule,
    DailyRule,
    WeeklyRule,
    BiweeklyRule,
    DayOfMonthRule,
    WeekdayOfMonthRule,
    FirstLastDayRule,
    BiweeklyParity,
    WeekOrdinal,
    MonthPosition,
    rule_from_dict,
    rule_to_dict,
    describe,
)
from .due import is_due, next_due, weekday_of, days_in_month, week_of_month
from .tasks import Task, Completion, Profile
from .agenda import AgendaItem, agenda_for, split_agenda, find_completion, pending_task_ids
from .streak import StreakState, update_streak
from .navigation import DateCursor
from .picker import QuoteRotation, SuggestionPicker, RecentWindow, ResetPolicy, pick

__all__ = [
    # Recurrence
    "RecurrenceError",
    "RecurrenceRule",
    "DailyRule",
    "WeeklyRule",
    "BiweeklyRule",
    "DayOfMonthRule",
    "WeekdayOfMonthRule",
    "FirstLastDayRule",
    "BiweeklyParity",
    "WeekOrdinal",
    "MonthPosition",
    "rule_from_dict",
    "rule_to_dict",
    "describe",
    # Due dates
    "is_due",
    "next_due",
    "weekday_of",
    "days_in_month",
    "week_of_month",
    # Tasks
    "Task",
    "Completion",
    "Profile",
    # Agenda
    "AgendaItem",
    "agenda_for",
    "split_agenda",
    "find_completion",
    "pending_task_ids",
    # Streak
    "StreakState",
    "update_streak",
    # Navigation
    "DateCursor",
    # Picker
    "QuoteRotation",
    "SuggestionPicker",
    "RecentWindow",
    "ResetPolicy",
    "pick",
]
