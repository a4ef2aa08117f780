"""Due-date evaluation - pure calendar arithmetic, no I/O dependencies."""

import calendar
from datetime import date, timedelta

from .recurrence import (
    BiweeklyParity,
    BiweeklyRule,
    DailyRule,
    DayOfMonthRule,
    FirstLastDayRule,
    MonthPosition,
    RecurrenceRule,
    WeekdayOfMonthRule,
    WeekOrdinal,
    WeeklyRule,
)

_PARITY_BUCKETS = {
    BiweeklyParity.FIRST_THIRD: (1, 3),
    BiweeklyParity.SECOND_FOURTH: (2, 4),
}


def weekday_of(day: date) -> int:
    """Weekday with Sunday = 0 ... Saturday = 6."""
    return day.isoweekday() % 7


def days_in_month(day: date) -> int:
    return calendar.monthrange(day.year, day.month)[1]


def week_of_month(day: date) -> int:
    """Week-of-month bucket: ceil(day_of_month / 7), so 1-5."""
    return (day.day + 6) // 7


def is_last_week_of_month(day: date) -> bool:
    """True when the day falls within the final seven days of its month."""
    return days_in_month(day) - day.day < 7


def start_of_week(day: date) -> date:
    """The Sunday on or before day."""
    return day - timedelta(days=weekday_of(day))


def calendar_weeks_between(later: date, earlier: date) -> int:
    """Number of Sunday-started week boundaries between two dates."""
    return (start_of_week(later) - start_of_week(earlier)).days // 7


def is_due(rule: RecurrenceRule, day: date, created_at: date | None = None) -> bool:
    """
    Whether a task with this rule is due on the given day.

    Pure and total over valid rules. created_at is only consulted by
    legacy biweekly rules that carry no week parity.
    """
    match rule:
        case DailyRule():
            return True
        case WeeklyRule(day_of_week=dow):
            return weekday_of(day) == dow
        case BiweeklyRule(day_of_week=dow, parity=parity):
            if weekday_of(day) != dow:
                return False
            if parity is None:
                anchor = created_at or day
                return calendar_weeks_between(day, anchor) % 2 == 0
            return week_of_month(day) in _PARITY_BUCKETS[parity]
        case DayOfMonthRule(day=target):
            last_day = days_in_month(day)
            return day.day == min(target, last_day)
        case WeekdayOfMonthRule(week=week, day_of_week=dow):
            if weekday_of(day) != dow:
                return False
            if week is WeekOrdinal.LAST:
                return is_last_week_of_month(day)
            return week_of_month(day) == week.bucket
        case FirstLastDayRule(position=MonthPosition.FIRST):
            return day.day == 1
        case FirstLastDayRule(position=MonthPosition.LAST):
            return day.day == days_in_month(day)
    return False


def next_due(
    rule: RecurrenceRule,
    start: date,
    created_at: date | None = None,
    horizon_days: int = 366,
) -> date | None:
    """First date on or after start when the rule is due, within the horizon."""
    for offset in range(horizon_days):
        candidate = start + timedelta(days=offset)
        if is_due(rule, candidate, created_at):
            return candidate
    return None
