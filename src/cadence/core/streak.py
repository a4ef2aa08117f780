"""Streak evaluation - pure day-difference state machine."""

from dataclasses import dataclass, replace
from datetime import date

from .agenda import AgendaItem


@dataclass(frozen=True)
class StreakState:
    """Consecutive fully-completed days, and when that was last evaluated."""

    streak: int = 0
    last_check: date | None = None


def all_complete(agenda: list[AgendaItem]) -> bool:
    """True if every due task is done (vacuously true for an empty day)."""
    return all(item.is_complete for item in agenda)


def update_streak(state: StreakState, yesterday_agenda: list[AgendaItem], today: date) -> StreakState:
    """
    Advance the streak for today.

    - First evaluation: record today, keep the streak.
    - Already evaluated today (or last check in the future): unchanged.
    - Last check was yesterday: +1 if yesterday's agenda was fully
      complete, otherwise reset to 0.
    - A day was skipped entirely: reset to 0.

    Pure function - the caller persists the result.
    """
    if state.last_check is None:
        return replace(state, last_check=today)

    days = (today - state.last_check).days
    if days <= 0:
        return state

    if days == 1 and all_complete(yesterday_agenda):
        return StreakState(streak=state.streak + 1, last_check=today)
    return StreakState(streak=0, last_check=today)
