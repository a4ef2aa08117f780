"""Pure task domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import date, datetime

from .due import is_due
from .recurrence import DailyRule, RecurrenceRule, rule_from_dict, rule_to_dict

ALL_DAY = "all_day"

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

# What from_api raises on a malformed backend row
ROW_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


def _parse_date(value: str | date) -> date:
    """Accept 'YYYY-MM-DD' or a full ISO 8601 timestamp."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def validate_task_fields(title: str, due_time: str | None) -> None:
    """Check user-entered task fields. Raises ValueError."""
    if not title or not title.strip():
        raise ValueError("Task title must not be empty")
    if due_time is not None and due_time != ALL_DAY:
        if not _TIME_PATTERN.match(due_time):
            raise ValueError(f"due_time must be 'HH:MM' or '{ALL_DAY}', got {due_time!r}")


@dataclass
class Task:
    """A recurring task owned by a single user."""

    id: str
    title: str
    recurrence: RecurrenceRule
    created_at: date
    due_time: str | None = None
    user_id: str = ""

    def __post_init__(self):
        validate_task_fields(self.title, self.due_time)

    @property
    def is_daily_habit(self) -> bool:
        return isinstance(self.recurrence, DailyRule)

    @property
    def is_all_day(self) -> bool:
        return self.due_time in (None, ALL_DAY)

    def is_due(self, day: date) -> bool:
        return is_due(self.recurrence, day, self.created_at)

    def format_time(self) -> str:
        """Format the due time for display."""
        if self.is_all_day:
            return "All day"
        return self.due_time

    @classmethod
    def from_api(cls, data: dict) -> "Task":
        """Create Task from a backend row."""
        return cls(
            id=str(data["id"]),
            title=data["title"],
            recurrence=rule_from_dict(data["recurrence"]),
            created_at=_parse_date(data["created_at"]),
            due_time=data.get("due_time"),
            user_id=data.get("user_id") or "",
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "recurrence": rule_to_dict(self.recurrence),
            "due_time": self.due_time,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class Completion:
    """A task marked done on one calendar day."""

    task_id: str
    completion_date: str  # YYYY-MM-DD
    id: str = ""
    user_id: str = ""

    @property
    def day(self) -> date:
        return date.fromisoformat(self.completion_date)

    def matches(self, task_id: str, day: date) -> bool:
        return self.task_id == task_id and self.completion_date == day.isoformat()

    @classmethod
    def from_api(cls, data: dict) -> "Completion":
        return cls(
            task_id=str(data["task_id"]),
            completion_date=str(data["completion_date"])[:10],
            id=str(data.get("id") or ""),
            user_id=data.get("user_id") or "",
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "task_id": self.task_id,
            "completion_date": self.completion_date,
        }


@dataclass
class Profile:
    """The slice of a user profile the tracker reads and writes."""

    id: str = ""
    streak: int = 0
    last_streak_check: date | None = None

    @classmethod
    def from_api(cls, data: dict) -> "Profile":
        last = data.get("last_streak_check")
        return cls(
            id=str(data.get("id") or ""),
            streak=int(data.get("streak") or 0),
            last_streak_check=_parse_date(last) if last else None,
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "streak": self.streak,
            "last_streak_check": self.last_streak_check.isoformat() if self.last_streak_check else None,
        }
