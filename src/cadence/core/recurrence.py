"""Recurrence rule model - pure data, no I/O dependencies."""

from dataclasses import dataclass
from enum import Enum

WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


class RecurrenceError(ValueError):
    """Raised when recurrence data is missing or out of range."""

    pass


class BiweeklyParity(Enum):
    """Which weeks of the month a biweekly task falls on."""

    FIRST_THIRD = "first_third"
    SECOND_FOURTH = "second_fourth"


class WeekOrdinal(Enum):
    """Position of a weekday occurrence within its month."""

    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    LAST = "last"

    @property
    def bucket(self) -> int | None:
        """Week-of-month bucket (1-4), or None for LAST."""
        return {"first": 1, "second": 2, "third": 3, "fourth": 4}.get(self.value)


class MonthPosition(Enum):
    FIRST = "first"
    LAST = "last"


def _check_weekday(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        raise RecurrenceError(f"day_of_week must be 0-6 (Sunday=0), got {value!r}")
    return value


@dataclass(frozen=True)
class DailyRule:
    """Due every day."""


@dataclass(frozen=True)
class WeeklyRule:
    """Due on one weekday every week."""

    day_of_week: int

    def __post_init__(self):
        _check_weekday(self.day_of_week)


@dataclass(frozen=True)
class BiweeklyRule:
    """
    Due on one weekday in alternating weeks of the month.

    parity is None only for records written before the week split existed;
    those alternate relative to the task's creation week.
    """

    day_of_week: int
    parity: BiweeklyParity | None

    def __post_init__(self):
        _check_weekday(self.day_of_week)
        if self.parity is not None and not isinstance(self.parity, BiweeklyParity):
            raise RecurrenceError(f"parity must be a BiweeklyParity, got {self.parity!r}")


@dataclass(frozen=True)
class DayOfMonthRule:
    """Due on a fixed day of the month, clamped to the last day in short months."""

    day: int

    def __post_init__(self):
        if isinstance(self.day, bool) or not isinstance(self.day, int) or not 1 <= self.day <= 31:
            raise RecurrenceError(f"day must be 1-31, got {self.day!r}")


@dataclass(frozen=True)
class WeekdayOfMonthRule:
    """Due on e.g. the second Tuesday or the last Thursday of each month."""

    week: WeekOrdinal
    day_of_week: int

    def __post_init__(self):
        if not isinstance(self.week, WeekOrdinal):
            raise RecurrenceError(f"week must be a WeekOrdinal, got {self.week!r}")
        _check_weekday(self.day_of_week)


@dataclass(frozen=True)
class FirstLastDayRule:
    """Due on the first or the last calendar day of each month."""

    position: MonthPosition

    def __post_init__(self):
        if not isinstance(self.position, MonthPosition):
            raise RecurrenceError(f"position must be a MonthPosition, got {self.position!r}")


RecurrenceRule = (
    DailyRule
    | WeeklyRule
    | BiweeklyRule
    | DayOfMonthRule
    | WeekdayOfMonthRule
    | FirstLastDayRule
)


def _enum(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise RecurrenceError(f"{field_name} must be one of {choices}, got {value!r}") from None


def _require(data: dict, key: str):
    if data.get(key) is None:
        raise RecurrenceError(f"{data.get('type')} recurrence is missing '{key}'")
    return data[key]


def rule_from_dict(data: dict) -> RecurrenceRule:
    """
    Build a rule from the backend's JSON shape.

    The legacy monthly shape ({"dayOfMonth": N, "isLastDayOfMonth": bool})
    is migrated here; only the monthlyType shape is ever written back.
    """
    if not isinstance(data, dict):
        raise RecurrenceError(f"recurrence must be an object, got {type(data).__name__}")

    match data.get("type"):
        case "daily":
            return DailyRule()
        case "weekly":
            return WeeklyRule(_require(data, "dayOfWeek"))
        case "biweekly":
            parity = data.get("biweeklyWeeks")
            return BiweeklyRule(
                _require(data, "dayOfWeek"),
                _enum(BiweeklyParity, parity, "biweeklyWeeks") if parity is not None else None,
            )
        case "monthly":
            return _monthly_from_dict(data)
        case other:
            raise RecurrenceError(f"Unknown recurrence type: {other!r}")


def _monthly_from_dict(data: dict) -> RecurrenceRule:
    match data.get("monthlyType"):
        case "dayOfMonth":
            return DayOfMonthRule(_require(data, "day"))
        case "dayOfWeek":
            return WeekdayOfMonthRule(
                _enum(WeekOrdinal, _require(data, "week"), "week"),
                _require(data, "dayOfWeek"),
            )
        case "firstLastDay":
            return FirstLastDayRule(_enum(MonthPosition, _require(data, "position"), "position"))
        case None:
            # Legacy shape
            if data.get("isLastDayOfMonth"):
                return FirstLastDayRule(MonthPosition.LAST)
            return DayOfMonthRule(_require(data, "dayOfMonth"))
        case other:
            raise RecurrenceError(f"Unknown monthlyType: {other!r}")


def rule_to_dict(rule: RecurrenceRule) -> dict:
    """Serialize a rule to the backend's JSON shape."""
    match rule:
        case DailyRule():
            return {"type": "daily"}
        case WeeklyRule(day_of_week=dow):
            return {"type": "weekly", "dayOfWeek": dow}
        case BiweeklyRule(day_of_week=dow, parity=parity):
            data = {"type": "biweekly", "dayOfWeek": dow}
            if parity is not None:
                data["biweeklyWeeks"] = parity.value
            return data
        case DayOfMonthRule(day=day):
            return {"type": "monthly", "monthlyType": "dayOfMonth", "day": day}
        case WeekdayOfMonthRule(week=week, day_of_week=dow):
            return {"type": "monthly", "monthlyType": "dayOfWeek", "week": week.value, "dayOfWeek": dow}
        case FirstLastDayRule(position=position):
            return {"type": "monthly", "monthlyType": "firstLastDay", "position": position.value}
    raise RecurrenceError(f"Not a recurrence rule: {rule!r}")


def _ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    return f"{n}" + {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def describe(rule: RecurrenceRule) -> str:
    """Human-readable schedule, e.g. 'Last Thursday of the month'."""
    match rule:
        case DailyRule():
            return "Every day"
        case WeeklyRule(day_of_week=dow):
            return f"Every {WEEKDAY_NAMES[dow]}"
        case BiweeklyRule(day_of_week=dow, parity=None):
            return f"Every other {WEEKDAY_NAMES[dow]}"
        case BiweeklyRule(day_of_week=dow, parity=BiweeklyParity.FIRST_THIRD):
            return f"1st & 3rd {WEEKDAY_NAMES[dow]}"
        case BiweeklyRule(day_of_week=dow):
            return f"2nd & 4th {WEEKDAY_NAMES[dow]}"
        case DayOfMonthRule(day=day) if day > 28:
            return f"Monthly on the {_ordinal(day)} (or last day)"
        case DayOfMonthRule(day=day):
            return f"Monthly on the {_ordinal(day)}"
        case WeekdayOfMonthRule(week=week, day_of_week=dow):
            return f"{week.value.capitalize()} {WEEKDAY_NAMES[dow]} of the month"
        case FirstLastDayRule(position=position):
            return f"{position.value.capitalize()} day of the month"
    raise RecurrenceError(f"Not a recurrence rule: {rule!r}")
