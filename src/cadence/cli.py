"""Cadence CLI - recurring tasks and habits."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.file_store import StoreError
from .adapters.supabase_api import AuthenticationError, BackendError
from .config import load_config
from .core.agenda import AgendaItem, completion_summary, split_agenda
from .core.due import next_due
from .core.navigation import DateCursor
from .core.picker import SuggestionPicker
from .core.recurrence import (
    WEEKDAY_NAMES,
    BiweeklyParity,
    BiweeklyRule,
    DailyRule,
    DayOfMonthRule,
    FirstLastDayRule,
    MonthPosition,
    RecurrenceError,
    RecurrenceRule,
    WeekdayOfMonthRule,
    WeekOrdinal,
    WeeklyRule,
    describe,
    rule_to_dict,
)
from .workflows import (
    TaskNotDueError,
    Tracker,
    UnknownTaskError,
    check_streak,
    daily_quote,
    get_repository,
)

BACKEND_ERRORS = (AuthenticationError, BackendError, StoreError)

_date_type = click.DateTime(formats=["%Y-%m-%d"])
_weekday_type = click.Choice([d.lower() for d in WEEKDAY_NAMES], case_sensitive=False)


def _today() -> date:
    return date.today()


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _load_tracker(config) -> Tracker:
    try:
        return Tracker(get_repository(config)).load()
    except BACKEND_ERRORS as e:
        _fail(e)


def _resolve_day(target_date) -> date:
    """Apply the viewing window to a --date option (nothing before yesterday)."""
    cursor = DateCursor(_today())
    if target_date is None:
        return cursor.viewed
    requested = target_date.date()
    if not cursor.go_to(requested):
        click.echo(f"Can't view {requested}; showing {cursor.viewed} instead.", err=True)
    return cursor.viewed


def _item_line(index: int, item: AgendaItem) -> str:
    check = "x" if item.is_complete else " "
    time_str = item.task.format_time()
    return f"{index:2}. [{check}] {item.task.title}  ({time_str})  {item.task.id}"


def _show_agenda(items: list[AgendaItem], heading: str) -> None:
    done, total = completion_summary(items)
    click.echo(f"### {heading}  ({done}/{total} done)")
    if not items:
        click.echo("  Nothing due.")
        return

    habits, scheduled = split_agenda(items)
    numbered = {id(item): n for n, item in enumerate(habits + scheduled, start=1)}
    for label, group in (("Daily Habits", habits), ("Scheduled", scheduled)):
        if not group:
            continue
        click.echo(f"\n{label}")
        for item in group:
            click.echo("  " + _item_line(numbered[id(item)], item))


def _agenda_json(items: list[AgendaItem], day: date) -> str:
    return json.dumps(
        {
            "date": day.isoformat(),
            "items": [
                {
                    "id": i.task.id,
                    "title": i.task.title,
                    "due_time": i.task.due_time,
                    "recurrence": rule_to_dict(i.task.recurrence),
                    "daily_habit": i.task.is_daily_habit,
                    "is_complete": i.is_complete,
                }
                for i in items
            ],
        },
        indent=2,
    )


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Cadence - recurring tasks and daily habits."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.option("--date", "-d", "target_date", type=_date_type, default=None,
              help="Date to view (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def agenda(target_date, as_json: bool):
    """Show the tasks due on a day."""
    config = load_config()
    day = _resolve_day(target_date)
    tracker = _load_tracker(config)
    items = tracker.agenda(day)

    if as_json:
        click.echo(_agenda_json(items, day))
        return

    cursor = DateCursor(_today())
    cursor.go_to(day)
    _show_agenda(items, cursor.label)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tasks(as_json: bool):
    """List all tasks and their schedules."""
    config = load_config()
    tracker = _load_tracker(config)
    today = _today()

    if as_json:
        click.echo(json.dumps([t.to_api() for t in tracker.tasks], indent=2))
        return

    if not tracker.tasks:
        click.echo("No tasks yet. Add one with 'cadence add'.")
        return

    for task in tracker.tasks:
        upcoming = next_due(task.recurrence, today, task.created_at)
        when = f"next {upcoming}" if upcoming else "not due within a year"
        click.echo(f"{task.id}  {task.title}  [{describe(task.recurrence)}; {when}]")


def _build_rule(every, weekday, weeks, day_of_month, week, position) -> RecurrenceRule:
    """Turn `add` options into a rule. Raises click.UsageError on bad combinations."""
    dow = WEEKDAY_NAMES.index(weekday.capitalize()) if weekday else None
    try:
        match every:
            case "daily":
                return DailyRule()
            case "weekly":
                if dow is None:
                    raise click.UsageError("--day is required for weekly tasks")
                return WeeklyRule(dow)
            case "biweekly":
                if dow is None or weeks is None:
                    raise click.UsageError("--day and --weeks are required for biweekly tasks")
                return BiweeklyRule(dow, BiweeklyParity(weeks))
            case "monthly":
                if position:
                    return FirstLastDayRule(MonthPosition(position))
                if week:
                    if dow is None:
                        raise click.UsageError("--day is required with --week")
                    return WeekdayOfMonthRule(WeekOrdinal(week), dow)
                if day_of_month is None:
                    raise click.UsageError(
                        "Monthly tasks need --day-of-month, --week with --day, or --position"
                    )
                return DayOfMonthRule(day_of_month)
    except RecurrenceError as e:
        raise click.UsageError(str(e)) from e
    raise click.UsageError(f"Unknown schedule: {every}")


@main.command()
@click.argument("title")
@click.option("--every", type=click.Choice(["daily", "weekly", "biweekly", "monthly"]),
              default="daily", show_default=True, help="How often the task repeats")
@click.option("--day", "weekday", type=_weekday_type, default=None, help="Weekday for weekly/biweekly/monthly")
@click.option("--weeks", type=click.Choice([p.value for p in BiweeklyParity]), default=None,
              help="Which weeks of the month a biweekly task falls on")
@click.option("--day-of-month", type=int, default=None, help="Day 1-31 (clamped in short months)")
@click.option("--week", type=click.Choice([w.value for w in WeekOrdinal]), default=None,
              help="Week of the month, with --day")
@click.option("--position", type=click.Choice([p.value for p in MonthPosition]), default=None,
              help="First or last day of the month")
@click.option("--time", "due_time", default=None, help="Due time HH:MM (default: all day)")
def add(title, every, weekday, weeks, day_of_month, week, position, due_time):
    """Create a recurring task."""
    rule = _build_rule(every, weekday, weeks, day_of_month, week, position)
    config = load_config()
    tracker = _load_tracker(config)
    try:
        task = tracker.add_task(title, rule, due_time or "all_day")
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    except BACKEND_ERRORS as e:
        _fail(e)
    click.echo(f"✓ Added '{task.title}' ({describe(task.recurrence)})  {task.id}")


@main.command()
@click.argument("task_id")
@click.option("--date", "-d", "target_date", type=_date_type, default=None,
              help="Date to toggle (YYYY-MM-DD), defaults to today")
def toggle(task_id: str, target_date):
    """Check or uncheck a task for a day."""
    config = load_config()
    day = _resolve_day(target_date)
    tracker = _load_tracker(config)
    try:
        done = tracker.toggle(task_id, day)
    except UnknownTaskError as e:
        raise click.BadParameter(str(e), param_hint="TASK_ID") from e
    except TaskNotDueError as e:
        raise click.BadParameter(str(e), param_hint="--date") from e
    except BACKEND_ERRORS as e:
        _fail(e)
    title = tracker.task(task_id).title
    click.echo(f"{'✓' if done else '○'} {title} ({day})")


@main.command("complete-all")
@click.option("--date", "-d", "target_date", type=_date_type, default=None,
              help="Date to complete (YYYY-MM-DD), defaults to today")
def complete_all(target_date):
    """Mark every task due on a day as done."""
    config = load_config()
    day = _resolve_day(target_date)
    tracker = _load_tracker(config)
    try:
        changed = tracker.complete_all(day)
    except BACKEND_ERRORS as e:
        _fail(e)
    if not changed:
        click.echo(f"Nothing left to complete for {day}.")
        return
    for task in changed:
        click.echo(f"✓ {task.title}")


@main.command()
def streak():
    """Update and show the completion streak."""
    config = load_config()
    tracker = _load_tracker(config)
    try:
        state = check_streak(tracker, tracker.repository, _today())
    except BACKEND_ERRORS as e:
        _fail(e)
    click.echo(f"🔥 {state.streak}-day streak")


@main.command()
def quote():
    """Show the quote of the day."""
    config = load_config()
    click.echo(daily_quote(config, _today()).format())


@main.command()
@click.option("--count", "-n", default=1, show_default=True, type=click.IntRange(min=1),
              help="Number of suggestions")
def suggest(count: int):
    """Suggest task titles."""
    config = load_config()
    picker = SuggestionPicker(window_size=config.suggestion_window)
    for _ in range(count):
        click.echo(picker.next())


@main.command()
def browse():
    """Step through days interactively."""
    config = load_config()
    tracker = _load_tracker(config)
    cursor = DateCursor(_today())

    while True:
        items = tracker.agenda(cursor.viewed)
        habits, scheduled = split_agenda(items)
        ordered = habits + scheduled
        click.echo()
        _show_agenda(items, f"{cursor.label} ({cursor.viewed})")

        choice = click.prompt("\n[n]ext [p]rev [t]oday, a number to toggle, [q]uit",
                              default="q", show_default=False).strip().lower()
        if choice in ("q", "quit"):
            return
        if choice == "n":
            if not cursor.advance():
                click.echo("Can't go further ahead from here.")
        elif choice == "p":
            if not cursor.retreat():
                click.echo("Can't go back before yesterday.")
        elif choice == "t":
            cursor.jump_to_today()
        elif choice.isdigit() and 1 <= int(choice) <= len(ordered):
            try:
                tracker.toggle(ordered[int(choice) - 1].task.id, cursor.viewed)
            except BACKEND_ERRORS as e:
                _fail(e)
        else:
            click.echo(f"Unknown choice: {choice}")


if __name__ == "__main__":
    main()
