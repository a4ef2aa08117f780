"""Shared workflow layer between the CLI and the repositories.

Tracker holds the loaded tasks and completions for a session and keeps them
in step with the repository on every write. Everything it computes comes
from the pure core.
"""

import logging
import random
from datetime import date, timedelta

from .adapters.file_rotation import FileRotationStore
from .adapters.file_store import JsonFileStore
from .adapters.supabase_api import SupabaseAdapter
from .config import Config
from .core.agenda import AgendaItem, agenda_for, find_completion, pending_task_ids
from .core.recurrence import RecurrenceRule
from .core.streak import StreakState, update_streak
from .core.suggestions import Quote
from .core.tasks import Completion, Task
from .ports import ProfileRepository, TaskRepository

logger = logging.getLogger(__name__)


class UnknownTaskError(LookupError):
    """Raised when a task id doesn't match any loaded task."""

    pass


class TaskNotDueError(ValueError):
    """Raised when checking off a task on a day it isn't due."""

    pass


def get_repository(config: Config) -> JsonFileStore | SupabaseAdapter:
    """Resolve the configured backend."""
    if config.backend == "supabase":
        return SupabaseAdapter(config)
    return JsonFileStore(config.data_path, user_id=config.user_id)


class Tracker:
    """Session state: tasks and completions loaded from one repository."""

    def __init__(self, repository: TaskRepository):
        self.repository = repository
        self.tasks: list[Task] = []
        self.completions: list[Completion] = []

    def load(self) -> "Tracker":
        self.tasks = self.repository.list_tasks()
        self.completions = self.repository.list_completions()
        logger.debug(f"Loaded {len(self.tasks)} tasks, {len(self.completions)} completions")
        return self

    def task(self, task_id: str) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise UnknownTaskError(f"No task with id {task_id!r}")

    def agenda(self, day: date) -> list[AgendaItem]:
        return agenda_for(self.tasks, self.completions, day)

    def add_task(self, title: str, recurrence: RecurrenceRule, due_time: str | None = None) -> Task:
        task = self.repository.create_task(title, recurrence, due_time)
        self.tasks.append(task)
        return task

    def toggle(self, task_id: str, day: date) -> bool:
        """
        Check or uncheck a task for a day. Returns the new completion state.

        Unchecking always works; checking off requires the task to be due.
        """
        task = self.task(task_id)
        date_string = day.isoformat()
        existing = find_completion(self.completions, task_id, day)

        if existing:
            self.repository.delete_completion(task_id, date_string)
            self.completions = [c for c in self.completions if c is not existing]
            return False

        if not task.is_due(day):
            raise TaskNotDueError(f"'{task.title}' isn't due on {day}")
        completion = self.repository.create_completion(task_id, date_string)
        self.completions.append(completion)
        return True

    def complete_all(self, day: date) -> list[Task]:
        """Mark every task due on the day as done. Returns the tasks that changed."""
        changed = []
        for task_id in pending_task_ids(self.tasks, self.completions, day):
            self.completions.append(self.repository.create_completion(task_id, day.isoformat()))
            changed.append(self.task(task_id))
        return changed


def check_streak(tracker: Tracker, profile_repo: ProfileRepository, today: date) -> StreakState:
    """
    Run the once-a-day streak evaluation and persist any change.

    Needs both task data and the profile, so call it after tracker.load().
    """
    profile = profile_repo.get_profile()
    state = StreakState(
        streak=profile.streak if profile else 0,
        last_check=profile.last_streak_check if profile else None,
    )
    yesterday = tracker.agenda(today - timedelta(days=1))
    new_state = update_streak(state, yesterday, today)

    if new_state != state:
        logger.info(f"Streak {state.streak} -> {new_state.streak} (checked {new_state.last_check})")
        profile_repo.update_profile(streak=new_state.streak, last_streak_check=new_state.last_check)
    return new_state


def daily_quote(config: Config, today: date, rng: random.Random | None = None) -> Quote:
    """Quote of the day, stable for the whole calendar day."""
    store = FileRotationStore(config.quote_state_path, window_size=config.quote_window)
    rotation = store.load()
    before = rotation.to_dict()
    quote = rotation.quote_for(today, rng=rng)
    if rotation.to_dict() != before:
        store.save(rotation)
    return quote
