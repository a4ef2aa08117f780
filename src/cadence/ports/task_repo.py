"""Task repository interface."""

from typing import Protocol

from cadence.core.recurrence import RecurrenceRule
from cadence.core.tasks import Completion, Task


class TaskRepository(Protocol):
    """Interface for storing tasks and their completions in any backend."""

    def list_tasks(self) -> list[Task]:
        """Fetch all tasks."""
        ...

    def list_completions(self) -> list[Completion]:
        """Fetch all completion records."""
        ...

    def create_task(self, title: str, recurrence: RecurrenceRule, due_time: str | None = None) -> Task:
        """Create a task. The backend assigns id, owner and creation date."""
        ...

    def create_completion(self, task_id: str, date_string: str) -> Completion:
        """Mark a task done on a day. Returns the existing record if already done."""
        ...

    def delete_completion(self, task_id: str, date_string: str) -> None:
        """Remove the completion for (task, day), if any."""
        ...
