"""File-based task storage adapter."""

import json
import logging
import uuid
from datetime import date
from pathlib import Path

from cadence.core.recurrence import RecurrenceRule, rule_to_dict
from cadence.core.tasks import ROW_ERRORS, Completion, Profile, Task

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the data file can't be read."""

    pass


class JsonFileStore:
    """
    File-based tracker storage.

    Implements TaskRepository and ProfileRepository. Everything lives in one
    JSON document: {"tasks": [...], "completions": [...], "profile": {...}}.
    """

    def __init__(self, path: Path | str, user_id: str = ""):
        self.path = Path(path).expanduser()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.user_id = user_id

    def _load(self) -> dict:
        if not self.path.exists():
            return {"tasks": [], "completions": [], "profile": None}
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise StoreError(f"Corrupt data file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Corrupt data file {self.path}: expected an object, got {type(data).__name__}")
        data.setdefault("tasks", [])
        data.setdefault("completions", [])
        data.setdefault("profile", None)
        return data

    def _save(self, data: dict) -> None:
        tmp = self.path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, indent=2))
        tmp.replace(self.path)

    def _parse(self, parse, rows: list, kind: str) -> list:
        try:
            return [parse(row) for row in rows]
        except ROW_ERRORS as e:
            raise StoreError(f"Corrupt {kind} record in {self.path}: {e!r}") from e

    def list_tasks(self) -> list[Task]:
        return self._parse(Task.from_api, self._load()["tasks"], "task")

    def list_completions(self) -> list[Completion]:
        return self._parse(Completion.from_api, self._load()["completions"], "completion")

    def create_task(self, title: str, recurrence: RecurrenceRule, due_time: str | None = None) -> Task:
        task = Task(
            id=str(uuid.uuid4()),
            title=title,
            recurrence=recurrence,
            created_at=date.today(),
            due_time=due_time,
            user_id=self.user_id,
        )
        data = self._load()
        data["tasks"].append(task.to_api())
        self._save(data)
        logger.debug(f"Created task {task.id} ({rule_to_dict(recurrence)['type']})")
        return task

    def create_completion(self, task_id: str, date_string: str) -> Completion:
        data = self._load()
        for row in data["completions"]:
            if row["task_id"] == task_id and row["completion_date"] == date_string:
                return Completion.from_api(row)

        completion = Completion(
            task_id=task_id,
            completion_date=date_string,
            id=str(uuid.uuid4()),
            user_id=self.user_id,
        )
        data["completions"].append(completion.to_api())
        self._save(data)
        return completion

    def delete_completion(self, task_id: str, date_string: str) -> None:
        data = self._load()
        data["completions"] = [
            row
            for row in data["completions"]
            if not (row["task_id"] == task_id and row["completion_date"] == date_string)
        ]
        self._save(data)

    def get_profile(self) -> Profile | None:
        row = self._load()["profile"]
        if not row:
            return None
        return self._parse(Profile.from_api, [row], "profile")[0]

    def update_profile(self, **changes) -> Profile:
        data = self._load()
        profile = Profile.from_api(data["profile"] or {"id": self.user_id})
        for key, value in changes.items():
            if not hasattr(profile, key):
                raise StoreError(f"Unknown profile field: {key}")
            setattr(profile, key, value)
        data["profile"] = profile.to_api()
        self._save(data)
        return profile
