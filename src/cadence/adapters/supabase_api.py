"""Supabase REST adapter - HTTP client for the hosted tracker backend."""

import logging
from datetime import date

import requests

from cadence.config import Config, load_config
from cadence.core.recurrence import RecurrenceRule, rule_to_dict
from cadence.core.tasks import ROW_ERRORS, Completion, Profile, Task, validate_task_fields

logger = logging.getLogger(__name__)

TASKS_TABLE = "tasks"
COMPLETIONS_TABLE = "task_completions"
PROFILES_TABLE = "profiles"


class AuthenticationError(Exception):
    """Raised when the backend rejects or lacks credentials."""

    pass


class BackendError(Exception):
    """Raised when the backend returns an unexpected response."""

    pass


class SupabaseAdapter:
    """
    Supabase (PostgREST) adapter.

    Implements TaskRepository and ProfileRepository. Handles headers,
    status codes and row mapping. No business logic - just I/O.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        if not self.config.supabase_url or not self.config.supabase_key:
            raise AuthenticationError("Missing SUPABASE_URL or SUPABASE_KEY. Add them to config/cadence.conf")
        if not self.config.supabase_access_token or not self.config.user_id:
            raise AuthenticationError("Missing SUPABASE_ACCESS_TOKEN or USER_ID. Add them to config/cadence.conf")
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "apikey": self.config.supabase_key,
                "Authorization": f"Bearer {self.config.supabase_access_token}",
                "Content-Type": "application/json",
            }
        )

    @property
    def user_id(self) -> str:
        return self.config.user_id

    def _url(self, table: str) -> str:
        return f"{self.config.supabase_url}/rest/v1/{table}"

    def _check(self, resp: requests.Response, action: str) -> None:
        if resp.status_code in (401, 403):
            raise AuthenticationError(f"{action} rejected ({resp.status_code}): {resp.text}")
        if resp.status_code >= 400:
            logger.error(f"{action} failed ({resp.status_code}): {resp.text}")
            raise BackendError(f"{action} failed ({resp.status_code}): {resp.text}")

    def _select(self, table: str, params: dict) -> list[dict]:
        logger.debug(f"GET {table} {params}")
        resp = self._session.get(self._url(table), params={"select": "*", **params})
        self._check(resp, f"Fetching {table}")
        return resp.json()

    def _insert(self, table: str, row: dict) -> requests.Response:
        logger.debug(f"POST {table}")
        return self._session.post(
            self._url(table),
            json=row,
            headers={"Prefer": "return=representation"},
        )

    def _parse(self, parse, rows: list, table: str) -> list:
        try:
            return [parse(row) for row in rows]
        except ROW_ERRORS as e:
            logger.error(f"Malformed row in {table}: {e!r}")
            raise BackendError(f"Malformed row in {table}: {e!r}") from e

    def list_tasks(self) -> list[Task]:
        rows = self._select(TASKS_TABLE, {"user_id": f"eq.{self.user_id}", "order": "created_at.asc"})
        return self._parse(Task.from_api, rows, TASKS_TABLE)

    def list_completions(self) -> list[Completion]:
        rows = self._select(COMPLETIONS_TABLE, {"user_id": f"eq.{self.user_id}"})
        return self._parse(Completion.from_api, rows, COMPLETIONS_TABLE)

    def create_task(self, title: str, recurrence: RecurrenceRule, due_time: str | None = None) -> Task:
        validate_task_fields(title, due_time)
        resp = self._insert(
            TASKS_TABLE,
            {
                "user_id": self.user_id,
                "title": title,
                "recurrence": rule_to_dict(recurrence),
                "due_time": due_time,
                "created_at": date.today().isoformat(),
            },
        )
        self._check(resp, "Creating task")
        return Task.from_api(resp.json()[0])

    def create_completion(self, task_id: str, date_string: str) -> Completion:
        resp = self._insert(
            COMPLETIONS_TABLE,
            {"user_id": self.user_id, "task_id": task_id, "completion_date": date_string},
        )
        if resp.status_code == 409:
            # Unique (task_id, completion_date): someone already checked it off
            logger.debug(f"Completion for {task_id} on {date_string} already exists")
            rows = self._select(
                COMPLETIONS_TABLE,
                {"task_id": f"eq.{task_id}", "completion_date": f"eq.{date_string}"},
            )
            if rows:
                return Completion.from_api(rows[0])
        self._check(resp, "Creating completion")
        return Completion.from_api(resp.json()[0])

    def delete_completion(self, task_id: str, date_string: str) -> None:
        resp = self._session.delete(
            self._url(COMPLETIONS_TABLE),
            params={"task_id": f"eq.{task_id}", "completion_date": f"eq.{date_string}"},
        )
        self._check(resp, "Deleting completion")

    def get_profile(self) -> Profile | None:
        rows = self._select(PROFILES_TABLE, {"id": f"eq.{self.user_id}"})
        return self._parse(Profile.from_api, rows[:1], PROFILES_TABLE)[0] if rows else None

    def update_profile(self, **changes) -> Profile:
        payload = {k: v.isoformat() if isinstance(v, date) else v for k, v in changes.items()}
        resp = self._session.patch(
            self._url(PROFILES_TABLE),
            params={"id": f"eq.{self.user_id}"},
            json=payload,
            headers={"Prefer": "return=representation"},
        )
        self._check(resp, "Updating profile")
        rows = resp.json()
        if not rows:
            raise BackendError(f"Profile {self.user_id} not found")
        return Profile.from_api(rows[0])
