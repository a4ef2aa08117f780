"""Tests for the file-based adapters."""

import json
from datetime import date

import pytest

from cadence.adapters.file_rotation import FileRotationStore
from cadence.adapters.file_store import JsonFileStore, StoreError
from cadence.core.picker import QuoteRotation
from cadence.core.recurrence import DayOfMonthRule, FirstLastDayRule, MonthPosition, WeeklyRule


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(tmp_path / "data" / "tracker.json", user_id="user-1")


class TestJsonFileStore:
    def test_empty_when_missing(self, store):
        assert store.list_tasks() == []
        assert store.list_completions() == []
        assert store.get_profile() is None

    def test_creates_parent_dir(self, tmp_path):
        JsonFileStore(tmp_path / "nested" / "dir" / "tracker.json")
        assert (tmp_path / "nested" / "dir").is_dir()

    def test_create_task_persists(self, store):
        task = store.create_task("Pay rent", DayOfMonthRule(31), "all_day")

        assert task.id
        assert task.user_id == "user-1"
        assert task.created_at == date.today()
        assert store.list_tasks() == [task]

    def test_create_task_rejects_empty_title(self, store):
        with pytest.raises(ValueError):
            store.create_task("", WeeklyRule(1))
        assert store.list_tasks() == []

    def test_create_completion_is_idempotent(self, store):
        first = store.create_completion("t1", "2024-01-15")
        second = store.create_completion("t1", "2024-01-15")

        assert first == second
        assert len(store.list_completions()) == 1

    def test_delete_completion(self, store):
        store.create_completion("t1", "2024-01-15")
        store.create_completion("t1", "2024-01-16")
        store.delete_completion("t1", "2024-01-15")

        assert [c.completion_date for c in store.list_completions()] == ["2024-01-16"]

    def test_delete_missing_completion_is_noop(self, store):
        store.delete_completion("t1", "2024-01-15")
        assert store.list_completions() == []

    def test_update_profile_creates_and_updates(self, store):
        profile = store.update_profile(streak=2, last_streak_check=date(2024, 1, 15))

        assert profile.id == "user-1"
        assert store.get_profile().streak == 2
        assert store.get_profile().last_streak_check == date(2024, 1, 15)

    def test_update_profile_unknown_field(self, store):
        with pytest.raises(StoreError, match="Unknown profile field"):
            store.update_profile(is_premium=True)

    def test_corrupt_file(self, store):
        store.path.write_text("{not json")
        with pytest.raises(StoreError, match="Corrupt data file"):
            store.list_tasks()

    def test_non_object_document(self, store):
        store.path.write_text("[1, 2, 3]")
        with pytest.raises(StoreError, match="expected an object"):
            store.list_tasks()

    def test_unknown_recurrence_type(self, store):
        store.path.write_text(
            json.dumps(
                {"tasks": [{"id": "1", "title": "Renew passport", "recurrence": {"type": "yearly"}, "created_at": "2024-01-01"}]}
            )
        )
        with pytest.raises(StoreError, match="Corrupt task record"):
            store.list_tasks()

    def test_completion_missing_fields(self, store):
        store.path.write_text(json.dumps({"completions": [{"id": "c1"}]}))
        with pytest.raises(StoreError, match="Corrupt completion record"):
            store.list_completions()

    def test_reads_legacy_monthly_rows(self, store):
        store.path.write_text(
            json.dumps(
                {
                    "tasks": [
                        {
                            "id": "1",
                            "title": "Month end",
                            "recurrence": {"type": "monthly", "dayOfMonth": 31, "isLastDayOfMonth": True},
                            "created_at": "2023-05-01",
                        }
                    ]
                }
            )
        )
        assert store.list_tasks()[0].recurrence == FirstLastDayRule(MonthPosition.LAST)


class TestFileRotationStore:
    def test_fresh_state_when_missing(self, tmp_path):
        rotation = FileRotationStore(tmp_path / "quote.json", window_size=10).load()
        assert rotation == QuoteRotation(window_size=10)

    def test_save_and_load(self, tmp_path):
        store = FileRotationStore(tmp_path / "state" / "quote.json")
        rotation = QuoteRotation(current_id=4, last_date=date(2024, 1, 1), recent_ids=[2, 4])
        store.save(rotation)
        assert store.load() == rotation

    def test_unreadable_state_resets(self, tmp_path):
        path = tmp_path / "quote.json"
        path.write_text("garbage")
        assert FileRotationStore(path).load() == QuoteRotation()
