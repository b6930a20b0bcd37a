"""Unit tests for the task model."""

from datetime import date

import pytest

from tasksync.models import (
    ImportResult,
    ItemOutcome,
    Persisted,
    PersistOutcome,
    ReorderResult,
    Task,
    is_remote_id,
    new_local_id,
)
from tasksync.remote import RemoteError


class TestRemoteIds:
    """Tests for telling remote ids from local ones."""

    @pytest.mark.parametrize("task_id", ["1", "42", "007", " 12 ", "3.5", "-4", 17])
    def test_numeric_ids_are_remote(self, task_id):
        """Anything that parses as a finite number is remote-backed."""
        assert is_remote_id(task_id) is True

    @pytest.mark.parametrize("task_id", ["abc123x", "", None, "inf", "nan", "12abc", True])
    def test_other_ids_are_local(self, task_id):
        """Opaque strings, infinities and NaN are not remote-backed."""
        assert is_remote_id(task_id) is False

    def test_new_local_id_is_never_numeric(self):
        """Generated local ids never look like remote ids."""
        ids = {new_local_id() for _ in range(200)}
        assert all(not is_remote_id(task_id) for task_id in ids)
        assert all(len(task_id) == 7 for task_id in ids)

    def test_task_is_remote_backed(self):
        """is_remote_backed follows the id."""
        assert Task(id="5", title="A").is_remote_backed
        assert not Task(id="k3j9x0a", title="A").is_remote_backed


class TestTaskDefaults:
    """Tests for Task field defaults."""

    def test_defaults(self):
        """Optional fields default sensibly."""
        task = Task(id="x", title="A")
        assert task.description == ""
        assert task.due_date is None
        assert task.priority == "medium"
        assert task.tags == []
        assert task.completed is False
        assert task.created_at
        assert task.order_index is None

    def test_due_date_parsed_from_string(self):
        """ISO date strings are parsed into dates."""
        task = Task(id="x", title="A", due_date="2025-03-01")
        assert task.due_date == date(2025, 3, 1)


class TestTaskRecords:
    """Tests for Task.to_record / Task.from_record."""

    def test_to_record_uses_camel_case(self):
        """Records use the camelCase storage names."""
        task = Task(
            id="7",
            title="Write report",
            due_date=date(2025, 1, 31),
            priority="high",
            tags=["work"],
            created_at="2025-01-01T10:00:00.000Z",
            order_index=3,
        )
        record = task.to_record()
        assert record == {
            "id": "7",
            "title": "Write report",
            "description": "",
            "dueDate": "2025-01-31",
            "priority": "high",
            "tags": ["work"],
            "completed": False,
            "createdAt": "2025-01-01T10:00:00.000Z",
            "orderIndex": 3,
        }

    def test_from_record_fills_missing_fields(self):
        """Old records without id, createdAt or tags get defaults."""
        task = Task.from_record({"title": "Old task"})
        assert task.id
        assert not is_remote_id(task.id)
        assert task.created_at
        assert task.tags == []

    def test_from_record_keeps_existing_values(self):
        """Present fields are kept as they are."""
        task = Task.from_record(
            {
                "id": "12",
                "title": "Kept",
                "createdAt": "2024-05-05T00:00:00Z",
                "tags": ["a", "a"],
                "completed": True,
                "orderIndex": 9,
            },
            position=2,
        )
        assert task.id == "12"
        assert task.created_at == "2024-05-05T00:00:00Z"
        assert task.tags == ["a", "a"]
        assert task.completed is True
        assert task.order_index == 9

    def test_from_record_order_index_defaults_to_position(self):
        """A record without orderIndex takes its position."""
        task = Task.from_record({"id": "a1b2c3d", "title": "T"}, position=4)
        assert task.order_index == 4

    def test_from_record_splits_tag_string(self):
        """A comma separated tag string is split and trimmed."""
        task = Task.from_record({"title": "T", "tags": "x, y,, "})
        assert task.tags == ["x", "y"]

    def test_from_record_bad_due_date_is_dropped(self):
        """A malformed due date reads as no due date."""
        task = Task.from_record({"title": "T", "dueDate": "next tuesday"})
        assert task.due_date is None

    def test_from_record_keeps_unknown_priority(self):
        """Unknown priorities survive so they can sort last."""
        task = Task.from_record({"title": "T", "priority": "Urgent"})
        assert task.priority == "urgent"

    def test_record_round_trip(self):
        """to_record followed by from_record gives the same task."""
        task = Task(id="9", title="T", due_date="2025-02-02", tags=["q"], order_index=1)
        assert Task.from_record(task.to_record()) == task


class TestTaskOverdue:
    """Tests for Task.is_overdue."""

    def test_past_due_open_task_is_overdue(self):
        """An open task past its due date is overdue."""
        task = Task(id="x", title="A", due_date="2025-01-01")
        assert task.is_overdue(today=date(2025, 1, 2)) is True

    def test_due_today_is_not_overdue(self):
        """A task due today is not overdue yet."""
        task = Task(id="x", title="A", due_date="2025-01-02")
        assert task.is_overdue(today=date(2025, 1, 2)) is False

    def test_completed_task_is_never_overdue(self):
        """Completed tasks are never overdue."""
        task = Task(id="x", title="A", due_date="2025-01-01", completed=True)
        assert task.is_overdue(today=date(2025, 6, 1)) is False

    def test_no_due_date_is_never_overdue(self):
        """Tasks without a due date are never overdue."""
        assert Task(id="x", title="A").is_overdue(today=date(2025, 6, 1)) is False


class TestOutcomeModels:
    """Tests for the result models."""

    def test_persisted_remote(self):
        """Persisted.remote marks the remote outcome."""
        result = Persisted.remote(Task(id="1", title="A"))
        assert result.outcome is PersistOutcome.REMOTE
        assert result.is_remote
        assert result.error is None

    def test_persisted_local_only_keeps_error(self):
        """Persisted.local_only carries the remote error when there was one."""
        err = RemoteError(0, "down")
        result = Persisted.local_only(Task(id="abcdefg", title="A"), err)
        assert result.outcome is PersistOutcome.LOCAL_ONLY
        assert not result.is_remote
        assert result.error is err

    def test_import_result_counts(self):
        """ImportResult counts remote and local-only items."""
        result = ImportResult(
            items=[
                Persisted.remote(Task(id="1", title="A")),
                Persisted.local_only(Task(id="abcdefg", title="B")),
            ]
        )
        assert result.remote_count == 1
        assert result.local_count == 1
        assert [t.title for t in result.tasks] == ["A", "B"]

    def test_reorder_result_failed(self):
        """ReorderResult.failed lists only the failed outcomes."""
        result = ReorderResult(
            moved=True,
            outcomes=[ItemOutcome("1"), ItemOutcome("2", RemoteError(500, "boom"))],
        )
        assert [o.task_id for o in result.failed] == ["2"]
