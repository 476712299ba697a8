"""Domain layer tests for Task entity.

Tests the core domain logic including:
- Task creation and validation
- Task state updates (details, priority, due date, status)
- Completion and its timestamps
- Domain events generation
"""

from datetime import datetime, timedelta, timezone

import pytest

from domain.entities import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH, Task
from domain.enums import TaskPriority, TaskStatus
from domain.events.task import (
    TaskCompletedDomainEvent,
    TaskCreatedDomainEvent,
    TaskDetailsUpdatedDomainEvent,
    TaskDueDateUpdatedDomainEvent,
    TaskPriorityUpdatedDomainEvent,
    TaskStatusUpdatedDomainEvent,
)
from domain.exceptions import DomainValidationError
from tests.fixtures.factories import TaskFactory


def in_days(days: int) -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=days)


class TestTaskCreation:
    """Test Task entity creation."""

    def test_create_task_with_defaults(self) -> None:
        """Test creating a task with only a title."""
        task: Task = Task.create(title="Test Task")

        assert task.state.title == "Test Task"
        assert task.state.description == ""
        assert task.state.status == TaskStatus.TODO
        assert task.state.priority == TaskPriority.MEDIUM
        assert task.state.due_date is None
        assert task.state.completed_at is None
        assert task.state.created_at == task.state.updated_at
        assert not task.is_completed
        assert task.id() == task.state.id != ""

    def test_create_task_with_all_parameters(self) -> None:
        """Test creating a task with all parameters specified."""
        due_date = in_days(7)
        task: Task = Task.create(title="Write spec", description="First draft", priority=TaskPriority.HIGH, due_date=due_date)

        assert task.state.title == "Write spec"
        assert task.state.description == "First draft"
        assert task.state.priority == TaskPriority.HIGH
        assert task.state.due_date == due_date
        assert task.state.status == TaskStatus.TODO

    def test_create_task_generates_domain_event(self) -> None:
        """Test that task creation generates TaskCreatedDomainEvent."""
        task: Task = Task.create(title="Test")

        events = task.domain_events
        assert len(events) == 1
        assert isinstance(events[0], TaskCreatedDomainEvent)
        assert events[0].title == "Test"
        assert events[0].aggregate_id == task.id()

    def test_task_id_is_unique(self) -> None:
        """Test that each task gets a unique ID."""
        ids = {Task.create(title=f"Task {i}").id() for i in range(50)}

        assert len(ids) == 50

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_create_task_rejects_blank_title(self, title: str) -> None:
        with pytest.raises(DomainValidationError) as exc_info:
            Task.create(title=title)

        assert exc_info.value.field == "title"
        assert "title" in exc_info.value.message

    def test_create_task_rejects_none_title(self) -> None:
        with pytest.raises(DomainValidationError):
            Task.create(title=None)  # type: ignore[arg-type]

    def test_title_length_limit(self) -> None:
        assert Task.create(title="x" * MAX_TITLE_LENGTH).state.title == "x" * MAX_TITLE_LENGTH

        with pytest.raises(DomainValidationError) as exc_info:
            Task.create(title="x" * (MAX_TITLE_LENGTH + 1))
        assert exc_info.value.field == "title"

    def test_description_length_limit(self) -> None:
        with pytest.raises(DomainValidationError) as exc_info:
            Task.create(title="Test", description="x" * (MAX_DESCRIPTION_LENGTH + 1))

        assert exc_info.value.field == "description"

    @pytest.mark.parametrize("due_date", [datetime.now(timezone.utc) - timedelta(days=1), datetime.now(timezone.utc) - timedelta(seconds=1)])
    def test_create_task_rejects_past_due_date(self, due_date: datetime) -> None:
        with pytest.raises(DomainValidationError) as exc_info:
            Task.create(title="Test", due_date=due_date)

        assert exc_info.value.field == "dueDate"

    def test_naive_due_date_is_taken_as_utc(self) -> None:
        naive = (datetime.now(timezone.utc) + timedelta(days=2)).replace(tzinfo=None)

        task = Task.create(title="Test", due_date=naive)

        assert task.state.due_date == naive.replace(tzinfo=timezone.utc)


class TestTaskDetailsUpdate:
    """Test title and description updates."""

    def test_update_details(self) -> None:
        task: Task = TaskFactory.create(title="Old Title", description="Old description")
        previous_updated_at = task.state.updated_at

        task.update_details("New Title", "New description")

        assert task.state.title == "New Title"
        assert task.state.description == "New description"
        assert task.state.updated_at >= previous_updated_at
        assert isinstance(task.domain_events[-1], TaskDetailsUpdatedDomainEvent)

    def test_update_details_with_none_description_clears_it(self) -> None:
        task: Task = TaskFactory.create()

        task.update_details("Title", None)

        assert task.state.description == ""

    def test_update_details_rejects_blank_title(self) -> None:
        task: Task = TaskFactory.create(title="Keep me")
        event_count = len(task.domain_events)

        with pytest.raises(DomainValidationError):
            task.update_details("  ", "whatever")

        assert task.state.title == "Keep me"
        assert len(task.domain_events) == event_count


class TestTaskPriorityUpdate:
    """Test priority updates."""

    def test_update_priority(self) -> None:
        task: Task = TaskFactory.create(priority=TaskPriority.LOW)

        task.update_priority(TaskPriority.CRITICAL)

        assert task.state.priority == TaskPriority.CRITICAL
        assert isinstance(task.domain_events[-1], TaskPriorityUpdatedDomainEvent)

    def test_update_priority_rejects_none(self) -> None:
        task: Task = TaskFactory.create(priority=TaskPriority.LOW)

        with pytest.raises(DomainValidationError) as exc_info:
            task.update_priority(None)

        assert exc_info.value.field == "priority"
        assert task.state.priority == TaskPriority.LOW


class TestTaskDueDateUpdate:
    """Test due date updates."""

    def test_update_due_date(self) -> None:
        task: Task = TaskFactory.create()
        due_date = in_days(3)

        task.update_due_date(due_date)

        assert task.state.due_date == due_date
        assert isinstance(task.domain_events[-1], TaskDueDateUpdatedDomainEvent)

    def test_update_due_date_with_none_clears_it(self) -> None:
        task: Task = TaskFactory.create_due_in(5)

        task.update_due_date(None)

        assert task.state.due_date is None

    def test_update_due_date_rejects_past(self) -> None:
        task: Task = TaskFactory.create_due_in(5)
        original = task.state.due_date

        with pytest.raises(DomainValidationError):
            task.update_due_date(in_days(-1))

        assert task.state.due_date == original


class TestTaskStatusUpdate:
    """Test status changes and completion."""

    def test_update_status(self) -> None:
        task: Task = TaskFactory.create()

        task.update_status(TaskStatus.IN_PROGRESS)

        assert task.state.status == TaskStatus.IN_PROGRESS
        assert task.state.completed_at is None
        assert isinstance(task.domain_events[-1], TaskStatusUpdatedDomainEvent)

    def test_moving_to_done_sets_completed_at(self) -> None:
        task: Task = TaskFactory.create()

        task.update_status(TaskStatus.DONE)

        assert task.is_completed
        assert task.state.completed_at is not None

    def test_leaving_done_clears_completed_at(self) -> None:
        task: Task = TaskFactory.create_done()

        task.update_status(TaskStatus.TODO)

        assert not task.is_completed
        assert task.state.completed_at is None

    def test_any_transition_is_allowed(self) -> None:
        task: Task = TaskFactory.create_cancelled()

        task.update_status(TaskStatus.IN_PROGRESS)

        assert task.state.status == TaskStatus.IN_PROGRESS

    def test_mark_completed(self) -> None:
        task: Task = TaskFactory.create_in_progress()

        task.mark_completed()

        assert task.state.status == TaskStatus.DONE
        assert task.is_completed
        assert task.state.completed_at == task.state.updated_at
        assert isinstance(task.domain_events[-1], TaskCompletedDomainEvent)

    def test_mark_completed_twice_refreshes_timestamps(self) -> None:
        task: Task = TaskFactory.create()
        task.mark_completed()
        first_completed_at = task.state.completed_at

        task.mark_completed()

        assert task.state.status == TaskStatus.DONE
        assert task.state.completed_at is not None and first_completed_at is not None
        assert task.state.completed_at >= first_completed_at
        assert task.state.updated_at == task.state.completed_at

    def test_updated_at_never_precedes_created_at(self) -> None:
        task: Task = TaskFactory.create(created_at=in_days(1))

        task.update_priority(TaskPriority.HIGH)

        assert task.state.updated_at >= task.state.created_at
