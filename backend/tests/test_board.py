"""Tests for the task page view state, driven through the real API."""

import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pydantic
import pytest

from taskboard.client import TaskClient
from taskboard.db.models import Priority
from taskboard.schemas.tasks import TaskOut
from taskboard.ui import (
    Editing,
    TaskBoard,
    Viewing,
    format_created,
    priority_color,
    priority_label,
    priority_option_label,
    ui_text,
)
from taskboard.ui.labels import TEXT


@pytest.fixture
def board(task_client: TaskClient) -> TaskBoard:
    board = TaskBoard(task_client)
    board.refresh()
    return board


def titles(board: TaskBoard) -> list:
    return [t.title for t in board.tasks.data]


def test_starts_loaded_and_empty(board: TaskBoard) -> None:
    assert board.tasks.data == []
    assert board.tasks.error is None
    assert board.editing is None


def test_submit_new_trims_clears_form_and_refetches(board: TaskBoard) -> None:
    board.form.title = "  Buy milk  "
    board.form.description = "   "
    board.form.priority = Priority.HIGH

    assert board.submit_new() is True

    assert (board.form.title, board.form.description, board.form.priority) == ("", "", Priority.MEDIUM)
    [task] = board.tasks.data
    assert task.title == "Buy milk"
    assert task.description is None
    assert task.priority == Priority.HIGH


def test_submit_new_blank_title_is_noop(board: TaskBoard) -> None:
    board.form.title = "   "
    assert board.submit_new() is False
    assert board.create_mutation.data is None
    assert board.tasks.data == []


def test_failed_create_keeps_form_and_only_logs(board: TaskBoard, caplog) -> None:
    board.form.title = "x" * 101
    board.form.description = "kept"

    with caplog.at_level(logging.ERROR, logger="taskboard.ui.board"):
        assert board.submit_new() is False

    assert board.form.title == "x" * 101
    assert board.form.description == "kept"
    assert board.tasks.data == []
    assert "Failed to create task" in caplog.text


def test_edit_save_cycle(board: TaskBoard) -> None:
    board.form.title = "Draft"
    board.submit_new()
    task = board.tasks.data[0]
    assert isinstance(board.row_state(task), Viewing)

    board.start_edit(task)
    state = board.row_state(task)
    assert isinstance(state, Editing)
    state.draft.title = "Final"
    state.draft.description = "with notes"
    state.draft.priority = Priority.LOW

    assert board.save_edit() is True
    assert board.editing is None
    [saved] = board.tasks.data
    assert (saved.title, saved.description, saved.priority) == ("Final", "with notes", Priority.LOW)


def test_only_one_row_in_edit_mode(board: TaskBoard) -> None:
    for title in ("First", "Second"):
        board.form.title = title
        board.submit_new()
    second, first = board.tasks.data

    board.start_edit(first)
    board.start_edit(second)

    assert isinstance(board.row_state(second), Editing)
    assert isinstance(board.row_state(first), Viewing)


def test_cancel_edit_discards_draft(board: TaskBoard) -> None:
    board.form.title = "Keep me"
    board.submit_new()
    task = board.tasks.data[0]

    board.start_edit(task)
    board.editing.draft.title = "Changed but cancelled"
    board.cancel_edit()

    assert board.editing is None
    board.refresh()
    assert titles(board) == ["Keep me"]


def test_failed_save_stays_in_edit_mode(board: TaskBoard, task_client: TaskClient, caplog) -> None:
    board.form.title = "Vanishing"
    board.submit_new()
    task = board.tasks.data[0]
    board.start_edit(task)
    task_client.delete_task(task.id)

    assert board.save_edit() is False
    assert isinstance(board.editing, Editing)
    assert f"Failed to update task {task.id}" in caplog.text


def test_toggle_and_delete_refetch(board: TaskBoard) -> None:
    board.form.title = "Buy milk"
    board.form.priority = Priority.HIGH
    board.submit_new()
    task = board.tasks.data[0]

    assert board.toggle(task.id) is True
    assert board.tasks.data[0].completed is True
    assert board.toggle_mutation.is_loading is False

    assert board.delete(task.id) is True
    assert board.tasks.data == []


def test_failed_toggle_leaves_list_unchanged(board: TaskBoard, caplog) -> None:
    assert board.toggle(31337) is False
    assert board.tasks.data == []
    assert "Failed to toggle task 31337" in caplog.text


def test_priority_labels() -> None:
    assert [priority_label(p) for p in ("HIGH", "MEDIUM", "LOW")] == ["高", "中", "低"]
    assert priority_label(Priority.HIGH, "en") == "High"
    assert priority_label("UNKNOWN") == "中"
    assert priority_option_label(Priority.LOW) == "低優先度"
    assert priority_color(Priority.HIGH) == "red"
    assert priority_color("UNKNOWN") == priority_color(Priority.MEDIUM)


def test_ui_text_falls_back_to_default_locale() -> None:
    assert ui_text("create") == "タスク作成"
    assert ui_text("create", "en") == "Create task"
    assert ui_text("create", "fr") == ui_text("create")


def test_every_locale_has_the_same_keys() -> None:
    assert ui_text("priority") == "優先度"
    assert ui_text("priority", "en") == "Priority"
    assert TEXT["ja"].keys() == TEXT["en"].keys()


def test_format_created() -> None:
    dt = datetime(2024, 1, 5, 12, 0, tzinfo=timezone.utc)
    assert format_created(dt) == "2024/1/5"
    assert format_created(dt, "en") == "1/5/2024"


def test_format_created_uses_viewer_timezone() -> None:
    late_utc = datetime(2024, 1, 5, 23, 30, tzinfo=timezone.utc)
    assert format_created(late_utc, "ja", "Asia/Tokyo") == "2024/1/6"
    assert format_created(late_utc, "en", ZoneInfo("America/New_York")) == "1/5/2024"
    assert format_created(late_utc, "ja") == "2024/1/5"


def test_format_created_treats_naive_as_utc() -> None:
    naive = datetime(2024, 1, 5, 23, 30)
    assert format_created(naive, "ja", "Asia/Tokyo") == "2024/1/6"


def test_unexpected_payload_is_only_logged(board: TaskBoard, task_client: TaskClient, caplog) -> None:
    board.form.title = "Odd response"
    board.submit_new()
    task = board.tasks.data[0]

    def malformed(task_id):
        return TaskOut.model_validate({"id": task_id})

    board.toggle_mutation.fn = malformed
    board.tasks.fn = lambda: [TaskOut.model_validate({"title": "no id"})]

    assert board.toggle(task.id) is False
    assert isinstance(board.toggle_mutation.error, pydantic.ValidationError)
    assert f"Failed to toggle task {task.id}" in caplog.text

    board.refresh()
    assert [t.id for t in board.tasks.data] == [task.id]
    assert isinstance(board.tasks.error, pydantic.ValidationError)
