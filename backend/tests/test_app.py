"""Tests for the Streamlit page, run headless against the test API."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from taskboard.client import TaskClient
from taskboard.ui import TaskBoard

APP = Path(__file__).resolve().parents[2] / "frontend" / "streamlit_app" / "app.py"


@pytest.fixture
def page(task_client: TaskClient):
    board = TaskBoard(task_client)
    board.refresh()
    at = AppTest.from_file(str(APP), default_timeout=30)
    at.session_state["board"] = board
    at.run()
    return at, board


def button(at: AppTest, label: str):
    return next(b for b in at.button if b.label == label)


def test_create_is_queued_then_run_and_form_cleared(page) -> None:
    at, board = page
    assert not at.exception

    at.text_input(key="new_title").input("Buy milk")
    button(at, "タスク作成").click()
    at.run()

    assert not at.exception
    assert [t.title for t in board.tasks.data] == ["Buy milk"]
    assert at.session_state["new_title"] == ""
    assert "pending" not in at.session_state
    assert not button(at, "タスク作成").disabled


def test_toggle_and_delete_from_row_buttons(page, task_client: TaskClient) -> None:
    at, board = page
    task = task_client.create_task("Row task")
    button(at, "再読み込み").click()
    at.run()

    at.button(key=f"toggle_{task.id}").click()
    at.run()
    assert board.tasks.data[0].completed is True
    assert not at.button(key=f"toggle_{task.id}").disabled

    at.button(key=f"delete_{task.id}").click()
    at.run()
    assert board.tasks.data == []
    assert "pending" not in at.session_state
