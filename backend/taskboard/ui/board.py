"""
View state for the task page, kept free of any rendering library so the
Streamlit script only has to draw it.

Every row is either `Viewing` or `Editing(draft)`; at most one row is being
edited at a time. Mutations never patch the cached list: each successful one
is followed by a full refetch. Failures are logged and otherwise leave the
page as it was.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..client import CALL_FAILURES, Mutation, Query, TaskClient
from ..db.models import Priority
from ..schemas.tasks import TaskOut
from .labels import DEFAULT_LOCALE

logger = logging.getLogger(__name__)


@dataclass
class NewTaskForm:
    title: str = ""
    description: str = ""
    priority: Priority = Priority.MEDIUM

    def clear(self) -> None:
        self.title = ""
        self.description = ""
        self.priority = Priority.MEDIUM


@dataclass
class TaskDraft:
    id: int
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM

    @classmethod
    def from_task(cls, task: TaskOut) -> "TaskDraft":
        return cls(id=task.id, title=task.title, description=task.description or "", priority=task.priority)


@dataclass(frozen=True)
class Viewing:
    pass


@dataclass
class Editing:
    draft: TaskDraft


RowState = Union[Viewing, Editing]

VIEWING = Viewing()


@dataclass
class TaskBoard:
    client: TaskClient
    locale: str = DEFAULT_LOCALE
    form: NewTaskForm = field(default_factory=NewTaskForm)
    editing: Optional[Editing] = None

    def __post_init__(self):
        self.tasks: Query[List[TaskOut]] = Query(self.client.list_tasks, default=[])
        self.create_mutation = Mutation(self.client.create_task)
        self.update_mutation = Mutation(self.client.update_task)
        self.delete_mutation = Mutation(self.client.delete_task)
        self.toggle_mutation = Mutation(self.client.toggle_task)

    def refresh(self) -> List[TaskOut]:
        return self.tasks.refetch()

    def row_state(self, task: TaskOut) -> RowState:
        if self.editing is not None and self.editing.draft.id == task.id:
            return self.editing
        return VIEWING

    def submit_new(self) -> bool:
        title = self.form.title.strip()
        if not title:
            return False
        try:
            self.create_mutation.mutate(
                title=title,
                description=self.form.description.strip() or None,
                priority=self.form.priority,
            )
        except CALL_FAILURES:
            logger.exception("Failed to create task")
            return False
        self.form.clear()
        self.refresh()
        return True

    def start_edit(self, task: TaskOut) -> None:
        self.editing = Editing(TaskDraft.from_task(task))

    def cancel_edit(self) -> None:
        self.editing = None

    def save_edit(self) -> bool:
        if self.editing is None:
            return False
        draft = self.editing.draft
        if not draft.title.strip():
            return False
        try:
            self.update_mutation.mutate(
                draft.id,
                title=draft.title,
                description=draft.description,
                priority=draft.priority,
            )
        except CALL_FAILURES:
            logger.exception("Failed to update task %s", draft.id)
            return False
        self.editing = None
        self.refresh()
        return True

    def toggle(self, task_id: int) -> bool:
        try:
            self.toggle_mutation.mutate(task_id)
        except CALL_FAILURES:
            logger.exception("Failed to toggle task %s", task_id)
            return False
        self.refresh()
        return True

    def delete(self, task_id: int) -> bool:
        try:
            self.delete_mutation.mutate(task_id)
        except CALL_FAILURES:
            logger.exception("Failed to delete task %s", task_id)
            return False
        self.refresh()
        return True
