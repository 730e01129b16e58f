import logging
from typing import List, Optional, Union
from sqlmodel import Session
from ..core.errors import NotFoundError, ValidationError
from ..db import crud
from ..db.models import TITLE_MAX_LENGTH, Priority, Task

logger = logging.getLogger(__name__)

def _check_title(title) -> str:
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title must not be empty")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
    return title

def _check_priority(priority: Union[Priority, str]) -> Priority:
    try:
        return Priority(priority)
    except ValueError:
        allowed = ", ".join(p.value for p in Priority)
        raise ValidationError(f"Priority must be one of {allowed}, got {priority!r}") from None

def _clean_description(description: Optional[str]) -> Optional[str]:
    return description or None

def list_tasks(session: Session) -> List[Task]:
    return crud.select_tasks(session)

def create_task(
    session: Session,
    title: str,
    description: Optional[str] = None,
    priority: Union[Priority, str] = Priority.MEDIUM,
) -> Task:
    task = Task(
        title=_check_title(title),
        description=_clean_description(description),
        priority=_check_priority(priority),
        completed=False,
    )
    task = crud.insert_task(session, task)
    logger.info("Created task %s (%s)", task.id, task.priority.value)
    return task

def update_task(
    session: Session,
    task_id: int,
    *,
    title: Optional[str] = None,
    description: Optional[str] = None,
    priority: Union[Priority, str, None] = None,
    completed: Optional[bool] = None,
) -> Task:
    """
    Partial update. Arguments left as None are not touched; an empty
    description clears it. `updated_at` is refreshed even when nothing else changes.
    """
    changes = {}
    if title is not None:
        changes["title"] = _check_title(title)
    if description is not None:
        changes["description"] = _clean_description(description)
    if priority is not None:
        changes["priority"] = _check_priority(priority)
    if completed is not None:
        changes["completed"] = bool(completed)

    task = crud.get_task(session, task_id)
    if task is None:
        raise NotFoundError(task_id)
    task = crud.save_task(session, task, changes)
    logger.info("Updated task %s: %s", task_id, sorted(changes) or "no fields")
    return task

def delete_task(session: Session, task_id: int) -> None:
    task = crud.get_task(session, task_id)
    if task is None:
        raise NotFoundError(task_id)
    crud.remove_task(session, task)
    logger.info("Deleted task %s", task_id)

def toggle_task(session: Session, task_id: int) -> Task:
    task = crud.flip_completed(session, task_id)
    if task is None:
        raise NotFoundError(task_id)
    logger.info("Toggled task %s -> completed=%s", task_id, task.completed)
    return task
