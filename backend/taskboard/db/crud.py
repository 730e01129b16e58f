from typing import List, Optional
from sqlalchemy import not_, update
from sqlmodel import Session, select
from .models import Task, utc_now

def insert_task(session: Session, task: Task) -> Task:
    session.add(task)
    session.commit()
    session.refresh(task)
    return task

def select_tasks(session: Session) -> List[Task]:
    # newest first; id breaks ties between rows created in the same tick
    stmt = select(Task).order_by(Task.created_at.desc(), Task.id.desc())
    return list(session.exec(stmt).all())

def get_task(session: Session, task_id: int) -> Optional[Task]:
    return session.get(Task, task_id)

def save_task(session: Session, task: Task, changes: dict) -> Task:
    for field, value in changes.items():
        setattr(task, field, value)
    task.updated_at = utc_now()
    session.add(task)
    session.commit()
    session.refresh(task)
    return task

def remove_task(session: Session, task: Task) -> None:
    session.delete(task)
    session.commit()

def flip_completed(session: Session, task_id: int) -> Optional[Task]:
    """Negate `completed` in one UPDATE statement. Returns None when no row matched."""
    table = Task.__table__
    stmt = (
        update(table)
        .where(table.c.id == task_id)
        .values(completed=not_(table.c.completed), updated_at=utc_now())
    )
    result = session.connection().execute(stmt)
    session.commit()
    if result.rowcount == 0:
        return None
    return session.get(Task, task_id, populate_existing=True)
