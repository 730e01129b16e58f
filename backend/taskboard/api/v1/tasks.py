from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from ...core.errors import NotFoundError, ValidationError
from ...db.session import get_session
from ...schemas.tasks import TaskDeleted, TaskIn, TaskOut, TaskUpdate
from ...services import tasks as service
from typing import List

router = APIRouter()

@router.get("/tasks", response_model=List[TaskOut])
def list_all(session: Session = Depends(get_session)):
    return service.list_tasks(session)

@router.post("/tasks", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create(body: TaskIn, session: Session = Depends(get_session)):
    try:
        return service.create_task(session, body.title, body.description, body.priority)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

@router.patch("/tasks/{task_id}", response_model=TaskOut)
def update(task_id: int, body: TaskUpdate, session: Session = Depends(get_session)):
    try:
        return service.update_task(session, task_id, **body.model_dump(exclude_unset=True))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

@router.delete("/tasks/{task_id}", response_model=TaskDeleted)
def delete(task_id: int, session: Session = Depends(get_session)):
    try:
        service.delete_task(session, task_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return TaskDeleted(id=task_id)

@router.post("/tasks/{task_id}/toggle", response_model=TaskOut)
def toggle(task_id: int, session: Session = Depends(get_session)):
    try:
        return service.toggle_task(session, task_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
