from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from ..db.models import Priority

class TaskIn(BaseModel):
    title: str
    description: Optional[str] = None
    priority: Priority = Priority.MEDIUM

class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    completed: Optional[bool] = None

class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    priority: Priority
    completed: bool
    created_at: datetime
    updated_at: datetime

class TaskDeleted(BaseModel):
    id: int
    deleted: bool = True
