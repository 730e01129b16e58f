"""
Typed HTTP client for the task API, plus the query/mutation state wrappers
the UI binds its controls to.

Error responses are raised as the same exceptions the service uses
(`NotFoundError`, `ValidationError`, `TaskError`), so callers handle one set
of failure types whether they talk to the service directly or over HTTP.
"""
import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar

import pydantic
import requests

from .core.config import settings
from .core.errors import NotFoundError, TaskError, ValidationError
from .db.models import Priority
from .schemas.tasks import TaskOut

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Everything a call can fail with: API errors, transport errors, and payloads
# that do not match the response schema.
CALL_FAILURES = (TaskError, requests.RequestException, pydantic.ValidationError)


class TaskClient:
    def __init__(self, base_url: Optional[str] = None, session=None, timeout: Optional[float] = None):
        # `session` is anything with requests-style get/post/patch/delete,
        # e.g. a requests.Session or FastAPI's TestClient.
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT

    def _call(self, method: str, path: str, task_id=None, **kwargs) -> Any:
        r = getattr(self.session, method)(f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        if r.status_code == 404 and task_id is not None:
            raise NotFoundError(task_id)
        if r.status_code == 422:
            raise ValidationError(_detail(r))
        if r.status_code >= 400:
            raise TaskError(f"HTTP {r.status_code}: {_detail(r)}")
        return r.json()

    def list_tasks(self) -> List[TaskOut]:
        return [TaskOut.model_validate(t) for t in self._call("get", "/tasks")]

    def create_task(self, title: str, description: Optional[str] = None,
                    priority: Priority = Priority.MEDIUM) -> TaskOut:
        payload = {"title": title, "priority": Priority(priority).value}
        if description is not None:
            payload["description"] = description
        return TaskOut.model_validate(self._call("post", "/tasks", json=payload))

    def update_task(self, task_id: int, **changes) -> TaskOut:
        payload = {k: v for k, v in changes.items() if v is not None}
        if "priority" in payload:
            payload["priority"] = Priority(payload["priority"]).value
        return TaskOut.model_validate(self._call("patch", f"/tasks/{task_id}", task_id, json=payload))

    def delete_task(self, task_id: int) -> dict:
        return self._call("delete", f"/tasks/{task_id}", task_id)

    def toggle_task(self, task_id: int) -> TaskOut:
        return TaskOut.model_validate(self._call("post", f"/tasks/{task_id}/toggle", task_id))


def _detail(r) -> str:
    try:
        detail = r.json().get("detail", r.text)
    except ValueError:
        return r.text
    if isinstance(detail, list):
        # FastAPI request validation errors
        return "; ".join(str(d.get("msg", d)) for d in detail)
    return str(detail)


class Mutation(Generic[T]):
    """
    A state-changing call. `is_loading` is True only while `mutate` runs;
    failures are recorded in `error` and re-raised for the caller to handle.
    """

    def __init__(self, fn: Callable[..., T]):
        self.fn = fn
        self.is_loading = False
        self.data: Optional[T] = None
        self.error: Optional[Exception] = None

    def mutate(self, *args, **kwargs) -> T:
        self.is_loading = True
        self.error = None
        try:
            self.data = self.fn(*args, **kwargs)
            return self.data
        except CALL_FAILURES as e:
            self.error = e
            raise
        finally:
            self.is_loading = False


class Query(Generic[T]):
    """A read-only call whose last good result stays in `data`."""

    def __init__(self, fn: Callable[[], T], default: T):
        self.fn = fn
        self.data: T = default
        self.is_loading = False
        self.error: Optional[Exception] = None

    def refetch(self) -> T:
        self.is_loading = True
        try:
            self.data = self.fn()
            self.error = None
        except CALL_FAILURES as e:
            self.error = e
            logger.error("Query %s failed: %s", getattr(self.fn, "__name__", self.fn), e)
        finally:
            self.is_loading = False
        return self.data
