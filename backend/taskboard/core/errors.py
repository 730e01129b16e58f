class TaskError(Exception):
    """Base class for task service failures."""


class ValidationError(TaskError):
    """Bad title length or unrecognized priority."""


class NotFoundError(TaskError):
    def __init__(self, task_id):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id
