from .board import Editing, NewTaskForm, RowState, TaskBoard, TaskDraft, Viewing
from .labels import format_created, priority_color, priority_label, priority_option_label, ui_text

__all__ = [
    "Editing",
    "NewTaskForm",
    "RowState",
    "TaskBoard",
    "TaskDraft",
    "Viewing",
    "format_created",
    "priority_color",
    "priority_label",
    "priority_option_label",
    "ui_text",
]
