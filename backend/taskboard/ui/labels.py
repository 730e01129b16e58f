from datetime import datetime, timezone
from zoneinfo import ZoneInfo
from ..db.models import Priority

DEFAULT_LOCALE = "ja"

PRIORITY_LABELS = {
    "ja": {Priority.HIGH: "高", Priority.MEDIUM: "中", Priority.LOW: "低"},
    "en": {Priority.HIGH: "High", Priority.MEDIUM: "Medium", Priority.LOW: "Low"},
}

PRIORITY_OPTION_LABELS = {
    "ja": {Priority.LOW: "低優先度", Priority.MEDIUM: "中優先度", Priority.HIGH: "高優先度"},
    "en": {Priority.LOW: "Low priority", Priority.MEDIUM: "Medium priority", Priority.HIGH: "High priority"},
}

# Streamlit markdown color names
PRIORITY_COLORS = {Priority.HIGH: "red", Priority.MEDIUM: "orange", Priority.LOW: "green"}

TEXT = {
    "ja": {
        "heading": "タスク管理",
        "new_title": "新しいタスクのタイトル",
        "new_description": "説明（オプション）",
        "create": "タスク作成",
        "creating": "作成中...",
        "save": "保存",
        "cancel": "キャンセル",
        "complete": "完了",
        "reopen": "未完了に戻す",
        "edit": "編集",
        "delete": "削除",
        "refresh": "再読み込み",
        "created": "作成",
        "priority": "優先度",
        "working": "処理中...",
        "empty": "タスクがありません。新しいタスクを作成してください。",
    },
    "en": {
        "heading": "Tasks",
        "new_title": "New task title",
        "new_description": "Description (optional)",
        "create": "Create task",
        "creating": "Creating...",
        "save": "Save",
        "cancel": "Cancel",
        "complete": "Complete",
        "reopen": "Mark as open",
        "edit": "Edit",
        "delete": "Delete",
        "refresh": "Refresh",
        "created": "Created",
        "priority": "Priority",
        "working": "Working...",
        "empty": "No tasks yet. Create one above.",
    },
}


def _locale(locale: str) -> str:
    return locale if locale in TEXT else DEFAULT_LOCALE


def _priority(priority) -> Priority:
    try:
        return Priority(priority)
    except ValueError:
        return Priority.MEDIUM


def priority_label(priority, locale: str = DEFAULT_LOCALE) -> str:
    return PRIORITY_LABELS[_locale(locale)][_priority(priority)]


def priority_option_label(priority, locale: str = DEFAULT_LOCALE) -> str:
    return PRIORITY_OPTION_LABELS[_locale(locale)][_priority(priority)]


def priority_color(priority) -> str:
    return PRIORITY_COLORS[_priority(priority)]


def ui_text(key: str, locale: str = DEFAULT_LOCALE) -> str:
    return TEXT[_locale(locale)][key]


def format_created(dt: datetime, locale: str = DEFAULT_LOCALE, tz=None) -> str:
    """
    Calendar date of `dt` as seen in `tz` (a tzinfo or an IANA zone name).
    Naive values are stored UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    if isinstance(tz, str):
        tz = ZoneInfo(tz)
    dt = dt.astimezone(tz or timezone.utc)
    # ja: 2024/1/5, en: 1/5/2024
    if _locale(locale) == "ja":
        return f"{dt.year}/{dt.month}/{dt.day}"
    return f"{dt.month}/{dt.day}/{dt.year}"
