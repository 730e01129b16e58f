import streamlit as st

from taskboard.client import TaskClient
from taskboard.core.config import settings
from taskboard.core.logging_setup import setup_logging
from taskboard.db.models import Priority
from taskboard.ui import Editing, TaskBoard, format_created, priority_color, priority_label, priority_option_label, ui_text

st.set_page_config(page_title="Taskboard", layout="centered")

if "board" not in st.session_state:
    setup_logging(settings.LOG_LEVEL)
    board = TaskBoard(TaskClient(settings.API_URL), locale=settings.UI_LOCALE)
    board.refresh()
    st.session_state.board = board

board: TaskBoard = st.session_state.board
loc = board.locale
# browser zone, so dates match what the viewer sees on their own clock
viewer_tz = st.context.timezone or settings.UI_TIMEZONE
PRIORITIES = [Priority.LOW, Priority.MEDIUM, Priority.HIGH]

# Widget state can only be reset before the widgets are drawn.
if st.session_state.pop("clear_new_form", False):
    st.session_state.new_title = ""
    st.session_state.new_description = ""
    st.session_state.new_priority = Priority.MEDIUM
st.session_state.setdefault("new_title", "")
st.session_state.setdefault("new_description", "")
st.session_state.setdefault("new_priority", Priority.MEDIUM)

# Clicks only queue a mutation; it runs after this render so its controls
# are drawn disabled while the request is in flight.
pending = st.session_state.get("pending")


def t(key):
    return ui_text(key, loc)


def fmt_priority(p):
    return priority_option_label(p, loc)


def busy(kind, task_id=None):
    if pending is None or pending[0] != kind:
        return False
    return task_id is None or pending[1] == task_id


def on_create():
    board.form.title = st.session_state.new_title
    board.form.description = st.session_state.new_description
    board.form.priority = st.session_state.new_priority
    st.session_state.pending = ("create", None)


def on_save(task_id):
    draft = board.editing.draft
    draft.title = st.session_state[f"edit_title_{task_id}"].strip()
    draft.description = st.session_state[f"edit_description_{task_id}"].strip()
    draft.priority = st.session_state[f"edit_priority_{task_id}"]
    st.session_state.pending = ("save", task_id)


def on_toggle(task_id):
    st.session_state.pending = ("toggle", task_id)


def on_delete(task_id):
    st.session_state.pending = ("delete", task_id)


st.title(t("heading"))

with st.form("new_task"):
    st.text_input(t("new_title"), key="new_title", max_chars=100)
    st.text_area(t("new_description"), key="new_description", height=80)
    st.selectbox(t("priority"), PRIORITIES, key="new_priority",
                 format_func=fmt_priority, label_visibility="collapsed")
    st.form_submit_button(
        t("creating") if busy("create") else t("create"),
        on_click=on_create,
        disabled=busy("create"),
        type="primary",
    )

st.button(t("refresh"), on_click=board.refresh, disabled=pending is not None)
st.divider()

tasks = board.tasks.data
if not tasks:
    st.info(t("empty"))

for task in tasks:
    state = board.row_state(task)
    with st.container(border=True):
        if isinstance(state, Editing):
            with st.form(f"edit_{task.id}"):
                draft = state.draft
                st.text_input(t("new_title"), value=draft.title, key=f"edit_title_{task.id}",
                              max_chars=100, label_visibility="collapsed")
                st.text_area(t("new_description"), value=draft.description,
                             key=f"edit_description_{task.id}", height=68, label_visibility="collapsed")
                st.selectbox(t("priority"), PRIORITIES, index=PRIORITIES.index(draft.priority),
                             key=f"edit_priority_{task.id}", format_func=fmt_priority,
                             label_visibility="collapsed")
                save_col, cancel_col = st.columns(2)
                save_col.form_submit_button(t("save"), on_click=on_save, args=(task.id,),
                                            disabled=busy("save", task.id))
                cancel_col.form_submit_button(t("cancel"), on_click=board.cancel_edit)
            continue

        title = f"~~{task.title}~~" if task.completed else task.title
        badge = f":{priority_color(task.priority)}[{priority_label(task.priority, loc)}]"
        st.markdown(f"**{title}** &nbsp; {badge}")
        if task.description:
            st.write(task.description)
        st.caption(f"{t('created')}: {format_created(task.created_at, loc, viewer_tz)}")

        toggle_col, edit_col, delete_col = st.columns(3)
        toggle_col.button(
            t("reopen") if task.completed else t("complete"),
            key=f"toggle_{task.id}",
            on_click=on_toggle,
            args=(task.id,),
            disabled=busy("toggle", task.id),
        )
        edit_col.button(t("edit"), key=f"edit_{task.id}_btn", on_click=board.start_edit, args=(task,))
        delete_col.button(
            t("delete"),
            key=f"delete_{task.id}",
            on_click=on_delete,
            args=(task.id,),
            disabled=busy("delete", task.id),
        )

if pending is not None:
    kind, task_id = st.session_state.pop("pending")
    with st.spinner(t("working")):
        if kind == "create":
            st.session_state.clear_new_form = board.submit_new()
        elif kind == "save":
            board.save_edit()
        elif kind == "toggle":
            board.toggle(task_id)
        elif kind == "delete":
            board.delete(task_id)
    st.rerun()
