from __future__ import annotations

from collections.abc import Iterable

from todoapp.models.task import FilterMode, Task
from todoapp.services.todos import IDLE, EditState, Editing

EMPTY_MESSAGE = "No tasks — add something fun!"

FILTER_LABELS: dict[FilterMode, str] = {
    FilterMode.ALL: "All",
    FilterMode.ACTIVE: "Active",
    FilterMode.DONE: "Done",
}


def task_to_viewmodel(task: Task, editing: EditState = IDLE) -> dict[str, str | bool]:
    is_editing = isinstance(editing, Editing) and editing.task_id == task.id
    return {
        "id": task.id,
        "title": task.title,
        "done": task.done,
        "editing": is_editing,
        "draft": editing.draft if is_editing else task.title,
        "checkbox_id": f"cb-{task.id}",
    }


def tasks_to_viewmodels(tasks: Iterable[Task], editing: EditState = IDLE) -> list[dict[str, str | bool]]:
    return [task_to_viewmodel(task, editing) for task in tasks]


def items_left_label(count: int) -> str:
    return f"{count} item{'' if count == 1 else 's'} left"


def filter_options(selected: FilterMode | str) -> list[tuple[FilterMode, str, bool]]:
    current = FilterMode.parse(selected)
    return [(mode, label, mode is current) for mode, label in FILTER_LABELS.items()]
