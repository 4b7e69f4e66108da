"""In-memory task list with the editing state machine and derived views.

The store is the only owner of the task list. Every operation that changes
the list notifies the subscribed listeners once with a fresh snapshot; the
persistence adapter hooks in that way.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Optional, Union

from todoapp.models.task import FilterMode, Task

logger = logging.getLogger(__name__)

Listener = Callable[[List[Task]], None]
Clock = Callable[[], int]


def now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Editing:
    task_id: str
    draft: str


EditState = Union[Idle, Editing]
IDLE = Idle()


class TaskStore:
    def __init__(self, tasks: Optional[Iterable[Task]] = None, clock: Clock = now_ms) -> None:
        self._tasks: List[Task] = list(tasks or [])
        self._clock = clock
        self._editing: EditState = IDLE
        self._listeners: List[Listener] = []

    # -------------------- state --------------------
    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    @property
    def editing(self) -> EditState:
        return self._editing

    def is_editing(self, task_id: str) -> bool:
        return isinstance(self._editing, Editing) and self._editing.task_id == task_id

    def get(self, task_id: str) -> Optional[Task]:
        return next((task for task in self._tasks if task.id == task_id), None)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------------------- mutations --------------------
    def add(self, raw_title: str) -> Optional[Task]:
        title = (raw_title or "").strip()
        if not title:
            return None
        created_at = int(self._clock())
        task = Task(id=self._fresh_id(created_at), title=title, created_at=created_at)
        self._commit([task, *self._tasks])
        logger.debug("task.add id=%s", task.id)
        return task

    def toggle_done(self, task_id: str) -> None:
        if self._update(task_id, lambda task: replace(task, done=not task.done)):
            logger.debug("task.toggle id=%s", task_id)

    def remove(self, task_id: str) -> None:
        remaining = [task for task in self._tasks if task.id != task_id]
        if len(remaining) == len(self._tasks):
            return
        self._commit(remaining)
        logger.debug("task.remove id=%s", task_id)

    def clear_completed(self) -> None:
        remaining = [task for task in self._tasks if not task.done]
        if len(remaining) == len(self._tasks):
            return
        removed = len(self._tasks) - len(remaining)
        self._commit(remaining)
        logger.debug("task.clear_completed removed=%s", removed)

    def set_all_done(self, value: bool) -> None:
        value = bool(value)
        updated = [task if task.done == value else replace(task, done=value) for task in self._tasks]
        if updated == self._tasks:
            return
        self._commit(updated)
        logger.debug("task.set_all_done value=%s", value)

    # -------------------- editing --------------------
    def begin_edit(self, task_id: str) -> None:
        task = self.get(task_id)
        if task is None:
            return
        if isinstance(self._editing, Editing) and self._editing.task_id != task_id:
            logger.debug("task.edit switch from=%s to=%s", self._editing.task_id, task_id)
        self._editing = Editing(task_id=task.id, draft=task.title)

    def update_draft(self, text: str) -> None:
        if isinstance(self._editing, Editing):
            self._editing = replace(self._editing, draft=text or "")

    def commit_edit(self, task_id: str, draft_title: Optional[str] = None) -> None:
        """Save the edit of ``task_id``. An empty (after trim) title deletes the task.

        Only the task currently being edited can be committed; any other call
        just returns to Idle.
        """
        editing = self._editing
        self._editing = IDLE
        if not isinstance(editing, Editing) or editing.task_id != task_id:
            return
        if draft_title is None:
            draft_title = editing.draft
        title = draft_title.strip()
        if not title:
            self.remove(task_id)
            return
        if self._update(task_id, lambda task: replace(task, title=title)):
            logger.debug("task.rename id=%s", task_id)

    def cancel_edit(self) -> None:
        self._editing = IDLE

    # -------------------- derived views --------------------
    def view(self, filter_mode: FilterMode | str = FilterMode.ALL, search_query: str = "") -> List[Task]:
        mode = FilterMode.parse(filter_mode)
        query = search_query or ""
        needle = query.casefold() if query.strip() else ""
        return [
            task
            for task in self._tasks
            if mode.matches(task) and needle in task.title.casefold()
        ]

    def count_active(self) -> int:
        return sum(1 for task in self._tasks if not task.done)

    # -------------------- internals --------------------
    def _fresh_id(self, created_at: int) -> str:
        taken = {task.id for task in self._tasks}
        candidate = created_at
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def _update(self, task_id: str, change: Callable[[Task], Task]) -> bool:
        for index, task in enumerate(self._tasks):
            if task.id != task_id:
                continue
            changed = change(task)
            if changed == task:
                return False
            updated = list(self._tasks)
            updated[index] = changed
            self._commit(updated)
            return True
        return False

    def _commit(self, tasks: List[Task]) -> None:
        self._tasks = tasks
        if isinstance(self._editing, Editing) and self.get(self._editing.task_id) is None:
            self._editing = IDLE
        snapshot = self.tasks
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("task listener failed")
