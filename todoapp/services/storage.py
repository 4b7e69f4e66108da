from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, MutableMapping, Optional, Protocol, runtime_checkable

from sqlalchemy.engine import Engine

from todoapp.data import KeyValueEntry, get_session
from todoapp.models.task import Task, TaskListDecodeError, decode_tasks, encode_tasks
from todoapp.services.todos import Clock, TaskStore, now_ms

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todo.tasks.v1"


@runtime_checkable
class KeyValueStore(Protocol):
    """String values under string keys; a missing key reads as None."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryKeyValueStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value


class BrowserKeyValueStore:
    """Adapter over a per-browser mapping such as NiceGUI's ``app.storage.user``."""

    def __init__(self, mapping: MutableMapping[str, object]) -> None:
        self._mapping = mapping

    def get(self, key: str) -> Optional[str]:
        value = self._mapping.get(key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    def set(self, key: str, value: str) -> None:
        self._mapping[key] = value


class SqlKeyValueStore:
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get(self, key: str) -> Optional[str]:
        with get_session(self._engine) as session:
            entry = session.get(KeyValueEntry, key)
            return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        with get_session(self._engine) as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                entry = KeyValueEntry(key=key, value=value)
            else:
                entry.value = value
                entry.updated_at = datetime.now().isoformat()
            session.add(entry)
            session.commit()


class TaskListStorage:
    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._kv = kv
        self.key = key

    def load(self) -> List[Task]:
        try:
            raw = self._kv.get(self.key)
        except Exception:
            logger.exception("storage.read_failed key=%s", self.key)
            return []
        if raw is None:
            return []
        try:
            tasks = decode_tasks(raw)
        except TaskListDecodeError as exc:
            logger.warning("storage.decode_failed key=%s error=%s", self.key, exc)
            return []
        logger.debug("storage.loaded key=%s count=%s", self.key, len(tasks))
        return tasks

    def save(self, tasks: List[Task]) -> None:
        try:
            self._kv.set(self.key, encode_tasks(tasks))
        except Exception:
            logger.exception("storage.write_failed key=%s", self.key)

    def attach(self, store: TaskStore) -> None:
        store.subscribe(self.save)


def open_task_store(
    kv: KeyValueStore,
    key: str = DEFAULT_STORAGE_KEY,
    clock: Clock = now_ms,
) -> TaskStore:
    storage = TaskListStorage(kv, key=key)
    store = TaskStore(storage.load(), clock=clock)
    storage.attach(store)
    return store
