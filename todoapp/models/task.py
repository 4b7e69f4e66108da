from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)


class FilterMode(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    DONE = "done"

    @classmethod
    def parse(cls, value: FilterMode | str | None) -> FilterMode:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.ALL

    def matches(self, task: Task) -> bool:
        if self is FilterMode.ACTIVE:
            return not task.done
        if self is FilterMode.DONE:
            return task.done
        return True


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    created_at: int
    done: bool = False


class TaskListDecodeError(ValueError):
    pass


class TaskRecord(BaseModel):
    """Stored shape of one task. Key order is the on-disk field order."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: StrictStr
    title: StrictStr
    done: StrictBool
    created_at: StrictInt = Field(alias="createdAt")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value.strip()

    @classmethod
    def from_task(cls, task: Task) -> TaskRecord:
        return cls(id=task.id, title=task.title, done=task.done, created_at=task.created_at)

    def to_task(self) -> Task:
        return Task(id=self.id, title=self.title, done=self.done, created_at=self.created_at)


_TASK_LIST = TypeAdapter(list[TaskRecord])


def encode_tasks(tasks: Iterable[Task]) -> str:
    records = [TaskRecord.from_task(task) for task in tasks]
    return _TASK_LIST.dump_json(records, by_alias=True).decode("utf-8")


def decode_tasks(raw: str | bytes) -> list[Task]:
    try:
        records = _TASK_LIST.validate_json(raw)
    except ValidationError as exc:
        raise TaskListDecodeError(f"invalid task list: {exc.error_count()} error(s)") from exc

    seen: set[str] = set()
    for record in records:
        if record.id in seen:
            raise TaskListDecodeError(f"duplicate task id {record.id!r}")
        seen.add(record.id)
    return [record.to_task() for record in records]
