from .task import FilterMode, Task, TaskListDecodeError, TaskRecord, decode_tasks, encode_tasks

__all__ = [
    "FilterMode",
    "Task",
    "TaskListDecodeError",
    "TaskRecord",
    "decode_tasks",
    "encode_tasks",
]
