"""Core layer: task models, command parsing and the task list.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from taskpal.core.codec import deserialize_task, serialize_task
from taskpal.core.models import Task, TaskKind, deadline, event, todo
from taskpal.core.parser import Command, CommandParser, CommandResult
from taskpal.core.protocols import TaskStore
from taskpal.core.task_list import ListEntry, TaskList, TaskListing

__all__: list[str] = [
    "Command",
    "CommandParser",
    "CommandResult",
    "ListEntry",
    "Task",
    "TaskKind",
    "TaskList",
    "TaskListing",
    "TaskStore",
    "deadline",
    "deserialize_task",
    "event",
    "serialize_task",
    "todo",
]
