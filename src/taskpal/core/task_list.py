"""Task list manager, the one owner of the ordered task collection.

Users speak in 1-based task numbers (the ones ``list`` prints); the list
is 0-based internally.  Every operation converts through
:meth:`TaskList._position`, so ``mark``, ``unmark`` and ``delete`` all
agree on which task a number names, including after a deletion has
shifted later tasks up by one.

Guarantees
----------
* No I/O, no ``print()``.
* Only :class:`~taskpal.exceptions.TaskpalError` subclasses escape.
* Callers only ever see tuples; the backing list is never handed out.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import NamedTuple

from taskpal.core.models import Task, TaskKind, deadline, event, todo
from taskpal.core.tokens import extract_fields, parse_task_number
from taskpal.exceptions import EmptyListError, IndexOutOfBoundsError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Listing view
# ---------------------------------------------------------------------------

class ListEntry(NamedTuple):
    """One display row of the task list."""

    index: int
    kind_code: str
    status_icon: str
    name: str


class TaskListing:
    """Lazy, restartable view over a snapshot of the task list.

    Rows are built on demand each time the listing is iterated, always
    in insertion order and numbered from 1.
    """

    def __init__(self, tasks: tuple[Task, ...]) -> None:
        self._tasks: tuple[Task, ...] = tasks

    def __iter__(self) -> Iterator[ListEntry]:
        for index, task in enumerate(self._tasks, start=1):
            yield ListEntry(index, task.kind_code, task.status_icon, task.name)

    def __len__(self) -> int:
        return len(self._tasks)


# ---------------------------------------------------------------------------
# Manager
# ---------------------------------------------------------------------------

class TaskList:
    """Ordered collection of tasks with add, list, mark and delete.

    Parameters
    ----------
    tasks:
        Initial contents, e.g. tasks rehydrated from the task file.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Read-only snapshot of the current tasks, in display order."""
        return tuple(self._tasks)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_task(self, kind: TaskKind, raw: str, normalized: str) -> Task:
        """Build a task of *kind* from the command line and append it.

        Raises
        ------
        EmptyDescriptionError
            If the task has no name.
        MissingByDateError
            If a deadline lacks its ``/by`` date.
        MissingEventDatesError
            If an event lacks its ``/from`` or ``/to`` date.
        """
        fields = extract_fields(kind, raw, normalized)
        if kind is TaskKind.DEADLINE:
            task = deadline(*fields)
        elif kind is TaskKind.EVENT:
            task = event(*fields)
        else:
            task = todo(*fields)

        self._tasks.append(task)
        logger.debug("Added %s task %r at %d", kind.name, task.name, len(self._tasks))
        return task

    def retrieve_list(self) -> TaskListing:
        """Return a listing of every task.

        Raises
        ------
        EmptyListError
            If there are no tasks yet.
        """
        if not self._tasks:
            raise EmptyListError(
                "Your list is empty.",
                hint="Add one with 'todo', 'deadline' or 'event'.",
            )
        return TaskListing(self.tasks)

    def mark_or_unmark(self, normalized: str) -> tuple[int, Task]:
        """Mark (or, for ``UNMARK``, unmark) the numbered task.

        Returns the 1-based task number and the updated task.

        Raises
        ------
        InvalidIndexError
            If no task number could be read.
        IndexOutOfBoundsError
            If the number does not name an existing task.
        """
        number = parse_task_number(normalized)
        position = self._position(number)
        is_complete = not normalized.startswith("UNMARK")

        task = self._tasks[position].with_completion(is_complete)
        self._tasks[position] = task
        logger.debug("Set task %d complete=%s", number, is_complete)
        return number, task

    def delete_task(self, normalized: str) -> tuple[int, Task]:
        """Remove the numbered task; later tasks move up by one.

        Returns the 1-based task number and the removed task.

        Raises
        ------
        InvalidIndexError
            If no task number could be read.
        IndexOutOfBoundsError
            If the number does not name an existing task.
        """
        number = parse_task_number(normalized)
        removed = self._tasks.pop(self._position(number))
        logger.debug("Deleted task %d %r", number, removed.name)
        return number, removed

    # ------------------------------------------------------------------
    # Index conversion
    # ------------------------------------------------------------------

    def _position(self, number: int) -> int:
        """Convert a 1-based task number to a list position."""
        if not 1 <= number <= len(self._tasks):
            if not self._tasks:
                hint = "Your list is empty."
            else:
                hint = f"Pick a number from 1 to {len(self._tasks)}."
            raise IndexOutOfBoundsError(f"There is no task {number}.", hint=hint)
        return number - 1
