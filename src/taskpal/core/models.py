"""Domain models for taskpal.

A task is a single **frozen** dataclass tagged with a :class:`TaskKind`
discriminant; the per-kind payload lives in optional fields that are
validated against the kind at construction time.  Completion changes
produce a new value via :meth:`Task.with_completion`; the task list
swaps it in at the same position.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from taskpal.exceptions import EmptyDescriptionError


# ---------------------------------------------------------------------------
# Kind discriminant
# ---------------------------------------------------------------------------

class TaskKind(enum.Enum):
    """Variant tag for a task.  The value is the one-letter display code."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> TaskKind:
        """Look up a kind by its display code (``"T"``, ``"D"``, ``"E"``)."""
        return cls(code)


COMPLETE_ICON: str = "X"
INCOMPLETE_ICON: str = " "


# ---------------------------------------------------------------------------
# Task
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Task:
    """A todo, deadline or event.

    Use :func:`todo`, :func:`deadline` or :func:`event` rather than the
    constructor; they fill the payload fields for the right kind.
    """

    kind: TaskKind
    """Which variant this task is."""

    name: str
    """Task description, trimmed and never empty."""

    is_complete: bool = False
    """Whether the task has been marked done."""

    by: str | None = None
    """Deadline only: due date, verbatim."""

    start: str | None = None
    """Event only: start date, verbatim."""

    end: str | None = None
    """Event only: end date, verbatim."""

    def __post_init__(self) -> None:
        name = self.name.strip()
        if not name:
            raise EmptyDescriptionError(
                "The description of a task cannot be empty.",
                hint="Type the task name right after the command word.",
            )
        object.__setattr__(self, "name", name)

        has_by = self.by is not None
        has_span = self.start is not None or self.end is not None
        if self.kind is TaskKind.TODO and (has_by or has_span):
            raise ValueError("A todo carries no dates.")
        if self.kind is TaskKind.DEADLINE and (not has_by or has_span):
            raise ValueError("A deadline carries exactly one 'by' date.")
        if self.kind is TaskKind.EVENT and (
            has_by or self.start is None or self.end is None
        ):
            raise ValueError("An event carries both a start and an end date.")

    @property
    def kind_code(self) -> str:
        return self.kind.code

    @property
    def status_icon(self) -> str:
        return COMPLETE_ICON if self.is_complete else INCOMPLETE_ICON

    def with_completion(self, is_complete: bool) -> Task:
        """Return a copy of this task with the given completion state."""
        return replace(self, is_complete=is_complete)


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def todo(name: str, *, is_complete: bool = False) -> Task:
    return Task(TaskKind.TODO, name, is_complete)


def deadline(name: str, by: str, *, is_complete: bool = False) -> Task:
    return Task(TaskKind.DEADLINE, name, is_complete, by=by)


def event(name: str, start: str, end: str, *, is_complete: bool = False) -> Task:
    return Task(TaskKind.EVENT, name, is_complete, start=start, end=end)
