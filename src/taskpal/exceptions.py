"""Custom exception hierarchy for taskpal.

Every error the user can trigger at the prompt maps to a subclass of
:class:`TaskpalError`.  The session loop catches the base class, prints
the message (and hint, when present) and reads the next line, so none
of these are fatal on their own.

Hierarchy
---------
TaskpalError
├── InvalidCommandError
├── EmptyListError
├── EmptyDescriptionError
├── MissingByDateError
├── MissingEventDatesError
├── IndexOutOfBoundsError
│   └── InvalidIndexError
├── CorruptTaskLineError
└── StorageError
"""

from __future__ import annotations


class TaskpalError(Exception):
    """Base exception for all taskpal errors.

    Carries an optional *hint* with actionable guidance, rendered
    below the message by the CLI layer.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command parsing -------------------------------------------------------

class InvalidCommandError(TaskpalError):
    """Raised when the first word of a line is not a known command."""


# --- Task list -------------------------------------------------------------

class EmptyListError(TaskpalError):
    """Raised when listing tasks while the list is empty."""


class EmptyDescriptionError(TaskpalError):
    """Raised when a task would be created without a name."""


class MissingByDateError(TaskpalError):
    """Raised when a deadline has no ``/by`` clause."""


class MissingEventDatesError(TaskpalError):
    """Raised when an event lacks ``/from`` or ``/to``."""


class IndexOutOfBoundsError(TaskpalError):
    """Raised when a task number does not name an existing task."""


class InvalidIndexError(IndexOutOfBoundsError):
    """Raised when a task number is missing or not a positive integer."""


# --- Persistence -----------------------------------------------------------

class CorruptTaskLineError(TaskpalError):
    """Raised when a saved line cannot be turned back into a task."""


class StorageError(TaskpalError):
    """Raised when the task file cannot be read or written."""
