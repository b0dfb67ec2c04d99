"""Pure text helpers for reading commands.

Every function here is a **pure** transformation of the input line: no
state, no I/O, and nothing cached between calls, since each command
brings a different line.

Two strings travel together through the parser:

* the *raw* line, exactly as typed, which supplies task names and dates
  in the user's own casing;
* the *normalized* line, trimmed and uppercased, which is used only to
  find command words and ``/BY`` / ``/FROM`` / ``/TO`` markers.

:func:`normalize` keeps both the same length, so an offset found in the
normalized line is a valid offset into the trimmed raw line.
"""

from __future__ import annotations

import re

from taskpal.core.models import TaskKind
from taskpal.exceptions import (
    EmptyDescriptionError,
    InvalidIndexError,
    MissingByDateError,
    MissingEventDatesError,
)

BY_MARKER: str = "/BY"
FROM_MARKER: str = "/FROM"
TO_MARKER: str = "/TO"

_TASK_NUMBER_RE = re.compile(r"[0-9]+")


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def _upper_char(char: str) -> str:
    upper = char.upper()
    # "ß".upper() == "SS" would shift every later offset.
    return upper if len(upper) == 1 else char


def normalize(line: str) -> str:
    """Trim *line* and uppercase it without changing its length."""
    return "".join(_upper_char(char) for char in line.strip())


def first_word(normalized: str) -> str:
    """Return the text before the first space, or the whole line."""
    index_of_space = normalized.find(" ")
    if index_of_space == -1:
        return normalized
    return normalized[:index_of_space]


def task_kind_for(normalized: str) -> TaskKind:
    """Pick the task variant from the literal prefix of *normalized*."""
    if normalized.startswith("EVENT"):
        return TaskKind.EVENT
    if normalized.startswith("DEADLINE"):
        return TaskKind.DEADLINE
    return TaskKind.TODO


# ---------------------------------------------------------------------------
# Task numbers
# ---------------------------------------------------------------------------

def parse_task_number(normalized: str) -> int:
    """Return the 1-based task number following the command word.

    Raises
    ------
    InvalidIndexError
        If the remainder is missing or not a plain decimal integer.
    """
    word = first_word(normalized)
    remainder = normalized[len(word):].strip()
    if not _TASK_NUMBER_RE.fullmatch(remainder):
        raise InvalidIndexError(
            "Please give me a task number." if not remainder
            else f"'{remainder}' is not a task number.",
            hint=f"Try '{word.lower()} 1'; numbers are the ones shown by 'list'.",
        )
    return int(remainder)


# ---------------------------------------------------------------------------
# Task fields (two passes: locate in normalized, slice in raw)
# ---------------------------------------------------------------------------

def locate_fields(kind: TaskKind, normalized: str) -> tuple[slice, ...]:
    """Find the spans of each task field inside *normalized*.

    Returns one slice per field: ``(name,)`` for todos, ``(name, by)``
    for deadlines and ``(name, start, end)`` for events.

    Raises
    ------
    EmptyDescriptionError
        If nothing follows the command word.
    MissingByDateError
        If a deadline has no ``/BY`` marker.
    MissingEventDatesError
        If an event lacks ``/FROM``, or ``/TO`` after it.
    """
    name_start = len(kind.name)
    if not normalized[name_start:].strip():
        raise EmptyDescriptionError(
            f"The description of a {kind.name.lower()} cannot be empty.",
            hint=_usage(kind),
        )

    if kind is TaskKind.TODO:
        return (slice(name_start, None),)

    if kind is TaskKind.DEADLINE:
        by_index = normalized.find(BY_MARKER, name_start)
        if by_index == -1:
            raise MissingByDateError(
                "A deadline needs a '/by' date.",
                hint=_usage(kind),
            )
        return (
            slice(name_start, by_index),
            slice(by_index + len(BY_MARKER), None),
        )

    from_index = normalized.find(FROM_MARKER, name_start)
    to_index = (
        normalized.find(TO_MARKER, from_index + len(FROM_MARKER))
        if from_index != -1
        else -1
    )
    if from_index == -1 or to_index == -1:
        raise MissingEventDatesError(
            "An event needs both a '/from' and a '/to' date.",
            hint=_usage(kind),
        )
    return (
        slice(name_start, from_index),
        slice(from_index + len(FROM_MARKER), to_index),
        slice(to_index + len(TO_MARKER), None),
    )


def slice_fields(raw: str, normalized: str, spans: tuple[slice, ...]) -> tuple[str, ...]:
    """Cut *spans* out of the trimmed raw line and trim each field.

    *normalized* must be ``normalize(raw)``; the spans are only valid
    against the line they were located in.
    """
    text = raw.strip()
    if len(text) != len(normalized):
        raise ValueError("normalized line does not belong to the raw line")
    return tuple(text[span].strip() for span in spans)


def extract_fields(kind: TaskKind, raw: str, normalized: str) -> tuple[str, ...]:
    """Locate and slice the fields of a task-creation command.

    Dates must be non-empty; the name is checked when the task is built.
    """
    fields = slice_fields(raw, normalized, locate_fields(kind, normalized))
    dates = fields[1:]
    if any(not date for date in dates):
        if kind is TaskKind.DEADLINE:
            raise MissingByDateError(
                "The '/by' date of a deadline cannot be empty.",
                hint=_usage(kind),
            )
        raise MissingEventDatesError(
            "The '/from' and '/to' dates of an event cannot be empty.",
            hint=_usage(kind),
        )
    return fields


def _usage(kind: TaskKind) -> str:
    if kind is TaskKind.DEADLINE:
        return "Usage: deadline <task name> /by <by date>"
    if kind is TaskKind.EVENT:
        return "Usage: event <task name> /from <start> /to <end>"
    return "Usage: todo <task name>"
