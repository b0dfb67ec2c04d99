"""One-line text codec for tasks, shared with the file store.

Line layout (fields joined by ``" | "``)::

    T | 0 | read book
    D | 1 | return book | Sunday
    E | 0 | project meeting | Mon 2pm | 4pm

The second field is the completion flag (``1`` done, ``0`` open).  Text
fields escape ``\\`` as ``\\\\`` and ``|`` as ``\\|``, so a name or date
may contain the separator and still split back into the same fields.
"""

from __future__ import annotations

import re

from taskpal.core.models import Task, TaskKind, deadline, event, todo
from taskpal.exceptions import CorruptTaskLineError, EmptyDescriptionError

SEPARATOR: str = " | "

_DONE_FLAGS: dict[str, bool] = {"1": True, "0": False}

# Order matters: an escape pair wins over the separator.
_TOKEN_RE = re.compile(r"\\(.)|( \| )|(.)", re.DOTALL)

_FIELD_COUNTS: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------

def escape_field(text: str) -> str:
    """Escape backslashes and pipes in a text field."""
    return text.replace("\\", "\\\\").replace("|", "\\|")


def split_fields(text: str) -> list[str]:
    """Split an escaped line on unescaped separators and unescape each field.

    Raises
    ------
    CorruptTaskLineError
        If the line ends in a lone backslash.
    """
    fields: list[str] = []
    current: list[str] = []
    for match in _TOKEN_RE.finditer(text):
        escaped, separator, plain = match.groups()
        if separator is not None:
            fields.append("".join(current))
            current = []
        elif escaped is not None:
            current.append(escaped)
        elif plain == "\\":
            raise CorruptTaskLineError(f"Dangling escape in line: {text!r}")
        else:
            current.append(plain)
    fields.append("".join(current))
    return fields


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------

def serialize_task(task: Task) -> str:
    """Render *task* as a single line (no trailing newline)."""
    fields = [task.name]
    if task.kind is TaskKind.DEADLINE:
        fields.append(task.by or "")
    elif task.kind is TaskKind.EVENT:
        fields.extend((task.start or "", task.end or ""))
    return SEPARATOR.join(
        [task.kind_code, "1" if task.is_complete else "0"]
        + [escape_field(field) for field in fields]
    )


def deserialize_task(line: str) -> Task:
    """Rebuild a task from a line produced by :func:`serialize_task`.

    Raises
    ------
    CorruptTaskLineError
        If the kind code or completion flag is unknown, or the line has
        the wrong number of fields for its kind.
    """
    text = line.rstrip("\r\n")
    parts = split_fields(text)
    if len(parts) < 3:
        raise CorruptTaskLineError(f"Malformed task line: {text!r}")
    code, flag = parts[0], parts[1]

    try:
        kind = TaskKind.from_code(code.strip())
    except ValueError as exc:
        raise CorruptTaskLineError(f"Unknown task type {code!r} in line: {text!r}") from exc

    is_complete = _DONE_FLAGS.get(flag.strip())
    if is_complete is None:
        raise CorruptTaskLineError(f"Unknown completion flag {flag!r} in line: {text!r}")

    if len(parts) != _FIELD_COUNTS[kind]:
        raise CorruptTaskLineError(
            f"Expected {_FIELD_COUNTS[kind]} fields for a {kind.name.lower()}, "
            f"got {len(parts)} in line: {text!r}"
        )

    fields = parts[2:]
    try:
        if kind is TaskKind.TODO:
            return todo(*fields, is_complete=is_complete)
        if kind is TaskKind.DEADLINE:
            return deadline(*fields, is_complete=is_complete)
        return event(*fields, is_complete=is_complete)
    except EmptyDescriptionError as exc:
        raise CorruptTaskLineError(f"Invalid task in line: {text!r} ({exc})") from exc
