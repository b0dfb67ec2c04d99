"""Plain-text file implementation of :class:`~taskpal.core.protocols.TaskStore`.

One task per line, in the layout defined by :mod:`taskpal.core.codec`.
The whole file is rewritten on every save.

Rules
-----
* Every ``OSError`` is re-raised as :class:`~taskpal.exceptions.StorageError`.
* No user-facing output; problems with individual lines are logged.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from taskpal.core.codec import deserialize_task, serialize_task
from taskpal.core.models import Task
from taskpal.exceptions import CorruptTaskLineError, StorageError

logger = logging.getLogger(__name__)


class FileTaskStore:
    """Concrete :class:`TaskStore` backed by a text file.

    Parameters
    ----------
    path:
        Location of the task file.  It and its parent directory are
        created on first load if missing.
    """

    def __init__(self, path: Path | str) -> None:
        self.path: Path = Path(path).expanduser()

    def load(self) -> list[Task]:
        """Read every task from the file, creating the file if absent.

        Lines that are not valid UTF-8 or cannot be decoded into a task
        are skipped with a warning.

        Raises
        ------
        StorageError
            If the file cannot be created or read.
        """
        try:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
                logger.debug("Created empty task file at %s", self.path)
                return []
            data = self.path.read_bytes()
        except OSError as exc:
            raise StorageError(
                f"Could not read task file {self.path}: {exc}",
                hint="Check the path and its permissions, or pass --file.",
            ) from exc

        tasks: list[Task] = []
        for line_number, raw_line in enumerate(data.splitlines(), start=1):
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError as exc:
                logger.warning(
                    "Skipping line %d of %s: not valid UTF-8 (%s)",
                    line_number,
                    self.path,
                    exc,
                )
                continue
            if not line.strip():
                continue
            try:
                tasks.append(deserialize_task(line))
            except CorruptTaskLineError as exc:
                logger.warning("Skipping line %d of %s: %s", line_number, self.path, exc)

        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        """Overwrite the file with *tasks*.

        Raises
        ------
        StorageError
            If the file cannot be written.
        """
        content = "".join(f"{serialize_task(task)}\n" for task in tasks)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise StorageError(
                f"There was an error saving your tasks: {exc}",
                hint="Your changes are kept for this session only.",
            ) from exc
        logger.debug("Saved %d tasks to %s", len(tasks), self.path)
