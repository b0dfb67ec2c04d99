"""The chat loop: read a line, run it, show the outcome, save.

One command is fully parsed, applied and saved before the next line is
read.  Errors raised by a command are shown to the user and the loop
carries on; a failed save is logged and the in-memory change is kept.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from taskpal.cli import render
from taskpal.core.parser import CommandParser, CommandResult
from taskpal.core.protocols import TaskStore
from taskpal.core.task_list import TaskList
from taskpal.exceptions import StorageError, TaskpalError

logger = logging.getLogger(__name__)

PROMPT: str = "> "


class ChatSession:
    """Interactive session over one task list and its store.

    Parameters
    ----------
    task_list:
        The list the session edits.
    store:
        Where the list is saved after every change.
    parser:
        Command parser; defaults to one bound to *task_list*.
    """

    def __init__(
        self,
        task_list: TaskList,
        store: TaskStore,
        *,
        parser: CommandParser | None = None,
    ) -> None:
        self._task_list: TaskList = task_list
        self._store: TaskStore = store
        self._parser: CommandParser = parser or CommandParser(task_list)

    def run(self, read_line: Callable[[], str]) -> None:
        """Greet the user and process lines until ``bye`` or end of input.

        *read_line* returns the next line typed by the user and raises
        :class:`EOFError` when input is exhausted.
        """
        render.print_spacer()
        render.print_greeting()
        render.print_help()

        while True:
            try:
                line = read_line()
            except EOFError:
                render.print_goodbye()
                return

            if not line.strip():
                continue

            result = self.execute(line)
            if result is not None and result.is_bye:
                return

    def execute(self, line: str) -> CommandResult | None:
        """Run a single command line; ``None`` when the command failed."""
        try:
            result = self._parser.handle(line)
        except TaskpalError as exc:
            render.print_error(exc)
            render.print_spacer()
            return None

        render.print_result(result)
        if result.mutated:
            self._save()
        render.print_spacer()
        return result

    def _save(self) -> None:
        try:
            self._store.save(self._task_list.tasks)
        except StorageError as exc:
            logger.error("%s", exc)
            render.print_error(exc)
