"""Command parser: turns one typed line into an operation on the list.

The parser decides *what* a line asks for and hands the work to the
:class:`~taskpal.core.task_list.TaskList` it was given.  It never prints;
the outcome comes back as a :class:`CommandResult` for the CLI layer to
render.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from taskpal.core.models import Task
from taskpal.core.task_list import TaskList, TaskListing
from taskpal.core.tokens import first_word, normalize, task_kind_for
from taskpal.exceptions import InvalidCommandError


class Command(enum.Enum):
    """Command words understood at the prompt."""

    LIST = "LIST"
    MARK = "MARK"
    UNMARK = "UNMARK"
    DELETE = "DELETE"
    TODO = "TODO"
    DEADLINE = "DEADLINE"
    EVENT = "EVENT"
    BYE = "BYE"
    GOODBYE = "GOODBYE"
    HELP = "HELP"


MUTATING_COMMANDS: frozenset[Command] = frozenset(
    {
        Command.MARK,
        Command.UNMARK,
        Command.DELETE,
        Command.TODO,
        Command.DEADLINE,
        Command.EVENT,
    }
)

_TASK_COMMANDS: frozenset[Command] = frozenset(
    {Command.TODO, Command.DEADLINE, Command.EVENT}
)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a single command."""

    command: Command
    """Which command ran."""

    task: Task | None = None
    """Task that was added, marked, unmarked or deleted."""

    number: int | None = None
    """1-based task number for mark, unmark and delete."""

    listing: TaskListing | None = None
    """Rows to show for ``list``."""

    remaining: int = 0
    """How many tasks are in the list after the command."""

    @property
    def is_bye(self) -> bool:
        """True when the session should end."""
        return self.command in (Command.BYE, Command.GOODBYE)

    @property
    def mutated(self) -> bool:
        """True when the list changed and needs saving."""
        return self.command in MUTATING_COMMANDS


class CommandParser:
    """Dispatches command lines against a task list.

    Parameters
    ----------
    task_list:
        The list every command operates on.
    """

    def __init__(self, task_list: TaskList) -> None:
        self._task_list: TaskList = task_list

    def handle(self, raw: str) -> CommandResult:
        """Normalize *raw*, pick out its command word and run it."""
        normalized = normalize(raw)
        return self.process_user_command(first_word(normalized), normalized, raw)

    def process_user_command(
        self,
        word: str,
        normalized: str,
        raw: str,
    ) -> CommandResult:
        """Run the command named by *word*.

        Parameters
        ----------
        word:
            First word of *normalized*.
        normalized:
            Trimmed, uppercased line (see :func:`~taskpal.core.tokens.normalize`).
        raw:
            The line exactly as typed.

        Raises
        ------
        InvalidCommandError
            If *word* is not a command.
        TaskpalError
            Whatever the task list raises for a malformed command.
        """
        try:
            command = Command(word)
        except ValueError:
            raise InvalidCommandError(
                f"Sorry, I don't know what '{raw.strip()}' means.",
                hint="Type 'help' to see what I can do.",
            ) from None

        task_list = self._task_list

        if command in (Command.MARK, Command.UNMARK):
            number, task = task_list.mark_or_unmark(normalized)
            return CommandResult(command, task=task, number=number, remaining=len(task_list))

        if command is Command.DELETE:
            number, task = task_list.delete_task(normalized)
            return CommandResult(command, task=task, number=number, remaining=len(task_list))

        if command is Command.LIST:
            listing = task_list.retrieve_list()
            return CommandResult(command, listing=listing, remaining=len(task_list))

        if command in _TASK_COMMANDS:
            task = task_list.add_task(task_kind_for(normalized), raw, normalized)
            return CommandResult(command, task=task, remaining=len(task_list))

        # BYE, GOODBYE and HELP only affect the session.
        return CommandResult(command, remaining=len(task_list))
