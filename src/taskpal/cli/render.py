"""Everything the bot says, rendered through Rich.

Task lines follow one layout everywhere::

    2: [D] [X] return book

User-typed text never goes through Rich markup unescaped: task lines are
printed as :class:`rich.text.Text`, and messages that quote the user are
passed through :func:`rich.markup.escape`.
"""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskpal.cli.console import console
from taskpal.core.models import Task, TaskKind
from taskpal.core.parser import Command, CommandResult
from taskpal.core.task_list import TaskListing
from taskpal.exceptions import TaskpalError

INDENT: str = "    "

HELP_ROWS: tuple[tuple[str, str], ...] = (
    ("list", "show your current list of tasks"),
    ("todo <task name>", "add a to-do"),
    ("deadline <task name> /by <by date>", "add a task with a deadline"),
    ("event <task name> /from <start> /to <end>", "add an event with a start and end"),
    ("mark <#>", "mark task number # as complete"),
    ("unmark <#>", "mark task number # as incomplete"),
    ("delete <#>", "remove task number # from the list"),
    ("help", "show this message again"),
    ("bye", "stop chatting :("),
)


# ---------------------------------------------------------------------------
# Pure formatting
# ---------------------------------------------------------------------------

def format_task_line(number: int, kind_code: str, status_icon: str, name: str) -> str:
    return f"{number}: [{kind_code}] [{status_icon}] {name}"


def format_dates(task: Task) -> str:
    """Date suffix for deadlines and events; empty for todos."""
    if task.kind is TaskKind.DEADLINE:
        return f" (by: {task.by})"
    if task.kind is TaskKind.EVENT:
        return f" (from: {task.start} to: {task.end})"
    return ""


def format_task_count(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


# ---------------------------------------------------------------------------
# Fixed messages
# ---------------------------------------------------------------------------

def print_spacer() -> None:
    console.rule(style="dim")


def print_greeting() -> None:
    console.print(
        Panel.fit(
            "[bold]Hey, taskpal here![/bold]\nHow can I assist you today?",
            border_style="cyan",
        )
    )


def print_help() -> None:
    table = Table(
        title="You can use the following commands",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Command", style="bold", no_wrap=True)
    table.add_column("What it does")
    for usage, description in HELP_ROWS:
        table.add_row(escape(usage), description)
    console.print(table)


def print_goodbye() -> None:
    console.print(f"{INDENT}Goodbye! Hope you have a marvelous day.")


def print_error(exc: TaskpalError) -> None:
    console.print(f"{INDENT}[bold red]Oops:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"{INDENT}[yellow]Hint:[/yellow] {escape(exc.hint)}")


# ---------------------------------------------------------------------------
# Command results
# ---------------------------------------------------------------------------

def print_task(number: int, task: Task, *, with_dates: bool = False) -> None:
    line = format_task_line(number, task.kind_code, task.status_icon, task.name)
    if with_dates:
        line += format_dates(task)
    console.print(Text(INDENT + line))


def print_listing(listing: TaskListing) -> None:
    console.print(f"{INDENT}The following are in your list:")
    for entry in listing:
        console.print(Text(INDENT + format_task_line(*entry)))


def print_result(result: CommandResult) -> None:
    """Render the outcome of a successful command."""
    command = result.command

    if command is Command.LIST and result.listing is not None:
        print_listing(result.listing)
    elif command in (Command.TODO, Command.DEADLINE, Command.EVENT) and result.task:
        console.print(f"{INDENT}Added to list:")
        print_task(result.remaining, result.task, with_dates=True)
        console.print(f"{INDENT}{format_task_count(result.remaining)}")
    elif command in (Command.MARK, Command.UNMARK) and result.task and result.number:
        verb = "done" if result.task.is_complete else "not done yet"
        console.print(f"{INDENT}Sure, I've marked this task as {verb}:")
        print_task(result.number, result.task)
    elif command is Command.DELETE and result.task and result.number:
        console.print(f"{INDENT}Noted. I've removed this task:")
        print_task(result.number, result.task)
        console.print(f"{INDENT}{format_task_count(result.remaining)}")
    elif command is Command.HELP:
        print_help()
    elif result.is_bye:
        print_goodbye()
