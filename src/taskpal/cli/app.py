"""CLI application entry point for taskpal.

This module is the **sole process-level error boundary**.  It catches
:class:`~taskpal.exceptions.TaskpalError`, ``KeyboardInterrupt`` and
any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.  Errors raised by individual
commands never get this far; the session reports them and keeps going.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from rich.markup import escape

from taskpal.cli import exit_codes
from taskpal.cli.console import configure_logging, get_rich_console
from taskpal.exceptions import TaskpalError
from taskpal.version import __version__

FILE_ENV_VAR: str = "TASKPAL_FILE"
DEFAULT_FILE: Path = Path("~/.taskpal/tasks.txt")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def default_task_file() -> Path:
    """Task file from ``$TASKPAL_FILE``, else ``~/.taskpal/tasks.txt``."""
    configured = os.getenv(FILE_ENV_VAR, "").strip()
    return Path(configured) if configured else DEFAULT_FILE


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskpal",
        description="Chat with taskpal to keep track of todos, deadlines and events.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help=(
            f"Path to the task file (default: ${FILE_ENV_VAR}, "
            f"else {DEFAULT_FILE})."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Session dispatch
# ---------------------------------------------------------------------------

def _run_session(path: Path) -> int:
    """Load the task file at *path* and chat until the user leaves.

    Flow:
    1. Load saved tasks (creating the file on first run).
    2. Hand the list and its store to a chat session.
    3. Read lines from the terminal until ``bye`` or end of input.
    """
    from taskpal.cli.console import console
    from taskpal.cli.session import PROMPT, ChatSession
    from taskpal.core.task_list import TaskList
    from taskpal.infra.file_store import FileTaskStore

    store = FileTaskStore(path)
    task_list = TaskList(store.load())

    ChatSession(task_list, store).run(lambda: console.input(PROMPT))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run a taskpal chat session.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = _build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    path: Path = args.file if args.file is not None else default_task_file()
    return _run_session(path)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    console = get_rich_console(stderr=True)
    try:
        code = main()
        sys.exit(code)
    except TaskpalError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
