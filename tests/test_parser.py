"""Tests for the command parser (core/parser.py).

The parser is exercised against a real :class:`TaskList`; nothing here
touches the filesystem or the console.
"""

from __future__ import annotations

import pytest

from taskpal.core.models import TaskKind, todo
from taskpal.core.parser import Command, CommandParser, CommandResult
from taskpal.core.task_list import TaskList
from taskpal.exceptions import (
    EmptyListError,
    IndexOutOfBoundsError,
    InvalidCommandError,
    InvalidIndexError,
)


def _parser(*names: str) -> tuple[CommandParser, TaskList]:
    task_list = TaskList(todo(name) for name in names)
    return CommandParser(task_list), task_list


# ---------------------------------------------------------------------------
# Recognition
# ---------------------------------------------------------------------------

class TestRecognition:
    @pytest.mark.parametrize("line", ["foobar", "lists", "todoo x", "mark2", "", "  "])
    def test_unknown_command(self, line: str) -> None:
        parser, task_list = _parser("a")
        with pytest.raises(InvalidCommandError):
            parser.handle(line)
        assert [t.name for t in task_list] == ["a"]

    @pytest.mark.parametrize("line", ["list", "LIST", "  LiSt  "])
    def test_keyword_is_case_insensitive(self, line: str) -> None:
        parser, _ = _parser("a")
        assert parser.handle(line).command is Command.LIST

    def test_error_quotes_the_input(self) -> None:
        parser, _ = _parser()
        with pytest.raises(InvalidCommandError, match="foobar"):
            parser.handle("foobar")


# ---------------------------------------------------------------------------
# Session-only commands
# ---------------------------------------------------------------------------

class TestSessionCommands:
    @pytest.mark.parametrize("line", ["bye", "GOODBYE", " Bye "])
    def test_bye_signals_end(self, line: str) -> None:
        parser, _ = _parser()
        result = parser.handle(line)
        assert result.is_bye
        assert not result.mutated

    def test_help(self) -> None:
        parser, _ = _parser()
        result = parser.handle("help")
        assert result.command is Command.HELP
        assert not result.is_bye
        assert not result.mutated

    def test_bye_ignores_trailing_words(self) -> None:
        parser, _ = _parser()
        assert parser.handle("bye now").is_bye


# ---------------------------------------------------------------------------
# Task commands
# ---------------------------------------------------------------------------

class TestTaskCommands:
    def test_todo(self) -> None:
        parser, task_list = _parser()
        result = parser.handle("todo read book")
        assert result.command is Command.TODO
        assert result.mutated
        assert result.task is not None and result.task.kind is TaskKind.TODO
        assert result.remaining == 1
        assert len(task_list) == 1

    def test_deadline(self) -> None:
        parser, _ = _parser()
        result = parser.handle("deadline Submit report /by Friday")
        assert result.task is not None
        assert result.task.name == "Submit report"
        assert result.task.by == "Friday"

    def test_event(self) -> None:
        parser, _ = _parser()
        result = parser.handle("Event Trip /from Mon /to Wed")
        assert result.command is Command.EVENT
        assert result.task is not None
        assert (result.task.name, result.task.start, result.task.end) == ("Trip", "Mon", "Wed")

    def test_list(self) -> None:
        parser, _ = _parser("a", "b")
        result = parser.handle("list")
        assert result.listing is not None
        assert [entry.name for entry in result.listing] == ["a", "b"]
        assert not result.mutated

    def test_list_empty(self) -> None:
        parser, _ = _parser()
        with pytest.raises(EmptyListError):
            parser.handle("list")

    def test_mark_and_unmark(self) -> None:
        parser, task_list = _parser("a", "b")
        marked = parser.handle("mark 2")
        assert marked.number == 2
        assert marked.task is not None and marked.task.is_complete
        unmarked = parser.handle("unmark 2")
        assert unmarked.command is Command.UNMARK
        assert not task_list.tasks[1].is_complete

    def test_mark_out_of_bounds(self) -> None:
        parser, _ = _parser("a", "b")
        with pytest.raises(IndexOutOfBoundsError):
            parser.handle("mark 99")

    def test_mark_without_number(self) -> None:
        parser, _ = _parser("a")
        with pytest.raises(InvalidIndexError):
            parser.handle("mark")

    def test_delete(self) -> None:
        parser, task_list = _parser("a", "b", "c")
        result = parser.handle("delete 2")
        assert result.number == 2
        assert result.task is not None and result.task.name == "b"
        assert result.remaining == 2
        assert [t.name for t in task_list] == ["a", "c"]


# ---------------------------------------------------------------------------
# Explicit three-part entry point
# ---------------------------------------------------------------------------

class TestProcessUserCommand:
    def test_uses_raw_line_for_names(self) -> None:
        parser, _ = _parser()
        result = parser.process_user_command("TODO", "TODO CALL MUM", "todo Call Mum")
        assert result.task is not None
        assert result.task.name == "Call Mum"

    def test_returns_command_result(self) -> None:
        parser, _ = _parser()
        assert isinstance(parser.process_user_command("HELP", "HELP", "help"), CommandResult)
