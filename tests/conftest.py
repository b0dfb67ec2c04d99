"""Shared pytest fixtures and configuration for the taskpal test suite.

Guidelines
----------
* Core tests must be pure, with no side effects.
* Anything touching the filesystem works under ``tmp_path``.
* Tests must not depend on the user's environment or home directory.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_task_file_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ``TASKPAL_FILE`` out of every test."""
    monkeypatch.delenv("TASKPAL_FILE", raising=False)


@pytest.fixture()
def task_file(tmp_path: Path) -> Path:
    """Path to a not-yet-existing task file inside a nested directory."""
    return tmp_path / "data" / "tasks.txt"


@pytest.fixture()
def make_reader() -> Callable[..., Callable[[], str]]:
    """Factory for ``read_line`` callables that yield lines, then EOF."""

    def factory(*lines: str) -> Callable[[], str]:
        pending = list(lines)

        def read_line() -> str:
            if not pending:
                raise EOFError
            return pending.pop(0)

        return read_line

    return factory
