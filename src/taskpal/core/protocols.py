"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts that infrastructure adapters must satisfy.
Callers depend ONLY on these protocols, never on a concrete store.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from taskpal.core.models import Task


class TaskStore(Protocol):
    """Contract for task persistence backends.

    Any object that implements :meth:`load` and :meth:`save` with the
    correct signatures satisfies this protocol structurally.
    """

    def load(self) -> list[Task]:
        """Return every saved task, in list order.

        Raises
        ------
        StorageError
            When the backing store cannot be read.
        """
        ...  # pragma: no cover

    def save(self, tasks: Sequence[Task]) -> None:
        """Replace the saved tasks with *tasks*.

        Raises
        ------
        StorageError
            When the backing store cannot be written.
        """
        ...  # pragma: no cover
