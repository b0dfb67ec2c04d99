"""Infrastructure layer: filesystem integration.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Raw ``OSError`` never escapes; it becomes a
  :class:`~taskpal.exceptions.StorageError`.
"""

from taskpal.infra.file_store import FileTaskStore

__all__: list[str] = ["FileTaskStore"]
