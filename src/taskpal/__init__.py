"""taskpal: a chatty command-line task tracker.

Todos, deadlines and events kept in a plain text file, driven by
free-form commands typed at a prompt.
"""

from taskpal.version import __version__

__all__: list[str] = ["__version__"]
