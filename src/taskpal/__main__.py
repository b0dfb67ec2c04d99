"""Allow ``python -m taskpal`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m taskpal`` behaves identically to the ``taskpal`` console
script.
"""

from __future__ import annotations

from taskpal.cli.app import cli

if __name__ == "__main__":
    cli()
