"""Allow ``python -m pushnut`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m pushnut`` behaves identically to the ``pushnut``
console script.
"""

from __future__ import annotations

from pushnut.cli.app import cli

if __name__ == "__main__":
    cli()
