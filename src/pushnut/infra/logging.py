"""Diagnostic logging configuration.

Diagnostics (commands run, raw ``cf`` output, cleanup warnings) go
through the standard :mod:`logging` module and are rendered on stderr by
Rich's :class:`~rich.logging.RichHandler`.  User-facing output never goes
through logging; it uses the CLI console helpers.
"""

from __future__ import annotations

import logging

_INITIALIZED = False

LOGGER_NAME: str = "pushnut"


def setup_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the ``pushnut`` logger (idempotent).

    WARNING and above are shown by default; *verbose* lowers the level
    to DEBUG.  Falls back to a plain :class:`logging.StreamHandler` when
    Rich is not installed.
    """
    global _INITIALIZED
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if _INITIALIZED:
        return

    handler: logging.Handler
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="%H:%M:%S"))

    logger.addHandler(handler)
    logger.propagate = False
    _INITIALIZED = True
