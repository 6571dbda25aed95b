"""Interactive sample app selection for ``pushnut push`` without a target.

This module is responsible for:

* Prompting the user to pick a sample app via questionary arrow keys.
* Returning the selected command name (or ``all``) as a string.

All display-related logic lives here — no pushing, no settings.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from pushnut.core.models import SampleApp
from pushnut.exceptions import EnvironmentError, SampleAppNotFoundError

ALL_APPS: str = "all"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _build_choice_label(app: SampleApp) -> str:
    """Build the single-line label shown in the selector.

    Format: ``"Golang       (golang, go)"``
    """
    names = ", ".join((app.command, *app.aliases))
    return f"{app.caption:<12} ({names})"


def _usage_hint(apps: Sequence[SampleApp]) -> str:
    names = ", ".join(app.command for app in apps)
    return f"Run: pushnut push <language>|{ALL_APPS}  (languages: {names})"


def prompt_sample_app(apps: Sequence[SampleApp]) -> str:
    """Ask which sample app to push.

    Returns
    -------
    str
        The chosen app's command name, or ``"all"``.

    Raises
    ------
    SampleAppNotFoundError
        When stdin is not interactive or the user cancels the prompt.
    """
    if not sys.stdin.isatty():
        raise SampleAppNotFoundError(
            "No sample app given.",
            hint=_usage_hint(apps),
        )

    questionary = _import_questionary()

    choices = [
        questionary.Choice(title=_build_choice_label(app), value=app.command)
        for app in apps
    ]
    choices.append(questionary.Choice(title="All sample apps", value=ALL_APPS))

    selected: str | None = questionary.select(
        "Select sample app to push:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if selected is None:
        raise SampleAppNotFoundError(
            "No sample app selected.",
            hint=_usage_hint(apps),
        )

    return selected
