"""The table of sample apps pushnut knows how to push.

The table is static and defined at import time; its order is the order
used by ``pushnut push all``.
"""

from __future__ import annotations

import secrets
import string

from pushnut.core.models import SampleApp

APP_PREFIX: str = "pushnut"
"""Prefix of every app name pushed by pushnut.

The cleanup command relies on it to decide whether an app on the
platform was pushed by pushnut or not.
"""

APP_NAME_LENGTH: int = 32

_RANDOM_ALPHABET: str = string.ascii_lowercase + string.digits


def _prefix(runtime: str) -> str:
    return f"{APP_PREFIX}-{runtime}-app-"


SAMPLE_APPS: tuple[SampleApp, ...] = (
    SampleApp(
        caption="Golang",
        command="golang",
        aliases=("go",),
        app_name_prefix=_prefix("golang"),
        asset_name="golang",
    ),
    SampleApp(
        caption="Python",
        command="python",
        aliases=(),
        app_name_prefix=_prefix("python"),
        asset_name="python",
    ),
    SampleApp(
        caption="PHP",
        command="php",
        aliases=(),
        app_name_prefix=_prefix("php"),
        asset_name="php",
    ),
    SampleApp(
        caption="Staticfile",
        command="staticfile",
        aliases=("static",),
        app_name_prefix=_prefix("staticfile"),
        asset_name="staticfile",
    ),
    SampleApp(
        caption="Swift",
        command="swift",
        aliases=(),
        app_name_prefix=_prefix("swift"),
        asset_name="swift",
    ),
    SampleApp(
        caption="NodeJS",
        command="nodejs",
        aliases=("node",),
        app_name_prefix=_prefix("nodejs"),
        asset_name="nodejs",
    ),
    SampleApp(
        caption="Ruby",
        command="ruby",
        aliases=(),
        app_name_prefix=_prefix("ruby-sinatra"),
        asset_name="ruby",
    ),
)


def lookup_sample_app(name: str) -> SampleApp | None:
    """Return the sample app whose command or alias is *name*, else ``None``."""
    for app in SAMPLE_APPS:
        if app.matches(name):
            return app
    return None


def command_names() -> list[str]:
    """All accepted sample app names: commands first, then aliases."""
    names = [app.command for app in SAMPLE_APPS]
    names.extend(alias for app in SAMPLE_APPS for alias in app.aliases)
    return names


def random_app_name(prefix: str, length: int = APP_NAME_LENGTH) -> str:
    """Return *prefix* padded with random lowercase alphanumerics to *length*.

    When the prefix is already *length* characters or longer it is
    returned unchanged.
    """
    missing = length - len(prefix)
    if missing <= 0:
        return prefix
    return prefix + "".join(secrets.choice(_RANDOM_ALPHABET) for _ in range(missing))


def is_pushnut_app(app_name: str) -> bool:
    """Whether *app_name* looks like an app pushed by pushnut."""
    return app_name.startswith(f"{APP_PREFIX}-")
