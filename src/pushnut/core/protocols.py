"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from pushnut.core.models import AppBundle, AppCleanupSetting, PushReport


class AssetProvider(Protocol):
    """Contract for sample app file sources.

    Any object that implements :meth:`load` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def load(self, asset_name: str) -> AppBundle:
        """Return the files of the sample app stored under *asset_name*.

        Raises
        ------
        AssetError
            When no such sample app exists or its files cannot be read.
        """
        ...  # pragma: no cover


class PushProvider(Protocol):
    """Contract for Cloud Foundry push backends.

    Implementations wrap the actual push mechanics (e.g. the ``cf``
    CLI) and must map all backend-specific exceptions to
    :class:`~pushnut.exceptions.PushnutError` subclasses.
    """

    def push_app(
        self,
        caption: str,
        app_name: str,
        bundle: AppBundle,
        cleanup: AppCleanupSetting,
    ) -> PushReport:
        """Push *bundle* as *app_name* and return the timing report.

        Parameters
        ----------
        caption:
            Display name of the sample app runtime.
        app_name:
            Name of the app on the platform.
        bundle:
            The app's files.
        cleanup:
            Whether the app is deleted after the push.

        Raises
        ------
        PushFailedError
            When the push fails for any reason.
        """
        ...  # pragma: no cover
