"""Core push service — orchestrates a single sample app push.

This service delegates file loading to an
:class:`~pushnut.core.protocols.AssetProvider` and the push itself to a
:class:`~pushnut.core.protocols.PushProvider`, both injected at
construction time.  It is responsible for:

* Resolving the cleanup setting.
* Generating a randomised app name.
* Delegating to the providers.
* Ensuring only :class:`~pushnut.exceptions.PushnutError` subclasses
  escape.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access, no
  subprocesses.
* The first error from any step propagates; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pushnut.core.catalog import random_app_name
from pushnut.core.models import PushReport, PushSettings, SampleApp
from pushnut.core.protocols import AssetProvider, PushProvider
from pushnut.core.settings import map_delete_setting
from pushnut.exceptions import PushFailedError, PushnutError

logger = logging.getLogger(__name__)


class PushService:
    """Stateless service that drives the push of one sample app.

    Parameters
    ----------
    assets:
        Any object satisfying the :class:`AssetProvider` protocol.
    pusher:
        Any object satisfying the :class:`PushProvider` protocol.
    name_factory:
        Builds the app name from the sample app's prefix.  Replaceable
        for deterministic tests.
    """

    def __init__(
        self,
        assets: AssetProvider,
        pusher: PushProvider,
        *,
        name_factory: Callable[[str], str] = random_app_name,
    ) -> None:
        self._assets: AssetProvider = assets
        self._pusher: PushProvider = pusher
        self._name_factory = name_factory

    def run_sample_app_push(self, app: SampleApp, settings: PushSettings) -> PushReport:
        """Push *app* according to *settings* and return the report.

        Raises
        ------
        UnsupportedSettingError
            When the delete setting is not recognised.
        AssetError
            When the app's files cannot be loaded.
        PushFailedError
            When the push fails for any reason.
        """
        cleanup = map_delete_setting(settings.delete)

        app_name = self._name_factory(app.app_name_prefix)
        logger.debug(
            "pushing %s sample app as %s (cleanup=%s)",
            app.caption,
            app_name,
            cleanup.value,
        )

        bundle = self._assets.load(app.asset_name)

        try:
            return self._pusher.push_app(app.caption, app_name, bundle, cleanup)
        except PushnutError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise PushFailedError(
                f"Unexpected error while pushing {app.caption} sample app: {exc}",
            ) from exc
