"""``cf`` CLI backed implementation of :class:`~pushnut.core.protocols.PushProvider`.

This module is the **only** place in the codebase that runs the
Cloud Foundry command line interface.  All subprocess and OS errors
are caught here and re-raised as typed
:class:`~pushnut.exceptions.PushnutError` subclasses — nothing raw
escapes the infrastructure boundary.

The CLI's own login and target state is used as-is.
"""

from __future__ import annotations

import logging
import subprocess
import tempfile
from collections import deque
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from pushnut.core.models import AppBundle, AppCleanupSetting, PushReport
from pushnut.exceptions import (
    CleanupFailedError,
    PushFailedError,
    append_cf_login_suggestion,
)
from pushnut.infra.assets import write_bundle
from pushnut.infra.cf_detector import require_cf_cli
from pushnut.infra.cf_output import PushOutputParser, parse_app_names

logger = logging.getLogger(__name__)

OUTPUT_TAIL_LINES: int = 15


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CfCliPushProvider:
    """Concrete :class:`PushProvider` backed by the ``cf`` binary.

    Parameters
    ----------
    binary:
        Path to the ``cf`` executable.  Located on PATH when omitted.
    clock:
        Source of the timestamps recorded in the report.

    This class satisfies the :class:`~pushnut.core.protocols.PushProvider`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(
        self,
        binary: Path | None = None,
        *,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._binary: str = str(binary if binary is not None else require_cf_cli())
        self._clock = clock

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def push_app(
        self,
        caption: str,
        app_name: str,
        bundle: AppBundle,
        cleanup: AppCleanupSetting,
    ) -> PushReport:
        """Push *bundle* as *app_name*, then apply the *cleanup* setting.

        A failed delete never hides the report of a completed push; it
        is logged as a warning instead.

        Raises
        ------
        PushFailedError
            When ``cf push`` cannot be run or exits non-zero.
        """
        try:
            report = self._push(caption, app_name, bundle)
        except PushFailedError:
            if cleanup is AppCleanupSetting.ALWAYS:
                self._delete_quietly(app_name, "after failed push")
            raise

        if cleanup in (AppCleanupSetting.ALWAYS, AppCleanupSetting.ON_SUCCESS):
            self._delete_quietly(app_name, "after push")
        return report

    # ------------------------------------------------------------------
    # Platform queries
    # ------------------------------------------------------------------

    def list_apps(self) -> list[str]:
        """Return the names of all apps in the currently targeted space.

        Raises
        ------
        CleanupFailedError
            When ``cf apps`` cannot be run or exits non-zero.
        """
        result = self._run(["apps"])
        return parse_app_names(result.stdout.splitlines())

    def delete_app(self, app_name: str) -> None:
        """Delete *app_name* together with its mapped routes.

        Raises
        ------
        CleanupFailedError
            When ``cf delete`` cannot be run or exits non-zero.
        """
        logger.info("deleting app %s", app_name)
        self._run(["delete", app_name, "-r", "-f"])

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _push(self, caption: str, app_name: str, bundle: AppBundle) -> PushReport:
        parser = PushOutputParser()
        tail: deque[str] = deque(maxlen=OUTPUT_TAIL_LINES)

        with tempfile.TemporaryDirectory(prefix=f"{bundle.name}-") as tmp:
            app_dir = Path(tmp)
            write_bundle(bundle, app_dir)

            args = [self._binary, "push", app_name, "-p", str(app_dir)]
            logger.debug("running %s", " ".join(args))

            init_start = self._clock()
            try:
                with subprocess.Popen(
                    args,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                    bufsize=1,
                ) as proc:
                    assert proc.stdout is not None
                    for raw_line in proc.stdout:
                        line = raw_line.rstrip("\n")
                        logger.debug("cf: %s", line)
                        tail.append(line)
                        parser.feed(line, self._clock())
                    returncode = proc.wait()
            except OSError as exc:
                raise PushFailedError(
                    f"Failed to run cf push for {caption} sample app: {exc}",
                ) from exc
            push_end = self._clock()

        if returncode != 0:
            raise PushFailedError(
                f"cf push of {caption} sample app {app_name} failed "
                f"with exit code {returncode}.",
                hint=append_cf_login_suggestion(
                    "Last lines of cf output:\n" + "\n".join(tail),
                ),
            )

        starts = parser.phase_starts
        return PushReport(
            caption=caption,
            app_name=app_name,
            init_start=init_start,
            creating_start=starts.get("creating"),
            uploading_start=starts.get("uploading"),
            staging_start=starts.get("staging"),
            starting_start=starts.get("starting"),
            push_end=push_end,
            stack=parser.stack,
            buildpack=parser.buildpack,
        )

    def _delete_quietly(self, app_name: str, when: str) -> None:
        """Best-effort delete; failures are logged, never raised."""
        try:
            self.delete_app(app_name)
        except CleanupFailedError as exc:
            logger.warning(
                "could not delete %s %s: %s (run: pushnut cleanup)", app_name, when, exc,
            )

    def _run(self, command: list[str]) -> subprocess.CompletedProcess[str]:
        args = [self._binary, *command]
        logger.debug("running %s", " ".join(args))
        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise CleanupFailedError(f"Failed to run cf {command[0]}: {exc}") from exc

        if result.returncode != 0:
            output = (result.stderr or result.stdout or "").strip()
            raise CleanupFailedError(
                f"cf {command[0]} failed with exit code {result.returncode}.",
                hint=append_cf_login_suggestion(output) if output else None,
            )
        return result
