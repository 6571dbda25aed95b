"""Infrastructure: ``cf`` CLI detection and platform guidance.

This module is responsible for locating the Cloud Foundry command line
interface on the system PATH and providing platform-specific
installation guidance when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from pushnut.exceptions import CfCliNotFoundError

CF_BINARY: str = "cf"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CfCliStatus:
    """Result of a ``cf`` CLI detection probe.

    Attributes
    ----------
    found : bool
        Whether ``cf`` was located on PATH.
    path : Path | None
        Absolute path to the ``cf`` binary, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found at …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the CLI on the current
        platform.  Empty when ``cf`` is already present.
    """

    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_cf_cli() -> CfCliStatus:
    """Probe the system for a ``cf`` binary.

    Returns a :class:`CfCliStatus` regardless of whether the CLI is
    present — the caller decides whether to abort or merely warn.
    """
    result = shutil.which(CF_BINARY)

    if result is not None:
        resolved = Path(result).resolve()
        return CfCliStatus(
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
            install_commands=(),
        )

    return CfCliStatus(
        found=False,
        path=None,
        version_hint="not found",
        install_commands=_platform_install_commands(),
    )


def require_cf_cli() -> Path:
    """Locate ``cf`` or raise :class:`CfCliNotFoundError`.

    Used by every code path that talks to the platform.
    """
    status = detect_cf_cli()
    if not status.found or status.path is None:
        hint_lines: list[str] = []
        if status.install_commands:
            hint_lines.append("Install the cf CLI using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise CfCliNotFoundError(
            "The cf CLI is not installed or not on PATH.",
            hint="\n".join(hint_lines) if hint_lines else None,
        )
    return status.path


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "choco install cloudfoundry-cli",
            "scoop install cf-cli",
        )
    if system == "linux":
        return (
            "sudo apt-get install cf8-cli",
            "sudo yum install cf8-cli",
        )
    if system == "darwin":
        return ("brew install cloudfoundry/tap/cf-cli@8",)
    # Fallback — generic guidance.
    return ("Download the cf CLI from https://github.com/cloudfoundry/cli#downloads",)
