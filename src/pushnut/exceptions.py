"""Custom exception hierarchy for pushnut.

All exceptions that cross layer boundaries must inherit from
:class:`PushnutError`.  Raw subprocess and OS errors must NEVER
propagate beyond the infrastructure layer — they must be caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
PushnutError
├── UnsupportedSettingError
├── SampleAppNotFoundError
├── AssetError
├── CfCliNotFoundError
├── PushFailedError
├── CleanupFailedError
├── ReportSerializationError
└── EnvironmentError
"""

from __future__ import annotations


class PushnutError(Exception):
    """Base exception for all pushnut errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Settings ----------------------------------------------------------------

class UnsupportedSettingError(PushnutError):
    """Raised when a command-line setting has a value outside its vocabulary."""


# --- Sample apps -------------------------------------------------------------

class SampleAppNotFoundError(PushnutError):
    """Raised when no sample app matches the requested name or alias."""


class AssetError(PushnutError):
    """Raised when the files of a sample app cannot be loaded."""


# --- Cloud Foundry -----------------------------------------------------------

class CfCliNotFoundError(PushnutError):
    """Raised when the ``cf`` CLI cannot be located on the system PATH."""


class PushFailedError(PushnutError):
    """Raised when pushing a sample app does not complete successfully."""


class CleanupFailedError(PushnutError):
    """Raised when listing or deleting apps on the platform fails."""


# --- Reporting ---------------------------------------------------------------

class ReportSerializationError(PushnutError):
    """Raised when a push report cannot be rendered as JSON or YAML."""


# --- Environment / tooling ---------------------------------------------------

class EnvironmentError(PushnutError):
    """Raised when a required runtime dependency is not available."""


def append_cf_login_suggestion(hint: str) -> str:
    """Append ``cf login`` guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Make sure you are logged in and targeted:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    cf login -a <api> && cf target -o <org> -s <space>",
        )
    )
