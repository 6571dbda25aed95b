"""Pure mapping of command-line setting strings to domain enums.

Every function in this module is a **pure** transformation over a small
fixed vocabulary — no I/O, no side effects.
"""

from __future__ import annotations

from pushnut.core.models import AppCleanupSetting, OutputType
from pushnut.exceptions import UnsupportedSettingError

_DELETE_SETTINGS: dict[str, AppCleanupSetting] = {
    "always": AppCleanupSetting.ALWAYS,
    "never": AppCleanupSetting.NEVER,
    "on-success": AppCleanupSetting.ON_SUCCESS,
}

_OUTPUT_TYPES: dict[str, OutputType] = {
    "json": OutputType.JSON,
    "yaml": OutputType.YAML,
}

_SUMMARY_SETTINGS: dict[str, str] = {
    "quiet": "quiet",
    "short": "short",
    "oneline": "short",
    "full": "full",
}


def map_delete_setting(delete_setting: str) -> AppCleanupSetting:
    """Map ``always``, ``never`` or ``on-success`` to a cleanup setting.

    Matching is exact.  Any other value raises
    :class:`UnsupportedSettingError`.
    """
    try:
        return _DELETE_SETTINGS[delete_setting]
    except KeyError:
        raise UnsupportedSettingError(
            f"unsupported delete setting: {delete_setting}",
            hint="Use one of: " + ", ".join(_DELETE_SETTINGS),
        ) from None


def map_output_setting(output_setting: str) -> OutputType:
    """Map ``json`` or ``yaml`` (any case) to an output type.

    Unknown values are not an error: they select :attr:`OutputType.NONE`,
    i.e. the human-readable report.
    """
    return _OUTPUT_TYPES.get(output_setting.lower(), OutputType.NONE)


def map_summary_setting(summary_setting: str) -> str:
    """Normalise the summary detail level (``oneline`` is ``short``)."""
    try:
        return _SUMMARY_SETTINGS[summary_setting]
    except KeyError:
        raise UnsupportedSettingError(
            f"unsupported summary setting: {summary_setting}",
            hint="Use one of: quiet, short, full",
        ) from None
