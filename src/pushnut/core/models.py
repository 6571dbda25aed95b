"""Domain models for pushnut.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access and simple derived values.  They
carry zero I/O, zero dependencies on external packages, and must remain
pure across the entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class AppCleanupSetting(enum.Enum):
    """When a pushed sample app is deleted again."""

    ALWAYS = "always"
    NEVER = "never"
    ON_SUCCESS = "on-success"


class OutputType(enum.Enum):
    """Structured output format of the full push summary."""

    JSON = "json"
    YAML = "yaml"
    NONE = "none"
    """Sentinel: render the human-readable report instead."""


# ---------------------------------------------------------------------------
# Sample app descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SampleApp:
    """Static description of one pushable sample application."""

    caption: str
    """Display name of the runtime (e.g. ``Golang``)."""

    command: str
    """Sub-command name used on the command line (e.g. ``golang``)."""

    aliases: tuple[str, ...]
    """Alternative command names (e.g. ``("go",)``)."""

    app_name_prefix: str
    """Prefix of the randomised Cloud Foundry app name."""

    asset_name: str
    """Name of the bundled asset directory holding the app's files."""

    def matches(self, name: str) -> bool:
        """Return ``True`` when *name* is this app's command or an alias."""
        return name == self.command or name in self.aliases


# ---------------------------------------------------------------------------
# Invocation settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PushSettings:
    """Raw per-invocation settings as given on the command line."""

    delete: str = "always"
    summary: str = "short"
    output: str = ""


# ---------------------------------------------------------------------------
# In-memory file bundle
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BundleFile:
    """A single file inside an :class:`AppBundle`."""

    path: str
    """Relative POSIX path inside the bundle (e.g. ``public/index.html``)."""

    content: bytes


@dataclass(frozen=True, slots=True)
class AppBundle:
    """Immutable directory tree of a sample app, held in memory."""

    name: str
    files: tuple[BundleFile, ...]

    def __len__(self) -> int:
        return len(self.files)

    def __bool__(self) -> bool:
        return len(self.files) > 0

    def paths(self) -> list[str]:
        """Return the relative paths of all files, sorted."""
        return sorted(f.path for f in self.files)


# ---------------------------------------------------------------------------
# Push report
# ---------------------------------------------------------------------------

_PHASES: tuple[str, ...] = ("init", "creating", "uploading", "staging", "starting")


@dataclass(frozen=True, slots=True)
class PushReport:
    """Timings and metadata of one sample app push.

    Each ``*_start`` timestamp marks the moment a phase began; a phase
    ends when the next one starts and the last phase ends at
    :attr:`push_end`.  Missing timestamps are ``None``.
    """

    caption: str
    app_name: str
    init_start: datetime | None = None
    creating_start: datetime | None = None
    uploading_start: datetime | None = None
    staging_start: datetime | None = None
    starting_start: datetime | None = None
    push_end: datetime | None = None
    stack: str = ""
    buildpack: str = ""

    def _timeline(self) -> tuple[datetime | None, ...]:
        return (
            self.init_start,
            self.creating_start,
            self.uploading_start,
            self.staging_start,
            self.starting_start,
            self.push_end,
        )

    @staticmethod
    def _span(start: datetime | None, end: datetime | None) -> timedelta:
        if start is None or end is None or end < start:
            return timedelta(0)
        return end - start

    def elapsed_time(self) -> timedelta:
        """Total time from the start of the push until it finished."""
        return self._span(self.init_start, self.push_end)

    def init_time(self) -> timedelta:
        return self._span(self.init_start, self.creating_start)

    def creating_time(self) -> timedelta:
        return self._span(self.creating_start, self.uploading_start)

    def uploading_time(self) -> timedelta:
        return self._span(self.uploading_start, self.staging_start)

    def staging_time(self) -> timedelta:
        return self._span(self.staging_start, self.starting_start)

    def starting_time(self) -> timedelta:
        return self._span(self.starting_start, self.push_end)

    def has_time_details(self) -> bool:
        """Whether every phase timestamp is known and in order."""
        timeline = self._timeline()
        if any(ts is None for ts in timeline):
            return False
        return all(a <= b for a, b in zip(timeline, timeline[1:]))  # type: ignore[operator]

    def phase_times(self) -> dict[str, timedelta]:
        """Per-phase durations keyed by phase name, in push order."""
        return dict(
            zip(
                _PHASES,
                (
                    self.init_time(),
                    self.creating_time(),
                    self.uploading_time(),
                    self.staging_time(),
                    self.starting_time(),
                ),
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view used by the JSON and YAML serialisers."""
        data: dict[str, Any] = {
            "caption": self.caption,
            "app": self.app_name,
            "stack": self.stack,
            "buildpack": self.buildpack,
            "started": self.init_start.isoformat() if self.init_start else None,
            "finished": self.push_end.isoformat() if self.push_end else None,
            "elapsed": self.elapsed_time().total_seconds(),
        }
        if self.has_time_details():
            data["phases"] = {
                name: span.total_seconds()
                for name, span in self.phase_times().items()
            }
        return data
