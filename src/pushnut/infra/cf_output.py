"""Pure parsing of ``cf`` CLI output.

Every function and class in this module works on plain text lines — no
subprocess, no I/O — so that the parsing rules are trivially
unit-testable against captured CLI output.

Phase detection
---------------
``cf push`` prints a banner line when it enters each phase.  The first
line containing one of a phase's markers stamps that phase's start:

* creating  — ``Creating app`` (cf v6) / ``Pushing app`` (cf v7+)
* uploading — ``Uploading`` / ``Packaging files to upload``
* staging   — ``Staging app`` / ``Starting app``
* starting  — ``Waiting for app``
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime

PHASE_MARKERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("creating", ("Creating app", "Pushing app")),
    ("uploading", ("Uploading", "Packaging files to upload")),
    ("staging", ("Staging app", "Starting app")),
    ("starting", ("Waiting for app",)),
)

_STACK_RE = re.compile(r"^\s*stack:\s*(\S+)")
_BUILDPACK_RE = re.compile(r"^\s*buildpacks?:\s*(.*?)\s*$")
_APPS_HEADER_RE = re.compile(r"^name\s+requested state\b")


class PushOutputParser:
    """Incremental parser fed with ``cf push`` output, one line at a time.

    Usage::

        parser = PushOutputParser()
        for line in lines:
            parser.feed(line, now())
        parser.phase_starts["staging"]
    """

    def __init__(self) -> None:
        self.phase_starts: dict[str, datetime] = {}
        self.stack: str = ""
        self.buildpack: str = ""
        self._awaiting_buildpack_table: bool = False

    def feed(self, line: str, timestamp: datetime) -> None:
        """Consume one output line observed at *timestamp*."""
        self._detect_phase(line, timestamp)
        self._detect_metadata(line)

    def _detect_phase(self, line: str, timestamp: datetime) -> None:
        for phase, markers in PHASE_MARKERS:
            if phase in self.phase_starts:
                continue
            if any(marker in line for marker in markers):
                self.phase_starts[phase] = timestamp
                return

    def _detect_metadata(self, line: str) -> None:
        if self._awaiting_buildpack_table:
            stripped = line.strip()
            if not stripped or stripped.startswith("name"):
                return
            # First row of the v7+ buildpack table: ``name version detect …``
            self.buildpack = stripped.split()[0]
            self._awaiting_buildpack_table = False
            return

        match = _STACK_RE.match(line)
        if match and not self.stack:
            self.stack = match.group(1)
            return

        match = _BUILDPACK_RE.match(line)
        if match and not self.buildpack:
            value = match.group(1)
            if value:
                self.buildpack = value
            else:
                self._awaiting_buildpack_table = True


def parse_app_names(lines: Iterable[str]) -> list[str]:
    """Extract app names from ``cf apps`` output.

    Rows follow the ``name  requested state …`` header; the first column
    of each non-empty row is the app name.  Returns an empty list when
    the space has no apps.
    """
    names: list[str] = []
    in_table = False
    for line in lines:
        stripped = line.strip()
        if not in_table:
            if _APPS_HEADER_RE.match(stripped):
                in_table = True
            continue
        if not stripped:
            continue
        names.append(stripped.split()[0])
    return names
