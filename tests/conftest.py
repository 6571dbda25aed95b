"""Shared pytest fixtures and configuration for the pushnut test suite.

Guidelines
----------
* No network access and no real ``cf`` binary in any test.
* ``shutil.which`` and ``subprocess`` must be mocked at the infra boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from pushnut.core.models import PushReport

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def at(seconds: float) -> datetime:
    """Timestamp *seconds* after :data:`T0`."""
    return T0 + timedelta(seconds=seconds)


@pytest.fixture
def full_report() -> PushReport:
    """A report with every phase timestamp known (total 95 s)."""
    return PushReport(
        caption="Golang",
        app_name="pushnut-golang-app-abc123def",
        init_start=at(0),
        creating_start=at(2),
        uploading_start=at(5),
        staging_start=at(10),
        starting_start=at(70),
        push_end=at(95),
        stack="cflinuxfs4",
        buildpack="go_buildpack",
    )


@pytest.fixture
def partial_report() -> PushReport:
    """A report whose phase details are unknown (total 42 s)."""
    return PushReport(
        caption="Python",
        app_name="pushnut-python-app-abc123def",
        init_start=at(0),
        push_end=at(42),
        stack="cflinuxfs4",
        buildpack="python_buildpack",
    )


_CF8_PUSH_OUTPUT = """\
Pushing app pushnut-golang-app-abc to org demo / space dev as admin...
Packaging files to upload...
Uploading files...
 1.08 KiB / 1.08 KiB [=====================================] 100.00% 1s

Waiting for API to complete processing files...

Staging app and tracing logs...
   Downloading go_buildpack...
   Uploading droplet...

Waiting for app pushnut-golang-app-abc to start...

Instances starting...

name:              pushnut-golang-app-abc
requested state:   started
routes:            pushnut-golang-app-abc.apps.example.com
last uploaded:     Wed 01 May 12:01:10 UTC 2024
stack:             cflinuxfs4
buildpacks:
   name           version   detect output   buildpack name
   go_buildpack   1.10.17   go              go

type:            web
"""


@pytest.fixture
def cf8_push_output() -> str:
    """Trimmed ``cf push`` output of a cf CLI v8 push."""
    return _CF8_PUSH_OUTPUT
