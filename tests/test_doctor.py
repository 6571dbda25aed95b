"""Tests for the ``pushnut doctor`` command (cli/doctor.py).

The cf CLI probe is mocked — no system dependency, no network.

Coverage:
* Doctor returns SUCCESS when everything is present.
* A missing cf CLI is a warning, not a failure.
* Missing bundled sample apps fail the run.
* Individual check functions return correct tuples.
* CLI routing dispatches to ``run_doctor``.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pushnut.cli import exit_codes
from pushnut.infra.cf_detector import CfCliStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _mock_cf_found() -> CfCliStatus:
    return CfCliStatus(
        found=True,
        path=Path("/usr/local/bin/cf"),
        version_hint="found at /usr/local/bin/cf",
        install_commands=(),
    )


def _mock_cf_missing() -> CfCliStatus:
    return CfCliStatus(
        found=False,
        path=None,
        version_hint="not found",
        install_commands=("brew install cloudfoundry/tap/cf-cli@8",),
    )


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from pushnut.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status or "FAIL" in status


class TestCfCliCheck:
    @patch("pushnut.cli.doctor.detect_cf_cli")
    def test_found(self, mock_detect: MagicMock) -> None:
        from pushnut.cli.doctor import _cf_cli_check

        mock_detect.return_value = _mock_cf_found()
        label, value, status = _cf_cli_check()
        assert label == "cf CLI"
        assert value == str(Path("/usr/local/bin/cf"))
        assert "OK" in status

    @patch("pushnut.cli.doctor.detect_cf_cli")
    def test_missing(self, mock_detect: MagicMock) -> None:
        from pushnut.cli.doctor import _cf_cli_check

        mock_detect.return_value = _mock_cf_missing()
        label, value, status = _cf_cli_check()
        assert value == "not found"
        assert "WARN" in status


class TestSampleAppsCheck:
    def test_all_bundled(self) -> None:
        from pushnut.cli.doctor import _sample_apps_check

        label, value, status = _sample_apps_check()
        assert label == "sample apps"
        assert value == "7 bundled"
        assert "OK" in status

    @patch("pushnut.infra.assets.BundledAssetProvider.available", return_value=["golang"])
    def test_missing_assets_fail(self, _mock_available: MagicMock) -> None:
        from pushnut.cli.doctor import _sample_apps_check

        _label, value, status = _sample_apps_check()
        assert value.startswith("missing: python, php")
        assert "FAIL" in status


class TestOsCheck:
    def test_returns_tuple(self) -> None:
        from pushnut.cli.doctor import _os_check

        label, value, status = _os_check()
        assert label == "OS"
        assert isinstance(value, str)
        assert "OK" in status

    @patch("pushnut.cli.doctor.platform.machine", return_value="arm64")
    @patch("pushnut.cli.doctor.platform.release", return_value="23.4.0")
    @patch("pushnut.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from pushnut.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert value == "macOS 23.4.0 (arm64)"


class TestPushnutVersionCheck:
    def test_returns_current_version(self) -> None:
        from pushnut.cli.doctor import _pushnut_version_check
        from pushnut.version import __version__

        label, value, status = _pushnut_version_check()
        assert label == "pushnut"
        assert value == __version__
        assert "OK" in status


class TestStatusPlain:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("[green]OK[/green]", "OK"),
            ("[yellow]WARN[/yellow]", "WARN"),
            ("[red]FAIL (>=3.10 required)[/red]", "FAIL"),
            ("unknown", "unknown"),
        ],
    )
    def test_strips_markup(self, status: str, expected: str) -> None:
        from pushnut.cli.doctor import _status_plain

        assert _status_plain(status) == expected


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("pushnut.cli.doctor.detect_cf_cli")
    def test_all_pass_returns_success(self, mock_detect: MagicMock) -> None:
        from pushnut.cli.doctor import run_doctor

        mock_detect.return_value = _mock_cf_found()
        assert run_doctor() == exit_codes.SUCCESS

    @patch("pushnut.cli.doctor.detect_cf_cli")
    def test_cf_missing_still_succeeds(self, mock_detect: MagicMock) -> None:
        """A missing cf CLI is WARN, not FAIL."""
        from pushnut.cli.doctor import run_doctor

        mock_detect.return_value = _mock_cf_missing()
        assert run_doctor() == exit_codes.SUCCESS

    @patch("pushnut.cli.doctor._sample_apps_check")
    @patch("pushnut.cli.doctor.detect_cf_cli")
    def test_failed_check_returns_general_error(
        self, mock_detect: MagicMock, mock_assets: MagicMock,
    ) -> None:
        from pushnut.cli.doctor import run_doctor

        mock_detect.return_value = _mock_cf_found()
        mock_assets.return_value = ("sample apps", "missing: ruby", "[red]FAIL[/red]")
        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch("pushnut.cli.doctor.platform.machine", return_value="arm64")
    @patch("pushnut.cli.doctor.platform.release", return_value="23.4.0")
    @patch("pushnut.cli.doctor.platform.system", return_value="Darwin")
    @patch("pushnut.cli.doctor.detect_cf_cli")
    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_darwin_plain_output_shows_macos_and_brew_guidance(
        self,
        mock_detect: MagicMock,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from pushnut.cli.doctor import run_doctor

        mock_detect.return_value = _mock_cf_missing()

        assert run_doctor() == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert "macOS" in captured.err
        assert "brew install cloudfoundry/tap/cf-cli@8" in captured.err
        assert "All checks passed." in captured.err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("pushnut.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches(self, mock_run: MagicMock) -> None:
        from pushnut.cli.app import main

        assert main(["doctor"]) == exit_codes.SUCCESS
        mock_run.assert_called_once()

    @patch("pushnut.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, mock_run: MagicMock) -> None:
        from pushnut.cli.app import main

        assert main(["doctor"]) == exit_codes.GENERAL_ERROR
