"""Tests for cf CLI detection (infra/cf_detector.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pushnut.exceptions import CfCliNotFoundError
from pushnut.infra.cf_detector import (
    CfCliStatus,
    _platform_install_commands,
    detect_cf_cli,
    require_cf_cli,
)


# ---------------------------------------------------------------------------
# detect_cf_cli
# ---------------------------------------------------------------------------

class TestDetectCfCli:
    @patch("pushnut.infra.cf_detector.shutil.which")
    def test_found(self, mock_which: MagicMock) -> None:
        mock_which.return_value = "/usr/bin/cf"
        status = detect_cf_cli()

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.version_hint.startswith("found at")
        assert status.install_commands == ()
        mock_which.assert_called_once_with("cf")

    @patch("pushnut.infra.cf_detector.shutil.which")
    def test_not_found(self, mock_which: MagicMock) -> None:
        mock_which.return_value = None
        status = detect_cf_cli()

        assert status.found is False
        assert status.path is None
        assert status.version_hint == "not found"
        assert len(status.install_commands) > 0


# ---------------------------------------------------------------------------
# require_cf_cli
# ---------------------------------------------------------------------------

class TestRequireCfCli:
    @patch("pushnut.infra.cf_detector.shutil.which")
    def test_found_returns_path(self, mock_which: MagicMock) -> None:
        mock_which.return_value = "/usr/local/bin/cf"
        assert isinstance(require_cf_cli(), Path)

    @patch("pushnut.infra.cf_detector.shutil.which")
    def test_missing_raises_with_install_hint(self, mock_which: MagicMock) -> None:
        mock_which.return_value = None
        with pytest.raises(CfCliNotFoundError, match="not installed") as exc_info:
            require_cf_cli()
        assert exc_info.value.hint is not None
        assert "Install the cf CLI" in exc_info.value.hint


# ---------------------------------------------------------------------------
# Platform install commands
# ---------------------------------------------------------------------------

class TestPlatformInstallCommands:
    @patch("pushnut.infra.cf_detector.platform.system", return_value="Windows")
    def test_windows_commands(self, _mock_sys: MagicMock) -> None:
        assert "choco install cloudfoundry-cli" in _platform_install_commands()

    @patch("pushnut.infra.cf_detector.platform.system", return_value="Linux")
    def test_linux_commands(self, _mock_sys: MagicMock) -> None:
        cmds = _platform_install_commands()
        assert any("apt-get" in c for c in cmds)
        assert any("yum" in c for c in cmds)

    @patch("pushnut.infra.cf_detector.platform.system", return_value="Darwin")
    def test_darwin_commands(self, _mock_sys: MagicMock) -> None:
        assert _platform_install_commands() == ("brew install cloudfoundry/tap/cf-cli@8",)

    @patch("pushnut.infra.cf_detector.platform.system", return_value="Plan9")
    def test_unknown_platform_falls_back(self, _mock_sys: MagicMock) -> None:
        (only,) = _platform_install_commands()
        assert "github.com/cloudfoundry/cli" in only


class TestCfCliStatus:
    def test_frozen(self) -> None:
        status = CfCliStatus(
            found=True, path=Path("/usr/bin/cf"), version_hint="found", install_commands=(),
        )
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]
