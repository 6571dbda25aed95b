"""Regression tests for optional CLI UI dependencies (rich/questionary).

Bootstrap commands must keep working when the UI packages are missing;
the push flow fails cleanly only when a UI path is actually exercised.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from pushnut.cli import exit_codes
from pushnut.cli.app import main
from pushnut.core.models import PushReport
from pushnut.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    code = main(["doctor"])
    assert code in (exit_codes.SUCCESS, exit_codes.GENERAL_ERROR)


def test_push_report_falls_back_to_plain_print(
    monkeypatch: pytest.MonkeyPatch,
    full_report: PushReport,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    with patch("pushnut.infra.cf_cli.CfCliPushProvider"):
        with patch("pushnut.infra.assets.BundledAssetProvider"):
            with patch("pushnut.core.push_service.PushService") as mock_service_cls:
                mock_service_cls.return_value.run_sample_app_push.return_value = full_report
                assert main(["push", "go"]) == exit_codes.SUCCESS

    out = capsys.readouterr().out
    assert "Successfully pushed" in out
    assert "1 min 35 sec" in out


def test_push_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_questionary(monkeypatch)
    stdin = MagicMock()
    stdin.isatty.return_value = True

    with patch("pushnut.cli.app_prompt.sys.stdin", stdin):
        with pytest.raises(EnvironmentError, match="questionary is not installed"):
            main(["push"])
