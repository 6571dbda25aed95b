"""``pushnut doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies pushnut's requirements.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from pushnut.cli import exit_codes
from pushnut.cli.console import console
from pushnut.core.catalog import SAMPLE_APPS
from pushnut.infra.cf_detector import detect_cf_cli
from pushnut.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _cf_cli_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the cf CLI row."""
    status_obj = detect_cf_cli()
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return "cf CLI", path_str, "[green]OK[/green]"
    return "cf CLI", "not found", "[yellow]WARN[/yellow]"


def _sample_apps_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the bundled sample apps row."""
    from pushnut.infra.assets import BundledAssetProvider

    try:
        available = set(BundledAssetProvider().available())
    except OSError:
        available = set()
    missing = [app.asset_name for app in SAMPLE_APPS if app.asset_name not in available]
    if missing:
        return "sample apps", "missing: " + ", ".join(missing), "[red]FAIL[/red]"
    return "sample apps", f"{len(SAMPLE_APPS)} bundled", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _pushnut_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the pushnut version row."""
    return "pushnut", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\npushnut doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _pushnut_version_check(),
        _python_version_check(),
        _cf_cli_check(),
        _sample_apps_check(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="pushnut doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    # Show cf CLI install guidance when missing.
    cf_status = detect_cf_cli()
    if not cf_status.found and cf_status.install_commands:
        if rich_available:
            console.print("[yellow]The cf CLI is not installed.[/yellow]")
            console.print("Install using one of the following commands:\n")
            for cmd in cf_status.install_commands:
                console.print(f"  [bold]{cmd}[/bold]")
            console.print()
        else:
            print("The cf CLI is not installed.", file=sys.stderr)
            print("Install using one of the following commands:\n", file=sys.stderr)
            for cmd in cf_status.install_commands:
                print(f"  {cmd}", file=sys.stderr)
            print(file=sys.stderr)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
