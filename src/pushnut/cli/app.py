"""CLI application entry point and command routing for pushnut.

This module is the **sole error boundary** for the entire application.
It catches :class:`~pushnut.exceptions.PushnutError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* Reports go to stdout, everything else to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from pushnut.cli import exit_codes
from pushnut.cli.console import console, escape_markup
from pushnut.core.catalog import command_names
from pushnut.core.models import PushSettings
from pushnut.exceptions import PushnutError
from pushnut.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``pushnut push [<language>|all]`` — push sample apps
    * ``pushnut cleanup``              — delete leftover pushnut apps
    * ``pushnut doctor``               — environment diagnostics
    * ``pushnut --version``
    """
    parser = argparse.ArgumentParser(
        prog="pushnut",
        description="Push sample apps to Cloud Foundry and time every phase.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log cf commands and their output to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    push = subparsers.add_parser(
        "push",
        help="Push a sample app to Cloud Foundry.",
        description=(
            "Push one of the sample apps (or all of them) to the Cloud Foundry "
            "instance the cf CLI is targeting. By default the application is "
            "deleted after it was pushed."
        ),
    )
    push.add_argument(
        "target",
        nargs="?",
        default=None,
        metavar="language",
        help="Sample app to push: " + ", ".join(command_names()) + ", or 'all'.",
    )
    push.add_argument(
        "-d",
        "--delete",
        default="always",
        help="Delete application after push: always, never, on-success.",
    )
    push.add_argument(
        "-s",
        "--summary",
        default="short",
        help="Push summary detail level: quiet, short, full.",
    )
    push.add_argument(
        "-o",
        "--output",
        default="",
        help="Push summary type: json | yaml.",
    )

    cleanup = subparsers.add_parser(
        "cleanup",
        help="Delete apps left behind by pushnut.",
        description="Delete every app in the targeted space whose name starts with 'pushnut-'.",
    )
    cleanup.add_argument(
        "--dry-run",
        action="store_true",
        help="Only list the apps that would be deleted.",
    )

    subparsers.add_parser("doctor", help="Check the local environment.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_push(target: str | None, settings: PushSettings) -> int:
    """Dispatch ``pushnut push``.

    Flow:
    1. Validate the summary and output settings.
    2. Resolve the sample app(s), prompting when no target was given.
    3. Instantiate infra providers + core service.
    4. Push each app in turn, rendering its report; the first failure
       aborts the run.
    """
    from pushnut.cli.app_prompt import ALL_APPS, prompt_sample_app
    from pushnut.cli.report import summary_printout
    from pushnut.core.catalog import SAMPLE_APPS, lookup_sample_app
    from pushnut.core.push_service import PushService
    from pushnut.core.settings import map_output_setting, map_summary_setting
    from pushnut.exceptions import SampleAppNotFoundError
    from pushnut.infra.assets import BundledAssetProvider
    from pushnut.infra.cf_cli import CfCliPushProvider

    summary = map_summary_setting(settings.summary)
    output_type = map_output_setting(settings.output)

    if target is None:
        target = prompt_sample_app(SAMPLE_APPS)

    if target == ALL_APPS:
        apps = SAMPLE_APPS
    else:
        app = lookup_sample_app(target)
        if app is None:
            raise SampleAppNotFoundError(
                f"failed to detect which sample app is to be tested: {target}",
                hint="Use one of: " + ", ".join(command_names()) + f", {ALL_APPS}",
            )
        apps = (app,)

    service = PushService(BundledAssetProvider(), CfCliPushProvider())

    for app in apps:
        console.print(f"[bold]Pushing {app.caption} sample app…[/bold]")
        report = service.run_sample_app_push(app, settings)
        summary_printout(app.caption, report, summary, output_type)

    return exit_codes.SUCCESS


def _handle_cleanup(dry_run: bool) -> int:
    """Dispatch ``pushnut cleanup``."""
    from pushnut.core.catalog import is_pushnut_app
    from pushnut.infra.cf_cli import CfCliPushProvider

    provider = CfCliPushProvider()
    leftovers = [name for name in provider.list_apps() if is_pushnut_app(name)]

    if not leftovers:
        console.print("[green]No pushnut apps found.[/green]")
        return exit_codes.SUCCESS

    for name in leftovers:
        if dry_run:
            console.print(f"Would delete [bold]{name}[/bold]")
            continue
        provider.delete_app(name)
        console.print(f"Deleted [bold]{name}[/bold]")

    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from pushnut.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the pushnut CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    from pushnut.infra.logging import setup_logging

    setup_logging(verbose=args.verbose)

    if args.command == "doctor":
        return _handle_doctor()

    if args.command == "cleanup":
        return _handle_cleanup(args.dry_run)

    settings = PushSettings(
        delete=args.delete,
        summary=args.summary,
        output=args.output,
    )
    return _handle_push(args.target, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PushnutError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}", highlight=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
