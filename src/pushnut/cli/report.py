"""Rendering of push reports on standard output.

Depending on the summary detail level and output type a report is shown
as a one-line summary, as JSON, as YAML, or as a multi-line breakdown of
the push phases.
"""

from __future__ import annotations

from pushnut.cli.console import escape_markup, stdout_console
from pushnut.core.duration import human_readable_duration
from pushnut.core.models import OutputType, PushReport
from pushnut.core.report_codec import report_to_json, report_to_yaml


def _headline(app_caption: str, report: PushReport, end: str) -> str:
    return (
        f"Successfully pushed [bold]{app_caption}[/bold] sample app in "
        f"[cadet_blue]{human_readable_duration(report.elapsed_time())}[/cadet_blue]{end}"
    )


def _detail_line(label: str, value: str, color: str) -> str:
    # Labels are right-aligned on the colon; values come from cf output.
    padding = " " * max(0, 10 - len(label))
    return f"{padding}[grey50 italic]{label}:[/] [{color}]{escape_markup(value)}[/]"


def _full_report_lines(app_caption: str, report: PushReport) -> list[str]:
    lines = [
        _headline(app_caption, report, ":"),
        _detail_line("stack", report.stack or "unknown", "dark_sea_green"),
        _detail_line("buildpack", report.buildpack or "unknown", "dark_sea_green"),
    ]
    if report.has_time_details():
        labels = {
            "init": "ramp-up",
            "creating": "creating",
            "uploading": "uploading",
            "staging": "staging",
            "starting": "starting",
        }
        for phase, span in report.phase_times().items():
            lines.append(
                _detail_line(labels[phase], human_readable_duration(span), "steel_blue")
            )
    return lines


def summary_printout(
    app_caption: str,
    report: PushReport,
    summary_setting: str,
    output_type: OutputType,
) -> None:
    """Write *report* to stdout according to the summary and output settings.

    ``short`` prints one line, ``full`` prints the structured document
    selected by *output_type* or the human-readable breakdown, and any
    other detail level (``quiet``) prints nothing.

    Raises
    ------
    ReportSerializationError
        When the report cannot be rendered as JSON or YAML.
    """
    if summary_setting in ("short", "oneline"):
        stdout_console.print(_headline(app_caption, report, "."))
        return

    if summary_setting != "full":
        return

    if output_type is OutputType.JSON:
        stdout_console.print(report_to_json(report), markup=False, highlight=False, soft_wrap=True)
        return

    if output_type is OutputType.YAML:
        stdout_console.print(
            report_to_yaml(report).rstrip("\n"), markup=False, highlight=False, soft_wrap=True,
        )
        return

    for line in _full_report_lines(app_caption, report):
        stdout_console.print(line, highlight=False)
    stdout_console.print()
