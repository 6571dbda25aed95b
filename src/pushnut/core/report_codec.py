"""JSON and YAML serialisation of :class:`~pushnut.core.models.PushReport`.

PyYAML is imported lazily so that modules importing the core layer do
not pay for it unless YAML output is actually requested.
"""

from __future__ import annotations

import json
from typing import Any

from pushnut.core.models import PushReport
from pushnut.exceptions import EnvironmentError, ReportSerializationError

JSON_INDENT: str = "   "


def _import_yaml() -> Any:
    """Import PyYAML lazily for YAML output."""
    try:
        import yaml
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "PyYAML is not installed. Install with: pip install PyYAML",
        ) from exc
    return yaml


def report_to_json(report: PushReport) -> str:
    """Serialise *report* as indented JSON."""
    try:
        return json.dumps(report.to_dict(), indent=JSON_INDENT)
    except (TypeError, ValueError) as exc:
        raise ReportSerializationError(
            f"failed to render push report as JSON: {exc}",
        ) from exc


def report_to_yaml(report: PushReport) -> str:
    """Serialise *report* as a block-style YAML document."""
    yaml = _import_yaml()
    try:
        return yaml.safe_dump(
            report.to_dict(),
            default_flow_style=False,
            sort_keys=False,
        )
    except yaml.YAMLError as exc:
        raise ReportSerializationError(
            f"failed to render push report as YAML: {exc}",
        ) from exc
