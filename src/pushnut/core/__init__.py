"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or subprocess I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from pushnut.core.catalog import SAMPLE_APPS, lookup_sample_app, random_app_name
from pushnut.core.duration import human_readable_duration
from pushnut.core.models import (
    AppBundle,
    AppCleanupSetting,
    BundleFile,
    OutputType,
    PushReport,
    PushSettings,
    SampleApp,
)
from pushnut.core.protocols import AssetProvider, PushProvider
from pushnut.core.push_service import PushService
from pushnut.core.settings import (
    map_delete_setting,
    map_output_setting,
    map_summary_setting,
)

__all__: list[str] = [
    "SAMPLE_APPS",
    "AppBundle",
    "AppCleanupSetting",
    "AssetProvider",
    "BundleFile",
    "OutputType",
    "PushProvider",
    "PushReport",
    "PushService",
    "PushSettings",
    "SampleApp",
    "human_readable_duration",
    "lookup_sample_app",
    "map_delete_setting",
    "map_output_setting",
    "map_summary_setting",
    "random_app_name",
]
