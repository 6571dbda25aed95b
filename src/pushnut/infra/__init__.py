"""Infrastructure layer — external system integration.

This layer wraps all interaction with the ``cf`` CLI, the operating
system, and the packaged sample app files.  Every raw subprocess or OS
exception must be caught here and re-raised as a
:class:`~pushnut.exceptions.PushnutError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from pushnut.infra.assets import BundledAssetProvider, write_bundle
from pushnut.infra.cf_cli import CfCliPushProvider
from pushnut.infra.cf_detector import CfCliStatus, detect_cf_cli, require_cf_cli

__all__: list[str] = [
    "BundledAssetProvider",
    "CfCliPushProvider",
    "CfCliStatus",
    "detect_cf_cli",
    "require_cf_cli",
    "write_bundle",
]
