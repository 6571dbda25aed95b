"""Bundled sample app sources.

The minimal sample apps ship as package data under ``pushnut/assets``.
:class:`BundledAssetProvider` reads one of them into an in-memory
:class:`~pushnut.core.models.AppBundle`; :func:`write_bundle` writes a
bundle back to disk right before it is pushed.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

from pushnut.core.models import AppBundle, BundleFile
from pushnut.exceptions import AssetError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

ASSET_PACKAGE: str = "pushnut"
ASSET_DIR: str = "assets"

_IGNORED_NAMES: frozenset[str] = frozenset({"__pycache__", ".DS_Store"})


class BundledAssetProvider:
    """Concrete :class:`AssetProvider` reading packaged sample apps.

    This class satisfies the :class:`~pushnut.core.protocols.AssetProvider`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, root: Traversable | None = None) -> None:
        self._root: Traversable = (
            root if root is not None else resources.files(ASSET_PACKAGE) / ASSET_DIR
        )

    def available(self) -> list[str]:
        """Names of all bundled sample apps, sorted."""
        return sorted(
            entry.name
            for entry in self._root.iterdir()
            if entry.is_dir() and entry.name not in _IGNORED_NAMES
        )

    def load(self, asset_name: str) -> AppBundle:
        """Read the sample app stored under *asset_name*.

        Raises
        ------
        AssetError
            When the sample app does not exist, is empty, or a file
            cannot be read.
        """
        directory = self._root / asset_name
        if not directory.is_dir():
            raise AssetError(
                f"No bundled sample app named '{asset_name}'.",
                hint="Reinstall pushnut; the package data may be incomplete.",
            )

        try:
            files = tuple(_collect(directory, ""))
        except OSError as exc:
            raise AssetError(
                f"Failed to read sample app '{asset_name}': {exc}",
            ) from exc

        if not files:
            raise AssetError(f"Sample app '{asset_name}' contains no files.")
        return AppBundle(name=asset_name, files=files)


def _collect(directory: Traversable, prefix: str) -> list[BundleFile]:
    """Recursively gather files below *directory* in a stable order."""
    collected: list[BundleFile] = []
    for entry in sorted(directory.iterdir(), key=lambda e: e.name):
        if entry.name in _IGNORED_NAMES:
            continue
        relative = f"{prefix}{entry.name}"
        if entry.is_dir():
            collected.extend(_collect(entry, f"{relative}/"))
        else:
            collected.append(BundleFile(path=relative, content=entry.read_bytes()))
    return collected


def write_bundle(bundle: AppBundle, target: Path) -> None:
    """Write every file of *bundle* below the existing directory *target*.

    Raises
    ------
    AssetError
        When a path escapes *target* or a file cannot be written.
    """
    root = target.resolve()
    for bundle_file in bundle.files:
        destination = (root / bundle_file.path).resolve()
        if root not in destination.parents:
            raise AssetError(
                f"Refusing to write '{bundle_file.path}' outside the app directory.",
            )
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_bytes(bundle_file.content)
        except OSError as exc:
            raise AssetError(
                f"Failed to write '{bundle_file.path}' of sample app "
                f"'{bundle.name}': {exc}",
            ) from exc
