"""Install-path resolution from Composer's installed repository.

Composer records every installed package in
``<vendor>/composer/installed.json``. Composer 2 writes an object with a
``packages`` list and an ``install-path`` per entry (relative to the
``vendor/composer`` directory); Composer 1 writes a bare list without
install paths, in which case packages live at ``<vendor>/<name>``.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from drupal_cleanup.models.package import InstalledPackage, Package

logger = logging.getLogger(__name__)


class InstalledRepositoryError(Exception):
    """Base exception for installed repository errors."""


class InstalledRepositoryNotFoundError(InstalledRepositoryError):
    """Raised when installed.json does not exist."""


class InstalledRepositoryParseError(InstalledRepositoryError):
    """Raised when installed.json cannot be parsed."""


class PackageNotInstalledError(InstalledRepositoryError):
    """Raised when a package is not recorded as installed."""


class InstalledRepository:
    """Read-only view over installed.json.

    Attributes:
        vendor_dir: Absolute vendor directory.
    """

    def __init__(self, vendor_dir: Path, entries: list[dict[str, Any]]) -> None:
        self.vendor_dir = vendor_dir
        self._entries: dict[str, dict[str, Any]] = {}
        for entry in entries:
            name = entry.get("name")
            if isinstance(name, str) and name:
                self._entries[name] = entry
            else:
                logger.debug("Ignoring installed.json entry without a name: %r", entry)

    @classmethod
    def load(cls, path: Path, vendor_dir: Path | None = None) -> "InstalledRepository":
        """Load an installed.json file.

        Args:
            path: Path to installed.json.
            vendor_dir: Vendor directory. Defaults to the grandparent of path.

        Returns:
            InstalledRepository for the file.

        Raises:
            InstalledRepositoryNotFoundError: If the file does not exist.
            InstalledRepositoryParseError: If the file is not valid JSON or
                has an unknown layout.
        """
        if not path.exists():
            raise InstalledRepositoryNotFoundError(f"Installed repository not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise InstalledRepositoryParseError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise InstalledRepositoryError(f"Failed to read {path}: {e}") from e

        if isinstance(data, dict):
            entries = data.get("packages", [])
        else:
            entries = data
        if not isinstance(entries, list):
            raise InstalledRepositoryParseError(f"Unknown installed.json layout in {path}")

        vendor = vendor_dir or path.resolve().parent.parent
        return cls(vendor, [e for e in entries if isinstance(e, dict)])

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def get_install_path(self, name: str) -> Path:
        """Resolve the absolute install directory of a package.

        Args:
            name: Package name.

        Returns:
            Absolute, normalized install path.

        Raises:
            PackageNotInstalledError: If the package is not recorded.
        """
        entry = self._entry(name)
        install_path = entry.get("install-path")
        if isinstance(install_path, str) and install_path:
            target = self.vendor_dir / "composer" / install_path
        else:
            target = self.vendor_dir / name
        return Path(os.path.normpath(target.absolute()))

    def get(self, name: str) -> InstalledPackage:
        """Get a package with its type and install path.

        Raises:
            PackageNotInstalledError: If the package is not recorded.
        """
        entry = self._entry(name)
        package = Package(name=name, type=entry.get("type") or "library")
        return InstalledPackage(package=package, install_path=self.get_install_path(name))

    def packages(self) -> list[InstalledPackage]:
        """All recorded packages, sorted by name."""
        return [self.get(name) for name in sorted(self._entries)]

    def _entry(self, name: str) -> dict[str, Any]:
        try:
            return self._entries[name]
        except KeyError:
            raise PackageNotInstalledError(f"Package is not installed: {name}") from None
