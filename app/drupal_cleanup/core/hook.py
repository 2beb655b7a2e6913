"""Post-install / post-update cleanup hook.

The hook maps package lifecycle events onto PackageCleaner runs. It is
the only entry point lifecycle scripts need: it honours the global skip
flag, resolves install paths through the installed repository, and
never raises for cleanup problems.
"""

import logging
from pathlib import Path
from typing import Protocol

from drupal_cleanup.core.cleaner import CleanupReport, CleanupStatus, PackageCleaner
from drupal_cleanup.core.installed import InstalledRepositoryError
from drupal_cleanup.core.settings import CleanupSettings
from drupal_cleanup.filesystem.operator import FilesystemOperator
from drupal_cleanup.models.config import CleanupConfig
from drupal_cleanup.models.event import (
    POST_PACKAGE_INSTALL,
    POST_PACKAGE_UPDATE,
    InstallOperation,
    UpdateOperation,
)
from drupal_cleanup.models.package import InstalledPackage, Package

logger = logging.getLogger(__name__)

SKIPPED_MESSAGE = "Clean-up is skipped"


class InstallPathResolver(Protocol):
    """Anything that can locate a package's install directory."""

    def get_install_path(self, name: str) -> Path: ...


class CleanupHook:
    """Cleans packages as they are installed or updated.

    Args:
        config: Cleanup rules from composer.json.
        settings: Flags for this run.
        resolver: Install-path resolver (usually an InstalledRepository).
            Required for event handling, not for clean().
        operator: Optional deletion primitive override.
    """

    def __init__(
        self,
        config: CleanupConfig,
        settings: CleanupSettings,
        resolver: InstallPathResolver | None = None,
        operator: FilesystemOperator | None = None,
    ) -> None:
        self._settings = settings
        self._resolver = resolver
        self._cleaner = PackageCleaner(config, settings, operator=operator)

    @staticmethod
    def subscribed_events() -> dict[str, str]:
        """Event name to handler method name."""
        return {
            POST_PACKAGE_INSTALL: "on_post_package_install",
            POST_PACKAGE_UPDATE: "on_post_package_update",
        }

    def dispatch(
        self, event_name: str, operation: InstallOperation | UpdateOperation
    ) -> CleanupReport:
        """Route an event to its handler.

        Args:
            event_name: post-package-install or post-package-update.
            operation: The operation carried by the event.

        Returns:
            CleanupReport for the affected package.

        Raises:
            ValueError: If the event is not subscribed.
        """
        method_name = self.subscribed_events().get(event_name)
        if method_name is None:
            msg = f"Unsupported event: {event_name}"
            raise ValueError(msg)
        return getattr(self, method_name)(operation)

    def on_post_package_install(self, operation: InstallOperation) -> CleanupReport:
        """Clean a freshly installed package."""
        return self._handle(operation.package)

    def on_post_package_update(self, operation: UpdateOperation) -> CleanupReport:
        """Clean the package an update installed (never the replaced one)."""
        return self._handle(operation.target_package)

    def clean(self, installed: InstalledPackage) -> CleanupReport:
        """Clean a package whose install path is already known."""
        if self._settings.should_skip:
            return self._skipped(installed.package)
        return self._cleaner.clean_package(installed)

    def _handle(self, package: Package) -> CleanupReport:
        if self._settings.should_skip:
            return self._skipped(package)

        skipped = self._cleaner.precheck(package)
        if skipped is not None:
            return skipped

        if self._resolver is None:
            message = "No installed repository to resolve the install path from"
            logger.error("%s: (%s) Error occurred: %s", package.name, package.type, message)
            return CleanupReport(package=package, status=CleanupStatus.FAILED, message=message)

        try:
            install_path = self._resolver.get_install_path(package.name)
        except InstalledRepositoryError as e:
            logger.error("%s: (%s) Error occurred: %s", package.name, package.type, e)
            return CleanupReport(package=package, status=CleanupStatus.FAILED, message=str(e))

        return self._cleaner.clean_package(InstalledPackage(package, install_path))

    def _skipped(self, package: Package) -> CleanupReport:
        logger.info(SKIPPED_MESSAGE)
        return CleanupReport(
            package=package, status=CleanupStatus.SKIPPED_DISABLED, message=SKIPPED_MESSAGE
        )
