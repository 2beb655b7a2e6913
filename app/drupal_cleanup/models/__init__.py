"""Data models for drupal-cleanup.

This module exports the core data structures used throughout the application.
"""

from drupal_cleanup.models.config import CleanupConfig, Scope
from drupal_cleanup.models.event import (
    POST_PACKAGE_INSTALL,
    POST_PACKAGE_UPDATE,
    InstallOperation,
    UpdateOperation,
)
from drupal_cleanup.models.manifest import ComposerManifest
from drupal_cleanup.models.package import InstalledPackage, Package

__all__ = [
    "POST_PACKAGE_INSTALL",
    "POST_PACKAGE_UPDATE",
    "CleanupConfig",
    "ComposerManifest",
    "InstallOperation",
    "InstalledPackage",
    "Package",
    "Scope",
    "UpdateOperation",
]
