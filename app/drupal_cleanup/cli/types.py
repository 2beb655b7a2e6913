"""Shared types and utilities for CLI commands.

This module provides common options and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from pathlib import Path
from typing import Annotated

import typer

from drupal_cleanup.core.installed import InstalledRepository, InstalledRepositoryError
from drupal_cleanup.core.manifest import require_manifest
from drupal_cleanup.core.paths import get_installed_json_path, get_manifest_path, get_vendor_dir
from drupal_cleanup.core.settings import CleanupSettings
from drupal_cleanup.models.manifest import ComposerManifest
from drupal_cleanup.utils.formatting import print_error

DevModeOption = Annotated[
    bool | None,
    typer.Option(
        "--dev/--no-dev",
        help="Force the dev or no-dev scope (default: from COMPOSER_DEV_MODE).",
        show_default=False,
    ),
]

DryRunOption = Annotated[
    bool,
    typer.Option("--dry-run", "-n", help="Show what would be deleted without deleting."),
]

StrictOption = Annotated[
    bool,
    typer.Option("--strict", help="Exit with code 1 if any deletion failed."),
]


def get_manifest_option(ctx: typer.Context) -> Path:
    """Get the manifest path chosen on the command line, or the default."""
    obj = ctx.obj or {}
    return obj.get("manifest") or get_manifest_path()


def is_quiet(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("quiet"))


def load_project(ctx: typer.Context) -> tuple[Path, ComposerManifest]:
    """Load composer.json or exit with an error message.

    Returns:
        Tuple of (manifest path, manifest).
    """
    path = get_manifest_option(ctx)
    return path, require_manifest(path)


def get_settings(dev: bool | None, dry_run: bool) -> CleanupSettings:
    """Build run settings from the environment and CLI flags."""
    return CleanupSettings.from_env(dev_mode=dev, dry_run=dry_run)


def require_repository(manifest_path: Path, manifest: ComposerManifest) -> InstalledRepository:
    """Load the installed repository or exit with an error message.

    Args:
        manifest_path: Path to composer.json.
        manifest: The loaded manifest (for vendor-dir).

    Returns:
        InstalledRepository for the project.

    Raises:
        typer.Exit: If installed.json cannot be loaded.
    """
    vendor_dir = get_vendor_dir(manifest_path, manifest.vendor_dir)
    try:
        return InstalledRepository.load(get_installed_json_path(vendor_dir), vendor_dir)
    except InstalledRepositoryError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
