"""Manifest (composer.json) loading.

This module loads the project's composer.json and validates the
``extra.drupal-cleanup`` section with Pydantic models. The cleaner never
reads configuration from anywhere else.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from drupal_cleanup.core.paths import get_manifest_path
from drupal_cleanup.models.manifest import EXTRA_KEY, ComposerManifest


class ManifestError(Exception):
    """composer.json could not be loaded."""


class ManifestNotFoundError(ManifestError):
    """composer.json does not exist."""


class ManifestParseError(ManifestError):
    """composer.json is not valid JSON."""


class ManifestValidationError(ManifestError):
    """composer.json content does not match the expected shape."""


def load_manifest(path: Path | None = None) -> ComposerManifest:
    """Load and validate composer.json.

    The cleanup section is validated eagerly so configuration mistakes
    surface before any package is touched.

    Args:
        path: composer.json location. Defaults to $COMPOSER or ./composer.json.

    Returns:
        Validated ComposerManifest object.

    Raises:
        ManifestNotFoundError: If the file is missing.
        ManifestParseError: If the JSON syntax is invalid.
        ManifestValidationError: If extra.drupal-cleanup is malformed.
    """
    manifest_path = path or get_manifest_path()

    if not manifest_path.exists():
        raise ManifestNotFoundError(f"Manifest not found: {manifest_path}")

    try:
        with open(manifest_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Invalid JSON syntax: {e}") from e
    except OSError as e:
        raise ManifestError(f"Failed to read manifest: {e}") from e

    if not isinstance(data, dict):
        raise ManifestValidationError("Invalid manifest content: top level must be an object")

    try:
        manifest = ComposerManifest.model_validate(data)
        _ = manifest.cleanup
    except ValidationError as e:
        raise ManifestValidationError(f"Invalid extra.{EXTRA_KEY} content: {e}") from e

    return manifest


def require_manifest(manifest_path: Path | None = None) -> ComposerManifest:
    """Load composer.json for a CLI command, exiting with code 1 on failure.

    Args:
        manifest_path: Manifest to load instead of the default.

    Returns:
        Loaded and validated ComposerManifest.

    Raises:
        typer.Exit: If the manifest is missing, malformed or invalid.
    """
    import typer

    from drupal_cleanup.utils.formatting import print_error, print_info

    path = manifest_path or get_manifest_path()
    try:
        return load_manifest(path)
    except ManifestNotFoundError as e:
        print_error(f"Manifest not found: {path}")
        print_info("Run from the project root or pass --manifest / set COMPOSER.")
        raise typer.Exit(code=1) from e
    except ManifestError as e:
        print_error(f"Failed to load manifest: {e}")
        raise typer.Exit(code=1) from e
