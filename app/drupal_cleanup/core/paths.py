"""Path management for drupal-cleanup.

Composer keeps everything relative to the project root: the manifest
(``composer.json``, or whatever ``$COMPOSER`` names), the vendor directory
and the installed repository under ``<vendor>/composer/installed.json``.
User-level settings follow the XDG Base Directory Specification.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "drupal-cleanup"

# Composer defaults
DEFAULT_MANIFEST_NAME = "composer.json"
DEFAULT_VENDOR_DIR = "vendor"


def get_config_dir() -> Path:
    """Get the user configuration directory path.

    Returns:
        Path to ~/.config/drupal-cleanup/ (or XDG_CONFIG_HOME/drupal-cleanup/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/drupal-cleanup/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_manifest_path() -> Path:
    """Get the default manifest file path.

    Composer honours the COMPOSER environment variable as the manifest
    file name, so we do the same.

    Returns:
        Path to composer.json (or $COMPOSER) in the working directory.
    """
    return Path(os.environ.get("COMPOSER") or DEFAULT_MANIFEST_NAME)


def get_vendor_dir(manifest_path: Path, vendor_dir: str = DEFAULT_VENDOR_DIR) -> Path:
    """Get the absolute vendor directory for a project.

    Args:
        manifest_path: Path to the project's composer.json.
        vendor_dir: The configured vendor-dir, relative to the project root
            unless absolute.

    Returns:
        Absolute path to the vendor directory.
    """
    vendor = Path(vendor_dir)
    if not vendor.is_absolute():
        vendor = manifest_path.resolve().parent / vendor
    return vendor


def get_installed_json_path(vendor_dir: Path) -> Path:
    """Get the path of Composer's installed repository file.

    Returns:
        Path to <vendor>/composer/installed.json.
    """
    return vendor_dir / "composer" / "installed.json"
