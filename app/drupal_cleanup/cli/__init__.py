"""CLI package for drupal-cleanup.

This package contains the Typer application and all subcommands.
"""

from drupal_cleanup.cli.main import app

__all__ = ["app"]
