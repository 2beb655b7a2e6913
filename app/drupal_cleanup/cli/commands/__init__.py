"""CLI commands for drupal-cleanup.

This package contains all subcommand implementations.
"""

from drupal_cleanup.cli.commands import clean, hook, rules, sweep

__all__ = ["clean", "hook", "rules", "sweep"]
