"""Utility modules for drupal-cleanup.

This module exports commonly used utility functions.
"""

from drupal_cleanup.utils.formatting import (
    configure_logging,
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_verbose,
    set_verbose,
)

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_verbose",
    "set_verbose",
]
