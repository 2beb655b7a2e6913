"""Filesystem matching and deletion.

This module expands cleanup rules into paths beneath a package's
install directory and deletes them.
"""

from drupal_cleanup.filesystem.matcher import anchor_rule, expand_rule
from drupal_cleanup.filesystem.operator import FilesystemOperator, RemovalResult, is_within

__all__ = [
    "FilesystemOperator",
    "RemovalResult",
    "anchor_rule",
    "expand_rule",
    "is_within",
]
