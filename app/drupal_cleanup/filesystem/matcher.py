"""Glob expansion of cleanup rules.

Rules are shell-style glob patterns anchored at a package's install
directory. ``*`` does not match a leading dot and ``**`` has no special
meaning, so ``*/tests`` matches one directory level only.
"""

import glob
import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)


def anchor_rule(install_path: Path, rule: str) -> str:
    """Join a rule onto an install path.

    Glob characters in the install path itself are escaped so that only
    the rule is treated as a pattern.

    Args:
        install_path: Package install directory.
        rule: Glob pattern relative to the install directory.

    Returns:
        The anchored glob pattern.
    """
    return glob.escape(str(install_path)) + os.sep + rule


def expand_rule(install_path: Path, rule: str) -> list[str]:
    """Expand a rule into the existing paths it matches.

    A pattern that cannot be evaluated contributes nothing; expansion
    errors are never raised.

    Args:
        install_path: Package install directory.
        rule: Glob pattern relative to the install directory.

    Returns:
        Sorted list of matching paths.
    """
    if not rule.strip():
        logger.warning("Ignoring empty cleanup rule for %s", install_path)
        return []
    if os.path.isabs(rule):
        logger.warning("Ignoring absolute cleanup rule %r for %s", rule, install_path)
        return []

    pattern = anchor_rule(install_path, rule)
    try:
        matches = glob.glob(pattern)
    except (OSError, re.error, ValueError) as e:
        logger.debug("Failed to expand %r: %s", pattern, e)
        return []

    return sorted(matches)
