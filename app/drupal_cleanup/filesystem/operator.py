"""Filesystem deletion operator.

Handles deletion of matched package paths with dry-run support and a
containment check that keeps deletions inside the package directory.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of a single filesystem deletion.

    Attributes:
        path: Path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        return not self.success


def is_within(path: str, root: Path) -> bool:
    """Check that a path lies strictly inside root.

    Both sides are normalized lexically; the last path component is not
    resolved so that a symlink inside root pointing elsewhere is removed
    as a link rather than followed.

    Args:
        path: Candidate path.
        root: Directory that must contain the path.

    Returns:
        True if path is a descendant of root.
    """
    candidate = Path(os.path.normpath(os.path.abspath(path)))
    parent = Path(os.path.realpath(candidate.parent))
    base = Path(os.path.realpath(root))
    resolved = parent / candidate.name
    return resolved != base and resolved.is_relative_to(base)


class FilesystemOperator:
    """Deletes files and directory trees.

    Attributes:
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the FilesystemOperator.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def delete(self, paths: list[str], root: Path | None = None) -> list[RemovalResult]:
        """Delete multiple paths and return one result per path.

        Failures are isolated per path: an error deleting one path never
        prevents the next one from being attempted.

        Args:
            paths: Paths to delete.
            root: If given, paths outside this directory are refused.

        Returns:
            List of RemovalResult, one per input path.
        """
        results: list[RemovalResult] = []
        for path in paths:
            if root is None or is_within(path, root):
                results.append(self.delete_one(path))
                continue
            logger.warning("Refusing to delete %s: outside of %s", path, root)
            results.append(
                RemovalResult(path=path, success=False, error=f"Path is outside of {root}: {path}")
            )
        return results

    def delete_one(self, path: str) -> RemovalResult:
        """Delete a single path.

        Real directories are removed with their contents. Anything else,
        including a symlink to a directory, is unlinked.

        Args:
            path: Path to delete.

        Returns:
            RemovalResult indicating success or failure.
        """
        target = Path(path)
        if not os.path.lexists(target):
            return RemovalResult(
                path=path,
                success=False,
                error=f"Path does not exist: {path}",
                dry_run=self._dry_run,
            )

        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return RemovalResult(path=path, success=True, dry_run=True)

        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as e:
            return RemovalResult(path=path, success=False, error=str(e))

        logger.debug("Deleted %s", path)
        return RemovalResult(path=path, success=True)
