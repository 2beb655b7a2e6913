"""Unit tests for FilesystemOperator.

Tests deletion of directories, files, symlinks, containment checks,
dry-run mode, and error handling.
"""

from pathlib import Path
from unittest.mock import patch

from drupal_cleanup.filesystem.operator import FilesystemOperator, RemovalResult, is_within


class TestFilesystemOperator:
    """Tests for FilesystemOperator."""

    def test_delete_directory(self, tmp_path: Path) -> None:
        """Deleting a directory removes the whole tree."""
        target = tmp_path / "tests"
        (target / "src").mkdir(parents=True)
        (target / "src" / "file.php").write_text("content")

        results = FilesystemOperator().delete([str(target)])

        assert results == [RemovalResult(path=str(target), success=True)]
        assert not target.exists()

    def test_delete_file(self, tmp_path: Path) -> None:
        target = tmp_path / "README.md"
        target.write_text("content")

        results = FilesystemOperator().delete([str(target)])

        assert results[0].success is True
        assert not target.exists()

    def test_delete_symlink_keeps_target(self, tmp_path: Path) -> None:
        """Deleting a symlinked directory removes the link, not the target."""
        real_dir = tmp_path / "real"
        real_dir.mkdir()
        (real_dir / "keep.txt").write_text("content")
        link = tmp_path / "link"
        link.symlink_to(real_dir)

        results = FilesystemOperator().delete([str(link)])

        assert results[0].success is True
        assert not link.is_symlink()
        assert (real_dir / "keep.txt").exists()

    def test_delete_dead_symlink(self, tmp_path: Path) -> None:
        link = tmp_path / "dead_link"
        link.symlink_to("/nonexistent/target")

        results = FilesystemOperator().delete([str(link)])

        assert results[0].success is True
        assert not link.is_symlink()

    def test_delete_nonexistent_path(self, tmp_path: Path) -> None:
        results = FilesystemOperator().delete([str(tmp_path / "gone")])

        assert results[0].success is False
        assert results[0].failed is True
        assert "does not exist" in (results[0].error or "")

    def test_failure_is_isolated(self, tmp_path: Path) -> None:
        """An OSError on one path does not prevent the next deletion."""
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"
        first.write_text("a")
        second.write_text("b")
        original_unlink = Path.unlink

        def flaky_unlink(self: Path, missing_ok: bool = False) -> None:
            if self.name == "first.txt":
                raise PermissionError("Permission denied")
            original_unlink(self, missing_ok=missing_ok)

        with patch.object(Path, "unlink", flaky_unlink):
            results = FilesystemOperator().delete([str(first), str(second)])

        assert [r.success for r in results] == [False, True]
        assert results[0].error == "Permission denied"
        assert first.exists()
        assert not second.exists()

    def test_rmtree_error(self, tmp_path: Path) -> None:
        target = tmp_path / "tests"
        target.mkdir()

        with patch("drupal_cleanup.filesystem.operator.shutil.rmtree", side_effect=OSError("busy")):
            results = FilesystemOperator().delete([str(target)])

        assert results[0].success is False
        assert results[0].error == "busy"

    def test_dry_run(self, tmp_path: Path) -> None:
        """Dry-run mode reports success without deleting anything."""
        target_dir = tmp_path / "tests"
        target_dir.mkdir()
        target_file = tmp_path / "README.md"
        target_file.write_text("content")

        op = FilesystemOperator(dry_run=True)
        results = op.delete([str(target_dir), str(target_file)])

        assert op.dry_run is True
        assert all(r.success and r.dry_run for r in results)
        assert target_dir.exists()
        assert target_file.exists()

    def test_dry_run_missing_path(self, tmp_path: Path) -> None:
        results = FilesystemOperator(dry_run=True).delete([str(tmp_path / "gone")])
        assert results[0].success is False

    def test_outside_root_refused(self, tmp_path: Path) -> None:
        root = tmp_path / "pkg"
        root.mkdir()
        victim = tmp_path / "victim.txt"
        victim.write_text("keep")

        results = FilesystemOperator().delete([str(root / ".." / "victim.txt")], root=root)

        assert results[0].success is False
        assert "outside" in (results[0].error or "")
        assert victim.exists()

    def test_root_itself_refused(self, tmp_path: Path) -> None:
        root = tmp_path / "pkg"
        root.mkdir()

        results = FilesystemOperator().delete([str(root / ".")], root=root)

        assert results[0].success is False
        assert root.exists()


class TestIsWithin:
    """Tests for is_within."""

    def test_descendant(self, tmp_path: Path) -> None:
        assert is_within(str(tmp_path / "a" / "b"), tmp_path)

    def test_parent_traversal(self, tmp_path: Path) -> None:
        assert not is_within(str(tmp_path / "a" / ".." / ".." / "x"), tmp_path / "a")

    def test_symlink_inside_root_pointing_out(self, tmp_path: Path) -> None:
        """A link living inside root is itself inside root."""
        root = tmp_path / "pkg"
        root.mkdir()
        (root / "link").symlink_to(tmp_path)
        assert is_within(str(root / "link"), root)

    def test_path_through_symlinked_dir(self, tmp_path: Path) -> None:
        """Paths reached through a symlinked parent are checked by real location."""
        root = tmp_path / "pkg"
        root.mkdir()
        outside = tmp_path / "outside"
        outside.mkdir()
        (root / "escape").symlink_to(outside)
        assert not is_within(str(root / "escape" / "file"), root)
