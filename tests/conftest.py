"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from drupal_cleanup.utils.formatting import set_verbose

ProjectFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def reset_output_state() -> Iterator[None]:
    """Undo logging and verbosity changes made by CLI invocations."""
    yield
    set_verbose(False)
    pkg_logger = logging.getLogger("drupal_cleanup")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment from leaking into settings."""
    for var in ("DRUPAL_CLEANUP_SKIP", "COMPOSER_DEV_MODE", "COMPOSER"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_cleanup() -> dict[str, Any]:
    """A typical extra.drupal-cleanup section."""
    return {
        "default": {
            "drupal-module": ["tests", "*.md"],
            "drupal-theme": ["node_modules"],
        },
        "dev": {"drupal-module": ["docs"]},
        "no-dev": {"drupal-module": ["*.txt"]},
        "exclude": ["README.md"],
    }


@pytest.fixture
def module_dir(tmp_path: Path) -> Path:
    """A package directory with typical cleanup targets."""
    root = tmp_path / "web" / "modules" / "contrib" / "token"
    (root / "tests" / "src").mkdir(parents=True)
    (root / "tests" / "src" / "TokenTest.php").write_text("<?php\n")
    (root / "docs").mkdir()
    (root / "docs" / "index.md").write_text("# Docs\n")
    (root / "src").mkdir()
    (root / "src" / "Token.php").write_text("<?php\n")
    (root / "README.md").write_text("# Token\n")
    (root / "CHANGELOG.md").write_text("# Changes\n")
    (root / "LICENSE.txt").write_text("GPL\n")
    (root / "token.info.yml").write_text("name: Token\n")
    return root


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Factory writing composer.json and vendor/composer/installed.json.

    Packages are given as (name, type, install-path relative to the
    project root). Their directories are created.
    """

    def _make(
        cleanup: dict[str, Any] | None = None,
        packages: list[tuple[str, str, str]] | None = None,
        installed_json: bool = True,
    ) -> Path:
        composer: dict[str, Any] = {"name": "acme/site", "type": "project"}
        if cleanup is not None:
            composer["extra"] = {"drupal-cleanup": cleanup}
        manifest = tmp_path / "composer.json"
        manifest.write_text(json.dumps(composer, indent=4))

        if installed_json:
            composer_dir = tmp_path / "vendor" / "composer"
            composer_dir.mkdir(parents=True, exist_ok=True)
            entries = []
            for name, package_type, rel_path in packages or []:
                (tmp_path / rel_path).mkdir(parents=True, exist_ok=True)
                entries.append(
                    {
                        "name": name,
                        "type": package_type,
                        "install-path": f"../../{rel_path}",
                    }
                )
            (composer_dir / "installed.json").write_text(
                json.dumps({"packages": entries, "dev": True}, indent=4)
            )

        return manifest

    return _make
