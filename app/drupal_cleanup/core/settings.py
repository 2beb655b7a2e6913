"""Runtime settings built once from the environment and CLI flags."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

SKIP_ENV_VAR = "DRUPAL_CLEANUP_SKIP"
DEV_MODE_ENV_VAR = "COMPOSER_DEV_MODE"

# Composer exports COMPOSER_DEV_MODE=1 to scripts when dev requirements are installed
DEV_MODE_SENTINEL = "1"


def _is_truthy(value: str | None) -> bool:
    """Interpret an environment value the way Composer scripts do.

    Unset, empty and "0" are false; everything else is true.
    """
    return bool(value) and value != "0"


@dataclass(frozen=True, slots=True)
class CleanupSettings:
    """Flags controlling one cleanup run.

    Attributes:
        skip: Global kill switch; when set nothing is cleaned.
        dev_mode: Whether dev requirements are installed in this run.
        dry_run: Report what would be deleted without deleting.
    """

    skip: bool = False
    dev_mode: bool = False
    dry_run: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        dev_mode: bool | None = None,
        dry_run: bool = False,
    ) -> "CleanupSettings":
        """Build settings from environment variables.

        Args:
            environ: Environment mapping. Defaults to os.environ.
            dev_mode: Explicit dev mode, overriding COMPOSER_DEV_MODE.
            dry_run: Whether deletions should only be simulated.

        Returns:
            CleanupSettings for this run.
        """
        env = os.environ if environ is None else environ
        if dev_mode is None:
            dev_mode = env.get(DEV_MODE_ENV_VAR) == DEV_MODE_SENTINEL
        return cls(
            skip=_is_truthy(env.get(SKIP_ENV_VAR)),
            dev_mode=dev_mode,
            dry_run=dry_run,
        )

    @property
    def should_skip(self) -> bool:
        """True if the whole cleanup mechanism is disabled for this run."""
        return self.skip
