"""Package cleaner.

Deletes the paths matched by a package's effective rule set beneath its
install directory. Per-path failures are recorded in the returned report
and logged; they never abort the remaining paths or rules.
"""

import logging
import os
from dataclasses import dataclass, replace
from enum import Enum

from drupal_cleanup.core.rules import collect_rules, is_package_type_eligible, resolve_scopes
from drupal_cleanup.core.settings import CleanupSettings
from drupal_cleanup.filesystem.matcher import expand_rule
from drupal_cleanup.filesystem.operator import FilesystemOperator, RemovalResult
from drupal_cleanup.models.config import CleanupConfig
from drupal_cleanup.models.package import InstalledPackage, Package

logger = logging.getLogger(__name__)


class CleanupStatus(str, Enum):
    """Outcome of cleaning one package.

    Attributes:
        CLEANED: Rules were applied (individual deletions may have failed).
        SKIPPED_DISABLED: DRUPAL_CLEANUP_SKIP is set.
        SKIPPED_INELIGIBLE: No active scope configures the package type.
        SKIPPED_NO_RULES: The effective rule set is empty.
        FAILED: The package could not be located.
    """

    CLEANED = "cleaned"
    SKIPPED_DISABLED = "skipped_disabled"
    SKIPPED_INELIGIBLE = "skipped_ineligible"
    SKIPPED_NO_RULES = "skipped_no_rules"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """Deletion results for the paths one rule matched."""

    rule: str
    results: tuple[RemovalResult, ...] = ()


@dataclass(frozen=True, slots=True)
class CleanupReport:
    """Everything that happened while cleaning one package.

    Attributes:
        package: The package that was processed.
        status: Overall outcome.
        rules: Effective rule set that was applied.
        outcomes: Per-rule deletion results, in rule order.
        message: Human-readable summary or failure reason.
    """

    package: Package
    status: CleanupStatus
    rules: tuple[str, ...] = ()
    outcomes: tuple[RuleOutcome, ...] = ()
    message: str | None = None

    @property
    def results(self) -> list[RemovalResult]:
        """All removal results, flattened in processing order."""
        return [result for outcome in self.outcomes for result in outcome.results]

    @property
    def removed(self) -> int:
        """Number of paths successfully deleted (or that would be, in dry-run)."""
        return sum(1 for r in self.results if r.success)

    @property
    def failures(self) -> list[RemovalResult]:
        return [r for r in self.results if r.failed]

    @property
    def skipped(self) -> bool:
        return self.status in (
            CleanupStatus.SKIPPED_DISABLED,
            CleanupStatus.SKIPPED_INELIGIBLE,
            CleanupStatus.SKIPPED_NO_RULES,
        )


def format_message(package: Package, message: str) -> str:
    """Format a per-package diagnostic line."""
    return f"  - Cleaning {package.name} ({package.type}): {message}"


def _is_claimed(path: str, claimed: set[str]) -> bool:
    """Check whether an earlier rule already removed path or one of its parents."""
    candidate = os.path.abspath(path)
    return any(candidate == c or candidate.startswith(c + os.sep) for c in claimed)


class PackageCleaner:
    """Applies cleanup rules to installed packages.

    Args:
        config: Cleanup rules from composer.json.
        settings: Flags for this run.
        operator: Deletion primitive. Defaults to a FilesystemOperator
            honouring settings.dry_run.
    """

    def __init__(
        self,
        config: CleanupConfig,
        settings: CleanupSettings,
        operator: FilesystemOperator | None = None,
    ) -> None:
        self._config = config
        self._operator = operator or FilesystemOperator(dry_run=settings.dry_run)
        self._scopes = resolve_scopes(settings.dev_mode)

    def effective_rules(self, package_type: str) -> list[str]:
        """Get the effective rule set for a package type in this run."""
        return collect_rules(self._config, package_type, self._scopes)

    def is_eligible(self, package_type: str) -> bool:
        """Check whether a package type has settings in any active scope."""
        return is_package_type_eligible(self._config, package_type, self._scopes)

    def precheck(self, package: Package) -> CleanupReport | None:
        """Report why a package would be skipped, before touching the filesystem.

        Args:
            package: The package about to be cleaned.

        Returns:
            A skipped CleanupReport, or None if the package has rules to apply.
        """
        package_type = package.type

        if not self.is_eligible(package_type):
            status = CleanupStatus.SKIPPED_INELIGIBLE
        elif not self.effective_rules(package_type):
            status = CleanupStatus.SKIPPED_NO_RULES
        else:
            return None

        message = f"skipped as settings for package type {package_type} missing"
        logger.info(format_message(package, message))
        return CleanupReport(package=package, status=status, message=message)

    def clean_package(self, installed: InstalledPackage) -> CleanupReport:
        """Delete everything the effective rules match inside the install path.

        Args:
            installed: The package to clean and its install directory.

        Returns:
            CleanupReport describing what was removed and what failed.
        """
        package = installed.package
        package_type = package.type
        install_path = installed.install_path

        skipped = self.precheck(package)
        if skipped is not None:
            return skipped
        rules = self.effective_rules(package_type)

        outcomes: list[RuleOutcome] = []
        claimed: set[str] = set()
        for rule in rules:
            paths = [
                path for path in expand_rule(install_path, rule) if not _is_claimed(path, claimed)
            ]
            if not paths:
                outcomes.append(RuleOutcome(rule=rule))
                continue

            results = self._operator.delete(paths, root=install_path)
            for result in results:
                if result.failed:
                    logger.error(
                        "%s: (%s) Error occurred: %s", package.name, package_type, result.error
                    )
                else:
                    claimed.add(os.path.abspath(result.path))
            outcomes.append(RuleOutcome(rule=rule, results=tuple(results)))

        report = CleanupReport(
            package=package,
            status=CleanupStatus.CLEANED,
            rules=tuple(rules),
            outcomes=tuple(outcomes),
        )
        verb = "would remove" if self._operator.dry_run else "removed"
        message = f"{verb} {report.removed}"
        logger.info(format_message(package, message))
        return replace(report, message=message)
