"""Unit tests for cli/display.py.

Tests for shared Rich display functions used by clean, hook, sweep and
rules commands.
"""

import io

import pytest
from drupal_cleanup.cli.display import (
    create_report_table,
    create_rules_table,
    print_report,
    print_reports_summary,
)
from drupal_cleanup.core.cleaner import CleanupReport, CleanupStatus, RuleOutcome
from drupal_cleanup.core.theme import get_theme
from drupal_cleanup.filesystem.operator import RemovalResult
from drupal_cleanup.models.config import Scope
from drupal_cleanup.models.package import Package
from drupal_cleanup.utils.formatting import set_verbose
from rich.console import Console

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def package() -> Package:
    return Package(name="drupal/token", type="drupal-module")


@pytest.fixture
def cleaned_report(package: Package) -> CleanupReport:
    """A report with one removal, one failure and one rule without matches."""
    return CleanupReport(
        package=package,
        status=CleanupStatus.CLEANED,
        rules=("tests", "*.md", "node_modules"),
        outcomes=(
            RuleOutcome("tests", (RemovalResult("/srv/token/tests", success=True),)),
            RuleOutcome(
                "*.md",
                (RemovalResult("/srv/token/README.md", success=False, error="Permission denied"),),
            ),
            RuleOutcome("node_modules"),
        ),
        message="removed 1",
    )


@pytest.fixture
def dry_run_report(package: Package) -> CleanupReport:
    return CleanupReport(
        package=package,
        status=CleanupStatus.CLEANED,
        rules=("tests",),
        outcomes=(
            RuleOutcome("tests", (RemovalResult("/srv/token/tests", success=True, dry_run=True),)),
        ),
        message="would remove 1",
    )


def _capture_console_output(func: object, *args: object, **kwargs: object) -> str:
    """Capture Rich console output by temporarily replacing the console.

    Patches the module-level console used by display functions and captures
    output to a StringIO buffer.
    """
    import drupal_cleanup.cli.display as display_mod
    import drupal_cleanup.utils.formatting as fmt_mod

    buf = io.StringIO()
    test_console = Console(theme=get_theme(), file=buf, color_system=None, width=200)

    original_display_console = display_mod.console
    original_fmt_console = fmt_mod.console
    display_mod.console = test_console
    fmt_mod.console = test_console
    try:
        func(*args, **kwargs)  # type: ignore[operator]
    finally:
        display_mod.console = original_display_console
        fmt_mod.console = original_fmt_console

    return buf.getvalue()


def _render(renderable: object) -> str:
    buf = io.StringIO()
    Console(theme=get_theme(), file=buf, color_system=None, width=200).print(renderable)
    return buf.getvalue()


# ===========================================================================
# create_report_table
# ===========================================================================


class TestCreateReportTable:
    """Tests for create_report_table."""

    def test_columns(self, cleaned_report: CleanupReport) -> None:
        table = create_report_table(cleaned_report)
        assert [c.header for c in table.columns] == ["Status", "Rule", "Path", "Message"]

    def test_rows(self, cleaned_report: CleanupReport) -> None:
        output = _render(create_report_table(cleaned_report))

        assert "OK" in output
        assert "FAIL" in output
        assert "Permission denied" in output
        assert "no match" in output
        assert "drupal/token" in output

    def test_dry_run_rows(self, dry_run_report: CleanupReport) -> None:
        output = _render(create_report_table(dry_run_report))
        assert "DRY" in output

    def test_markup_in_paths_is_escaped(self, package: Package) -> None:
        report = CleanupReport(
            package=package,
            status=CleanupStatus.CLEANED,
            outcomes=(RuleOutcome("[a]*", (RemovalResult("/srv/[a]b", success=True),)),),
        )
        output = _render(create_report_table(report))
        assert "/srv/[a]b" in output
        assert "[a]*" in output


# ===========================================================================
# print_report
# ===========================================================================


class TestPrintReport:
    """Tests for print_report."""

    def test_silent_without_verbose(self, cleaned_report: CleanupReport) -> None:
        assert _capture_console_output(print_report, cleaned_report) == ""

    def test_verbose_cleaned(self, cleaned_report: CleanupReport) -> None:
        set_verbose(True)
        output = _capture_console_output(print_report, cleaned_report)
        assert "Status" in output
        assert "Cleaning" not in output

    def test_verbose_skipped_prints_nothing(self, package: Package) -> None:
        """The skip reason is logged by the cleaner, not repeated here."""
        report = CleanupReport(
            package=package,
            status=CleanupStatus.SKIPPED_INELIGIBLE,
            message="skipped as settings for package type drupal-module missing",
        )
        set_verbose(True)
        output = _capture_console_output(print_report, report)
        assert output == ""


# ===========================================================================
# print_reports_summary
# ===========================================================================


class TestPrintReportsSummary:
    """Tests for print_reports_summary."""

    def test_all_succeeded(self, package: Package) -> None:
        report = CleanupReport(
            package=package,
            status=CleanupStatus.CLEANED,
            outcomes=(RuleOutcome("tests", (RemovalResult("/srv/token/tests", success=True),)),),
        )
        output = _capture_console_output(print_reports_summary, [report])
        assert "Removed 1 path(s) from 1 package(s)." in output

    def test_dry_run(self, dry_run_report: CleanupReport) -> None:
        output = _capture_console_output(print_reports_summary, [dry_run_report])
        assert "Would remove 1 path(s) from 1 package(s)." in output

    def test_with_failures(self, cleaned_report: CleanupReport, package: Package) -> None:
        missing = CleanupReport(package=package, status=CleanupStatus.FAILED, message="gone")
        output = _capture_console_output(print_reports_summary, [cleaned_report, missing])
        assert "1 removed" in output
        assert "1 failed" in output
        assert "1 package(s) not found" in output

    def test_skipped_reports_not_counted(self, package: Package) -> None:
        skipped = CleanupReport(package=package, status=CleanupStatus.SKIPPED_DISABLED)
        output = _capture_console_output(print_reports_summary, [skipped])
        assert "Removed 0 path(s) from 0 package(s)." in output


# ===========================================================================
# create_rules_table
# ===========================================================================


class TestCreateRulesTable:
    """Tests for create_rules_table."""

    def test_states(self) -> None:
        table = create_rules_table(
            "drupal-module",
            (Scope.DEFAULT, Scope.NO_DEV),
            [(Scope.DEFAULT, "tests"), (Scope.NO_DEV, "README.md")],
            {"README.md"},
        )
        output = _render(table)

        assert "Rules for drupal-module (default, no-dev)" in output
        assert "applied" in output
        assert "excluded" in output
