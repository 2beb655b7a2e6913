"""Shared Rich display functions for cleanup reports.

Provides table builders and summary printers used by the clean, hook
and sweep commands.
"""

from rich.markup import escape
from rich.table import Table

from drupal_cleanup.core.cleaner import CleanupReport, CleanupStatus
from drupal_cleanup.models.config import Scope
from drupal_cleanup.utils.formatting import console, print_success, print_verbose


def create_report_table(report: CleanupReport) -> Table:
    """Create a Rich table listing every path a package's rules matched.

    Args:
        report: Report of one package.

    Returns:
        Rich Table with Status, Rule, Path and Message columns.
    """
    package = report.package
    table = Table(
        title=f"[package]{package.name}[/] [package_type]({package.type})[/]",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Rule", no_wrap=True)
    table.add_column("Path")
    table.add_column("Message")

    for outcome in report.outcomes:
        if not outcome.results:
            table.add_row("[muted]-[/muted]", escape(outcome.rule), "[muted]no match[/muted]", "")
            continue
        for result in outcome.results:
            if result.success:
                status = "[muted]DRY[/muted]" if result.dry_run else "[success]OK[/success]"
                message = ""
            else:
                status = "[error]FAIL[/error]"
                message = escape(result.error or "Unknown error")
            path = f"[removed]{escape(result.path)}[/removed]"
            table.add_row(status, escape(outcome.rule), path, message)

    return table


def print_report(report: CleanupReport) -> None:
    """Print the matched-paths table of a cleaned package in verbose mode.

    The one-line per-package diagnostic is emitted by the cleaner's logger.
    """
    if report.status == CleanupStatus.CLEANED and report.results:
        print_verbose(create_report_table(report))


def print_reports_summary(reports: list[CleanupReport]) -> None:
    """Print totals over a set of package reports."""
    cleaned = [r for r in reports if r.status == CleanupStatus.CLEANED]
    removed = sum(r.removed for r in cleaned)
    failed = sum(len(r.failures) for r in cleaned)
    unresolved = sum(1 for r in reports if r.status == CleanupStatus.FAILED)
    dry_run = any(result.dry_run for r in cleaned for result in r.results)
    verb = "Would remove" if dry_run else "Removed"

    if failed == 0 and unresolved == 0:
        print_success(f"{verb} {removed} path(s) from {len(cleaned)} package(s).")
        return

    parts = [f"[success]{removed} removed[/success]"]
    if failed:
        parts.append(f"[error]{failed} failed[/error]")
    if unresolved:
        parts.append(f"[error]{unresolved} package(s) not found[/error]")
    console.print(f"\n{', '.join(parts)}")


def create_rules_table(
    package_type: str,
    scopes: tuple[Scope, ...],
    declared: list[tuple[Scope, str]],
    excluded: set[str],
) -> Table:
    """Create a Rich table showing how the effective rule set is built.

    Args:
        package_type: Composer package type.
        scopes: Active scopes.
        declared: (scope, pattern) pairs in application order.
        excluded: Patterns listed under exclude.

    Returns:
        Rich Table with Scope, Pattern and State columns.
    """
    active = ", ".join(scope.value for scope in scopes)
    table = Table(
        title=f"Rules for [package_type]{package_type}[/] ({active})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Scope", width=8)
    table.add_column("Pattern", no_wrap=True)
    table.add_column("State", width=10)

    for scope, pattern in declared:
        if pattern in excluded:
            state = "[kept]excluded[/kept]"
        else:
            state = "[removed]applied[/removed]"
        table.add_row(scope.value, escape(pattern), state)

    return table
