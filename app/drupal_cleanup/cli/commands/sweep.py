"""Sweep command implementation.

Cleans every package recorded in vendor/composer/installed.json. Meant
for the post-install-cmd and post-update-cmd scripts of composer.json.
"""

from typing import Annotated

import typer

from drupal_cleanup.cli.display import print_report, print_reports_summary
from drupal_cleanup.cli.types import (
    DevModeOption,
    DryRunOption,
    StrictOption,
    get_settings,
    is_quiet,
    load_project,
    require_repository,
)
from drupal_cleanup.core.cleaner import CleanupReport
from drupal_cleanup.core.hook import SKIPPED_MESSAGE, CleanupHook
from drupal_cleanup.utils.formatting import print_info, print_verbose


def sweep(
    ctx: typer.Context,
    only_type: Annotated[
        list[str] | None,
        typer.Option("--only-type", help="Limit to these package types (repeatable)."),
    ] = None,
    dev: DevModeOption = None,
    dry_run: DryRunOption = False,
    strict: StrictOption = False,
) -> None:
    """Remove configured files from every installed package.

    Examples:
        drupal-cleanup sweep
        drupal-cleanup sweep --no-dev --dry-run
        drupal-cleanup sweep --only-type drupal-module --only-type drupal-theme
    """
    settings = get_settings(dev, dry_run)
    if settings.should_skip:
        print_verbose(SKIPPED_MESSAGE)
        return

    manifest_path, manifest = load_project(ctx)
    repository = require_repository(manifest_path, manifest)

    packages = repository.packages()
    if only_type:
        packages = [p for p in packages if p.type in only_type]

    if not packages:
        print_info("No installed packages to clean.")
        return

    cleanup_hook = CleanupHook(manifest.cleanup, settings, resolver=repository)
    reports: list[CleanupReport] = []
    for installed in packages:
        report = cleanup_hook.clean(installed)
        print_report(report)
        reports.append(report)

    if not is_quiet(ctx):
        print_reports_summary(reports)

    if strict and any(r.failures for r in reports):
        raise typer.Exit(code=1)
