"""Clean command implementation.

Cleans a single package, either at an explicit path or at the location
recorded in vendor/composer/installed.json.
"""

from pathlib import Path
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
from drupal_cleanup.core.cleaner import CleanupStatus
from drupal_cleanup.core.hook import SKIPPED_MESSAGE, CleanupHook
from drupal_cleanup.models.package import InstalledPackage, Package
from drupal_cleanup.utils.formatting import print_error, print_verbose


def clean(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Package name, e.g. drupal/token.")],
    package_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Package type (default: from installed.json)."),
    ] = None,
    path: Annotated[
        Path | None,
        typer.Option(
            "--path",
            "-p",
            help="Install directory (default: from installed.json).",
            file_okay=False,
        ),
    ] = None,
    dev: DevModeOption = None,
    dry_run: DryRunOption = False,
    strict: StrictOption = False,
) -> None:
    """Remove configured files from one installed package.

    Examples:
        drupal-cleanup clean drupal/token
        drupal-cleanup clean drupal/token --type drupal-module --path web/modules/contrib/token
        drupal-cleanup -v clean drupal/token --dry-run
    """
    settings = get_settings(dev, dry_run)
    if settings.should_skip:
        print_verbose(SKIPPED_MESSAGE)
        return

    manifest_path, manifest = load_project(ctx)

    if package_type is not None and path is not None:
        installed = InstalledPackage(Package(name=name, type=package_type), path.absolute())
    else:
        repository = require_repository(manifest_path, manifest)
        if name not in repository:
            print_error(f"Package is not installed: {name}")
            raise typer.Exit(code=1)
        recorded = repository.get(name)
        installed = InstalledPackage(
            Package(name=name, type=package_type or recorded.type),
            path.absolute() if path is not None else recorded.install_path,
        )

    hook = CleanupHook(manifest.cleanup, settings)
    report = hook.clean(installed)

    print_report(report)
    if report.status == CleanupStatus.CLEANED and not is_quiet(ctx):
        print_reports_summary([report])

    if strict and report.failures:
        raise typer.Exit(code=1)
