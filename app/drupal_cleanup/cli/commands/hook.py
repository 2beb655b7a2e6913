"""Hook command implementation.

Entry point for per-package lifecycle scripts: routes a
post-package-install or post-package-update event through CleanupHook.
Cleanup problems never fail the surrounding install unless --strict.
"""

from enum import Enum
from typing import Annotated

import typer

from drupal_cleanup.cli.display import print_report
from drupal_cleanup.cli.types import (
    DevModeOption,
    DryRunOption,
    StrictOption,
    get_settings,
    load_project,
    require_repository,
)
from drupal_cleanup.core.cleaner import CleanupStatus
from drupal_cleanup.core.hook import SKIPPED_MESSAGE, CleanupHook
from drupal_cleanup.models.event import (
    POST_PACKAGE_INSTALL,
    POST_PACKAGE_UPDATE,
    InstallOperation,
    UpdateOperation,
)
from drupal_cleanup.models.package import Package
from drupal_cleanup.utils.formatting import print_error, print_verbose


class HookEvent(str, Enum):
    """Package events the hook reacts to."""

    INSTALL = POST_PACKAGE_INSTALL
    UPDATE = POST_PACKAGE_UPDATE


def hook(
    ctx: typer.Context,
    event: Annotated[HookEvent, typer.Argument(help="Package event name.")],
    name: Annotated[str, typer.Argument(help="Installed (or update target) package name.")],
    package_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Package type (default: from installed.json)."),
    ] = None,
    previous_type: Annotated[
        str | None,
        typer.Option("--previous-type", help="Type of the package before an update."),
    ] = None,
    dev: DevModeOption = None,
    dry_run: DryRunOption = False,
    strict: StrictOption = False,
) -> None:
    """Handle a package event the way a Composer plugin would.

    Examples:
        drupal-cleanup hook post-package-install drupal/token
        drupal-cleanup hook post-package-update drupal/token --type drupal-module
    """
    settings = get_settings(dev, dry_run)
    if settings.should_skip:
        print_verbose(SKIPPED_MESSAGE)
        return

    manifest_path, manifest = load_project(ctx)
    repository = require_repository(manifest_path, manifest)

    if package_type is None:
        if name not in repository:
            print_error(f"Package is not installed: {name}")
            raise typer.Exit(code=1 if strict else 0)
        package_type = repository.get(name).type

    package = Package(name=name, type=package_type)
    operation: InstallOperation | UpdateOperation
    if event == HookEvent.UPDATE:
        operation = UpdateOperation(
            initial_package=Package(name=name, type=previous_type or package_type),
            target_package=package,
        )
    else:
        operation = InstallOperation(package=package)

    cleanup_hook = CleanupHook(manifest.cleanup, settings, resolver=repository)
    report = cleanup_hook.dispatch(event.value, operation)

    print_report(report)

    if strict and (report.failures or report.status == CleanupStatus.FAILED):
        raise typer.Exit(code=1)
