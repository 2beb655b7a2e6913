"""Rules command implementation.

Shows the effective rule set a package type would get in this run.
"""

import json
from enum import Enum
from typing import Annotated

import typer

from drupal_cleanup.cli.display import create_rules_table
from drupal_cleanup.cli.types import DevModeOption, get_settings, load_project
from drupal_cleanup.core.rules import collect_rules, is_package_type_eligible, resolve_scopes
from drupal_cleanup.models.config import Scope
from drupal_cleanup.utils.formatting import console, print_info


class OutputFormat(str, Enum):
    """Output format options for rules."""

    TABLE = "table"
    JSON = "json"


def rules(
    ctx: typer.Context,
    package_type: Annotated[str, typer.Argument(help="Package type, e.g. drupal-module.")],
    dev: DevModeOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the effective cleanup rules for a package type."""
    settings = get_settings(dev, dry_run=False)
    _, manifest = load_project(ctx)
    config = manifest.cleanup

    scopes = resolve_scopes(settings.dev_mode)
    eligible = is_package_type_eligible(config, package_type, scopes)
    effective = collect_rules(config, package_type, scopes)

    if output_format == OutputFormat.JSON:
        data = {
            "package_type": package_type,
            "scopes": [scope.value for scope in scopes],
            "eligible": eligible,
            "rules": effective,
            "exclude": config.exclude,
        }
        console.print_json(json.dumps(data))
        return

    if not eligible:
        active = ", ".join(scope.value for scope in scopes)
        print_info(f"No settings for package type {package_type} in scopes: {active}")
        return

    declared: list[tuple[Scope, str]] = [
        (scope, pattern)
        for scope in scopes
        for pattern in config.rules_for(scope, package_type) or []
    ]
    console.print(create_rules_table(package_type, scopes, declared, set(config.exclude)))
    console.print(f"\n[dim]{len(effective)} effective rule(s)[/dim]")
