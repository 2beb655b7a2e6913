"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from drupal_cleanup import __version__
from drupal_cleanup.cli.commands import clean, hook, rules, sweep
from drupal_cleanup.utils.formatting import configure_logging, set_verbose

# Create main Typer app
app = typer.Typer(
    name="drupal-cleanup",
    help="Remove configured files from installed Composer packages.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"drupal-cleanup version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show per-package diagnostics.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    manifest: Annotated[
        Path | None,
        typer.Option(
            "--manifest",
            "-m",
            help="Path to composer.json (default: $COMPOSER or ./composer.json).",
        ),
    ] = None,
) -> None:
    """drupal-cleanup - strip docs, tests and build artifacts from packages.

    Rules live in the [bold]extra.drupal-cleanup[/bold] section of
    composer.json. Set DRUPAL_CLEANUP_SKIP=1 to disable cleanup entirely.
    """
    set_verbose(verbose and not quiet)
    configure_logging(verbose=verbose and not quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["manifest"] = manifest


# Register commands
app.command(name="clean")(clean.clean)
app.command(name="hook")(hook.hook)
app.command(name="sweep")(sweep.sweep)
app.command(name="rules")(rules.rules)


if __name__ == "__main__":
    app()
