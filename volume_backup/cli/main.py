################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        main.py
# @module:      volume_backup.cli.main
# @description: Typer command line entry point for docker-volume-backup.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - Every configuration or usage error exits with code 1
# - The workflow returns the exit code; this module owns typer.Exit
################################################################################

"""
Main CLI application using Typer

Entry point for docker-volume-backup.
"""

import sys
from pathlib import Path
from typing import Optional

import click
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from volume_backup.errors import ConfigurationError
from volume_backup.helpers import ui_utils
from volume_backup.helpers.config import resolve_options
from volume_backup.helpers.constants import (
    CONTAINER_STOP_TIMEOUT,
    DEFAULT_BACKUP_DIR,
    DEFAULT_HELPER_IMAGE,
    DEFAULT_LOG_DIR,
    ENV_BACKUP_DIR,
    ENV_HELPER_IMAGE,
    ENV_LOG_DIR,
    VERSION,
)
from volume_backup.helpers.logging import setup_logging

EPILOG = """
Examples:

  docker-volume-backup --volume postgres_data

  docker-volume-backup --all --stop

  docker-volume-backup --volume app_data --out ~/backups/docker-volumes

  docker-volume-backup --all --dry-run
"""

app = typer.Typer(
    name="docker-volume-backup",
    help="Consistent Docker volume snapshots as tar.gz archives",
    add_completion=False,
)

console = Console()


class BackupCommand(TyperCommand):
    """Command whose usage errors (missing values, bad types) exit with code 1."""

    def parse_args(self, ctx: click.Context, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = ConfigurationError.exit_code
            raise


def _version_callback(value: bool):
    if value:
        console.print(f"[cyan]docker-volume-backup[/cyan] v{VERSION}")
        raise typer.Exit()


@app.command(
    cls=BackupCommand,
    epilog=EPILOG,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def backup(
    ctx: typer.Context,
    volume: Optional[str] = typer.Option(
        None, "--volume", metavar="NAME", help="Backup specific volume",
    ),
    backup_all: bool = typer.Option(False, "--all", help="Backup all Docker volumes"),
    out: Path = typer.Option(
        DEFAULT_BACKUP_DIR, "--out", envvar=ENV_BACKUP_DIR, help="Output directory",
    ),
    log_dir: Path = typer.Option(
        DEFAULT_LOG_DIR, "--log-dir", envvar=ENV_LOG_DIR, help="Directory for run logs and JSON summaries",
    ),
    stop: bool = typer.Option(
        False, "--stop/--no-stop", help="Stop dependent containers during backup",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show backup plan without executing"),
    json_output: bool = typer.Option(False, "--json", help="Write a JSON summary"),
    helper_image: str = typer.Option(
        DEFAULT_HELPER_IMAGE, "--helper-image", envvar=ENV_HELPER_IMAGE,
        help="Image used for the tar helper container",
    ),
    stop_timeout: int = typer.Option(
        CONTAINER_STOP_TIMEOUT, "--stop-timeout", min=0, help="Seconds passed to docker stop -t",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug output"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit",
    ),
):
    """
    Backup Docker volumes with a helper container

    Archives are written as <volume>_<timestamp>.tar.gz with mode 600.
    Containers stopped with --stop are always restarted afterwards.
    """
    from volume_backup.cores.workflow import BackupWorkflow

    setup_logging(debug)

    try:
        options = resolve_options(
            volume=volume,
            backup_all=backup_all,
            output_dir=out,
            log_dir=log_dir,
            stop=stop,
            dry_run=dry_run,
            emit_json=json_output,
            helper_image=helper_image,
            stop_timeout=stop_timeout,
            extra_args=ctx.args,
        )
    except ConfigurationError as e:
        ui_utils.print_error(str(e))
        console.print("Run with --help for usage.")
        raise typer.Exit(e.exit_code)

    try:
        code = BackupWorkflow(options).run()
    except KeyboardInterrupt:
        console.print("\n")
        ui_utils.print_warning("Backup cancelled by user")
        raise typer.Exit(1)

    raise typer.Exit(code)


def cli_main():
    """
    Entry point for CLI

    This function is called by the console script entry point.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        if "--debug" in sys.argv:
            raise
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
