################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        ui_utils.py
# @module:      volume_backup.helpers.ui_utils
# @description: Rich console helpers and the subprocess wrapper for docker calls.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""
CLI Utilities for docker-volume-backup

Rich-based helpers for consistent CLI output, plus run_command() which
every docker invocation goes through.
"""

import logging
import subprocess
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

logger = logging.getLogger(__name__)


class SubprocessError(Exception):
    """A command exited non-zero (or could not be started at all)."""

    def __init__(self, cmd: Sequence[str], returncode: int, stderr: str = "", stdout: str = ""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr or ""
        self.stdout = stdout or ""
        super().__init__(
            f"Command failed ({returncode}): {' '.join(self.cmd)}"
            + (f": {self.stderr.strip()}" if self.stderr.strip() else "")
        )


def run_command(
    cmd: List[str],
    description: str = "",
    check: bool = True,
) -> subprocess.CompletedProcess:
    """
    Run an external command and capture its output.

    Args:
        cmd: Command and arguments
        description: Short label for debug logging
        check: Raise SubprocessError on a non-zero exit code

    Returns:
        CompletedProcess with text stdout/stderr

    Raises:
        SubprocessError: If the command fails and check is True, or the
            binary cannot be executed
    """
    logger.debug(f"Running{' (' + description + ')' if description else ''}: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except (FileNotFoundError, PermissionError) as e:
        raise SubprocessError(cmd, 127, stderr=str(e)) from e

    if check and result.returncode != 0:
        raise SubprocessError(cmd, result.returncode, stderr=result.stderr, stdout=result.stdout)
    return result


def print_success(message: str):
    """Print success message with green checkmark"""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str):
    """Print error message with red X"""
    console.print(f"[red]✗ Error:[/red] {escape(message)}")


def print_warning(message: str):
    """Print warning message with yellow warning symbol"""
    console.print(f"[yellow]⚠[/yellow]  {escape(message)}")


def print_info(message: str):
    """Print info message with cyan arrow"""
    console.print(f"[cyan]→[/cyan] {escape(message)}")


def print_plain(message: str):
    console.print(escape(message))


def print_divider(title: str = "") -> None:
    """
    Print a styled horizontal divider with optional title.

    Args:
        title: Optional title to display in the divider
    """
    if title:
        fill = max(0, 50 - len(title))
        console.print(f"\n[cyan]{'━' * 3} {escape(title)} {'━' * fill}[/cyan]\n")
    else:
        console.print(f"\n[dim]{'─' * 60}[/dim]\n")


def create_table(title: str, columns: List[tuple]) -> Table:
    """
    Create a styled Rich table

    Args:
        title: Table title
        columns: List of (name, style, width) tuples; width may be None

    Returns:
        Rich Table instance
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for name, style, width in columns:
        table.add_column(name, style=style, width=width)
    return table


def print_table(table: Table, title: Optional[str] = None) -> None:
    if title:
        table.title = title
    console.print(table)
