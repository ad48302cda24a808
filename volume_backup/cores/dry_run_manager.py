################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        dry_run_manager.py
# @module:      volume_backup.cores.dry_run_manager
# @description: Prints the backup plan without touching Docker or the filesystem.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - Runs after target resolution, before any directory or image is created
# - Never stops, starts or archives anything
################################################################################

"""
Dry run module for docker-volume-backup.

Prints the backup plan for the resolved targets without touching any
container or writing any archive.
"""

import logging
from typing import Sequence

from ..helpers.config import BackupOptions
from ..helpers.logging import RunLog
from ..types import BackupTarget
from .backup_manager import archive_name_for


logger = logging.getLogger(__name__)


class DryRunReport:
    """
    Shows what a real run would do.
    """

    def __init__(self, options: BackupOptions, log: RunLog, timestamp: str):
        self.options = options
        self.log = log
        self.timestamp = timestamp

    def generate(self, targets: Sequence[BackupTarget]) -> None:
        """
        Print the plan.

        Args:
            targets: Volumes that would be backed up
        """
        self.log.warning("DRY RUN MODE - no actual backups will be created")
        self.log.info("Would backup the following volumes:")
        for target in targets:
            archive = self.options.output_dir / archive_name_for(target.name, self.timestamp)
            self.log.plain(f"  - {target.name} -> {archive}")

        if self.options.stop_containers:
            self.log.info("Would stop dependent containers during backup")
        else:
            self.log.info("Dependent containers would keep running during backup")
        self.log.info("No changes were made. Run without --dry-run to perform actual backup.")
