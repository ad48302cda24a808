################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        workflow.py
# @module:      volume_backup.cores.workflow
# @description: Runs preflight, backup, and report stages for one invocation.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - Stages run strictly in order: preflight -> (dry run | backup) -> report
# - The run timestamp is fixed once and shared by archives, log and summary
# - Returns the exit code instead of exiting; the CLI owns sys.exit
################################################################################

"""
End-to-end backup workflow.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from ..errors import NoVolumesWarning, VolumeBackupError
from ..helpers.config import BackupOptions
from ..helpers.constants import LOG_FILE_TEMPLATE, PRIVATE_DIR_MODE, TIMESTAMP_FORMAT
from ..helpers.logging import RunLog
from ..helpers.system_utils import SystemUtils
from .backup_manager import VolumeBackupManager
from .docker_runtime import DockerRuntime
from .dry_run_manager import DryRunReport
from .preflight import PreflightChecker
from .report import ReportEmitter


logger = logging.getLogger(__name__)


class BackupWorkflow:
    """
    One invocation of docker-volume-backup.

    Example:
        >>> code = BackupWorkflow(options).run()
    """

    def __init__(
        self,
        options: BackupOptions,
        runtime: Optional[DockerRuntime] = None,
        utils: Optional[SystemUtils] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.options = options
        self.runtime = runtime or DockerRuntime(
            stop_timeout=options.stop_timeout,
            helper_image=options.helper_image,
        )
        self.utils = utils or SystemUtils()
        self.clock = clock or (lambda: datetime.now().astimezone())
        self.started_at = self.clock()
        self.timestamp = self.started_at.strftime(TIMESTAMP_FORMAT)
        self.log = RunLog(options.log_dir / LOG_FILE_TEMPLATE.format(timestamp=self.timestamp))

    def run(self) -> int:
        """
        Execute the workflow.

        Returns:
            Process exit code
        """
        self.log.open(header=self._header_lines())
        try:
            return self._execute()
        finally:
            self.log.close()

    def _execute(self) -> int:
        opts = self.options
        log = self.log

        log.section("Docker Volume Backup")
        if opts.backup_all:
            log.info("Mode: Backup all volumes")
        else:
            log.info(f"Mode: Backup single volume: {opts.volume_name}")
        log.info(f"Output directory: {opts.output_dir}")
        if opts.stop_containers:
            log.info("Container stop: enabled")
        log.info(f"Log file: {log.log_file}")

        log.section("Pre-flight Checks")
        checker = PreflightChecker(self.runtime, log, self.utils)
        try:
            checker.check_environment()
            targets = checker.resolve_targets(opts)
        except NoVolumesWarning as w:
            log.warning(str(w))
            return w.exit_code
        except VolumeBackupError as e:
            log.error(str(e))
            return e.exit_code

        if opts.dry_run:
            DryRunReport(opts, log, self.timestamp).generate(targets)
            return 0

        try:
            self.utils.ensure_directory(opts.output_dir, PRIVATE_DIR_MODE)
        except OSError as e:
            log.error(f"Cannot create output directory {opts.output_dir}: {e}")
            return 1

        try:
            checker.ensure_helper_image(opts.helper_image)
        except VolumeBackupError as e:
            log.error(str(e))
            return e.exit_code
        checker.report_disk_space(opts.output_dir)
        log.success("Pre-flight checks passed")

        manager = VolumeBackupManager(opts, self.runtime, log, self.timestamp)
        acc = manager.run(targets)

        return ReportEmitter(opts, log, self.timestamp, clock=self.clock).emit(acc)

    def _header_lines(self) -> List[str]:
        opts = self.options
        rule = "=" * 48
        return [
            rule,
            f"Docker Volume Backup - {self.started_at.isoformat(timespec='seconds')}",
            rule,
            f"Volume: {opts.volume_name or 'all volumes'}",
            f"Backup all: {str(opts.backup_all).lower()}",
            f"Output directory: {opts.output_dir}",
            f"Stop containers: {str(opts.stop_containers).lower()}",
            f"Dry run: {str(opts.dry_run).lower()}",
            rule,
        ]
