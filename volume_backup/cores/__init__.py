################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        __init__.py
# @module:      volume_backup.cores
# @description: Core business logic package exports.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""Core business logic modules for docker-volume-backup."""

from .docker_runtime import DockerRuntime
from .preflight import PreflightChecker
from .backup_manager import VolumeBackupManager, archive_name_for
from .dry_run_manager import DryRunReport
from .report import ReportEmitter, SUMMARY_SCHEMA
from .workflow import BackupWorkflow

__all__ = [
    'DockerRuntime',
    'PreflightChecker',
    'VolumeBackupManager',
    'archive_name_for',
    'DryRunReport',
    'ReportEmitter',
    'SUMMARY_SCHEMA',
    'BackupWorkflow',
]
