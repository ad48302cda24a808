################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        __init__.py
# @module:      volume_backup.helpers
# @description: Shared helper package exports.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""Helper modules and utilities for docker-volume-backup."""

from .config import BackupOptions, TargetMode, resolve_options
from .constants import VERSION
from .logging import get_logger, setup_logging, RunLog
from .system_utils import SystemUtils
from .ui_utils import run_command, SubprocessError

__all__ = [
    'BackupOptions',
    'TargetMode',
    'resolve_options',
    'VERSION',
    'get_logger',
    'setup_logging',
    'RunLog',
    'SystemUtils',
    'run_command',
    'SubprocessError',
]
