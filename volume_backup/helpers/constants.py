################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        constants.py
# @module:      volume_backup.helpers.constants
# @description: Shared constants for paths, permissions, and docker defaults.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""
Constants used throughout docker-volume-backup.

This module defines all constant values used across different modules
to ensure consistency and ease of maintenance.
"""

from pathlib import Path

# Version information
VERSION = "1.2.0"

# Default paths (relative to the working directory, like the shell original)
DEFAULT_BACKUP_DIR = Path("backups") / "volumes"
DEFAULT_LOG_DIR = Path("logs") / "volume-backup"

# Environment overrides
ENV_BACKUP_DIR = "VOLUME_BACKUP_DIR"
ENV_LOG_DIR = "VOLUME_BACKUP_LOG_DIR"
ENV_HELPER_IMAGE = "VOLUME_BACKUP_HELPER_IMAGE"

# Output directories may not resolve into these
BLOCKED_OUTPUT_PREFIXES = ("/usr", "/etc", "/bin", "/sbin", "/boot", "/sys", "/proc", "/dev")

# File naming
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
ARCHIVE_SUFFIX = ".tar.gz"
LOG_FILE_TEMPLATE = "volume_backup_{timestamp}.log"
SUMMARY_FILE_TEMPLATE = "volume_backup_summary_{timestamp}.json"

# Permissions
ARCHIVE_FILE_MODE = 0o600
SUMMARY_FILE_MODE = 0o600
PRIVATE_DIR_MODE = 0o700

# Helper container
DEFAULT_HELPER_IMAGE = "alpine:latest"
HELPER_VOLUME_MOUNT = "/data"
HELPER_BACKUP_MOUNT = "/backup"

# Timeouts (in seconds)
CONTAINER_STOP_TIMEOUT = 30

# Logging
RUN_LOGGER_NAME = "volume_backup.run"
RUN_LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
