################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        system_utils.py
# @module:      volume_backup.helpers.system_utils
# @description: Host checks for the docker binary, daemon, and disk space.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""
System utilities module for docker-volume-backup.

This module provides system-level checks used by the preflight stage.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

import psutil

from .ui_utils import run_command, SubprocessError


logger = logging.getLogger(__name__)


class SystemUtils:
    """
    System utilities for dependency checking and resource information.
    """

    @staticmethod
    def check_docker_installed() -> bool:
        """
        Check if the docker binary is on PATH.

        Returns:
            True if docker can be found
        """
        return shutil.which('docker') is not None

    @staticmethod
    def check_docker_daemon() -> bool:
        """
        Check if the Docker daemon answers 'docker info'.

        Returns:
            True if the daemon is reachable
        """
        try:
            run_command(['docker', 'info'], description="daemon check")
            return True
        except SubprocessError as e:
            logger.debug(f"docker info failed: {e}")
            return False

    @staticmethod
    def get_available_disk_space(path: Path) -> Optional[int]:
        """
        Get free space in bytes for the filesystem holding ``path``.

        The nearest existing parent is used when ``path`` does not exist yet.

        Args:
            path: Path to check disk space for

        Returns:
            Free bytes, or None if it cannot be determined
        """
        probe = Path(path)
        while not probe.exists() and probe != probe.parent:
            probe = probe.parent
        try:
            return psutil.disk_usage(str(probe)).free
        except OSError as e:
            logger.debug(f"Failed to get disk space for {probe}: {e}")
            return None

    @staticmethod
    def format_bytes(size_bytes: float) -> str:
        """
        Format bytes into human-readable string.

        Args:
            size_bytes: Size in bytes

        Returns:
            Formatted string (e.g., "1.50 GB")
        """
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if size_bytes < 1024.0:
                return f"{size_bytes:.2f} {unit}"
            size_bytes /= 1024.0
        return f"{size_bytes:.2f} PB"

    @staticmethod
    def ensure_directory(path: Path, mode: int = 0o700):
        """
        Ensure directory exists with proper permissions.

        Args:
            path: Directory path
            mode: Permission mode
        """
        path.mkdir(parents=True, exist_ok=True)
        path.chmod(mode)
