################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        preflight.py
# @module:      volume_backup.cores.preflight
# @description: Verifies docker availability and resolves the volumes to back up.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""
Pre-flight checks for docker-volume-backup.

Confirms the docker binary and daemon, turns the selected mode into an
ordered list of BackupTarget, and makes sure the helper image is present.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..errors import DockerEnvironmentError, NoVolumesWarning, VolumeNotFoundError
from ..helpers.config import BackupOptions
from ..helpers.logging import RunLog
from ..helpers.system_utils import SystemUtils
from ..types import BackupTarget
from .docker_runtime import DockerRuntime


logger = logging.getLogger(__name__)


class PreflightChecker:
    """
    Runs the checks that must pass before any volume is touched.
    """

    def __init__(self, runtime: DockerRuntime, log: RunLog, utils: Optional[SystemUtils] = None):
        self.runtime = runtime
        self.log = log
        self.utils = utils or SystemUtils()

    def check_environment(self) -> None:
        """
        Verify docker is installed and its daemon is running.

        Raises:
            DockerEnvironmentError: If either check fails
        """
        if not self.utils.check_docker_installed():
            raise DockerEnvironmentError("Docker not found. Install Docker first.")
        self.log.success("Docker installed")

        if not self.utils.check_docker_daemon():
            raise DockerEnvironmentError("Docker daemon not running. Start Docker first.")
        self.log.success("Docker daemon running")

    def resolve_targets(self, options: BackupOptions) -> List[BackupTarget]:
        """
        Resolve the volumes selected by ``options``.

        Returns:
            Targets in the order docker lists them

        Raises:
            NoVolumesWarning: --all and docker knows no volumes
            VolumeNotFoundError: The named volume does not exist
        """
        if options.backup_all:
            names = self.runtime.list_volumes()
            if not names:
                raise NoVolumesWarning()
            self.log.info(f"Found {len(names)} volumes to backup")
            return [BackupTarget(name=n) for n in names]

        name = options.volume_name
        if not self.runtime.volume_exists(name):
            raise VolumeNotFoundError(name)
        self.log.success(f"Volume exists: {name}")
        return [BackupTarget(name=name)]

    def ensure_helper_image(self, image: str) -> None:
        """
        Make sure the tar helper image is available locally, pulling it if needed.

        Raises:
            DockerEnvironmentError: If the pull fails
        """
        if self.runtime.image_exists(image):
            logger.debug(f"Helper image present: {image}")
            return
        self.log.info(f"Pulling {image} for backup operations...")
        self.runtime.pull_image(image)
        self.log.success(f"{image} pulled")

    def report_disk_space(self, output_dir: Path) -> None:
        free = self.utils.get_available_disk_space(output_dir)
        if free is not None:
            self.log.info(f"Free space in output directory: {self.utils.format_bytes(free)}")
