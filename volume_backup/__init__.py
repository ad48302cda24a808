################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        __init__.py
# @module:      volume_backup
# @description: Exposes version, data models, and errors for package consumers.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""
docker-volume-backup: consistent, compressed snapshots of Docker volumes.

Each selected volume is archived by an ephemeral helper container into
``<volume>_<timestamp>.tar.gz``, optionally with its dependent containers
stopped for the duration of the archive.
"""

from .helpers.constants import VERSION

__version__ = VERSION
__author__ = "docker-volume-backup Development Team"

from .errors import (
    VolumeBackupError,
    ConfigurationError,
    DockerEnvironmentError,
    VolumeNotFoundError,
    NoVolumesWarning,
    ContainerDiscoveryError,
    ContainerStopError,
    ContainerStartError,
    ArchiveError,
)

from .types import (
    BackupTarget,
    DependentContainer,
    BackupRecord,
    RunAccumulator,
    RunSummary,
)

__all__ = [
    "VERSION",
    "VolumeBackupError",
    "ConfigurationError",
    "DockerEnvironmentError",
    "VolumeNotFoundError",
    "NoVolumesWarning",
    "ContainerDiscoveryError",
    "ContainerStopError",
    "ContainerStartError",
    "ArchiveError",
    "BackupTarget",
    "DependentContainer",
    "BackupRecord",
    "RunAccumulator",
    "RunSummary",
]
