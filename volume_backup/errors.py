################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        errors.py
# @module:      volume_backup.errors
# @description: Error taxonomy for option, environment, and per-volume failures.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - Fatal errors abort the run before or during preflight
# - Container and archive errors are caught per volume and recorded
# - exit_code is what the CLI hands back to the shell
################################################################################

"""Exceptions raised by docker-volume-backup."""


class VolumeBackupError(Exception):
    """Base class for all docker-volume-backup errors."""

    exit_code = 1


class ConfigurationError(VolumeBackupError):
    """Invalid or conflicting command line options."""


class DockerEnvironmentError(VolumeBackupError):
    """Docker is not installed, not reachable, or cannot provide the helper image."""


class VolumeNotFoundError(VolumeBackupError):
    """The requested volume does not exist."""

    def __init__(self, volume: str):
        super().__init__(f"Volume not found: {volume}")
        self.volume = volume


class NoVolumesWarning(VolumeBackupError):
    """No volumes exist; the run ends successfully without backups."""

    exit_code = 0

    def __init__(self, message: str = "No Docker volumes found"):
        super().__init__(message)


class ContainerStopError(VolumeBackupError):
    """A dependent container could not be stopped."""

    def __init__(self, container: str, detail: str = ""):
        super().__init__(f"Failed to stop: {container}")
        self.container = container
        self.detail = detail


class ContainerStartError(VolumeBackupError):
    """A stopped container could not be started again."""

    def __init__(self, container: str, detail: str = ""):
        super().__init__(f"Failed to restart: {container}")
        self.container = container
        self.detail = detail


class ArchiveError(VolumeBackupError):
    """The helper container failed to archive a volume."""

    def __init__(self, volume: str, detail: str = ""):
        super().__init__(f"Failed to backup volume: {volume}")
        self.volume = volume
        self.detail = detail


class ContainerDiscoveryError(VolumeBackupError):
    """Containers mounting a volume could not be listed."""

    def __init__(self, volume: str, detail: str = ""):
        super().__init__(f"Failed to list containers using volume: {volume}")
        self.volume = volume
        self.detail = detail
