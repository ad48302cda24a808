################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        backup_manager.py
# @module:      volume_backup.cores.backup_manager
# @description: Per-volume discover, quiesce, archive, and restore sequence.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - Volumes are processed strictly one after another
# - A container stopped by this run is always given a restart attempt
# - A container whose stop failed is never restarted
# - A failed container lookup fails the volume before anything is stopped
# - One volume failing never skips the remaining volumes
################################################################################

"""
Backup management module for docker-volume-backup.

This module handles the actual backup operations: stopping dependent
containers, archiving the volume through a helper container, and
restarting what was stopped.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from ..errors import ArchiveError, ContainerDiscoveryError, ContainerStartError, ContainerStopError
from ..helpers.config import BackupOptions
from ..helpers.constants import ARCHIVE_FILE_MODE, ARCHIVE_SUFFIX
from ..helpers.logging import RunLog
from ..helpers.system_utils import SystemUtils
from ..types import BackupRecord, BackupTarget, DependentContainer, RunAccumulator
from .docker_runtime import DockerRuntime


logger = logging.getLogger(__name__)


def archive_name_for(volume: str, timestamp: str) -> str:
    """<volume>_<timestamp>.tar.gz"""
    return f"{volume}_{timestamp}{ARCHIVE_SUFFIX}"


class VolumeBackupManager:
    """
    Orchestrates backups for a list of volumes.

    Each volume runs through discover -> quiesce -> archive -> restore.
    Results are collected in a RunAccumulator that is returned to the caller.
    """

    def __init__(self, options: BackupOptions, runtime: DockerRuntime, log: RunLog, timestamp: str):
        """
        Initialize backup manager.

        Args:
            options: Validated run options
            runtime: Docker access
            log: Console/file event sink
            timestamp: Run timestamp used in archive names
        """
        self.options = options
        self.runtime = runtime
        self.log = log
        self.timestamp = timestamp

    def run(self, targets: Sequence[BackupTarget], acc: Optional[RunAccumulator] = None) -> RunAccumulator:
        """
        Back up every target, in order.

        Args:
            targets: Volumes to back up
            acc: Existing accumulator to extend (a new one by default)

        Returns:
            The accumulator holding records and failure state
        """
        acc = acc if acc is not None else RunAccumulator()
        for target in targets:
            try:
                self.backup_volume(target, acc)
            except Exception as e:
                message = f"Unexpected error while backing up {target.name}: {e}"
                logger.exception(message)
                self.log.error(message)
                acc.mark_failed(message)
        return acc

    def backup_volume(self, target: BackupTarget, acc: RunAccumulator) -> Optional[BackupRecord]:
        """
        Back up a single volume.

        Returns:
            The BackupRecord, or None if the archive step was never attempted
        """
        self.log.section(f"Backing Up: {target.name}")

        try:
            containers = self._discover(target)
        except ContainerDiscoveryError as e:
            self.log.error(str(e))
            self.log.detail(e.detail)
            acc.mark_failed(str(e))
            return None

        with self._quiesced(containers, acc) as ready:
            if not ready:
                return None
            return self._archive(target, acc)

    # --------------- Steps ---------------

    def _discover(self, target: BackupTarget) -> List[DependentContainer]:
        names = self.runtime.containers_using_volume(target.name)
        if names:
            self.log.info(f"Volume used by containers: {', '.join(names)}")
        else:
            self.log.info("No containers using this volume")
        return [DependentContainer(name=n) for n in names]

    @contextmanager
    def _quiesced(self, containers: List[DependentContainer], acc: RunAccumulator) -> Iterator[bool]:
        """
        Stop dependent containers for the duration of the block.

        Yields True when the archive may proceed. Containers stopped here are
        restarted on every exit path, in the order they were stopped.
        """
        try:
            ready = True
            if containers and self.options.stop_containers:
                self.log.info("Stopping containers for consistency...")
                for container in containers:
                    try:
                        self.runtime.stop_container(container.name)
                    except ContainerStopError as e:
                        self.log.error(str(e))
                        self.log.detail(e.detail)
                        acc.mark_failed(str(e))
                        ready = False
                        break
                    container.was_stopped = True
                    acc.stopped_containers.append(container.name)
                    self.log.success(f"Stopped: {container.name}")
            elif containers:
                self.log.warning("Backing up while containers running (may be inconsistent)")
            yield ready
        finally:
            self._restore(containers, acc)

    def _archive(self, target: BackupTarget, acc: RunAccumulator) -> BackupRecord:
        output_dir = self.options.output_dir
        archive_name = archive_name_for(target.name, self.timestamp)
        expected = Path(output_dir) / archive_name

        self.log.info(f"Creating backup: {expected}")
        try:
            archive_path = self.runtime.archive_volume(target.name, output_dir, archive_name)
            archive_path.chmod(ARCHIVE_FILE_MODE)
            size = archive_path.stat().st_size
        except ArchiveError as e:
            self.log.error(str(e))
            self.log.detail(e.detail)
            return self._record_failure(target, expected, str(e), acc)
        except OSError as e:
            message = f"Failed to backup volume: {target.name} ({e})"
            self.log.error(message)
            return self._record_failure(target, expected, message, acc)

        self.log.success(f"Backup created: {archive_path} ({SystemUtils.format_bytes(size)})")
        record = BackupRecord(volume=target.name, archive_path=archive_path, size_bytes=size)
        acc.add_record(record)
        return record

    def _record_failure(self, target: BackupTarget, path: Path, message: str,
                        acc: RunAccumulator) -> BackupRecord:
        if path.exists():
            self.log.warning(f"Incomplete archive left on disk: {path}")
        record = BackupRecord(
            volume=target.name,
            archive_path=path,
            size_bytes=0,
            succeeded=False,
            error_message=message,
        )
        acc.add_record(record)
        acc.errors.append(message)
        return record

    def _restore(self, containers: List[DependentContainer], acc: RunAccumulator) -> None:
        """Restart containers flagged was_stopped; a failure does not stop the others."""
        stopped = [c for c in containers if c.was_stopped]
        if not stopped:
            return
        self.log.info("Restarting containers...")
        for container in stopped:
            try:
                self.runtime.start_container(container.name)
            except ContainerStartError as e:
                self.log.error(str(e))
                self.log.detail(e.detail)
                acc.mark_failed(str(e))
                continue
            acc.restarted_containers.append(container.name)
            self.log.success(f"Restarted: {container.name}")
