################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        docker_runtime.py
# @module:      volume_backup.cores.docker_runtime
# @description: Thin wrapper around the docker CLI calls a backup run needs.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - Every call goes through run_command(); failures arrive as SubprocessError
# - Per-volume calls translate failures into ContainerDiscovery/Stop/Start/ArchiveError
# - No timeouts: a hanging daemon call hangs the run
################################################################################

"""
Docker runtime access for docker-volume-backup.

Lists and inspects volumes, finds containers mounting a volume, stops and
starts containers, and runs the ephemeral tar helper container.
"""

from pathlib import Path
from typing import List

from ..errors import (
    ArchiveError,
    ContainerDiscoveryError,
    ContainerStartError,
    ContainerStopError,
    DockerEnvironmentError,
)
from ..helpers.constants import (
    CONTAINER_STOP_TIMEOUT,
    DEFAULT_HELPER_IMAGE,
    HELPER_BACKUP_MOUNT,
    HELPER_VOLUME_MOUNT,
)
from ..helpers.ui_utils import run_command, SubprocessError


def _lines(output: str) -> List[str]:
    return [line.strip() for line in output.splitlines() if line.strip()]


class DockerRuntime:
    """
    Query and command interface to the Docker daemon via the docker CLI.
    """

    def __init__(self, stop_timeout: int = CONTAINER_STOP_TIMEOUT,
                 helper_image: str = DEFAULT_HELPER_IMAGE):
        """
        Args:
            stop_timeout: Grace period for 'docker stop -t'
            helper_image: Image for the tar helper container
        """
        self.stop_timeout = stop_timeout
        self.helper_image = helper_image

    # --------------- Queries ---------------

    def list_volumes(self) -> List[str]:
        """
        List volume names in the daemon's listing order.

        Raises:
            DockerEnvironmentError: If the listing fails
        """
        try:
            result = run_command(['docker', 'volume', 'ls', '--format', '{{.Name}}'],
                                 description="list volumes")
        except SubprocessError as e:
            raise DockerEnvironmentError(f"Failed to list Docker volumes: {e.stderr.strip() or e}") from e
        return _lines(result.stdout)

    def volume_exists(self, name: str) -> bool:
        result = run_command(['docker', 'volume', 'inspect', name],
                             description="inspect volume", check=False)
        return result.returncode == 0

    def containers_using_volume(self, volume: str) -> List[str]:
        """
        Names of running containers that mount ``volume``, in docker's order.

        Raises:
            ContainerDiscoveryError: If docker ps fails
        """
        try:
            result = run_command(
                ['docker', 'ps', '--filter', f'volume={volume}', '--format', '{{.Names}}'],
                description="find dependent containers",
            )
        except SubprocessError as e:
            raise ContainerDiscoveryError(volume, e.stderr) from e
        return _lines(result.stdout)

    def image_exists(self, image: str) -> bool:
        result = run_command(['docker', 'image', 'inspect', image],
                             description="inspect image", check=False)
        return result.returncode == 0

    # --------------- Commands ---------------

    def pull_image(self, image: str) -> None:
        try:
            run_command(['docker', 'pull', image], description="pull helper image")
        except SubprocessError as e:
            raise DockerEnvironmentError(
                f"Failed to pull {image} (required for backups)"
            ) from e

    def stop_container(self, name: str) -> None:
        """
        Stop a container gracefully.

        Raises:
            ContainerStopError: If docker stop fails
        """
        try:
            run_command(['docker', 'stop', '-t', str(self.stop_timeout), name],
                        description="stop container")
        except SubprocessError as e:
            raise ContainerStopError(name, e.stderr) from e

    def start_container(self, name: str) -> None:
        """
        Start a previously stopped container.

        Raises:
            ContainerStartError: If docker start fails
        """
        try:
            run_command(['docker', 'start', name], description="start container")
        except SubprocessError as e:
            raise ContainerStartError(name, e.stderr) from e

    def archive_volume(self, volume: str, output_dir: Path, archive_name: str) -> Path:
        """
        Archive a volume with an ephemeral helper container.

        The volume is mounted read-only at /data, ``output_dir`` at /backup,
        and the helper writes /backup/<archive_name> with tar czf.

        Returns:
            Host path of the archive

        Raises:
            ArchiveError: If the helper container fails
        """
        archive_path = Path(output_dir) / archive_name
        cmd = [
            'docker', 'run', '--rm',
            '-v', f'{volume}:{HELPER_VOLUME_MOUNT}:ro',
            '-v', f'{output_dir}:{HELPER_BACKUP_MOUNT}',
            self.helper_image,
            'tar', 'czf', f'{HELPER_BACKUP_MOUNT}/{archive_name}', HELPER_VOLUME_MOUNT,
        ]
        try:
            run_command(cmd, description="archive volume")
        except SubprocessError as e:
            raise ArchiveError(volume, e.stderr) from e
        return archive_path
