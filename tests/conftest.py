"""
Shared pytest fixtures for docker-volume-backup tests.

Provides a scripted stand-in for the docker runtime, option factories,
and an opened run log.
"""

import pytest
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock
from typer.testing import CliRunner

from volume_backup.errors import (
    ArchiveError,
    ContainerDiscoveryError,
    ContainerStartError,
    ContainerStopError,
    DockerEnvironmentError,
)
from volume_backup.helpers.config import resolve_options
from volume_backup.helpers.logging import RunLog
from volume_backup.helpers.system_utils import SystemUtils


class FakeRuntime:
    """
    In-memory replacement for DockerRuntime.

    Records every call in ``calls`` as (action, name) tuples. The archive
    call writes a real file so permissions and sizes can be checked.
    """

    def __init__(
        self,
        volumes=(),
        containers=None,
        fail_ps=(),
        fail_stop=(),
        fail_start=(),
        fail_archive=(),
        image_present=True,
        pull_fails=False,
        archive_size=2048,
    ):
        self.volumes = list(volumes)
        self.containers = containers or {}
        self.fail_ps = set(fail_ps)
        self.fail_stop = set(fail_stop)
        self.fail_start = set(fail_start)
        self.fail_archive = set(fail_archive)
        self.image_present = image_present
        self.pull_fails = pull_fails
        self.archive_size = archive_size
        self.calls = []

    def list_volumes(self):
        self.calls.append(("list_volumes", None))
        return list(self.volumes)

    def volume_exists(self, name):
        self.calls.append(("inspect", name))
        return name in self.volumes

    def containers_using_volume(self, volume):
        self.calls.append(("ps", volume))
        if volume in self.fail_ps:
            raise ContainerDiscoveryError(volume, "Cannot connect to the Docker daemon")
        return list(self.containers.get(volume, []))

    def image_exists(self, image):
        return self.image_present

    def pull_image(self, image):
        self.calls.append(("pull", image))
        if self.pull_fails:
            raise DockerEnvironmentError(f"Failed to pull {image} (required for backups)")

    def stop_container(self, name):
        self.calls.append(("stop", name))
        if name in self.fail_stop:
            raise ContainerStopError(name, "Error response from daemon: cannot stop")

    def start_container(self, name):
        self.calls.append(("start", name))
        if name in self.fail_start:
            raise ContainerStartError(name, "Error response from daemon: cannot start")

    def archive_volume(self, volume, output_dir, archive_name):
        self.calls.append(("archive", volume))
        if volume in self.fail_archive:
            raise ArchiveError(volume, "tar: /data: Cannot open: Permission denied")
        path = Path(output_dir) / archive_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\0" * self.archive_size)
        path.chmod(0o644)
        return path

    def actions(self, action):
        return [name for a, name in self.calls if a == action]

    @property
    def mutations(self):
        return [c for c in self.calls if c[0] in ("stop", "start", "archive", "pull")]


@pytest.fixture
def cli_runner():
    """Typer CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def fake_runtime_factory():
    """Factory fixture for FakeRuntime instances."""
    return FakeRuntime


@pytest.fixture
def make_options(tmp_path):
    """
    Factory fixture building validated BackupOptions under tmp_path.

    Usage:
        options = make_options(volume="pgdata", stop=True)
    """

    def _make(**overrides):
        values = {
            "output_dir": tmp_path / "backups",
            "log_dir": tmp_path / "logs",
        }
        values.update(overrides)
        return resolve_options(**values)

    return _make


@pytest.fixture
def mock_utils():
    """SystemUtils stand-in with docker available and plenty of disk."""
    utils = Mock(spec=SystemUtils)
    utils.check_docker_installed.return_value = True
    utils.check_docker_daemon.return_value = True
    utils.get_available_disk_space.return_value = 50 * 1024 ** 3
    utils.format_bytes.side_effect = SystemUtils.format_bytes
    utils.ensure_directory.side_effect = SystemUtils.ensure_directory
    return utils


@pytest.fixture
def run_log(tmp_path):
    """An opened RunLog writing to tmp_path/logs."""
    log = RunLog(tmp_path / "logs" / "volume_backup_test.log")
    log.open()
    yield log
    log.close()


@pytest.fixture
def fixed_clock():
    """Clock factory returning a fixed datetime."""

    def _clock(*args):
        moment = datetime(*args) if args else datetime(2025, 3, 14, 9, 26, 53)
        return lambda: moment

    return _clock
