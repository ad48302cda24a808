"""
Unit tests for DockerRuntime.

Verifies the docker CLI invocations and how failures are translated,
with run_command mocked.
"""

import pytest
from pathlib import Path
from subprocess import CompletedProcess
from unittest.mock import patch

from volume_backup.cores.docker_runtime import DockerRuntime
from volume_backup.errors import (
    ArchiveError,
    ContainerDiscoveryError,
    ContainerStartError,
    ContainerStopError,
    DockerEnvironmentError,
)
from volume_backup.helpers.ui_utils import SubprocessError


def ok(stdout: str = "") -> CompletedProcess:
    return CompletedProcess([], 0, stdout=stdout, stderr="")


# =============================================================================
# Query Tests
# =============================================================================


@pytest.mark.unit
class TestQueries:

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_list_volumes_keeps_docker_order(self, mock_run):
        mock_run.return_value = ok("zeta\nalpha\n\nmid\n")

        assert DockerRuntime().list_volumes() == ["zeta", "alpha", "mid"]
        assert mock_run.call_args[0][0] == ["docker", "volume", "ls", "--format", "{{.Name}}"]

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_list_volumes_empty(self, mock_run):
        mock_run.return_value = ok("")
        assert DockerRuntime().list_volumes() == []

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_list_volumes_failure(self, mock_run):
        mock_run.side_effect = SubprocessError(["docker"], 1, stderr="permission denied")
        with pytest.raises(DockerEnvironmentError, match="permission denied"):
            DockerRuntime().list_volumes()

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_volume_exists(self, mock_run):
        mock_run.return_value = ok("[]")
        assert DockerRuntime().volume_exists("pgdata") is True
        assert mock_run.call_args[0][0] == ["docker", "volume", "inspect", "pgdata"]
        assert mock_run.call_args[1]["check"] is False

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_volume_missing(self, mock_run):
        mock_run.return_value = CompletedProcess([], 1, stdout="[]", stderr="no such volume")
        assert DockerRuntime().volume_exists("nope") is False

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_containers_using_volume(self, mock_run):
        mock_run.return_value = ok("web1\nworker\n")

        names = DockerRuntime().containers_using_volume("pgdata")

        assert names == ["web1", "worker"]
        assert mock_run.call_args[0][0] == [
            "docker", "ps", "--filter", "volume=pgdata", "--format", "{{.Names}}",
        ]

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_containers_query_failure(self, mock_run):
        mock_run.side_effect = SubprocessError(["docker", "ps"], 1, stderr="daemon hiccup")

        with pytest.raises(ContainerDiscoveryError) as exc:
            DockerRuntime().containers_using_volume("pgdata")

        assert exc.value.volume == "pgdata"
        assert exc.value.detail == "daemon hiccup"
        assert str(exc.value) == "Failed to list containers using volume: pgdata"


# =============================================================================
# Command Tests
# =============================================================================


@pytest.mark.unit
class TestCommands:

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_stop_uses_timeout(self, mock_run):
        mock_run.return_value = ok()
        DockerRuntime(stop_timeout=12).stop_container("web1")
        assert mock_run.call_args[0][0] == ["docker", "stop", "-t", "12", "web1"]

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_stop_failure(self, mock_run):
        mock_run.side_effect = SubprocessError(["docker", "stop"], 1, stderr="busy")
        with pytest.raises(ContainerStopError) as exc:
            DockerRuntime().stop_container("web1")
        assert exc.value.container == "web1"
        assert exc.value.detail == "busy"
        assert str(exc.value) == "Failed to stop: web1"

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_start(self, mock_run):
        mock_run.return_value = ok()
        DockerRuntime().start_container("web1")
        assert mock_run.call_args[0][0] == ["docker", "start", "web1"]

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_start_failure(self, mock_run):
        mock_run.side_effect = SubprocessError(["docker", "start"], 1)
        with pytest.raises(ContainerStartError, match="Failed to restart: web1"):
            DockerRuntime().start_container("web1")

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_archive_command(self, mock_run, tmp_path):
        mock_run.return_value = ok()
        runtime = DockerRuntime(helper_image="alpine:3.20")

        path = runtime.archive_volume("pgdata", tmp_path, "pgdata_20250101_000000.tar.gz")

        assert path == tmp_path / "pgdata_20250101_000000.tar.gz"
        assert mock_run.call_args[0][0] == [
            "docker", "run", "--rm",
            "-v", "pgdata:/data:ro",
            "-v", f"{tmp_path}:/backup",
            "alpine:3.20",
            "tar", "czf", "/backup/pgdata_20250101_000000.tar.gz", "/data",
        ]

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_archive_failure(self, mock_run, tmp_path):
        mock_run.side_effect = SubprocessError(["docker", "run"], 2, stderr="tar: write error")
        with pytest.raises(ArchiveError) as exc:
            DockerRuntime().archive_volume("pgdata", tmp_path, "x.tar.gz")
        assert exc.value.volume == "pgdata"
        assert exc.value.detail == "tar: write error"

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_image_exists(self, mock_run):
        mock_run.return_value = CompletedProcess([], 1, stdout="", stderr="")
        assert DockerRuntime().image_exists("alpine:latest") is False
        assert mock_run.call_args[0][0] == ["docker", "image", "inspect", "alpine:latest"]

    @patch("volume_backup.cores.docker_runtime.run_command")
    def test_pull_failure(self, mock_run):
        mock_run.side_effect = SubprocessError(["docker", "pull"], 1)
        with pytest.raises(DockerEnvironmentError, match="Failed to pull alpine:latest"):
            DockerRuntime().pull_image("alpine:latest")
