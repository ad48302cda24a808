"""
Unit tests for the run log.
"""

import logging
import pytest

from volume_backup.helpers.constants import RUN_LOGGER_NAME
from volume_backup.helpers.logging import RunLog, get_logger, setup_logging


@pytest.mark.unit
class TestRunLog:

    def test_creates_private_directory_and_file(self, tmp_path):
        log = RunLog(tmp_path / "logs" / "run.log")
        log.open()
        log.close()

        assert (tmp_path / "logs").stat().st_mode & 0o777 == 0o700
        assert (tmp_path / "logs" / "run.log").stat().st_mode & 0o777 == 0o600

    def test_levels_written_to_file(self, tmp_path, capsys):
        path = tmp_path / "logs" / "run.log"
        with RunLog(path) as log:
            log.error("bad thing")
            log.success("good thing")
            log.warning("odd thing")
            log.info("plain thing")
            log.section("Pre-flight Checks")

        content = path.read_text()
        assert "ERROR: bad thing" in content
        assert "SUCCESS: good thing" in content
        assert "WARNING: odd thing" in content
        assert "INFO: plain thing" in content
        assert "SECTION: Pre-flight Checks" in content

        out = capsys.readouterr().out
        assert "bad thing" in out
        assert "good thing" in out

    def test_lines_start_with_iso_timestamp(self, tmp_path):
        path = tmp_path / "run.log"
        with RunLog(path) as log:
            log.info("hello")

        line = path.read_text().strip().splitlines()[-1]
        assert line.startswith("[")
        stamp = line[1:line.index("]")]
        assert "T" in stamp

    def test_detail_is_file_only(self, tmp_path, capsys):
        path = tmp_path / "run.log"
        with RunLog(path) as log:
            log.detail("Error response from daemon: nope\n")

        assert "DEBUG: Error response from daemon: nope" in path.read_text()
        assert "nope" not in capsys.readouterr().out

    def test_header_written_first(self, tmp_path):
        path = tmp_path / "run.log"
        log = RunLog(path)
        log.open(header=["=====", "Docker Volume Backup", "====="])
        log.info("after")
        log.close()

        lines = path.read_text().splitlines()
        assert lines[:3] == ["=====", "Docker Volume Backup", "====="]
        assert lines[3].endswith("INFO: after")

    def test_close_detaches_handler(self, tmp_path):
        log = RunLog(tmp_path / "run.log")
        log.open()
        log.close()

        handlers = logging.getLogger(f"{RUN_LOGGER_NAME}.run").handlers
        assert log._handler is None
        assert not any(isinstance(h, logging.FileHandler) for h in handlers)

    def test_run_logger_does_not_propagate(self, tmp_path):
        with RunLog(tmp_path / "run.log"):
            assert logging.getLogger(f"{RUN_LOGGER_NAME}.run").propagate is False


@pytest.mark.unit
class TestSetupLogging:

    def test_debug_level(self):
        setup_logging(debug=True)
        assert logging.getLogger("volume_backup").level == logging.DEBUG
        setup_logging(debug=False)
        assert logging.getLogger("volume_backup").level == logging.WARNING

    def test_handler_added_once(self):
        setup_logging()
        setup_logging()
        handlers = [h for h in logging.getLogger("volume_backup").handlers
                    if getattr(h, "_volume_backup_console", False)]
        assert len(handlers) == 1

    def test_get_logger(self):
        assert get_logger("volume_backup.x").name == "volume_backup.x"
