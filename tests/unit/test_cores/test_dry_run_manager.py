"""
Unit tests for DryRunReport.
"""

import pytest

from volume_backup.cores.dry_run_manager import DryRunReport
from volume_backup.types import BackupTarget


TS = "20250314_092653"


@pytest.mark.unit
class TestDryRunReport:

    def test_lists_planned_archives(self, make_options, run_log):
        options = make_options(backup_all=True, dry_run=True)

        DryRunReport(options, run_log, TS).generate([BackupTarget("a"), BackupTarget("b")])

        content = run_log.log_file.read_text()
        assert "DRY RUN MODE - no actual backups will be created" in content
        assert f"- a -> {options.output_dir / 'a_20250314_092653.tar.gz'}" in content
        assert f"- b -> {options.output_dir / 'b_20250314_092653.tar.gz'}" in content
        assert "No changes were made" in content

    def test_stop_mode_mentioned(self, make_options, run_log):
        options = make_options(volume="a", dry_run=True, stop=True)
        DryRunReport(options, run_log, TS).generate([BackupTarget("a")])
        assert "Would stop dependent containers during backup" in run_log.log_file.read_text()

    def test_running_mode_mentioned(self, make_options, run_log):
        options = make_options(volume="a", dry_run=True)
        DryRunReport(options, run_log, TS).generate([BackupTarget("a")])
        assert "would keep running" in run_log.log_file.read_text()

    def test_no_filesystem_changes(self, make_options, run_log):
        options = make_options(volume="a", dry_run=True)
        DryRunReport(options, run_log, TS).generate([BackupTarget("a")])
        assert not options.output_dir.exists()
