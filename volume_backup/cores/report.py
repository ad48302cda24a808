################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        report.py
# @module:      volume_backup.cores.report
# @description: Run summary output, exit code policy, and the JSON summary file.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - Any failed volume or restart fails the whole batch (exit 1)
# - The JSON summary is only written for successful runs
# - The summary document is validated against SUMMARY_SCHEMA before writing
################################################################################

"""
Report emitter for docker-volume-backup.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import jsonschema
from rich.markup import escape

from ..helpers import ui_utils
from ..helpers.config import BackupOptions
from ..helpers.constants import SUMMARY_FILE_MODE, SUMMARY_FILE_TEMPLATE
from ..helpers.logging import RunLog
from ..helpers.system_utils import SystemUtils
from ..types import RunAccumulator, RunSummary


logger = logging.getLogger(__name__)


SUMMARY_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": [
        "timestamp",
        "backup_dir",
        "stop_containers",
        "volumes_backed_up",
        "total_size_bytes",
        "backups",
        "log_file",
    ],
    "properties": {
        "timestamp": {"type": "string"},
        "backup_dir": {"type": "string"},
        "stop_containers": {"type": "boolean"},
        "volumes_backed_up": {"type": "integer", "minimum": 0},
        "total_size_bytes": {"type": "integer", "minimum": 0},
        "backups": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["volume", "file", "size_bytes"],
                "properties": {
                    "volume": {"type": "string"},
                    "file": {"type": "string"},
                    "size_bytes": {"type": "integer", "minimum": 0},
                },
                "additionalProperties": False,
            },
        },
        "log_file": {"type": "string"},
    },
    "additionalProperties": False,
}


class ReportEmitter:
    """
    Turns the collected records into console output, an exit code and,
    optionally, a JSON summary file.
    """

    def __init__(
        self,
        options: BackupOptions,
        log: RunLog,
        timestamp: str,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.options = options
        self.log = log
        self.timestamp = timestamp
        self.clock = clock or (lambda: datetime.now().astimezone())

    @property
    def summary_file(self) -> Path:
        return self.options.log_dir / SUMMARY_FILE_TEMPLATE.format(timestamp=self.timestamp)

    def emit(self, acc: RunAccumulator) -> int:
        """
        Print the summary and return the process exit code.

        Args:
            acc: Results collected by the orchestrator

        Returns:
            0 if every volume and restart succeeded, 1 otherwise
        """
        summary = acc.summarize()
        self.log.section("Backup Summary")
        self._print_table(acc)

        if summary.any_failed:
            self.log.error("Some backups failed - check logs for details")
            return 1

        self.log.success(f"Backed up {summary.succeeded_count} volume(s)")
        self.log.info(f"Total backup size: {SystemUtils.format_bytes(summary.total_size_bytes)}")

        if self.options.emit_json:
            path = self.write_json(acc, summary)
            self.log.info(f"JSON summary: {path}")
        return 0

    def build_document(self, acc: RunAccumulator, summary: RunSummary) -> Dict[str, Any]:
        return {
            "timestamp": self.clock().isoformat(timespec="seconds"),
            "backup_dir": str(self.options.output_dir),
            "stop_containers": self.options.stop_containers,
            "volumes_backed_up": summary.succeeded_count,
            "total_size_bytes": summary.total_size_bytes,
            "backups": [r.to_dict() for r in acc.successful_records],
            "log_file": str(self.log.log_file),
        }

    def write_json(self, acc: RunAccumulator, summary: Optional[RunSummary] = None) -> Path:
        """
        Write the JSON summary with owner-only permissions.

        Raises:
            jsonschema.ValidationError: If the document does not match SUMMARY_SCHEMA
        """
        summary = summary or acc.summarize()
        document = self.build_document(acc, summary)
        jsonschema.validate(instance=document, schema=SUMMARY_SCHEMA)

        path = self.summary_file
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
        path.chmod(SUMMARY_FILE_MODE)
        logger.debug(f"Wrote summary to {path}")
        return path

    def _print_table(self, acc: RunAccumulator) -> None:
        if not acc.records:
            return
        table = ui_utils.create_table(
            "Volume Backups",
            [
                ("Volume", "cyan", None),
                ("Status", "white", 8),
                ("Size", "yellow", 12),
                ("Archive", "white", None),
            ]
        )
        for record in acc.records:
            status = "[green]OK[/green]" if record.succeeded else "[red]FAILED[/red]"
            size = SystemUtils.format_bytes(record.size_bytes) if record.succeeded else "-"
            table.add_row(
                escape(record.volume),
                status,
                size,
                escape(str(record.archive_path)),
            )
        ui_utils.print_table(table)
