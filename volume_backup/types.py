################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        types.py
# @module:      volume_backup.types
# @description: Shared data models for targets, records, and run summaries.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - BackupTarget and BackupRecord are frozen once created
# - RunAccumulator is threaded through the orchestrator instead of globals
# - RunSummary is derived, only persisted through the JSON report
################################################################################

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional


# ---- Per-volume DTOs ----

@dataclass(frozen=True)
class BackupTarget:
    name: str


@dataclass
class DependentContainer:
    name: str
    was_stopped: bool = False


@dataclass(frozen=True)
class BackupRecord:
    volume: str
    archive_path: Path
    size_bytes: int = 0
    succeeded: bool = True
    error_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "volume": self.volume,
            "file": str(self.archive_path),
            "size_bytes": self.size_bytes,
        }


# ---- Run state & summary ----

@dataclass
class RunAccumulator:
    """Mutable state for one invocation, handed from volume to volume."""

    records: List[BackupRecord] = field(default_factory=list)
    stopped_containers: List[str] = field(default_factory=list)
    restarted_containers: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    failed: bool = False

    def add_record(self, record: BackupRecord) -> None:
        self.records.append(record)
        if not record.succeeded:
            self.failed = True

    def mark_failed(self, message: str) -> None:
        self.failed = True
        self.errors.append(message)

    @property
    def successful_records(self) -> List[BackupRecord]:
        return [r for r in self.records if r.succeeded]

    def summarize(self) -> RunSummary:
        return RunSummary.from_accumulator(self)


@dataclass(frozen=True)
class RunSummary:
    total_volumes: int
    succeeded_count: int
    total_size_bytes: int
    any_failed: bool

    @classmethod
    def from_accumulator(cls, acc: RunAccumulator) -> RunSummary:
        ok = acc.successful_records
        return cls(
            total_volumes=len(acc.records),
            succeeded_count=len(ok),
            total_size_bytes=sum(r.size_bytes for r in ok),
            any_failed=acc.failed,
        )
