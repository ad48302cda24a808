################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        config.py
# @module:      volume_backup.helpers.config
# @description: Validated run options built from the command line.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - resolve_options() is pure: no filesystem access, no docker calls
# - Paths are expanded and normalized, never resolved against symlinks
# - Every validation failure surfaces as ConfigurationError
################################################################################

"""
Pydantic option model for docker-volume-backup.

Type-safe, validated configuration for a single backup run.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..errors import ConfigurationError
from .constants import (
    BLOCKED_OUTPUT_PREFIXES,
    CONTAINER_STOP_TIMEOUT,
    DEFAULT_BACKUP_DIR,
    DEFAULT_HELPER_IMAGE,
    DEFAULT_LOG_DIR,
)


class TargetMode(str, Enum):
    SINGLE = "single"
    ALL = "all"


def normalize_path(value: Any) -> Path:
    """Expand ``~`` and make the path absolute without touching the filesystem."""
    return Path(os.path.normpath(os.path.abspath(os.path.expanduser(str(value)))))


def is_system_path(path: Path) -> Optional[str]:
    """Return the blocked prefix ``path`` falls under, if any."""
    text = str(path)
    for prefix in BLOCKED_OUTPUT_PREFIXES:
        if text == prefix or text.startswith(prefix + "/"):
            return prefix
    return None


class BackupOptions(BaseModel):
    """Options for one backup run"""

    model_config = ConfigDict(frozen=True)

    target_mode: TargetMode
    volume_name: Optional[str] = Field(
        default=None,
        description="Volume to back up (single mode only)"
    )
    output_dir: Path = Field(
        default=DEFAULT_BACKUP_DIR,
        description="Directory receiving <volume>_<timestamp>.tar.gz archives"
    )
    log_dir: Path = Field(
        default=DEFAULT_LOG_DIR,
        description="Directory receiving the run log and JSON summary"
    )
    stop_containers: bool = Field(default=False, description="Stop dependent containers")
    dry_run: bool = Field(default=False, description="Only print the backup plan")
    emit_json: bool = Field(default=False, description="Write a JSON summary")
    helper_image: str = Field(
        default=DEFAULT_HELPER_IMAGE,
        description="Image used for the ephemeral tar container"
    )
    stop_timeout: int = Field(
        default=CONTAINER_STOP_TIMEOUT,
        ge=0,
        description="Grace period passed to 'docker stop -t'"
    )

    @field_validator("output_dir", "log_dir", mode="before")
    @classmethod
    def validate_dir(cls, v: Any) -> Path:
        """Convert to a normalized absolute Path"""
        if v is None or not str(v).strip():
            raise ValueError("Directory path cannot be empty")
        return normalize_path(v)

    @field_validator("output_dir")
    @classmethod
    def validate_output_dir(cls, v: Path) -> Path:
        """Refuse system directories"""
        prefix = is_system_path(v)
        if prefix:
            raise ValueError(f"Output directory cannot be in system directory: {prefix}")
        return v

    @field_validator("helper_image")
    @classmethod
    def validate_helper_image(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Helper image cannot be empty")
        return v.strip()

    @model_validator(mode="after")
    def validate_target(self) -> BackupOptions:
        """Exactly one of single volume / all volumes"""
        if self.target_mode is TargetMode.SINGLE and not self.volume_name:
            raise ValueError("Must specify --volume <name> or --all")
        if self.target_mode is TargetMode.ALL and self.volume_name:
            raise ValueError("Cannot use both --volume and --all")
        return self

    @property
    def backup_all(self) -> bool:
        return self.target_mode is TargetMode.ALL


def _first_message(error: ValidationError) -> str:
    msg = error.errors()[0].get("msg", str(error))
    return msg.removeprefix("Value error, ")


def resolve_options(
    volume: Optional[str] = None,
    backup_all: bool = False,
    output_dir: Any = DEFAULT_BACKUP_DIR,
    log_dir: Any = DEFAULT_LOG_DIR,
    stop: bool = False,
    dry_run: bool = False,
    emit_json: bool = False,
    helper_image: str = DEFAULT_HELPER_IMAGE,
    stop_timeout: int = CONTAINER_STOP_TIMEOUT,
    extra_args: Sequence[str] = (),
) -> BackupOptions:
    """
    Validate parsed command line values into BackupOptions.

    Args:
        volume: Value of --volume
        backup_all: --all given
        output_dir: Value of --out
        log_dir: Value of --log-dir
        stop: --stop (True) or --no-stop (False)
        dry_run: --dry-run given
        emit_json: --json given
        helper_image: Image for the tar helper container
        stop_timeout: Seconds for docker stop
        extra_args: Arguments the parser did not recognize

    Returns:
        Validated BackupOptions

    Raises:
        ConfigurationError: On unknown flags or an invalid selection
    """
    if extra_args:
        raise ConfigurationError(f"Unknown option {extra_args[0]}")

    if backup_all and volume:
        raise ConfigurationError("Cannot use both --volume and --all")
    if not backup_all and not volume:
        raise ConfigurationError("Must specify --volume <name> or --all")

    try:
        return BackupOptions(
            target_mode=TargetMode.ALL if backup_all else TargetMode.SINGLE,
            volume_name=volume or None,
            output_dir=output_dir,
            log_dir=log_dir,
            stop_containers=stop,
            dry_run=dry_run,
            emit_json=emit_json,
            helper_image=helper_image,
            stop_timeout=stop_timeout,
        )
    except ValidationError as e:
        raise ConfigurationError(_first_message(e)) from e
