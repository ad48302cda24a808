################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        __init__.py
# @module:      volume_backup.cli
# @description: Command line interface package.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""Command line interface for docker-volume-backup."""
