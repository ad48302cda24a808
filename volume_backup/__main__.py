################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        __main__.py
# @module:      volume_backup.__main__
# @description: Allows running the tool with python -m volume_backup.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

"""Allow ``python -m volume_backup``."""

from volume_backup.cli.main import cli_main

if __name__ == "__main__":
    cli_main()
