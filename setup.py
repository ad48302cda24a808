################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        setup.py
# @module:      setup
# @description: Setuptools configuration and CLI packaging for docker-volume-backup.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description (optional)
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text(encoding="utf-8")

setup(
    name="docker-volume-backup",
    version="1.2.0",
    description="Consistent Docker volume snapshots as compressed tar archives",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Markus F. (TZERO78) & Contributors",
    author_email="",
    url="https://github.com/TZERO78/docker-volume-backup",
    project_urls={
        "Source": "https://github.com/TZERO78/docker-volume-backup",
        "Issues": "https://github.com/TZERO78/docker-volume-backup/issues",
    },
    license="MIT",

    packages=find_packages(exclude=("tests*", "docs*", "examples*")),

    include_package_data=True,
    zip_safe=False,

    python_requires=">=3.10",

    install_requires=[
        "psutil>=5.9.0",
        "typer>=0.12.0,<0.26",
        "rich>=13.0.0",
        "pydantic>=2.0.0",
        "jsonschema>=4.21.0",
        "click>=8.0.0",
    ],

    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },

    entry_points={
        "console_scripts": [
            "docker-volume-backup=volume_backup.cli.main:cli_main",
        ],
    },

    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Archiving :: Backup",
        "Topic :: System :: Systems Administration",
        "Topic :: Utilities",
    ],

    keywords="docker backup volumes tar snapshot cold-backup",
)
