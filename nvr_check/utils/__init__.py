"""
nvr_check utilities

This package contains utility modules used throughout the nvr_check application.
"""

from .config import Config, load_config, get_config_path
from .logging_setup import configure_logging
from .paths import get_executable_dir, get_snapshot_path, snapshot_file_name
from .polling import poll_until

__all__ = [
    "Config",
    "load_config",
    "get_config_path",
    "configure_logging",
    "get_executable_dir",
    "get_snapshot_path",
    "snapshot_file_name",
    "poll_until",
]
