"""
Models package for nvr_check.

This package contains the data models passed between the command line,
the NVR client and the snapshot writer.
"""

from .connection_target import ConnectionTarget
from .device import Device, Entity, LoginResult

__all__ = [
    "ConnectionTarget",
    "Device",
    "Entity",
    "LoginResult",
]
