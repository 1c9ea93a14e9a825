"""
nvr_check

Connects to an NVR, waits for the expected cameras to appear and writes a
one-time XML snapshot of their connection state.
"""

from .version import VERSION as __version__

__all__ = ["__version__"]
