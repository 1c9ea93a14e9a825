"""NVR clients."""

from .base import ControlCenter, ControlCenterSdk, Nvr, SdkInitParams
from .avigilon import AvigilonControlCenter, AvigilonNvr, AvigilonSdk

__all__ = [
    "ControlCenter",
    "ControlCenterSdk",
    "Nvr",
    "SdkInitParams",
    "AvigilonControlCenter",
    "AvigilonNvr",
    "AvigilonSdk",
]
