from abc import ABC, abstractmethod
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import List, Optional, Union

from nvr_check.models import Device, LoginResult

IPAddress = Union[IPv4Address, IPv6Address]


@dataclass(frozen=True)
class SdkInitParams:
    """Parameters the SDK is initialised with."""

    major_version: int
    minor_version: int
    auto_discover_nvrs: bool = False
    service_mode: bool = True


class Nvr(ABC):
    """Session handle for a single NVR."""

    @property
    @abstractmethod
    def address(self) -> IPAddress:
        """Address of the NVR."""
        pass

    @abstractmethod
    async def login(self, username: str, password: str) -> LoginResult:
        """Authenticate the session."""
        pass

    @abstractmethod
    async def get_devices(self) -> List[Device]:
        """Get the devices currently known to the NVR."""
        pass


class ControlCenter(ABC):
    """Client that tracks the NVRs it has been asked to connect to."""

    @property
    @abstractmethod
    def default_nvr_port(self) -> int:
        """Port NVRs listen on unless configured otherwise."""
        pass

    @abstractmethod
    async def add_nvr(self, address: IPAddress, port: int) -> Optional[str]:
        """Register an NVR endpoint.

        Returns:
            An error description, or None if registration succeeded
        """
        pass

    @abstractmethod
    async def get_nvr(self, address: IPAddress) -> Optional[Nvr]:
        """Get the session handle for a registered NVR, or None if it is not live yet."""
        pass

    @abstractmethod
    async def dispose(self) -> None:
        """Release the client and any open sessions."""
        pass


class ControlCenterSdk(ABC):
    """Entry point that creates control centers and is shut down once at exit."""

    @abstractmethod
    def create_instance(self, params: SdkInitParams) -> ControlCenter:
        """Create a control center compatible with the requested SDK version."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Shut down the SDK."""
        pass
