"""
Connection target model supplied on the command line.
"""

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import Union


@dataclass(frozen=True)
class ConnectionTarget:
    """The NVR to check and what it is expected to report."""

    address: Union[IPv4Address, IPv6Address]
    username: str = ""
    password: str = ""
    camera_count: int = 0
