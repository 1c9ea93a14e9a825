import sys
from ipaddress import IPv4Address, IPv6Address
from pathlib import Path
from typing import Union


def get_executable_dir() -> Path:
    """Returns the directory of the running executable.

    For frozen builds this is the directory of the bundled executable,
    otherwise the directory of the launcher script (e.g. the nvr-check
    console script). When started from a .py file, as with
    ``python -m nvr_check``, the working directory is used so files do not
    land inside the installed package.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    if sys.argv and sys.argv[0] and not sys.argv[0].endswith(".py"):
        return Path(sys.argv[0]).resolve().parent
    return Path.cwd()


def snapshot_file_name(
    address: Union[IPv4Address, IPv6Address], extension: str = ".xml"
) -> str:
    """File name for an address: its text with the dots removed.

    The mapping is not injective (1.0.0.11 and 10.0.1.1 both give 10011)
    and existing snapshots rely on it, so it is kept as is.
    """
    return str(address).replace(".", "") + extension


def get_snapshot_path(
    address: Union[IPv4Address, IPv6Address], directory: Path, extension: str = ".xml"
) -> Path:
    """Full path of the snapshot file for an address."""
    return Path(directory) / snapshot_file_name(address, extension)
