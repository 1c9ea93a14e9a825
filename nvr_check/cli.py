"""Command line parsing.

Options are single letters with the value attached, e.g. ``-s10.0.0.5``.
"""

import ipaddress
import logging
import re
from typing import Optional, Sequence

from nvr_check.models import ConnectionTarget

logger = logging.getLogger(__name__)

# Expected camera counts are 16-bit signed values
MIN_CAMERA_COUNT = -32768
MAX_CAMERA_COUNT = 32767

COUNT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _parse_camera_count(value: str) -> Optional[int]:
    value = value.strip()
    if not COUNT_PATTERN.fullmatch(value):
        return None
    count = int(value)
    if MIN_CAMERA_COUNT <= count <= MAX_CAMERA_COUNT:
        return count
    return None


def parse_command_line(argv: Sequence[str]) -> Optional[ConnectionTarget]:
    """
    Build the connection target from ``-s<ip> -u<user> -p<pass> -c<count>``.

    Unknown options and options without a value are ignored, and a later
    option overrides an earlier one. An address or count that does not parse
    leaves the previous value in place.

    Returns:
        The target, or None when no valid server address was given
    """
    address = None
    username = ""
    password = ""
    camera_count = 0

    for arg in argv:
        if len(arg) < 3 or arg[0] != "-":
            continue
        flag, value = arg[1], arg[2:]

        if flag == "s":
            try:
                address = ipaddress.ip_address(value)
            except ValueError:
                logger.debug(f"Ignoring invalid server address: {value}")
        elif flag == "u":
            username = value
        elif flag == "p":
            password = value
        elif flag == "c":
            count = _parse_camera_count(value)
            if count is not None:
                camera_count = count

    if address is None:
        return None

    return ConnectionTarget(
        address=address,
        username=username,
        password=password,
        camera_count=camera_count,
    )
