"""Device snapshot files."""

import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable

import aiofiles

from nvr_check.models import Device

logger = logging.getLogger(__name__)

ROOT_ELEMENT = "root"
DEVICE_ELEMENT_PREFIX = "id"


def build_snapshot(devices: Iterable[Device]) -> str:
    """
    Render devices as ``<root><id{logicalId}>True</id{logicalId}>...</root>``.

    Devices keep their order. No XML declaration is emitted.
    """
    root = ET.Element(ROOT_ELEMENT)
    for device in devices:
        if device.logical_id is None:
            logger.error(f"Skipping device without a logical id: {device}")
            continue
        element = ET.SubElement(root, f"{DEVICE_ELEMENT_PREFIX}{device.logical_id}")
        element.text = str(bool(device.connected))
    return ET.tostring(root, encoding="unicode")


async def write_snapshot_if_absent(path: Path, devices: Iterable[Device]) -> bool:
    """
    Write the snapshot unless a file already exists at ``path``.

    Returns:
        True if the file was written, False if an existing file was left alone
    """
    if os.path.exists(path):
        logger.info(f"Snapshot {path} already exists, leaving it untouched")
        return False

    content = build_snapshot(devices)
    async with aiofiles.open(path, "w", encoding="utf-8") as f:
        await f.write(content)
    logger.info(f"Wrote snapshot {path}")
    return True
