"""
Provisioning check: connect to one NVR, wait for the expected cameras and
write a snapshot of their connection state.
"""

import logging
from pathlib import Path
from typing import List, Optional

from nvr_check.models import ConnectionTarget, Device, LoginResult
from nvr_check.nvr.base import ControlCenter, ControlCenterSdk, Nvr, SdkInitParams
from nvr_check.snapshot import write_snapshot_if_absent
from nvr_check.utils.config import Config
from nvr_check.utils.paths import get_snapshot_path
from nvr_check.utils.polling import poll_until

logger = logging.getLogger(__name__)

SDK_INIT_PARAMS = SdkInitParams(
    major_version=6, minor_version=2, auto_discover_nvrs=False, service_mode=True
)


class ProvisioningCheck:
    """Runs the check once for a single connection target."""

    def __init__(self, target: ConnectionTarget, sdk: ControlCenterSdk, config: Optional[Config] = None):
        self.target = target
        self.sdk = sdk
        self.config = config or Config()
        self.control_center: Optional[ControlCenter] = None

    @property
    def snapshot_path(self) -> Path:
        return get_snapshot_path(
            self.target.address,
            self.config.output_directory(),
            self.config.output.extension,
        )

    async def run(self) -> Optional[Path]:
        """
        Run the whole check. The control center and SDK are always released.

        Returns:
            Path of the snapshot written by this run, or None if nothing was written
        """
        try:
            self.control_center = self.sdk.create_instance(SDK_INIT_PARAMS)

            nvr = await self.connect()
            if nvr is None:
                logger.error("An error occurred while connecting to the NVR.")
                return None

            result = await nvr.login(self.target.username, self.target.password)
            if result != LoginResult.SUCCESS:
                name = result.name if isinstance(result, LoginResult) else result
                logger.error(f"Failed to login to NVR: {name}")
                return None

            devices = await self.wait_for_devices(nvr)
            if devices is None:
                logger.debug(
                    f"NVR at {self.target.address} did not report {self.target.camera_count} devices in time"
                )
                return None

            if await write_snapshot_if_absent(self.snapshot_path, devices):
                return self.snapshot_path
            return None
        finally:
            await self.teardown()

    async def connect(self) -> Optional[Nvr]:
        """Register the NVR and wait for its session handle."""
        address = self.target.address
        port = self.control_center.default_nvr_port

        error = await self.control_center.add_nvr(address, port)
        if error:
            logger.error(f"An error occurred while adding the NVR.{address}")
            logger.debug(f"add_nvr({address}:{port}) failed: {error}")

        return await poll_until(
            lambda: self.control_center.get_nvr(address),
            lambda nvr: nvr is not None,
            timeout=self.config.polling.session_timeout,
            interval=self.config.polling.interval,
            name="wait_for_session",
        )

    async def wait_for_devices(self, nvr: Nvr) -> Optional[List[Device]]:
        """Poll the device list until it has the expected number of entries."""
        expected = self.target.camera_count
        return await poll_until(
            nvr.get_devices,
            lambda devices: len(devices) == expected,
            timeout=self.config.polling.device_timeout,
            interval=self.config.polling.interval,
            name="wait_for_devices",
        )

    async def teardown(self) -> None:
        try:
            if self.control_center is not None:
                await self.control_center.dispose()
        finally:
            await self.sdk.shutdown()
