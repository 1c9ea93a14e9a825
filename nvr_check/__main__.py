#!/usr/bin/env python
import sys
import asyncio
import logging
from typing import Optional, Sequence

from nvr_check.cli import parse_command_line
from nvr_check.nvr.avigilon import AvigilonSdk
from nvr_check.provisioning_check import ProvisioningCheck
from nvr_check.utils.config import load_config
from nvr_check.utils.logging_setup import configure_logging
from nvr_check.version import VERSION

logger = logging.getLogger(__name__)


async def main(argv: Optional[Sequence[str]] = None):
    """Main entry point for the application."""
    if argv is None:
        argv = sys.argv[1:]

    target = parse_command_line(argv)
    if target is None:
        return

    config = load_config()
    configure_logging(config.logging)
    logger.info(f"nvr_check {VERSION}")
    logger.info(
        f"Checking NVR at {target.address} for {target.camera_count} camera(s)"
    )

    sdk = AvigilonSdk(config.nvr)
    check = ProvisioningCheck(target, sdk, config)
    await check.run()


def main_entry():
    """Entry point for console script."""
    try:
        exit_code = asyncio.run(main())
        sys.exit(exit_code)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received, shutting down...")
        sys.exit(0)


if __name__ == "__main__":
    main_entry()
