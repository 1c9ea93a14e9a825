import ipaddress
from unittest.mock import AsyncMock, MagicMock

import pytest

from nvr_check.models import ConnectionTarget, Device, Entity, LoginResult
from nvr_check.utils.config import Config, OutputConfig, PollingConfig


@pytest.fixture
def temp_storage(tmp_path):
    """Directory snapshots are written to during a test."""
    storage = tmp_path / "snapshots"
    storage.mkdir()
    return storage


@pytest.fixture
def mock_config(temp_storage):
    """Config with short poll windows writing into the temp directory."""
    return Config(
        polling=PollingConfig(session_timeout=0.3, device_timeout=0.3, interval=0.01),
        output=OutputConfig(directory=str(temp_storage)),
    )


@pytest.fixture
def target():
    return ConnectionTarget(
        address=ipaddress.ip_address("10.0.0.1"),
        username="admin",
        password="secret",
        camera_count=2,
    )


@pytest.fixture
def devices():
    return [
        Device(entities=[Entity(logical_id=3)], connected=True),
        Device(entities=[Entity(logical_id=7)], connected=False),
    ]


@pytest.fixture
def mock_nvr(devices):
    """An NVR session that logs in and reports the two fixture devices."""
    nvr = MagicMock()
    nvr.login = AsyncMock(return_value=LoginResult.SUCCESS)
    nvr.get_devices = AsyncMock(return_value=devices)
    return nvr


@pytest.fixture
def mock_control_center(mock_nvr):
    control_center = MagicMock()
    control_center.default_nvr_port = 8443
    control_center.add_nvr = AsyncMock(return_value=None)
    control_center.get_nvr = AsyncMock(return_value=mock_nvr)
    control_center.dispose = AsyncMock()
    return control_center


@pytest.fixture
def mock_sdk(mock_control_center):
    sdk = MagicMock()
    sdk.create_instance = MagicMock(return_value=mock_control_center)
    sdk.shutdown = AsyncMock()
    return sdk
