import hashlib
import logging
import os
import time
from typing import Any, Dict, List, Optional

import httpx

from nvr_check.models import Device, Entity, LoginResult
from nvr_check.utils.config import NvrConfig

from .base import ControlCenter, ControlCenterSdk, IPAddress, Nvr, SdkInitParams

logger = logging.getLogger(__name__)

API_PREFIX = "/mt/api/rest/v1"
DEFAULT_WEB_ENDPOINT_PORT = 8443
SUPPORTED_MAJOR_VERSION = 6


def build_authorization_token(nonce: str, key: str, now: Optional[float] = None) -> str:
    """Integration token sent with every login: nonce:epoch:sha256(epoch + key)."""
    epoch = int(time.time() if now is None else now)
    digest = hashlib.sha256(f"{epoch}{key}".encode("utf-8")).hexdigest()
    return f"{nonce}:{epoch}:{digest}"


def format_host(address: IPAddress) -> str:
    if address.version == 6:
        return f"[{address}]"
    return str(address)


def _log_http_call(
    name: str, response: Optional[httpx.Response] = None, error: Exception = None
) -> None:
    """Logs request/response details when LOG_LEVEL is 'debug'."""
    if os.environ.get("LOG_LEVEL", "").lower() != "debug":
        return

    if response is not None:
        request = response.request
        logger.debug(f"{name}: {request.method} {request.url.copy_remove_param('session')}")
        logger.debug(f"{name}: status {response.status_code}")
        # login bodies carry the password
        if name != "login":
            logger.debug(f"{name}: body {response.text}")
    elif error is not None:
        logger.debug(f"{name}: {type(error).__name__}: {error}")


def parse_camera(camera: Dict[str, Any]) -> Device:
    """Convert a camera record from the web endpoint into a Device."""
    if not isinstance(camera, dict):
        raise ValueError(f"expected a camera object, got {type(camera).__name__}")
    entities = []
    logical_id = camera.get("logicalId")
    if logical_id is not None:
        entities.append(Entity(logical_id=int(logical_id), name=camera.get("name")))

    connected = camera.get("connected")
    if connected is None:
        connected = camera.get("connectionState") == "CONNECTED"
    return Device(entities=entities, connected=bool(connected))


class AvigilonNvr(Nvr):
    """Session on an NVR's web endpoint."""

    def __init__(
        self, address: IPAddress, base_url: str, client: httpx.AsyncClient, config: NvrConfig
    ):
        self._address = address
        self.base_url = base_url
        self._client = client
        self.config = config
        self.session_id: Optional[str] = None

    @property
    def address(self) -> IPAddress:
        return self._address

    async def login(self, username: str, password: str) -> LoginResult:
        """Log in and keep the session id for later requests."""
        if not username:
            return LoginResult.INVALID_USERNAME

        payload = {
            "username": username,
            "password": password,
            "clientName": self.config.client_name,
            "authorizationToken": build_authorization_token(
                self.config.user_nonce, self.config.user_key
            ),
        }
        try:
            response = await self._client.post(f"{self.base_url}/login", json=payload)
            _log_http_call("login", response)
        except httpx.RequestError as e:
            _log_http_call("login", error=e)
            logger.info(f"Unable to reach NVR at {self._address} for login: {e}")
            return LoginResult.CONNECTION_ERROR

        if response.status_code in (401, 403):
            return LoginResult.INVALID_CREDENTIALS
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            logger.error(f"Unexpected login response from {self._address}: {response.status_code}")
            return LoginResult.UNKNOWN_ERROR

        if response.status_code == 200 and body.get("status") == "success":
            result = body.get("result") or {}
            self.session_id = result.get("session") if isinstance(result, dict) else None
            if self.session_id:
                logger.info(f"Logged in to NVR at {self._address} as {username}")
                return LoginResult.SUCCESS
            return LoginResult.UNKNOWN_ERROR
        if body.get("status") == "error":
            logger.debug(f"Login rejected by {self._address}: {body.get('message')}")
            return LoginResult.INVALID_CREDENTIALS
        return LoginResult.UNKNOWN_ERROR

    async def get_devices(self) -> List[Device]:
        """Get the cameras currently attached to the NVR."""
        if not self.session_id:
            logger.warning(f"Not logged in to NVR at {self._address}, no devices to list")
            return []
        try:
            response = await self._client.get(
                f"{self.base_url}/cameras", params={"session": self.session_id}
            )
            _log_http_call("get_devices", response)
            if response.status_code != 200:
                logger.error(f"Failed to list cameras: {response.status_code}")
                return []
            body = response.json()
            if not isinstance(body, dict):
                raise ValueError(f"expected an object, got {type(body).__name__}")
            result = body.get("result") or {}
            cameras = (result.get("cameras") if isinstance(result, dict) else None) or []
            if not isinstance(cameras, list):
                raise ValueError(f"expected a camera list, got {type(cameras).__name__}")
            return [parse_camera(camera) for camera in cameras]
        except httpx.RequestError as e:
            _log_http_call("get_devices", error=e)
            logger.info(f"Unable to list cameras on NVR at {self._address}: {e}")
            return []
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Invalid camera list from NVR at {self._address}: {e}")
            return []

    async def logout(self) -> None:
        """End the session. Errors are logged and ignored."""
        if not self.session_id:
            return
        try:
            response = await self._client.post(
                f"{self.base_url}/logout", json={"session": self.session_id}
            )
            _log_http_call("logout", response)
        except httpx.RequestError as e:
            logger.debug(f"Logout from {self._address} failed: {e}")
        finally:
            self.session_id = None


class AvigilonControlCenter(ControlCenter):
    """Tracks NVR web endpoints and hands out sessions for live ones."""

    def __init__(self, config: Optional[NvrConfig] = None, client: Optional[httpx.AsyncClient] = None):
        self.config = config or NvrConfig()
        self._client = client
        self._owns_client = client is None
        self._endpoints: Dict[IPAddress, str] = {}
        self._nvrs: Dict[IPAddress, AvigilonNvr] = {}
        self.is_disposed = False

    @property
    def default_nvr_port(self) -> int:
        return self.config.port or DEFAULT_WEB_ENDPOINT_PORT

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                verify=self.config.verify_ssl, timeout=self.config.request_timeout
            )
        return self._client

    async def _check_health(self, base_url: str) -> Optional[str]:
        try:
            response = await self._get_client().get(f"{base_url}/health")
            _log_http_call("health", response)
        except httpx.RequestError as e:
            _log_http_call("health", error=e)
            return f"{type(e).__name__}: {e}"
        if response.status_code != 200:
            return f"health check returned {response.status_code}"
        return None

    async def add_nvr(self, address: IPAddress, port: int) -> Optional[str]:
        base_url = f"https://{format_host(address)}:{port}{API_PREFIX}"
        # Kept even on error so later get_nvr probes can still find it
        self._endpoints[address] = base_url
        logger.info(f"Adding NVR at {format_host(address)}:{port}")
        return await self._check_health(base_url)

    async def get_nvr(self, address: IPAddress) -> Optional[AvigilonNvr]:
        if address in self._nvrs:
            return self._nvrs[address]
        base_url = self._endpoints.get(address)
        if base_url is None:
            return None

        error = await self._check_health(base_url)
        if error:
            logger.debug(f"NVR at {address} not available yet: {error}")
            return None
        nvr = AvigilonNvr(address, base_url, self._get_client(), self.config)
        self._nvrs[address] = nvr
        return nvr

    async def dispose(self) -> None:
        if self.is_disposed:
            return
        for nvr in self._nvrs.values():
            await nvr.logout()
        self._nvrs.clear()
        if self._owns_client and self._client is not None:
            await self._client.aclose()
        self._client = None
        self.is_disposed = True


class AvigilonSdk(ControlCenterSdk):
    """Creates web endpoint control centers."""

    def __init__(self, config: Optional[NvrConfig] = None, client: Optional[httpx.AsyncClient] = None):
        self.config = config or NvrConfig()
        self._client = client
        self._instances: List[AvigilonControlCenter] = []

    def create_instance(self, params: SdkInitParams) -> AvigilonControlCenter:
        if params.major_version != SUPPORTED_MAJOR_VERSION:
            raise ValueError(
                f"SDK version {params.major_version}.{params.minor_version} is not supported "
                f"(expected {SUPPORTED_MAJOR_VERSION}.x)"
            )
        if params.auto_discover_nvrs:
            logger.warning("NVR auto discovery is not available, NVRs must be added explicitly")

        control_center = AvigilonControlCenter(self.config, self._client)
        self._instances.append(control_center)
        return control_center

    async def shutdown(self) -> None:
        for control_center in self._instances:
            await control_center.dispose()
        self._instances.clear()
        logger.debug("SDK shut down")
