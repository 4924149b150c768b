"""REST API client for the EcoFlow cloud."""

import asyncio
import json
from typing import Any

import aiohttp

from ..exceptions import DecodeError, TransportError
from ..models.device import Device, DeviceOnlineStatus, is_online_flag
from ..utils.config import Config
from ..utils.logger import logger
from .auth import Credentials, build_headers

DEVICE_LIST_PATH = "/iot-open/sign/device/list"
DEVICE_QUOTA_ALL_PATH = "/iot-open/sign/device/quota/all"
DEVICE_QUOTA_PATH = "/iot-open/sign/device/quota"

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"


class SignedApiClient:
    """Async REST client for the EcoFlow IoT open platform."""

    def __init__(
        self,
        access_key: str | None = None,
        secret_key: str | None = None,
        host: str | None = None,
    ):
        self.credentials = Credentials(
            access_key=access_key if access_key is not None else Config.ACCESS_KEY,
            secret_key=secret_key if secret_key is not None else Config.SECRET_KEY,
        )
        self.base_url = Config.get_rest_url(host)
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self):
        """Context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create aiohttp session."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=Config.REST_TIMEOUT)
            self.session = aiohttp.ClientSession(timeout=timeout)
            logger.info(f"REST client connected to {self.base_url}")

    async def close(self) -> None:
        """Close aiohttp session."""
        if self.session and not self.session.closed:
            await self.session.close()
            logger.info("REST client closed")

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a signed HTTP request.

        Query params and the request body are both covered by the signature.

        Args:
            method: HTTP method (GET or PUT)
            path: API path
            params: Query parameters
            body: Request body, JSON-encoded (PUT only)

        Returns:
            Decoded JSON response

        Raises:
            TransportError: On network or TLS failure
            DecodeError: If the response body is not valid JSON
        """
        if self.session is None or self.session.closed:
            await self.connect()

        method = method.upper()
        url = f"{self.base_url}{path}"

        signed_params: dict[str, Any] = {}
        if params:
            signed_params.update(params)
        if body:
            signed_params.update(body)

        headers = build_headers(self.credentials, signed_params)

        data = None
        if method == "PUT":
            headers["Content-Type"] = JSON_CONTENT_TYPE
            data = json.dumps(
                body if body is not None else {}, separators=(",", ":")
            ).encode("utf-8")

        logger.debug(
            f"REST request ->\nmethod: {method}\nurl: {url}\nparams: {params}\nbody: {body}\n"
            f"headers: {headers}\n{'=' * 60}"
        )

        try:
            async with self.session.request(
                method=method,
                url=url,
                params=params,
                data=data,
                headers=headers,
            ) as response:
                status = response.status
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"REST request failed: {method} {url} - {e!r}")
            raise TransportError(f"{method} {url} failed: {e!r}", cause=e) from e

        if status >= 400:
            logger.warning(f"REST API returned HTTP {status} for {method} {path}")

        try:
            text = raw.decode("utf-8")
            return json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            snippet = raw[:100].decode("utf-8", errors="replace")
            logger.error(
                f"REST API error: {status} - Non-JSON response: {snippet}"
            )
            raise DecodeError(
                f"Invalid JSON response (HTTP {status}): {snippet}",
                body=raw.decode("utf-8", errors="replace"),
                status=status,
            ) from e

    # Device endpoints

    async def list_devices(self) -> Any:
        """
        Get the list of devices bound to the account.

        Returns:
            Raw API response ({code, message, data: [...]})
        """
        return await self.request("GET", DEVICE_LIST_PATH)

    async def get_devices(self) -> list[Device]:
        """
        Get the device list as Device objects.

        Returns:
            List of Device objects
        """
        response = await self.list_devices()

        devices = []
        for item in _device_entries(response):
            try:
                devices.append(Device.from_api(item))
            except (KeyError, TypeError) as e:
                logger.warning(f"Failed to parse device: {e}")

        logger.info(f"Fetched {len(devices)} devices")
        return devices

    async def get_device(self, serial: str) -> Any:
        """
        Get all quota (telemetry) values of a device.

        Args:
            serial: Device serial number

        Returns:
            Raw API response
        """
        return await self.request(
            "GET", DEVICE_QUOTA_ALL_PATH, params={"sn": serial}
        )

    async def is_device_online(self, serial: str) -> DeviceOnlineStatus:
        """
        Check whether a device is online.

        Args:
            serial: Device serial number

        Returns:
            ONLINE, OFFLINE, or NOT_FOUND if the serial is not in the device list
        """
        response = await self.list_devices()

        for item in _device_entries(response):
            if isinstance(item, dict) and str(item.get("sn")) == serial:
                if is_online_flag(item.get("online")):
                    return DeviceOnlineStatus.ONLINE
                return DeviceOnlineStatus.OFFLINE

        return DeviceOnlineStatus.NOT_FOUND

    async def set_device_function(
        self,
        serial: str,
        cmd_code: str = "",
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send a command to a device.

        Args:
            serial: Device serial number
            cmd_code: Command code (e.g. "WN511_SOCKET_SET_PLUG_SWITCH")
            params: Command parameters

        Returns:
            Raw API response
        """
        payload = {
            "sn": serial,
            "cmdCode": cmd_code,
            "params": params if params is not None else {},
        }

        response = await self.request("PUT", DEVICE_QUOTA_PATH, body=payload)
        logger.info(f"Command sent: {cmd_code} -> {serial}")
        return response


def _device_entries(response: Any) -> list:
    if not isinstance(response, dict):
        return []
    data = response.get("data")
    return data if isinstance(data, list) else []
