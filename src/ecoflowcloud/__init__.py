"""
EcoFlow cloud (IoT open platform) API client.
"""

from .client.rest import SignedApiClient
from .exceptions import DecodeError, EcoFlowError, TransportError
from .models.device import Device, DeviceOnlineStatus
from .utils.config import Config

__version__ = "0.1.0"

__all__ = [
    "SignedApiClient",
    "Device",
    "DeviceOnlineStatus",
    "Config",
    "EcoFlowError",
    "TransportError",
    "DecodeError",
]
