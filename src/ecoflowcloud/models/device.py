"""Device model."""

from dataclasses import dataclass
from enum import Enum


class DeviceOnlineStatus(str, Enum):
    """Result of an online check against the device list."""

    ONLINE = "online"
    OFFLINE = "offline"
    NOT_FOUND = "not_found"


@dataclass
class Device:
    """Represents a device bound to the account."""

    sn: str  # Serial number
    online: bool
    device_name: str = ""
    product_name: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "Device":
        """Create Device from a device list entry."""
        return cls(
            sn=str(data["sn"]),
            online=is_online_flag(data.get("online")),
            device_name=str(data.get("deviceName", "")),
            product_name=str(data.get("productName", "")),
        )


def is_online_flag(value) -> bool:
    """The API reports online as 1; anything else is offline."""
    try:
        return float(value) == 1
    except (TypeError, ValueError):
        return False
