"""Data models."""

from .device import Device, DeviceOnlineStatus

__all__ = ["Device", "DeviceOnlineStatus"]
