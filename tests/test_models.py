"""Unit tests for data models."""

import pytest

from ecoflowcloud.models.device import Device, DeviceOnlineStatus, is_online_flag


class TestDevice:
    """Test suite for the Device model."""

    def test_from_api(self, sample_device_list: dict):
        device = Device.from_api(sample_device_list["data"][0])

        assert device.sn == "R331ZEB4ZEAL0528"
        assert device.online is True
        assert device.device_name == "Delta 2"
        assert device.product_name == "DELTA 2"

    def test_from_api_minimal(self):
        device = Device.from_api({"sn": "SN1"})

        assert device.sn == "SN1"
        assert device.online is False
        assert device.device_name == ""

    def test_from_api_missing_serial(self):
        with pytest.raises(KeyError):
            Device.from_api({"online": 1})

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, True),
            ("1", True),
            ("1.0", True),
            (1.0, True),
            (True, True),
            (0, False),
            (1.5, False),
            (2, False),
            (None, False),
            ("x", False),
        ],
    )
    def test_online_flag(self, value, expected):
        assert is_online_flag(value) is expected


class TestDeviceOnlineStatus:
    """Test suite for the online status enum."""

    def test_members(self):
        assert DeviceOnlineStatus.ONLINE.value == "online"
        assert DeviceOnlineStatus.OFFLINE.value == "offline"
        assert DeviceOnlineStatus.NOT_FOUND.value == "not_found"

    def test_compares_as_string(self):
        assert DeviceOnlineStatus.NOT_FOUND == "not_found"
        assert DeviceOnlineStatus("online") is DeviceOnlineStatus.ONLINE
