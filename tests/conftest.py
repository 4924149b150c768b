"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ecoflowcloud.client.auth import Credentials
from ecoflowcloud.client.rest import SignedApiClient
from ecoflowcloud.utils.config import Config

TEST_ACCESS_KEY = "Fp4SvIprYSDPXtYJidEtUAd1o"
TEST_SECRET_KEY = "WIbFEKre0s6sLnh4ei7SPUeYnptHG6V"


def _make_session(status: int = 200, body: bytes = b'{"code":"0","message":"Success"}'):
    """Build a mock aiohttp session whose request() yields a canned response."""
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=body)

    session = MagicMock()
    session.closed = False
    session.request.return_value.__aenter__.return_value = response
    session.request.return_value.__aexit__.return_value = False
    return session


@pytest.fixture
def make_session():
    """Factory for mocked sessions with a given status and body."""
    return _make_session


@pytest.fixture
def credentials() -> Credentials:
    """Create test credentials."""
    return Credentials(access_key=TEST_ACCESS_KEY, secret_key=TEST_SECRET_KEY)


@pytest.fixture
def client() -> SignedApiClient:
    """Create a client with a mocked session returning an empty success."""
    api = SignedApiClient(access_key=TEST_ACCESS_KEY, secret_key=TEST_SECRET_KEY)
    api.session = _make_session()
    return api


@pytest.fixture
def sample_device_list() -> dict:
    """Sample device list response."""
    return {
        "code": "0",
        "message": "Success",
        "data": [
            {
                "sn": "R331ZEB4ZEAL0528",
                "deviceName": "Delta 2",
                "online": 1,
                "productName": "DELTA 2",
            },
            {
                "sn": "HW52ZDH4SF123456",
                "deviceName": "Smart Plug",
                "online": 0,
                "productName": "Smart Plug",
            },
        ],
        "eagleEyeTraceId": "",
        "tid": "",
    }


@pytest.fixture
def skip_if_no_credentials():
    """Skip test if API credentials are not available."""
    if not Config.ACCESS_KEY or not Config.SECRET_KEY:
        pytest.skip("API credentials not available")


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "live: mark test as requiring live connection")
    config.addinivalue_line(
        "markers", "credentials: mark test as requiring API credentials"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Add 'live' marker to tests in integration_live module
        if "integration_live" in item.nodeid:
            item.add_marker(pytest.mark.live)
            item.add_marker(pytest.mark.credentials)
