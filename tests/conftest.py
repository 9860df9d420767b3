"""
Shared Test Fixtures.

Sample API payloads and environment isolation used by unit and
integration tests.
"""

import json
import logging
from typing import Any

import pytest

from unifi_cli.core import config as config_module


@pytest.fixture(autouse=True)
def reset_config():
    """Make every test re-read YAML settings and the environment."""
    config_module.reset_config_cache()
    yield
    config_module.reset_config_cache()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers installed by setup_logging during a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def unifi_key(monkeypatch) -> str:
    """Provide a UNIFI_KEY in the environment."""
    key = "test-key-abcd1234"
    monkeypatch.setenv("UNIFI_KEY", key)
    return key


@pytest.fixture
def device_listing_payload() -> dict[str, Any]:
    """Device listing with two host groups holding 2 and 1 devices."""
    return {
        "data": [
            {
                "hostId": "host-1",
                "hostName": "Dream Machine",
                "devices": [
                    {
                        "id": "dev-1",
                        "mac": "AA:BB:CC:00:00:01",
                        "name": "Gateway",
                        "model": "UDM-Pro",
                        "shortname": "UDMPRO",
                        "ip": "192.168.1.1",
                        "productLine": "network",
                        "status": "online",
                        "version": "4.0.6",
                        "firmwareStatus": "upToDate",
                        "updateAvailable": None,
                        "isConsole": True,
                        "isManaged": True,
                        "startupTime": "2024-05-01T10:15:30Z",
                        "adoptionTime": "2023-01-01T00:00:00Z",
                        "note": None,
                        "uidb": {
                            "guid": "guid-1",
                            "iconId": "icon-1",
                            "id": "uidb-1",
                            "images": {
                                "default": "abc",
                                "nopadding": "def",
                                "topology": "ghi",
                            },
                        },
                    },
                    {
                        "id": "dev-2",
                        "mac": "AA:BB:CC:00:00:02",
                        "name": "Office-AP",
                        "model": "U6-Pro",
                        "ip": "192.168.1.20",
                        "status": "online",
                        "version": "6.6.55",
                        "firmwareStatus": "updateAvailable",
                        "updateAvailable": "6.6.77",
                        "isConsole": False,
                        "isManaged": False,
                        "startupTime": "2024-05-02T08:00:00+02:00",
                        "note": {"text": "ceiling mount"},
                    },
                ],
                "updatedAt": "2024-05-03T12:00:00Z",
            },
            {
                "hostId": "host-2",
                "hostName": "Cloud Key",
                "devices": [
                    {
                        "id": "dev-3",
                        "mac": "AA:BB:CC:00:00:03",
                        "name": "Lobby-Switch",
                        "model": "USW-24",
                        "ip": "10.0.0.2",
                        "status": "offline",
                        "version": "7.0.50",
                        "firmwareStatus": "upToDate",
                        "isManaged": True,
                        "startupTime": "2024-04-30T23:59:59Z",
                    },
                ],
                "updatedAt": "2024-05-03T12:00:00Z",
            },
        ],
        "httpStatusCode": 200,
        "traceId": "trace-123",
    }


@pytest.fixture
def device_listing_body(device_listing_payload) -> str:
    """The device listing payload as a raw JSON body."""
    return json.dumps(device_listing_payload)


@pytest.fixture
def empty_listing_body() -> str:
    """A device listing with no host groups."""
    return json.dumps({"data": [], "httpStatusCode": 200, "traceId": "trace-empty"})
