"""
Integration Test Fixtures.

A fake UniFi Site Manager API served through httpx.MockTransport, wired into
the CLI so whole runs can be exercised without network access.
"""

import json
from collections.abc import Generator
from dataclasses import dataclass, field
from functools import partial
from typing import Any
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner

from unifi_cli.client import APIClient


# =============================================================================
# Fake API
# =============================================================================


@dataclass
class FakeUnifiAPI:
    """In-process stand-in for https://api.ui.com/v1."""

    api_key: str
    routes: dict[str, tuple[int, str]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def respond(self, path: str, status: int, body: Any) -> None:
        """Serve ``body`` (JSON-encoded unless already a string) for ``path``."""
        text = body if isinstance(body, str) else json.dumps(body)
        self.routes[path] = (status, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.headers.get("X-API-Key") != self.api_key:
            return httpx.Response(401, json={"code": "unauthorized", "httpStatusCode": 401})

        status, text = self.routes.get(request.url.path, (404, '{"httpStatusCode": 404}'))
        return httpx.Response(status, text=text, headers={"Content-Type": "application/json"})


@pytest.fixture
def fake_api(unifi_key) -> Generator[FakeUnifiAPI, None, None]:
    """
    Patch the CLI's HTTP client to talk to a FakeUnifiAPI.

    Usage:
        def test_devices(fake_api, cli_runner):
            fake_api.respond("/v1/devices", 200, {"data": []})
            result = cli_runner.invoke(main, ["--action", "GetDevices"])
    """
    api = FakeUnifiAPI(api_key=unifi_key)
    transport = httpx.MockTransport(api.handler)

    with patch("unifi_cli.cli.APIClient", partial(APIClient, transport=transport)):
        yield api


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create Click test runner."""
    return CliRunner()
