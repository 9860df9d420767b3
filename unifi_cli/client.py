"""
HTTP Client for the UniFi Site Manager API.

Every request carries the API key in the X-API-Key header and asks for JSON.
One request per CLI run; no retries and no timeout override beyond httpx's
defaults.
"""

from typing import Any

import click
import httpx

from unifi_cli.core.logging import get_logger
from unifi_cli.core.utils import mask_secret
from unifi_cli.registry import Operation

logger = get_logger(__name__)


class APIClient:
    """
    HTTP client for UniFi API communication.

    Usage:
        with APIClient(api_key=key) as client:
            response = client.get("https://api.ui.com/v1/devices")
    """

    def __init__(
        self,
        api_key: str,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            api_key: UniFi API key sent as X-API-Key.
            transport: Optional httpx transport (tests pass httpx.MockTransport).
        """
        self.api_key = api_key
        self._transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers={
                    "Accept": "application/json",
                    "X-API-Key": self.api_key,
                },
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Make an HTTP request and read the full body.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute endpoint URL
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            httpx.HTTPError: On transport or body-read failure
            httpx.InvalidURL: If the request cannot be built
        """
        client = self._get_client()

        logger.debug(
            "API request",
            method=method,
            url=url,
            api_key=mask_secret(self.api_key),
        )

        try:
            response = client.request(method, url, **kwargs)
            response.read()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("API request failed", method=method, url=url, error=str(e))
            raise

        logger.debug(
            "API response",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return response

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return self.request("GET", url, **kwargs)


def call_api(client: APIClient, operation: Operation) -> tuple[bool, str]:
    """
    Call one registered operation.

    Returns:
        (success, body). Success means a 2xx status. Transport and body-read
        failures print a diagnostic and return (False, "").
    """
    try:
        response = client.request(operation.method, operation.url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        click.echo(f"Error making request: {e}")
        return False, ""

    return response.is_success, response.text
