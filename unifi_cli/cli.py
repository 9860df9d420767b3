"""
Command-line entry point.

Validates --action and --interval, calls the selected UniFi endpoint once and
prints a summary of the response.

Usage:
    unifi-cli --action GetDevices
    unifi-cli --action getsites --debug
    unifi-cli --help
"""

import json
import sys
from collections.abc import Callable
from typing import NoReturn

import click
from pydantic import ValidationError

from unifi_cli.client import APIClient, call_api
from unifi_cli.core.config import get_app_config, get_settings
from unifi_cli.core.logging import get_logger, setup_logging
from unifi_cli.core.utils import mask_secret
from unifi_cli.models import parse_device_listing
from unifi_cli.registry import (
    API_REQUESTS,
    check_action,
    check_interval,
    find_operation_index,
    sorted_operations,
)
from unifi_cli.render import render_devices, render_registry

logger = get_logger(__name__)


def fail(message: str) -> NoReturn:
    """Print a single diagnostic line and exit with status 1."""
    click.echo(message)
    sys.exit(1)


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def show_devices(action: str, body: str, debug: bool) -> None:
    """Decode a device listing and print the count and the device table."""
    if debug:
        click.echo(f"Printing results for {action}... {body}")

    try:
        listing = parse_device_listing(body)
    except ValidationError as e:
        logger.debug("Device listing decode failed", errors=e.error_count())
        fail(f"Error decoding response: {_describe_validation_error(e)}")

    click.echo(f"Devices count: {listing.total_devices}")

    if debug:
        click.echo()
        for host in listing.data:
            devices = [device.model_dump(mode="json", by_alias=True) for device in host.devices]
            click.echo(json.dumps(devices, indent=2))
        click.echo()

    click.echo(render_devices(listing), nl=False)


def show_sites(action: str, body: str, debug: bool) -> None:
    """Sites are not decoded yet; debug mode echoes the raw body."""
    if debug:
        click.echo(f"Printing results for {action}... {body}")


RENDERERS: dict[str, Callable[[str, str, bool], None]] = {
    "getdevices": show_devices,
    "getsites": show_sites,
}


def show_response(action: str, body: str, debug: bool) -> None:
    """Dispatch a response body to the renderer for the requested action."""
    renderer = RENDERERS.get(action.lower())
    if renderer is None:
        fail(f"Unknown action: {action}")
    renderer(action, body, debug)


class UnifiCommand(click.Command):
    """Click command whose help starts with the application name and version."""

    def format_help_text(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        app = get_app_config().application
        formatter.write_paragraph()
        formatter.write_text(f"{app['name']} {app['version']}")
        formatter.write_text(app["description"])
        super().format_help_text(ctx, formatter)


def _print_version(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    app = get_app_config().application
    click.echo(f"{app['name']} {app['version']}")
    ctx.exit()


@click.command(cls=UnifiCommand)
@click.option("--debug", "-d", is_flag=True, help="Enable debug mode.")
@click.option("--action", default=None, help="Specify action to perform (GetDevices, GetSites).")
@click.option(
    "--interval",
    default="5m",
    show_default=True,
    help="Specify time interval for API requests (5m or 1h).",
)
@click.option(
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help="Show the version and exit.",
)
def main(debug: bool, action: str | None, interval: str) -> None:
    """Call the UniFi Site Manager API and print a summary.

    The API key is read from the UNIFI_KEY environment variable.
    """
    setup_logging(level="DEBUG" if debug else None)

    if action is None:
        fail("No action specified. Use --action to specify an action.")

    api_key = get_settings().unifi_key
    if not api_key:
        fail("UNIFI_KEY environment variable not set")

    if debug:
        click.echo(f"Using Unifi API Key: {mask_secret(api_key)}")
        click.echo(f"Action: {action}")
        click.echo(render_registry(sorted_operations()), nl=False)

    if not check_interval(interval):
        fail(
            "Invalid interval specified. Use --interval to specify a valid interval "
            "(default = 5m), either 5m or 1h."
        )
    logger.debug("Interval accepted", interval=interval)

    if not check_action(action):
        fail(f"Invalid action specified: {action}. Use --action to specify a valid action.")
    if debug:
        click.echo(f"Valid action specified: {action}")

    index = find_operation_index(action)
    operation = API_REQUESTS[index]
    if debug:
        click.echo(f"{action} is at position: {index}")

    with APIClient(api_key=api_key) as client:
        success, body = call_api(client, operation)

    if not success:
        logger.debug("API call unsuccessful", operation=operation.name)
        fail(f"Failed to call API: {operation.name}")

    show_response(action, body, debug)


if __name__ == "__main__":
    main()
