"""
Table Rendering.

Plain-text, column-aligned tables built with rich and returned as strings so
the CLI prints everything through click.echo.
"""

from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.table import Table

from unifi_cli.core.utils import format_rfc3339
from unifi_cli.models import DeviceListing
from unifi_cli.registry import Operation

DEVICE_COLUMNS = (
    "#",
    "MAC",
    "Name",
    "Model",
    "IP",
    "Status",
    "Version",
    "Firmware",
    "Managed",
    "Startup Time",
)

REGISTRY_COLUMNS = ("Action", "URL", "Method", "Description")

# Wide enough that rows never wrap
_CONSOLE_WIDTH = 1024


def render_table(
    columns: Sequence[str],
    rows: Iterable[Sequence[str]],
    gap: int = 2,
) -> str:
    """
    Render an elastic, borderless table.

    Each column is as wide as its widest cell; ``gap`` spaces separate columns.
    """
    table = Table(
        box=None,
        show_edge=False,
        pad_edge=False,
        padding=(0, gap, 0, 0),
        header_style="",
        expand=False,
    )
    for column in columns:
        table.add_column(column, no_wrap=True, overflow="ignore")
    for row in rows:
        table.add_row(*row)

    console = Console(
        width=_CONSOLE_WIDTH,
        markup=False,
        emoji=False,
        highlight=False,
        color_system=None,
    )
    with console.capture() as capture:
        console.print(table)
    return "\n".join(line.rstrip() for line in capture.get().splitlines()) + "\n"


def device_rows(listing: DeviceListing) -> list[tuple[str, ...]]:
    """One row per device, numbered from 1 in encounter order."""
    rows = []
    for index, device in enumerate(listing.iter_devices(), start=1):
        rows.append((
            str(index),
            device.mac,
            device.name,
            device.model,
            device.ip,
            device.status,
            device.version,
            device.firmware_status,
            "true" if device.is_managed else "false",
            format_rfc3339(device.startup_time),
        ))
    return rows


def render_devices(listing: DeviceListing) -> str:
    """Render the device listing table (header plus one row per device)."""
    return render_table(DEVICE_COLUMNS, device_rows(listing), gap=2)


def render_registry(operations: Iterable[Operation]) -> str:
    """Render the operation registry for the debug dump."""
    rows = [(op.name, op.url, op.method, op.description) for op in operations]
    return render_table(REGISTRY_COLUMNS, rows, gap=1)
