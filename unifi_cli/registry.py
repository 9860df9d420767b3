"""
Operation Registry.

Static list of the UniFi Site Manager endpoints the CLI can call, plus the
validators for the --action and --interval options.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Operation:
    """One callable endpoint."""

    name: str
    url: str
    method: str
    description: str


API_REQUESTS: tuple[Operation, ...] = (
    Operation(
        name="GetDevices",
        url="https://api.ui.com/v1/devices",
        method="GET",
        description="Fetches devices from the Unifi API",
    ),
    Operation(
        name="GetSites",
        url="https://api.ui.com/v1/sites",
        method="GET",
        description="Fetches sites from the Unifi API",
    ),
)

# Accepted values for --interval
TIME_INTERVALS: tuple[str, ...] = ("5m", "1h")


def check_action(action: str, operations: tuple[Operation, ...] = API_REQUESTS) -> bool:
    """Return True if the action names exactly one operation (case-insensitive)."""
    return find_operation_index(action, operations) != -1


def check_interval(interval: str) -> bool:
    """Return True if the interval is one of TIME_INTERVALS."""
    return interval in TIME_INTERVALS


def find_operation_index(action: str, operations: tuple[Operation, ...] = API_REQUESTS) -> int:
    """
    Locate an operation by name.

    Returns:
        Index of the single case-insensitive match, or -1 when there is no
        match or the name is ambiguous.
    """
    wanted = action.lower()
    matches = [i for i, op in enumerate(operations) if op.name.lower() == wanted]
    if len(matches) != 1:
        return -1
    return matches[0]


def sorted_operations(operations: tuple[Operation, ...] = API_REQUESTS) -> list[Operation]:
    """Operations ordered alphabetically by name, for the debug listing."""
    return sorted(operations, key=lambda op: op.name)
