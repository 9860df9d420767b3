"""Small shared helpers."""

from datetime import datetime, timezone


def format_rfc3339(value: datetime | None) -> str:
    """
    Format a datetime as RFC 3339 with whole seconds.

    UTC renders with a trailing "Z", other offsets are kept as-is, and naive
    values are treated as UTC. None renders as an empty string.
    """
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    text = value.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def mask_secret(secret: str, visible: int = 4) -> str:
    """Hide all but the last few characters of a secret."""
    if len(secret) <= visible:
        return "*" * len(secret)
    return "*" * (len(secret) - visible) + secret[-visible:]
