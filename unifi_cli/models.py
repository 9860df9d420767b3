"""
Response Models.

Pydantic models for the body of GET https://api.ui.com/v1/devices.

Decoding rules:
- JSON keys are camelCase; Python attributes are snake_case
- Unknown keys are ignored
- Missing keys and explicit nulls fall back to the field's zero value,
  and a body of ``null`` decodes to an empty listing
- A value of the wrong type is a ValidationError: no string/number/bool
  coercion, and timestamps must be RFC 3339 date-times with an offset
"""

from collections.abc import Iterator
from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AwareDatetime,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    JsonValue,
    StrictBool,
    StrictInt,
    StrictStr,
    model_validator,
)
from pydantic.alias_generators import to_camel


def _require_timestamp_string(value: Any) -> Any:
    if not isinstance(value, (str, datetime)):
        raise ValueError("timestamp must be an RFC 3339 date-time string")
    return value


Timestamp = Annotated[AwareDatetime, BeforeValidator(_require_timestamp_string)]


class APIModel(BaseModel):
    """Base for every response model: camelCase aliases, frozen, extras ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Treat explicit nulls like missing keys so defaults apply."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class DeviceImages(APIModel):
    default: StrictStr = ""
    nopadding: StrictStr = ""
    topology: StrictStr = ""


class VendorIcon(APIModel):
    """The ``uidb`` block: icon metadata for the device's product."""

    guid: StrictStr = ""
    icon_id: StrictStr = ""
    id: StrictStr = ""
    images: DeviceImages = Field(default_factory=DeviceImages)


class Device(APIModel):
    """One managed UniFi device."""

    id: StrictStr = ""
    mac: StrictStr = ""
    name: StrictStr = ""
    model: StrictStr = ""
    shortname: StrictStr = ""
    ip: StrictStr = ""
    product_line: StrictStr = ""
    status: StrictStr = ""
    version: StrictStr = ""
    firmware_status: StrictStr = ""
    # Shape varies by firmware; kept as raw JSON
    update_available: JsonValue = None
    is_console: StrictBool = False
    is_managed: StrictBool = False
    startup_time: Timestamp | None = None
    adoption_time: Timestamp | None = None
    note: JsonValue = None
    uidb: VendorIcon = Field(default_factory=VendorIcon)


class HostGroup(APIModel):
    """Devices reported by one managing host (console)."""

    host_id: StrictStr = ""
    host_name: StrictStr = ""
    devices: tuple[Device, ...] = ()
    updated_at: Timestamp | None = None


class DeviceListing(APIModel):
    """Top-level envelope of the device listing response."""

    data: tuple[HostGroup, ...] = ()
    http_status_code: StrictInt = 0
    trace_id: StrictStr = ""

    @property
    def total_devices(self) -> int:
        """Number of devices across every host group."""
        return sum(len(host.devices) for host in self.data)

    def iter_devices(self) -> Iterator[Device]:
        """Yield devices in host-group order, then device order within a group."""
        for host in self.data:
            yield from host.devices


def parse_device_listing(body: str | bytes) -> DeviceListing:
    """
    Decode a device listing response body.

    Raises:
        pydantic.ValidationError: On malformed JSON or a type mismatch
    """
    return DeviceListing.model_validate_json(body)
