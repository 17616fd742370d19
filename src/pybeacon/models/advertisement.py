"""Advertisement input model.

Mirrors the envelope a BLE scanner hands over for one received packet.
Both the flat shape and the noble ``peripheral`` shape (with the payload
nested under ``advertisement``) are accepted.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator

from pybeacon._normalize import normalize_uuid
from pybeacon.models._base import BeaconBaseModel, HexBytes

# Bluetooth Base UUID; 16-bit UUIDs expand to 0000xxxx-0000-1000-8000-00805f9b34fb.
_BASE_UUID_RE = re.compile(r"^0000([0-9a-f]{4})-0000-1000-8000-00805f9b34fb$")


class ServiceData(BeaconBaseModel):
    """One service-data entry keyed by its service UUID.

    The UUID is stored lowercase.  Full 128-bit UUIDs built on the
    Bluetooth Base UUID are shortened to their 16-bit form so they
    compare equal to the short UUIDs scanners usually report.
    """

    uuid: str
    data: HexBytes = b""

    @field_validator("uuid", mode="before")
    @classmethod
    def _normalize_uuid(cls, value: Any) -> str:
        uuid = normalize_uuid(value)
        match = _BASE_UUID_RE.match(uuid)
        return match.group(1) if match else uuid

    @field_validator("data", mode="before")
    @classmethod
    def _missing_data_is_empty(cls, value: Any) -> Any:
        # Scanners report absent service data as None; treat it as zero bytes.
        return b"" if value is None else value


class Advertisement(BeaconBaseModel):
    """A single received BLE advertisement.

    Parameters
    ----------
    id : str
        Scanner-assigned peripheral identifier.
    address : str or None
        Device address; some devices (Minew sensors) leave it empty.
    local_name : str or None
        Advertised local name.
    tx_power_level : int or None
        Advertised TX power level.
    rssi : int or None
        Received signal strength in dBm.
    manufacturer_data : bytes or None
        Manufacturer-specific data, company id included.
    service_data : tuple[ServiceData, ...]
        Service-data entries in the order they were received.
    """

    # Scanners differ on whether ids are strings or integers.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str = ""
    address: str | None = None
    local_name: str | None = None
    tx_power_level: int | None = None
    rssi: int | None = None
    manufacturer_data: HexBytes | None = None
    service_data: tuple[ServiceData, ...] = Field(default_factory=tuple)

    @model_validator(mode="before")
    @classmethod
    def _flatten_peripheral(cls, values: Any) -> Any:
        """Lift the fields of a nested noble ``advertisement`` dict."""
        if not isinstance(values, Mapping):
            return values
        nested = values.get("advertisement")
        if not isinstance(nested, Mapping):
            return values
        flat = {k: v for k, v in values.items() if k != "advertisement"}
        for key, value in nested.items():
            flat.setdefault(key, value)
        return flat

    @field_validator("service_data", mode="before")
    @classmethod
    def _coerce_service_data(cls, value: Any) -> Any:
        """Accept a ``{uuid: data}`` mapping (bleak style) as well as a list."""
        if value is None:
            return ()
        if isinstance(value, Mapping):
            return tuple({"uuid": uuid, "data": data} for uuid, data in value.items())
        return value

    def find_service_data(self, uuid: str) -> ServiceData | None:
        """Return the first service-data entry for *uuid*, if any."""
        for entry in self.service_data:
            if entry.uuid == uuid:
                return entry
        return None
