"""Normalized parse result.

The decoded payload is held as a tagged union: ``payload.beacon_type``
always equals the envelope ``beacon_type``.  :meth:`ParseResult.to_dict`
renders the flat external shape where the payload sits under a key
named after the tag (``{"beaconType": "iBeacon", "iBeacon": {...}}``).
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import ConfigDict, Field, model_validator

from pybeacon.models._base import BeaconBaseModel, BeaconType
from pybeacon.models.eddystone import EddystoneEid, EddystoneTlm, EddystoneUid, EddystoneUrl
from pybeacon.models.estimote import EstimoteNearable, EstimoteTelemetry
from pybeacon.models.ibeacon import IBeacon
from pybeacon.models.minew import MinewSensor

BeaconPayload = Annotated[
    IBeacon
    | EddystoneUid
    | EddystoneUrl
    | EddystoneTlm
    | EddystoneEid
    | EstimoteTelemetry
    | EstimoteNearable
    | MinewSensor,
    Field(discriminator="beacon_type"),
]
"""Any decoded payload, discriminated by its ``beacon_type``."""


class ParseResult(BeaconBaseModel):
    """One classified and decoded advertisement.

    Parameters
    ----------
    id : str
        Peripheral identifier from the advertisement.
    address : str or None
        Device address, backfilled from the payload for Minew sensors.
    local_name : str or None
        Local name; ``None`` when missing or empty.
    tx_power_level : int or None
        Advertised TX power; ``None`` when missing or zero.
    rssi : int or None
        Received signal strength.
    beacon_type : BeaconType
        Classified tag; never :attr:`BeaconType.UNKNOWN`.
    payload : BeaconPayload
        Decoded payload for ``beacon_type``.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str = ""
    address: str | None = None
    local_name: str | None = None
    tx_power_level: int | None = None
    rssi: int | None = None
    beacon_type: BeaconType
    payload: BeaconPayload

    @model_validator(mode="after")
    def _check_discriminant(self) -> ParseResult:
        if self.beacon_type is BeaconType.UNKNOWN:
            raise ValueError("a parse result cannot carry the unknown beacon type")
        if self.payload.beacon_type != self.beacon_type:
            raise ValueError(
                f"payload type {self.payload.beacon_type.value!r} does not match beacon type {self.beacon_type.value!r}"
            )
        return self

    def __getitem__(self, tag: str) -> Any:
        """Return the payload when *tag* names this result's beacon type."""
        if tag == self.beacon_type.value:
            return self.payload
        raise KeyError(tag)

    def to_dict(self) -> dict[str, Any]:
        """Render the flat camelCase shape keyed by the tag string."""
        data = self.model_dump(by_alias=True, exclude={"payload"}, mode="json")
        data[self.beacon_type.value] = self.payload.model_dump(by_alias=True, exclude={"beacon_type"}, mode="json")
        return data
