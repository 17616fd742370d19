"""Base model and beacon type enum.

Every pybeacon model inherits from :class:`BeaconBaseModel` which
provides:

* ``alias_generator=to_camel`` so the camelCase keys emitted by
  noble-style scanners map automatically to snake_case fields, and
  ``model_dump(by_alias=True)`` reproduces them.
* ``frozen=True``; parse results are immutable once returned.

:class:`BeaconType` is the closed set of tags the classifier can
produce.  Its values are the wire-level tag strings, and
``BeaconType.UNKNOWN`` is the empty string.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from pybeacon._normalize import coerce_bytes


class BeaconType(StrEnum):
    """Beacon wire format tag."""

    IBEACON = "iBeacon"
    EDDYSTONE_UID = "eddystoneUid"
    EDDYSTONE_URL = "eddystoneUrl"
    EDDYSTONE_TLM = "eddystoneTlm"
    EDDYSTONE_EID = "eddystoneEid"
    ESTIMOTE_TELEMETRY = "estimoteTelemetry"
    ESTIMOTE_NEARABLE = "estimoteNearable"
    MINEW_SENSOR = "minewSensor"
    UNKNOWN = ""

    @classmethod
    def known(cls) -> frozenset[BeaconType]:
        """All tags except :attr:`UNKNOWN`."""
        return frozenset(member for member in cls if member is not cls.UNKNOWN)


HexBytes = Annotated[bytes, BeforeValidator(coerce_bytes)]
"""Annotated type accepting bytes, a hex string or a list of ints."""


class BeaconBaseModel(BaseModel):
    """Base for all pybeacon models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Vector3(BeaconBaseModel):
    """Three-axis reading (acceleration, magnetic field)."""

    x: float
    y: float
    z: float
