"""Minew sensor payload model."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pybeacon.models._base import BeaconBaseModel, BeaconType, Vector3


class MinewFrame(StrEnum):
    """Minew ``ffe1`` frame product type."""

    HT = "ht"
    ACCELEROMETER = "accelerometer"
    INFO = "info"


class MinewSensor(BeaconBaseModel):
    """Decoded Minew sensor frame.

    Minew sensors usually advertise without a usable address and embed
    their MAC in the frame instead; ``mac_address`` is used to backfill
    the result envelope.
    """

    beacon_type: Literal[BeaconType.MINEW_SENSOR] = BeaconType.MINEW_SENSOR

    frame: MinewFrame
    battery_level: int
    mac_address: str
    temperature: float | None = None
    humidity: float | None = None
    acceleration: Vector3 | None = None
    name: str | None = None
