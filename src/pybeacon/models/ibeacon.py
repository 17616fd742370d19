"""Apple iBeacon payload model."""

from __future__ import annotations

from typing import Literal

from pybeacon.models._base import BeaconBaseModel, BeaconType


class IBeacon(BeaconBaseModel):
    """Decoded iBeacon advertisement.

    Parameters
    ----------
    uuid : str
        Proximity UUID, uppercase ``8-4-4-4-12``.
    major : int
        Major value.
    minor : int
        Minor value.
    tx_power : int
        Calibrated RSSI at 1 m, in dBm.
    """

    beacon_type: Literal[BeaconType.IBEACON] = BeaconType.IBEACON

    uuid: str
    major: int
    minor: int
    tx_power: int
