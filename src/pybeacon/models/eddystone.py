"""Eddystone frame payload models."""

from __future__ import annotations

from typing import Literal

from pybeacon.models._base import BeaconBaseModel, BeaconType


class EddystoneUid(BeaconBaseModel):
    """UID frame: 10-byte namespace + 6-byte instance."""

    beacon_type: Literal[BeaconType.EDDYSTONE_UID] = BeaconType.EDDYSTONE_UID

    tx_power: int
    namespace: str
    instance: str


class EddystoneUrl(BeaconBaseModel):
    """URL frame with the compressed URL expanded."""

    beacon_type: Literal[BeaconType.EDDYSTONE_URL] = BeaconType.EDDYSTONE_URL

    tx_power: int
    url: str


class EddystoneTlm(BeaconBaseModel):
    """Unencrypted telemetry frame.

    Parameters
    ----------
    version : int
        TLM version (always ``0`` for unencrypted frames).
    battery_voltage : int
        Battery voltage in mV (``0`` when the beacon is not battery powered).
    temperature : float or None
        Beacon temperature in °C, ``None`` when not supported (``0x8000``).
    adv_count : int
        Advertising PDU count since power-up.
    sec_count : int
        Time since power-up, in 0.1 s units.
    """

    beacon_type: Literal[BeaconType.EDDYSTONE_TLM] = BeaconType.EDDYSTONE_TLM

    version: int
    battery_voltage: int
    temperature: float | None = None
    adv_count: int
    sec_count: int


class EddystoneEid(BeaconBaseModel):
    """Ephemeral identifier frame."""

    beacon_type: Literal[BeaconType.EDDYSTONE_EID] = BeaconType.EDDYSTONE_EID

    tx_power: int
    eid: str
