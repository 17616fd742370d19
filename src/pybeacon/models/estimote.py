"""Estimote payload models.

Telemetry packets alternate between two subframes; fields that belong
to the other subframe are ``None``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Literal

from pybeacon.models._base import BeaconBaseModel, BeaconType, Vector3


class TelemetrySubframe(IntEnum):
    """Estimote telemetry subframe selector (byte 9, low 2 bits)."""

    A = 0
    B = 1


class EstimoteTelemetry(BeaconBaseModel):
    """Decoded Estimote Telemetry packet (service ``fe9a``).

    Parameters
    ----------
    protocol_version : int
        Telemetry protocol version (high nibble of the frame byte).
    short_identifier : str
        First 8 bytes of the beacon identifier, lowercase hex.
    subframe : TelemetrySubframe
        Which half of the telemetry this packet carries.
    acceleration : Vector3 or None
        Acceleration in g (subframe A).
    previous_motion_state_duration, current_motion_state_duration : int or None
        Motion state durations in seconds (subframe A).
    is_moving : bool or None
        Motion flag (subframe A).
    magnetic_field : Vector3 or None
        Normalized magnetic field, -1..1 (subframe B).
    ambient_light_level : float or None
        Ambient light in lux (subframe B).
    uptime : int or None
        Beacon uptime in seconds (subframe B).
    temperature : float or None
        Temperature in °C (subframe B).
    battery_voltage : int or None
        Battery voltage in mV, ``None`` when not measured yet (subframe B).
    battery_level : int or None
        Battery level in percent, protocol version 1+ only (subframe B).
    """

    beacon_type: Literal[BeaconType.ESTIMOTE_TELEMETRY] = BeaconType.ESTIMOTE_TELEMETRY

    protocol_version: int
    short_identifier: str
    subframe: TelemetrySubframe

    acceleration: Vector3 | None = None
    previous_motion_state_duration: int | None = None
    current_motion_state_duration: int | None = None
    is_moving: bool | None = None

    magnetic_field: Vector3 | None = None
    ambient_light_level: float | None = None
    uptime: int | None = None
    temperature: float | None = None
    battery_voltage: int | None = None
    battery_level: int | None = None


class EstimoteNearable(BeaconBaseModel):
    """Decoded Estimote Nearable (sticker) packet."""

    beacon_type: Literal[BeaconType.ESTIMOTE_NEARABLE] = BeaconType.ESTIMOTE_NEARABLE

    nearable_id: str
    hardware_version: int
    firmware_version: int
    temperature: float
    is_moving: bool
    acceleration: Vector3
    """Acceleration in mg."""
    current_motion_state_duration: int
    previous_motion_state_duration: int
    tx_power: int
