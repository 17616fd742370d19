"""Estimote Telemetry and Nearable decoders.

Telemetry (service data ``fe9a``)::

    byte 0      frame type (low nibble, 2) | protocol version (high nibble)
    bytes 1-8   short identifier
    byte 9      subframe type (low 2 bits)
    bytes 10-19 subframe A or B fields

Nearable (manufacturer data, company id ``0x015D``)::

    bytes 0-1   company id (LE)
    byte 2      frame type (1)
    bytes 3-10  nearable identifier
    byte 11/12  hardware / firmware version
    bytes 13-14 temperature (12-bit signed, 1/16 °C)
    byte 15     flags (bit 6: moving)
    bytes 16-18 acceleration (int8, 15.625 mg)
    byte 19/20  current / previous motion state duration
    byte 21     TX power
"""

from __future__ import annotations

from pybeacon._constants import (
    ESTIMOTE_COMPANY_ID,
    ESTIMOTE_NEARABLE_FRAME_TYPE,
    ESTIMOTE_TELEMETRY_FRAME_TYPE,
    ESTIMOTE_TELEMETRY_SERVICE_UUID,
    ESTIMOTE_TELEMETRY_SUBFRAME_A,
    ESTIMOTE_TELEMETRY_SUBFRAME_B,
)
from pybeacon.decoders._common import decoder, int8, manufacturer_payload, require_length, service_payload
from pybeacon.exceptions import BeaconDecodeError
from pybeacon.models._base import BeaconType, Vector3
from pybeacon.models.advertisement import Advertisement
from pybeacon.models.estimote import EstimoteNearable, EstimoteTelemetry, TelemetrySubframe

_TELEMETRY_LENGTH = 20
_NEARABLE_LENGTH = 22

_SECONDS_PER_UNIT = (1, 60, 3600, 86400)
_SECONDS_PER_WEEK = 7 * 86400
_BATTERY_VOLTAGE_UNMEASURED = 0b11111111111111
_BATTERY_LEVEL_UNMEASURED = 0xFF
_NEARABLE_MOVING_FLAG = 0b01000000


def motion_state_duration(value: int) -> int:
    """Decode a motion-state duration byte to seconds.

    Top two bits select the unit (s, min, h, days); in the days unit,
    numbers of 32 and above count weeks from 32.
    """
    number = value & 0b00111111
    unit = (value & 0b11000000) >> 6
    if unit == 3 and number >= 32:
        return (number - 32) * _SECONDS_PER_WEEK
    return number * _SECONDS_PER_UNIT[unit]


def _signed_12bit(raw: int) -> int:
    return raw - 4096 if raw > 2047 else raw


def _telemetry_subframe_a(data: bytes) -> dict[str, object]:
    return {
        "acceleration": Vector3(
            x=int8(data[10]) * 2 / 127,
            y=int8(data[11]) * 2 / 127,
            z=int8(data[12]) * 2 / 127,
        ),
        "previous_motion_state_duration": motion_state_duration(data[13]),
        "current_motion_state_duration": motion_state_duration(data[14]),
        "is_moving": (data[15] & 0b00000011) == 1,
    }


def _telemetry_subframe_b(data: bytes, protocol_version: int) -> dict[str, object]:
    light_upper = (data[13] & 0b11110000) >> 4
    light_lower = data[13] & 0b00001111

    uptime_unit = (data[15] & 0b00110000) >> 4
    uptime_number = ((data[15] & 0b00001111) << 8) | data[14]

    temperature_raw = ((data[17] & 0b00000011) << 10) | (data[16] << 2) | ((data[15] & 0b11000000) >> 6)

    battery_voltage: int | None = (data[18] << 6) | ((data[17] & 0b11111100) >> 2)
    if battery_voltage == _BATTERY_VOLTAGE_UNMEASURED:
        battery_voltage = None

    battery_level: int | None = None
    if protocol_version >= 1 and data[19] != _BATTERY_LEVEL_UNMEASURED:
        battery_level = data[19]

    return {
        "magnetic_field": Vector3(x=int8(data[10]) / 128, y=int8(data[11]) / 128, z=int8(data[12]) / 128),
        "ambient_light_level": (2**light_upper) * light_lower * 0.72,
        "uptime": uptime_number * _SECONDS_PER_UNIT[uptime_unit],
        "temperature": _signed_12bit(temperature_raw) / 16,
        "battery_voltage": battery_voltage,
        "battery_level": battery_level,
    }


@decoder(BeaconType.ESTIMOTE_TELEMETRY)
def decode_telemetry(advertisement: Advertisement) -> EstimoteTelemetry:
    data = service_payload(advertisement, ESTIMOTE_TELEMETRY_SERVICE_UUID, BeaconType.ESTIMOTE_TELEMETRY)
    require_length(data, _TELEMETRY_LENGTH, BeaconType.ESTIMOTE_TELEMETRY)

    frame_type = data[0] & 0b00001111
    if frame_type != ESTIMOTE_TELEMETRY_FRAME_TYPE:
        raise BeaconDecodeError(f"not a telemetry frame (0x{frame_type:x})", beacon_type=BeaconType.ESTIMOTE_TELEMETRY)
    protocol_version = (data[0] & 0b11110000) >> 4

    subframe = data[9] & 0b00000011
    if subframe == ESTIMOTE_TELEMETRY_SUBFRAME_A:
        fields = _telemetry_subframe_a(data)
    elif subframe == ESTIMOTE_TELEMETRY_SUBFRAME_B:
        fields = _telemetry_subframe_b(data, protocol_version)
    else:
        raise BeaconDecodeError(f"unknown telemetry subframe {subframe}", beacon_type=BeaconType.ESTIMOTE_TELEMETRY)

    return EstimoteTelemetry(
        protocol_version=protocol_version,
        short_identifier=data[1:9].hex(),
        subframe=TelemetrySubframe(subframe),
        **fields,
    )


@decoder(BeaconType.ESTIMOTE_NEARABLE)
def decode_nearable(advertisement: Advertisement) -> EstimoteNearable:
    manu = manufacturer_payload(advertisement, BeaconType.ESTIMOTE_NEARABLE)
    require_length(manu, _NEARABLE_LENGTH, BeaconType.ESTIMOTE_NEARABLE)
    if int.from_bytes(manu[0:2], "little") != ESTIMOTE_COMPANY_ID:
        raise BeaconDecodeError("not an Estimote company id", beacon_type=BeaconType.ESTIMOTE_NEARABLE)
    if manu[2] != ESTIMOTE_NEARABLE_FRAME_TYPE:
        raise BeaconDecodeError(f"not a nearable frame (0x{manu[2]:02x})", beacon_type=BeaconType.ESTIMOTE_NEARABLE)

    temperature_raw = ((manu[14] & 0b00001111) << 8) | manu[13]
    return EstimoteNearable(
        nearable_id=manu[3:11].hex(),
        hardware_version=manu[11],
        firmware_version=manu[12],
        temperature=_signed_12bit(temperature_raw) / 16,
        is_moving=bool(manu[15] & _NEARABLE_MOVING_FLAG),
        acceleration=Vector3(x=int8(manu[16]) * 15.625, y=int8(manu[17]) * 15.625, z=int8(manu[18]) * 15.625),
        current_motion_state_duration=motion_state_duration(manu[19]),
        previous_motion_state_duration=motion_state_duration(manu[20]),
        tx_power=int8(manu[21]),
    )
