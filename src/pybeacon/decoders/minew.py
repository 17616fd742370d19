"""Minew sensor decoder (service data ``ffe1``).

Every frame starts with ``A1`` followed by a product byte and the battery
level in percent.  Fixed-point values are signed 8.8, big-endian.  The
device MAC is embedded byte-reversed.
"""

from __future__ import annotations

import struct

from pybeacon._constants import (
    MINEW_FRAME_TYPE,
    MINEW_PRODUCT_ACCELEROMETER,
    MINEW_PRODUCT_HT,
    MINEW_PRODUCT_INFO,
    MINEW_SERVICE_UUID,
)
from pybeacon._normalize import format_mac
from pybeacon.decoders._common import decoder, require_length, service_payload
from pybeacon.exceptions import BeaconDecodeError
from pybeacon.models._base import BeaconType, Vector3
from pybeacon.models.advertisement import Advertisement
from pybeacon.models.minew import MinewFrame, MinewSensor

_HT_LENGTH = 13
_ACCELEROMETER_LENGTH = 15
_INFO_LENGTH = 9


def _fixed_8_8(data: bytes, offset: int) -> float:
    (raw,) = struct.unpack_from(">h", data, offset)
    return raw / 256


def _decode_ht(data: bytes) -> MinewSensor:
    require_length(data, _HT_LENGTH, BeaconType.MINEW_SENSOR)
    (humidity_raw,) = struct.unpack_from(">H", data, 5)
    return MinewSensor(
        frame=MinewFrame.HT,
        battery_level=data[2],
        temperature=_fixed_8_8(data, 3),
        humidity=humidity_raw / 256,
        mac_address=format_mac(data[7:13], reverse=True),
    )


def _decode_accelerometer(data: bytes) -> MinewSensor:
    require_length(data, _ACCELEROMETER_LENGTH, BeaconType.MINEW_SENSOR)
    return MinewSensor(
        frame=MinewFrame.ACCELEROMETER,
        battery_level=data[2],
        acceleration=Vector3(x=_fixed_8_8(data, 3), y=_fixed_8_8(data, 5), z=_fixed_8_8(data, 7)),
        mac_address=format_mac(data[9:15], reverse=True),
    )


def _decode_info(data: bytes) -> MinewSensor:
    require_length(data, _INFO_LENGTH, BeaconType.MINEW_SENSOR)
    name = data[9:].decode("ascii", errors="ignore").strip("\x00 ")
    return MinewSensor(
        frame=MinewFrame.INFO,
        battery_level=data[2],
        mac_address=format_mac(data[3:9], reverse=True),
        name=name or None,
    )


_PRODUCT_DECODERS = {
    MINEW_PRODUCT_HT: _decode_ht,
    MINEW_PRODUCT_ACCELEROMETER: _decode_accelerometer,
    MINEW_PRODUCT_INFO: _decode_info,
}


@decoder(BeaconType.MINEW_SENSOR)
def decode_sensor(advertisement: Advertisement) -> MinewSensor:
    data = service_payload(advertisement, MINEW_SERVICE_UUID, BeaconType.MINEW_SENSOR)
    require_length(data, 3, BeaconType.MINEW_SENSOR)
    if data[0] != MINEW_FRAME_TYPE:
        raise BeaconDecodeError(f"unknown frame type 0x{data[0]:02x}", beacon_type=BeaconType.MINEW_SENSOR)
    product_decoder = _PRODUCT_DECODERS.get(data[1])
    if product_decoder is None:
        raise BeaconDecodeError(f"unsupported product 0x{data[1]:02x}", beacon_type=BeaconType.MINEW_SENSOR)
    return product_decoder(data)
