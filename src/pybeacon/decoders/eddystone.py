"""Eddystone frame decoders.

All frames live in service data ``feaa``; byte 0 is the frame type and,
except for TLM, byte 1 is the calibrated TX power at 0 m.
"""

from __future__ import annotations

import struct

from pybeacon._constants import EDDYSTONE_SERVICE_UUID, EDDYSTONE_URL_EXPANSIONS, EDDYSTONE_URL_SCHEMES
from pybeacon._normalize import format_hex_id
from pybeacon.decoders._common import decoder, int8, require_length, service_payload
from pybeacon.exceptions import BeaconDecodeError
from pybeacon.models._base import BeaconType
from pybeacon.models.advertisement import Advertisement
from pybeacon.models.eddystone import EddystoneEid, EddystoneTlm, EddystoneUid, EddystoneUrl

# Trailing two RFU bytes are optional on the wire.
_UID_LENGTHS = (18, 20)
_URL_MIN_LENGTH = 4
_TLM_LENGTH = 14
_TLM_UNENCRYPTED = 0x00
_TLM_TEMPERATURE_UNSUPPORTED = -0x8000
_EID_LENGTH = 10


@decoder(BeaconType.EDDYSTONE_UID)
def decode_uid(advertisement: Advertisement) -> EddystoneUid:
    data = service_payload(advertisement, EDDYSTONE_SERVICE_UUID, BeaconType.EDDYSTONE_UID)
    require_length(data, 0, BeaconType.EDDYSTONE_UID, exact=_UID_LENGTHS)
    return EddystoneUid(
        tx_power=int8(data[1]),
        namespace=format_hex_id(data[2:12]),
        instance=format_hex_id(data[12:18]),
    )


def expand_url(encoded: bytes) -> str:
    """Expand an Eddystone compressed URL (scheme byte + body).

    Raises :class:`BeaconDecodeError` for an unknown scheme or a byte that
    is neither an expansion code nor printable ASCII.
    """
    if not encoded:
        raise BeaconDecodeError("empty URL", beacon_type=BeaconType.EDDYSTONE_URL)
    scheme = encoded[0]
    if scheme >= len(EDDYSTONE_URL_SCHEMES):
        raise BeaconDecodeError(f"unknown URL scheme 0x{scheme:02x}", beacon_type=BeaconType.EDDYSTONE_URL)
    parts = [EDDYSTONE_URL_SCHEMES[scheme]]
    for byte in encoded[1:]:
        if byte < len(EDDYSTONE_URL_EXPANSIONS):
            parts.append(EDDYSTONE_URL_EXPANSIONS[byte])
        elif 0x21 <= byte <= 0x7E:
            parts.append(chr(byte))
        else:
            raise BeaconDecodeError(f"invalid URL byte 0x{byte:02x}", beacon_type=BeaconType.EDDYSTONE_URL)
    return "".join(parts)


@decoder(BeaconType.EDDYSTONE_URL)
def decode_url(advertisement: Advertisement) -> EddystoneUrl:
    data = service_payload(advertisement, EDDYSTONE_SERVICE_UUID, BeaconType.EDDYSTONE_URL)
    require_length(data, _URL_MIN_LENGTH, BeaconType.EDDYSTONE_URL)
    return EddystoneUrl(tx_power=int8(data[1]), url=expand_url(data[2:]))


@decoder(BeaconType.EDDYSTONE_TLM)
def decode_tlm(advertisement: Advertisement) -> EddystoneTlm:
    data = service_payload(advertisement, EDDYSTONE_SERVICE_UUID, BeaconType.EDDYSTONE_TLM)
    require_length(data, 0, BeaconType.EDDYSTONE_TLM, exact=(_TLM_LENGTH,))
    version = data[1]
    if version != _TLM_UNENCRYPTED:
        raise BeaconDecodeError(f"unsupported TLM version {version}", beacon_type=BeaconType.EDDYSTONE_TLM)
    battery_voltage, temperature_raw, adv_count, sec_count = struct.unpack_from(">HhII", data, 2)
    temperature = None if temperature_raw == _TLM_TEMPERATURE_UNSUPPORTED else temperature_raw / 256
    return EddystoneTlm(
        version=version,
        battery_voltage=battery_voltage,
        temperature=temperature,
        adv_count=adv_count,
        sec_count=sec_count,
    )


@decoder(BeaconType.EDDYSTONE_EID)
def decode_eid(advertisement: Advertisement) -> EddystoneEid:
    data = service_payload(advertisement, EDDYSTONE_SERVICE_UUID, BeaconType.EDDYSTONE_EID)
    require_length(data, 0, BeaconType.EDDYSTONE_EID, exact=(_EID_LENGTH,))
    return EddystoneEid(tx_power=int8(data[1]), eid=format_hex_id(data[2:10]))
