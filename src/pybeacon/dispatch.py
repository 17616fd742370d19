"""Decoder dispatch table.

Maps every known beacon type to exactly one decoder.  Dispatch is a
plain lookup-and-call with no retries and no fallback between decoders.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from pybeacon.decoders import (
    decode_eid,
    decode_ibeacon,
    decode_nearable,
    decode_sensor,
    decode_telemetry,
    decode_tlm,
    decode_uid,
    decode_url,
)
from pybeacon.exceptions import UnknownBeaconTypeError
from pybeacon.models._base import BeaconType
from pybeacon.models.advertisement import Advertisement
from pybeacon.models.result import BeaconPayload

Decoder = Callable[[Advertisement], BeaconPayload | None]

DECODERS: Mapping[BeaconType, Decoder] = MappingProxyType(
    {
        BeaconType.IBEACON: decode_ibeacon,
        BeaconType.EDDYSTONE_UID: decode_uid,
        BeaconType.EDDYSTONE_URL: decode_url,
        BeaconType.EDDYSTONE_TLM: decode_tlm,
        BeaconType.EDDYSTONE_EID: decode_eid,
        BeaconType.ESTIMOTE_TELEMETRY: decode_telemetry,
        BeaconType.ESTIMOTE_NEARABLE: decode_nearable,
        BeaconType.MINEW_SENSOR: decode_sensor,
    }
)


def get_decoder(beacon_type: BeaconType | str) -> Decoder:
    """Return the decoder registered for *beacon_type*.

    Raises :class:`UnknownBeaconTypeError` for the unknown (empty) tag or
    any value without a decoder.
    """
    try:
        return DECODERS[BeaconType(beacon_type)]
    except (KeyError, ValueError):
        raise UnknownBeaconTypeError(str(beacon_type)) from None


def dispatch(beacon_type: BeaconType | str, advertisement: Advertisement) -> BeaconPayload | None:
    """Decode *advertisement* with the decoder for *beacon_type*.

    Returns ``None`` for the unknown tag (no decoder is called) or when
    the decoder reports the frame as not decodable.
    """
    if beacon_type == BeaconType.UNKNOWN:
        return None
    return get_decoder(beacon_type)(advertisement)
