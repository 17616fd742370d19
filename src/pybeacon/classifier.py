"""Beacon type classification.

Rules run in a fixed priority order: service-UUID-qualified formats
first, raw manufacturer-id sniffing last.  Each rule checks the length
of what it reads, so a truncated advertisement falls through to the
next rule instead of failing.
"""

from __future__ import annotations

from collections.abc import Callable

from pybeacon._constants import (
    COMPANY_ID_LENGTH,
    EDDYSTONE_FRAME_EID,
    EDDYSTONE_FRAME_TLM,
    EDDYSTONE_FRAME_UID,
    EDDYSTONE_FRAME_URL,
    EDDYSTONE_SERVICE_UUID,
    ESTIMOTE_COMPANY_ID,
    ESTIMOTE_TELEMETRY_SERVICE_UUID,
    IBEACON_SIGNATURE,
    IBEACON_SIGNATURE_LENGTH,
    MINEW_SERVICE_UUID,
)
from pybeacon.models._base import BeaconType
from pybeacon.models.advertisement import Advertisement

Rule = Callable[[Advertisement], BeaconType | None]

_EDDYSTONE_FRAMES: dict[int, BeaconType] = {
    EDDYSTONE_FRAME_UID: BeaconType.EDDYSTONE_UID,
    EDDYSTONE_FRAME_URL: BeaconType.EDDYSTONE_URL,
    EDDYSTONE_FRAME_TLM: BeaconType.EDDYSTONE_TLM,
    EDDYSTONE_FRAME_EID: BeaconType.EDDYSTONE_EID,
}


def _eddystone(ad: Advertisement) -> BeaconType | None:
    service = ad.find_service_data(EDDYSTONE_SERVICE_UUID)
    if service is None or len(service.data) < 1:
        return None
    # Unassigned frame types continue to the next rule.
    return _EDDYSTONE_FRAMES.get(service.data[0] >> 4)


def _minew_sensor(ad: Advertisement) -> BeaconType | None:
    if ad.find_service_data(MINEW_SERVICE_UUID) is None:
        return None
    return BeaconType.MINEW_SENSOR


def _ibeacon(ad: Advertisement) -> BeaconType | None:
    manu = ad.manufacturer_data
    if manu is None or len(manu) < IBEACON_SIGNATURE_LENGTH:
        return None
    if int.from_bytes(manu[:IBEACON_SIGNATURE_LENGTH], "big") != IBEACON_SIGNATURE:
        return None
    return BeaconType.IBEACON


def _estimote_telemetry(ad: Advertisement) -> BeaconType | None:
    service = ad.find_service_data(ESTIMOTE_TELEMETRY_SERVICE_UUID)
    if service is None or len(service.data) < 1:
        return None
    return BeaconType.ESTIMOTE_TELEMETRY


def _estimote_nearable(ad: Advertisement) -> BeaconType | None:
    manu = ad.manufacturer_data
    if manu is None or len(manu) < COMPANY_ID_LENGTH:
        return None
    if int.from_bytes(manu[:COMPANY_ID_LENGTH], "little") != ESTIMOTE_COMPANY_ID:
        return None
    return BeaconType.ESTIMOTE_NEARABLE


RULES: tuple[Rule, ...] = (
    _eddystone,
    _minew_sensor,
    _ibeacon,
    _estimote_telemetry,
    _estimote_nearable,
)
"""Classification rules in priority order."""


def classify(advertisement: Advertisement) -> BeaconType:
    """Return the beacon type of *advertisement*.

    Returns :attr:`BeaconType.UNKNOWN` when no rule matches.
    """
    for rule in RULES:
        beacon_type = rule(advertisement)
        if beacon_type is not None:
            return beacon_type
    return BeaconType.UNKNOWN
