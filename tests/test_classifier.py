"""Tests for priority-ordered beacon classification."""

from __future__ import annotations

from typing import Any

import pytest

from pybeacon.classifier import RULES, classify
from pybeacon.models import Advertisement, BeaconType

IBEACON_MANU = "4c000215" + "e2c56db5dffb48d2b060d0f5a71096e0" + "0001" + "0002" + "c5"
NEARABLE_MANU = "5d0101a1b2c3d4e5f607180401680140" + "10f040" + "0342f4"


def _ad(**kwargs: Any) -> Advertisement:
    return Advertisement.model_validate({"id": "abc", "rssi": -60, **kwargs})


def _service(uuid: str, data: str) -> dict[str, str]:
    return {"uuid": uuid, "data": data}


def test_empty_advertisement_is_unknown() -> None:
    assert classify(_ad()) == BeaconType.UNKNOWN
    assert classify(_ad()) == ""


def test_rules_cover_every_known_type_in_priority_order() -> None:
    assert [rule.__name__ for rule in RULES] == [
        "_eddystone",
        "_minew_sensor",
        "_ibeacon",
        "_estimote_telemetry",
        "_estimote_nearable",
    ]


# ------------------------------------------------------------------
# Eddystone
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("first_byte", "expected"),
    [
        ("00", BeaconType.EDDYSTONE_UID),
        ("10", BeaconType.EDDYSTONE_URL),
        ("20", BeaconType.EDDYSTONE_TLM),
        ("30", BeaconType.EDDYSTONE_EID),
        # Low nibble is ignored.
        ("0f", BeaconType.EDDYSTONE_UID),
        ("3a", BeaconType.EDDYSTONE_EID),
    ],
)
def test_eddystone_frame_nibble(first_byte: str, expected: BeaconType) -> None:
    assert classify(_ad(serviceData=[_service("feaa", first_byte)])) == expected


def test_eddystone_wins_over_manufacturer_data() -> None:
    ad = _ad(manufacturerData=IBEACON_MANU, serviceData=[_service("feaa", "00e7")])
    assert classify(ad) == BeaconType.EDDYSTONE_UID


def test_unassigned_eddystone_frame_continues_evaluation() -> None:
    ad = _ad(manufacturerData=IBEACON_MANU, serviceData=[_service("feaa", "40")])
    assert classify(ad) == BeaconType.IBEACON


def test_empty_eddystone_service_data_continues_evaluation() -> None:
    ad = _ad(serviceData=[_service("feaa", ""), _service("ffe1", "")])
    assert classify(ad) == BeaconType.MINEW_SENSOR


def test_service_uuid_is_matched_case_insensitively_after_normalisation() -> None:
    assert classify(_ad(serviceData=[_service("FEAA", "10")])) == BeaconType.EDDYSTONE_URL
    full = "0000feaa-0000-1000-8000-00805f9b34fb"
    assert classify(_ad(serviceData=[_service(full, "20")])) == BeaconType.EDDYSTONE_TLM


def test_unrelated_service_uuid_is_ignored() -> None:
    assert classify(_ad(serviceData=[_service("180f", "00")])) == BeaconType.UNKNOWN


# ------------------------------------------------------------------
# Minew
# ------------------------------------------------------------------


def test_minew_matches_regardless_of_payload_length() -> None:
    assert classify(_ad(serviceData=[_service("ffe1", "")])) == BeaconType.MINEW_SENSOR


def test_minew_wins_over_ibeacon() -> None:
    ad = _ad(manufacturerData=IBEACON_MANU, serviceData=[_service("ffe1", "a101")])
    assert classify(ad) == BeaconType.MINEW_SENSOR


# ------------------------------------------------------------------
# iBeacon
# ------------------------------------------------------------------


def test_ibeacon_signature() -> None:
    assert classify(_ad(manufacturerData=IBEACON_MANU)) == BeaconType.IBEACON


def test_ibeacon_signature_only_needs_four_bytes() -> None:
    assert classify(_ad(manufacturerData="4c000215")) == BeaconType.IBEACON


def test_three_byte_manufacturer_data_falls_through() -> None:
    assert classify(_ad(manufacturerData="4c0002")) == BeaconType.UNKNOWN


def test_other_apple_subtype_is_not_ibeacon() -> None:
    assert classify(_ad(manufacturerData="4c001005")) == BeaconType.UNKNOWN


def test_ibeacon_wins_over_estimote_telemetry() -> None:
    ad = _ad(manufacturerData=IBEACON_MANU, serviceData=[_service("fe9a", "22")])
    assert classify(ad) == BeaconType.IBEACON


# ------------------------------------------------------------------
# Estimote
# ------------------------------------------------------------------


def test_estimote_telemetry_needs_one_byte() -> None:
    assert classify(_ad(serviceData=[_service("fe9a", "22")])) == BeaconType.ESTIMOTE_TELEMETRY
    assert classify(_ad(serviceData=[_service("fe9a", "")])) == BeaconType.UNKNOWN


def test_estimote_telemetry_wins_over_nearable() -> None:
    ad = _ad(manufacturerData=NEARABLE_MANU, serviceData=[_service("fe9a", "12")])
    assert classify(ad) == BeaconType.ESTIMOTE_TELEMETRY


def test_empty_telemetry_falls_through_to_nearable() -> None:
    ad = _ad(manufacturerData="5d01", serviceData=[_service("fe9a", "")])
    assert classify(ad) == BeaconType.ESTIMOTE_NEARABLE


def test_nearable_company_id_is_little_endian() -> None:
    assert classify(_ad(manufacturerData=NEARABLE_MANU)) == BeaconType.ESTIMOTE_NEARABLE
    assert classify(_ad(manufacturerData="015d")) == BeaconType.UNKNOWN


@pytest.mark.parametrize("manu", ["", "5d", "4c", "4c00", "4c0002"])
def test_short_manufacturer_data_never_raises(manu: str) -> None:
    assert classify(_ad(manufacturerData=manu)) == BeaconType.UNKNOWN


def test_classification_is_pure() -> None:
    ad = _ad(manufacturerData=IBEACON_MANU)
    before = ad.model_dump()
    assert classify(ad) == classify(ad)
    assert ad.model_dump() == before


def test_missing_service_data_bytes_fall_through() -> None:
    ad = _ad(manufacturerData=IBEACON_MANU, serviceData=[{"uuid": "feaa", "data": None}])
    assert ad.find_service_data("feaa").data == b""  # type: ignore[union-attr]
    assert classify(ad) == BeaconType.IBEACON


def test_missing_telemetry_bytes_fall_through_to_nearable() -> None:
    ad = _ad(manufacturerData=NEARABLE_MANU, serviceData=[{"uuid": "fe9a", "data": None}])
    assert classify(ad) == BeaconType.ESTIMOTE_NEARABLE
