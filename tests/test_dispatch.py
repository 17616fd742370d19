from __future__ import annotations

import pytest

from pybeacon.dispatch import DECODERS, dispatch, get_decoder
from pybeacon.exceptions import BeaconError, UnknownBeaconTypeError
from pybeacon.models import Advertisement, BeaconType, IBeacon

IBEACON_MANU = "4c000215" + "e2c56db5dffb48d2b060d0f5a71096e0" + "0001" + "0002" + "c5"


def test_every_known_type_has_exactly_one_decoder() -> None:
    assert set(DECODERS) == BeaconType.known()
    assert BeaconType.UNKNOWN not in DECODERS


def test_decoder_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        DECODERS[BeaconType.IBEACON] = lambda ad: None  # type: ignore[index]


def test_get_decoder_accepts_tag_strings() -> None:
    assert get_decoder("iBeacon") is DECODERS[BeaconType.IBEACON]


@pytest.mark.parametrize("tag", ["", "minewSensors", "altBeacon"])
def test_get_decoder_rejects_unregistered_tags(tag: str) -> None:
    with pytest.raises(UnknownBeaconTypeError) as excinfo:
        get_decoder(tag)
    assert isinstance(excinfo.value, BeaconError)
    assert isinstance(excinfo.value, KeyError)
    assert excinfo.value.beacon_type == tag


def test_dispatch_skips_unknown_tag() -> None:
    ad = Advertisement(manufacturer_data=bytes.fromhex(IBEACON_MANU))
    assert dispatch(BeaconType.UNKNOWN, ad) is None
    assert dispatch("", ad) is None


def test_dispatch_calls_matching_decoder() -> None:
    ad = Advertisement(manufacturer_data=bytes.fromhex(IBEACON_MANU))
    payload = dispatch(BeaconType.IBEACON, ad)
    assert isinstance(payload, IBeacon)


def test_dispatch_does_not_fall_back_between_decoders() -> None:
    # iBeacon bytes handed to the nearable decoder are simply not decodable.
    ad = Advertisement(manufacturer_data=bytes.fromhex(IBEACON_MANU))
    assert dispatch(BeaconType.ESTIMOTE_NEARABLE, ad) is None
