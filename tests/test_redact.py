from __future__ import annotations

from pybeacon._redact import redact_for_log
from pybeacon.models import Advertisement


def test_redact_for_log_masks_addresses() -> None:
    payload = {
        "id": "d0f5a71096e0",
        "address": "d0:f5:a7:10:96:e0",
        "rssi": -60,
        "nested": {"macAddress": "ac:23:3f:a0:11:22"},
    }

    redacted = redact_for_log(payload)
    assert redacted["id"] == "<redacted:…96e0>"
    assert redacted["address"] == "<redacted:…6:e0>"
    assert redacted["nested"]["macAddress"] == "<redacted:…1:22>"
    assert redacted["rssi"] == -60


def test_redact_for_log_keeps_empty_address() -> None:
    assert redact_for_log({"address": None})["address"] is None


def test_redact_for_log_summarizes_bytes() -> None:
    assert redact_for_log({"data": b"\x01\x02"}) == {"data": "<bytes:2b>"}
    assert redact_for_log({"data": b"\x01\x02"}, include_payloads=True) == {"data": "0102"}


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_accepts_models() -> None:
    ad = Advertisement.model_validate(
        {"address": "aa:bb:cc:dd:ee:ff", "serviceData": [{"uuid": "feaa", "data": "0011"}]}
    )

    redacted = redact_for_log(ad)
    assert redacted["address"] == "<redacted:…e:ff>"
    assert redacted["service_data"] == [{"uuid": "feaa", "data": "<bytes:2b>"}]
