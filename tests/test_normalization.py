from __future__ import annotations

import pytest

from pybeacon._normalize import coerce_bytes, falsy_to_none, format_hex_id, format_mac, normalize_uuid


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (b"\x01\x02", b"\x01\x02"),
        (bytearray(b"\x01\x02"), b"\x01\x02"),
        (memoryview(b"\x01\x02"), b"\x01\x02"),
        ("0102", b"\x01\x02"),
        ("01:02", b"\x01\x02"),
        ("0x0102", b"\x01\x02"),
        ("", b""),
        ([1, 2], b"\x01\x02"),
        (None, None),
    ],
)
def test_coerce_bytes(value: object, expected: bytes | None) -> None:
    assert coerce_bytes(value) == expected


@pytest.mark.parametrize("value", ["zz", "012", [256], 3.5])
def test_coerce_bytes_rejects_garbage(value: object) -> None:
    with pytest.raises(ValueError):
        coerce_bytes(value)


def test_falsy_to_none() -> None:
    assert falsy_to_none("") is None
    assert falsy_to_none(0) is None
    assert falsy_to_none(None) is None
    assert falsy_to_none(-4) == -4
    assert falsy_to_none("x") == "x"


def test_normalize_uuid() -> None:
    assert normalize_uuid(" FEAA ") == "feaa"


def test_formatting() -> None:
    assert format_hex_id(b"\xab\x01") == "AB01"
    assert format_mac(bytes.fromhex("2211a03f23ac"), reverse=True) == "ac:23:3f:a0:11:22"
    assert format_mac(bytes.fromhex("ac233fa01122")) == "ac:23:3f:a0:11:22"
