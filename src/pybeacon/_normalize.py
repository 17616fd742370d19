"""Normalization helpers.

Centralizes defensive coercion of scanner-supplied values.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def falsy_to_none(value: Any) -> Any:
    """Return ``None`` for any falsy *value* (``""``, ``0``, ``None``)."""
    return value if value else None


def normalize_uuid(value: Any) -> str:
    """Lowercase and strip a service UUID string."""
    return str(value).strip().lower()


def coerce_bytes(value: Any) -> bytes | None:
    """Coerce scanner byte payloads to :class:`bytes`.

    Accepts ``bytes``/``bytearray``/``memoryview``, a hex string (with or
    without ``:``/space separators), or a sequence of ints.  ``None`` is
    passed through.  Anything else raises :class:`ValueError` so pydantic
    reports it as a validation error.
    """
    if value is None:
        return None
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        text = value.strip().replace(":", "").replace(" ", "")
        if text.lower().startswith("0x"):
            text = text[2:]
        try:
            return bytes.fromhex(text)
        except ValueError as exc:
            raise ValueError(f"invalid hex payload: {value!r}") from exc
    if isinstance(value, Sequence):
        try:
            return bytes(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid byte sequence: {value!r}") from exc
    raise ValueError(f"cannot interpret {type(value).__name__} as bytes")


def format_hex_id(data: bytes) -> str:
    """Render *data* as uppercase hex without separators."""
    return data.hex().upper()


def format_mac(data: bytes, *, reverse: bool = False) -> str:
    """Render six address bytes as a lowercase colon-separated MAC."""
    octets = reversed(data) if reverse else data
    return ":".join(f"{b:02x}" for b in octets)
