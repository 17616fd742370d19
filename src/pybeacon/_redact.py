"""Helpers for safe debug logging.

Advertisements carry device addresses, which identify people as much as
their devices.  This module renders advertisements and results for DEBUG
logs with addresses masked and byte payloads summarized.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "id",
        "address",
        "macaddress",
        "mac_address",
        "nearableid",
        "nearable_id",
        "shortidentifier",
        "short_identifier",
    }
)


def _mask(value: Any) -> str:
    text = str(value)
    if len(text) <= 4:
        return "<redacted>"
    return f"<redacted:…{text[-4:]}>"


def redact_for_log(
    value: Any,
    *,
    include_payloads: bool = False,
    max_string: int = 128,
    _depth: int = 0,
) -> Any:
    """Return a redacted copy of *value* suitable for debug logs.

    Bytes become ``<bytes:Nb>`` unless *include_payloads* is set, in which
    case they are rendered as (possibly truncated) hex.
    """
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, (bytes, bytearray)):
        if not include_payloads:
            return f"<bytes:{len(value)}b>"
        text = bytes(value).hex()
        if len(text) > max_string:
            return f"{text[:max_string]}…<truncated>"
        return text

    if hasattr(value, "model_dump"):
        value = value.model_dump()

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower() in _SENSITIVE_VALUE_KEYS and v:
                redacted[key] = _mask(v)
            else:
                redacted[key] = redact_for_log(
                    v, include_payloads=include_payloads, max_string=max_string, _depth=_depth + 1
                )
        return redacted

    if isinstance(value, Sequence):
        return [
            redact_for_log(v, include_payloads=include_payloads, max_string=max_string, _depth=_depth + 1)
            for v in value
        ]

    # Fallback: represent unknown objects without dumping internals.
    return repr(value)
