"""Shared plumbing for format decoders.

Decoder internals raise :class:`BeaconDecodeError` for malformed frames;
:func:`decoder` turns that (and pydantic validation failures) into the
``None`` "not decodable" signal at the entry point.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TypeVar

from pydantic import ValidationError

from pybeacon.exceptions import BeaconDecodeError
from pybeacon.models._base import BeaconType
from pybeacon.models.advertisement import Advertisement

_logger = logging.getLogger(__name__)

TPayload = TypeVar("TPayload")


def decoder(
    beacon_type: BeaconType,
) -> Callable[[Callable[[Advertisement], TPayload]], Callable[[Advertisement], TPayload | None]]:
    """Wrap a raising decoder so malformed frames yield ``None``."""

    def wrap(func: Callable[[Advertisement], TPayload]) -> Callable[[Advertisement], TPayload | None]:
        @functools.wraps(func)
        def wrapper(advertisement: Advertisement) -> TPayload | None:
            try:
                return func(advertisement)
            except BeaconDecodeError as exc:
                _logger.debug("%s frame not decodable: %s", exc.beacon_type or beacon_type.value, exc)
                return None
            except ValidationError as exc:
                _logger.debug("%s payload failed validation: %s", beacon_type.value, exc.errors(include_url=False))
                return None

        return wrapper

    return wrap


def service_payload(advertisement: Advertisement, uuid: str, beacon_type: BeaconType) -> bytes:
    """Return the service-data bytes for *uuid* or raise."""
    service = advertisement.find_service_data(uuid)
    if service is None:
        raise BeaconDecodeError(f"no service data for {uuid}", beacon_type=beacon_type)
    return service.data


def manufacturer_payload(advertisement: Advertisement, beacon_type: BeaconType) -> bytes:
    """Return the manufacturer data or raise."""
    if advertisement.manufacturer_data is None:
        raise BeaconDecodeError("no manufacturer data", beacon_type=beacon_type)
    return advertisement.manufacturer_data


def require_length(
    data: bytes,
    minimum: int,
    beacon_type: BeaconType,
    *,
    exact: tuple[int, ...] = (),
) -> None:
    """Raise :class:`BeaconDecodeError` unless *data* is long enough.

    When *exact* is given the length must be one of those values instead.
    """
    if exact:
        if len(data) not in exact:
            raise BeaconDecodeError(
                f"expected {' or '.join(map(str, exact))} bytes, got {len(data)}",
                beacon_type=beacon_type,
            )
        return
    if len(data) < minimum:
        raise BeaconDecodeError(f"expected at least {minimum} bytes, got {len(data)}", beacon_type=beacon_type)


def int8(value: int) -> int:
    """Reinterpret an unsigned byte as a signed int8."""
    return value - 0x100 if value & 0x80 else value
