"""Beacon advertisement parser.

``parse`` runs one advertisement through classify → dispatch → assemble
and returns a :class:`ParseResult`, or ``None`` when the advertisement
is not a recognized beacon or its payload could not be decoded.  The
two cases are deliberately indistinguishable to callers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from pybeacon._normalize import falsy_to_none
from pybeacon._redact import redact_for_log
from pybeacon.classifier import classify
from pybeacon.config import ParserConfig
from pybeacon.dispatch import dispatch
from pybeacon.models._base import BeaconType
from pybeacon.models.advertisement import Advertisement
from pybeacon.models.minew import MinewSensor
from pybeacon.models.result import BeaconPayload, ParseResult

_logger = logging.getLogger(__name__)


def assemble(
    advertisement: Advertisement,
    beacon_type: BeaconType,
    payload: BeaconPayload | None,
) -> ParseResult | None:
    """Build the normalized result envelope for a decoded payload.

    Returns ``None`` when *payload* is absent.
    """
    if payload is None:
        return None

    address = advertisement.address
    # Minew sensors carry their MAC in the frame rather than the advertisement.
    if beacon_type == BeaconType.MINEW_SENSOR and not address and isinstance(payload, MinewSensor):
        address = payload.mac_address

    return ParseResult(
        id=advertisement.id,
        address=address,
        local_name=falsy_to_none(advertisement.local_name),
        tx_power_level=falsy_to_none(advertisement.tx_power_level),
        rssi=advertisement.rssi,
        beacon_type=beacon_type,
        payload=payload,
    )


def _as_advertisement(value: Advertisement | Mapping[str, Any]) -> Advertisement | None:
    if isinstance(value, Advertisement):
        return value
    try:
        return Advertisement.model_validate(value)
    except ValidationError as exc:
        _logger.debug("Discarding malformed advertisement: %s", exc.errors(include_url=False))
        return None


class BeaconParser:
    """Stateless parser handle bound to an immutable :class:`ParserConfig`."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config or ParserConfig()

    @property
    def config(self) -> ParserConfig:
        return self._config

    def classify(self, advertisement: Advertisement | Mapping[str, Any]) -> BeaconType:
        ad = _as_advertisement(advertisement)
        if ad is None:
            return BeaconType.UNKNOWN
        return classify(ad)

    def parse(self, advertisement: Advertisement | Mapping[str, Any]) -> ParseResult | None:
        ad = _as_advertisement(advertisement)
        if ad is None:
            return None

        beacon_type = classify(ad)
        if beacon_type is BeaconType.UNKNOWN:
            return None

        if not self._config.is_enabled(beacon_type):
            _logger.debug("Ignoring %s advertisement (type disabled)", beacon_type.value)
            return None

        result = assemble(ad, beacon_type, dispatch(beacon_type, ad))
        if result is None and _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(
                "Classified as %s but not decodable: %s",
                beacon_type.value,
                redact_for_log(ad, include_payloads=self._config.debug_payloads),
            )
        return result


_default_parser = BeaconParser()


def parse(
    advertisement: Advertisement | Mapping[str, Any],
    *,
    config: ParserConfig | None = None,
) -> ParseResult | None:
    """Parse one advertisement; see :class:`BeaconParser`."""
    parser = _default_parser if config is None else BeaconParser(config)
    return parser.parse(advertisement)
