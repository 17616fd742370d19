"""Custom exception hierarchy for pybeacon."""

from __future__ import annotations


class BeaconError(Exception):
    """Base exception for all pybeacon errors."""


class BeaconConfigError(BeaconError):
    """Invalid or missing configuration."""


class BeaconDecodeError(BeaconError):
    """Advertisement bytes matched a format signature but could not be decoded.

    Decoder entry points catch this and report the frame as not decodable,
    so callers of :func:`pybeacon.parse` never see it.
    """

    def __init__(self, message: str, *, beacon_type: str = "") -> None:
        self.beacon_type = beacon_type
        super().__init__(message)


class UnknownBeaconTypeError(BeaconError, KeyError):
    """No decoder is registered for the requested beacon type."""

    def __init__(self, beacon_type: str) -> None:
        self.beacon_type = beacon_type
        super().__init__(f"no decoder registered for beacon type {beacon_type!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])
