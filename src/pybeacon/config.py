"""Parser configuration for pybeacon."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pybeacon.exceptions import BeaconConfigError
from pybeacon.models._base import BeaconType


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def parse_beacon_types(value: str) -> frozenset[BeaconType]:
    """Parse a comma-separated list of tag names (e.g. ``"iBeacon,eddystoneUid"``).

    Blank entries are ignored.  Raises :class:`BeaconConfigError` for a
    name that is not a known tag.
    """
    types: set[BeaconType] = set()
    for item in value.split(","):
        name = item.strip()
        if not name:
            continue
        try:
            beacon_type = BeaconType(name)
        except ValueError as exc:
            raise BeaconConfigError(f"unknown beacon type {name!r}") from exc
        types.add(beacon_type)
    return frozenset(types)


@dataclasses.dataclass(frozen=True)
class ParserConfig:
    """Parser configuration.

    The defaults reproduce the plain classify/dispatch/assemble behaviour.

    Parameters
    ----------
    enabled_types : frozenset[BeaconType]
        Beacon types :func:`pybeacon.parse` may return.  Advertisements
        classified as any other type yield ``None`` without being decoded.
        Classification itself is unaffected.
    debug_payloads : bool
        Include hex-encoded payload bytes in DEBUG log records instead of
        only their length.
    """

    enabled_types: frozenset[BeaconType] = dataclasses.field(default_factory=BeaconType.known)
    debug_payloads: bool = False

    def __post_init__(self) -> None:
        # Callers may pass any iterable; keep an immutable copy.
        object.__setattr__(self, "enabled_types", frozenset(self.enabled_types))
        if BeaconType.UNKNOWN in self.enabled_types:
            raise BeaconConfigError("the unknown beacon type cannot be enabled")

    def is_enabled(self, beacon_type: BeaconType) -> bool:
        return beacon_type in self.enabled_types

    @classmethod
    def from_env(cls, **overrides: Any) -> ParserConfig:
        """Create configuration from environment variables.

        Reads ``PYBEACON_ENABLED_TYPES`` (comma-separated tag names) and
        ``PYBEACON_DEBUG_PAYLOADS``.  Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ParserConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        types_env = env.get("PYBEACON_ENABLED_TYPES")
        if types_env is not None and "enabled_types" not in overrides:
            config_kwargs["enabled_types"] = parse_beacon_types(types_env)

        if "debug_payloads" not in overrides:
            config_kwargs["debug_payloads"] = _env_bool(env.get("PYBEACON_DEBUG_PAYLOADS"), False)

        config_kwargs.update(overrides)
        if "enabled_types" in config_kwargs:
            config_kwargs["enabled_types"] = frozenset(config_kwargs["enabled_types"])

        return cls(**config_kwargs)
