"""pybeacon - BLE beacon advertisement classification and decoding."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pybeacon")
except PackageNotFoundError:
    __version__ = "0+local"
from pybeacon.classifier import classify
from pybeacon.config import ParserConfig
from pybeacon.dispatch import DECODERS, dispatch, get_decoder
from pybeacon.exceptions import BeaconConfigError, BeaconDecodeError, BeaconError, UnknownBeaconTypeError
from pybeacon.models import (
    Advertisement,
    BeaconPayload,
    BeaconType,
    EddystoneEid,
    EddystoneTlm,
    EddystoneUid,
    EddystoneUrl,
    EstimoteNearable,
    EstimoteTelemetry,
    IBeacon,
    MinewFrame,
    MinewSensor,
    ParseResult,
    ServiceData,
)
from pybeacon.parser import BeaconParser, assemble, parse

__all__ = [
    "__version__",
    "Advertisement",
    "BeaconConfigError",
    "BeaconDecodeError",
    "BeaconError",
    "BeaconParser",
    "BeaconPayload",
    "BeaconType",
    "DECODERS",
    "EddystoneEid",
    "EddystoneTlm",
    "EddystoneUid",
    "EddystoneUrl",
    "EstimoteNearable",
    "EstimoteTelemetry",
    "IBeacon",
    "MinewFrame",
    "MinewSensor",
    "ParseResult",
    "ParserConfig",
    "ServiceData",
    "UnknownBeaconTypeError",
    "assemble",
    "classify",
    "dispatch",
    "get_decoder",
    "parse",
]
