"""Data models for advertisements, decoded payloads and parse results."""

from pybeacon.models._base import BeaconBaseModel, BeaconType, HexBytes, Vector3
from pybeacon.models.advertisement import Advertisement, ServiceData
from pybeacon.models.eddystone import EddystoneEid, EddystoneTlm, EddystoneUid, EddystoneUrl
from pybeacon.models.estimote import EstimoteNearable, EstimoteTelemetry, TelemetrySubframe
from pybeacon.models.ibeacon import IBeacon
from pybeacon.models.minew import MinewFrame, MinewSensor
from pybeacon.models.result import BeaconPayload, ParseResult

__all__ = [
    "Advertisement",
    "BeaconBaseModel",
    "BeaconPayload",
    "BeaconType",
    "EddystoneEid",
    "EddystoneTlm",
    "EddystoneUid",
    "EddystoneUrl",
    "EstimoteNearable",
    "EstimoteTelemetry",
    "HexBytes",
    "IBeacon",
    "MinewFrame",
    "MinewSensor",
    "ParseResult",
    "ServiceData",
    "TelemetrySubframe",
    "Vector3",
]
