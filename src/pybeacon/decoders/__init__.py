"""Format-specific decoders.

Each decoder takes an :class:`~pybeacon.models.Advertisement` and returns
its payload model, or ``None`` when the frame cannot be decoded.
"""

from pybeacon.decoders.eddystone import decode_eid, decode_tlm, decode_uid, decode_url
from pybeacon.decoders.estimote import decode_nearable, decode_telemetry
from pybeacon.decoders.ibeacon import decode_ibeacon
from pybeacon.decoders.minew import decode_sensor

__all__ = [
    "decode_eid",
    "decode_ibeacon",
    "decode_nearable",
    "decode_sensor",
    "decode_telemetry",
    "decode_tlm",
    "decode_uid",
    "decode_url",
]
