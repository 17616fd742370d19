"""Apple iBeacon decoder.

Manufacturer data layout::

    4C 00 | 02 | 15 | uuid (16) | major (2, BE) | minor (2, BE) | tx power (int8)
"""

from __future__ import annotations

import struct
import uuid

from pybeacon.decoders._common import decoder, manufacturer_payload, require_length
from pybeacon.models._base import BeaconType
from pybeacon.models.advertisement import Advertisement
from pybeacon.models.ibeacon import IBeacon

_FRAME_LENGTH = 25


@decoder(BeaconType.IBEACON)
def decode_ibeacon(advertisement: Advertisement) -> IBeacon:
    manu = manufacturer_payload(advertisement, BeaconType.IBEACON)
    require_length(manu, _FRAME_LENGTH, BeaconType.IBEACON)
    major, minor, tx_power = struct.unpack_from(">HHb", manu, 20)
    return IBeacon(
        uuid=str(uuid.UUID(bytes=manu[4:20])).upper(),
        major=major,
        minor=minor,
        tx_power=tx_power,
    )
