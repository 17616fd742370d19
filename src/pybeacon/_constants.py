"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# 16-bit service UUIDs (lowercase, as reported by the scanner)
# ------------------------------------------------------------------

EDDYSTONE_SERVICE_UUID = "feaa"
MINEW_SERVICE_UUID = "ffe1"
ESTIMOTE_TELEMETRY_SERVICE_UUID = "fe9a"

# ------------------------------------------------------------------
# Manufacturer data signatures
# ------------------------------------------------------------------

# Apple company id 0x004C (little-endian on air) + beacon type 0x02 + length 0x15.
IBEACON_SIGNATURE = 0x4C000215
IBEACON_SIGNATURE_LENGTH = 4

ESTIMOTE_COMPANY_ID = 0x015D
COMPANY_ID_LENGTH = 2

# ------------------------------------------------------------------
# Eddystone frame types (high nibble of the first service-data byte)
# ------------------------------------------------------------------

EDDYSTONE_FRAME_UID = 0b0000
EDDYSTONE_FRAME_URL = 0b0001
EDDYSTONE_FRAME_TLM = 0b0010
EDDYSTONE_FRAME_EID = 0b0011

EDDYSTONE_URL_SCHEMES: tuple[str, ...] = ("http://www.", "https://www.", "http://", "https://")
EDDYSTONE_URL_EXPANSIONS: tuple[str, ...] = (
    ".com/",
    ".org/",
    ".edu/",
    ".net/",
    ".info/",
    ".biz/",
    ".gov/",
    ".com",
    ".org",
    ".edu",
    ".net",
    ".info",
    ".biz",
    ".gov",
)

# ------------------------------------------------------------------
# Estimote
# ------------------------------------------------------------------

ESTIMOTE_TELEMETRY_FRAME_TYPE = 0x02
ESTIMOTE_TELEMETRY_SUBFRAME_A = 0
ESTIMOTE_TELEMETRY_SUBFRAME_B = 1
ESTIMOTE_NEARABLE_FRAME_TYPE = 0x01

# ------------------------------------------------------------------
# Minew
# ------------------------------------------------------------------

MINEW_FRAME_TYPE = 0xA1
MINEW_PRODUCT_HT = 0x01
MINEW_PRODUCT_ACCELEROMETER = 0x03
MINEW_PRODUCT_INFO = 0x08
