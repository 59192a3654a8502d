"""Generic constants"""

import sys

# File magic numbers, as they read when decoded big-endian
# ----------------------------------------

MAGIC_MICROSECONDS = 0xA1B2C3D4
MAGIC_MICROSECONDS_SWAPPED = 0xD4C3B2A1
MAGIC_NANOSECONDS = 0xA1B23C4D
MAGIC_NANOSECONDS_SWAPPED = 0x4D3CB2A1

# Only supported version; unchanged since 1998
VERSION_MAJOR = 2
VERSION_MINOR = 4

# Byte order markers, in the format used by the :py:mod:`struct` module

ENDIAN_LITTLE = "<"
ENDIAN_BIG = ">"
ENDIAN_NATIVE = ENDIAN_LITTLE if sys.byteorder == "little" else ENDIAN_BIG
ENDIAN_SWAPPED = ENDIAN_BIG if ENDIAN_NATIVE == ENDIAN_LITTLE else ENDIAN_LITTLE

# Struct layouts (without the byte order marker)

FILE_HEADER_FORMAT = "IHHiIII"
FILE_HEADER_SIZE = 24
RECORD_HEADER_FORMAT = "IIII"
RECORD_HEADER_SIZE = 16

# Largest snaplen libpcap will write
MAXIMUM_SNAPLEN = 262144

# Ceiling for the captured length of a single record when reading.
# Anything bigger is assumed to come from a corrupted record header.
MAX_RECORD_SIZE = 256 * MAXIMUM_SNAPLEN
