# ----------------------------------------------------------------------
# Library to read/write the legacy libpcap file format
#
# See: https://wiki.wireshark.org/Development/LibpcapFileFormat
# ----------------------------------------------------------------------

from .records import FileOptions, Packet, TimestampFormat, TimestampResolution  # noqa
from .scanner import FileScanner  # noqa
from .writer import FileWriter  # noqa
