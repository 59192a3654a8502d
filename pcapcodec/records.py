"""
Value objects exchanged with the codec: the file-level options
decoded from (or encoded into) the file header, and the packets.
"""

from collections import namedtuple
from enum import Enum

from pcapcodec.constants import (
    ENDIAN_BIG,
    ENDIAN_LITTLE,
    ENDIAN_NATIVE,
    MAXIMUM_SNAPLEN,
)
from pcapcodec.constants import link_types


class TimestampResolution(Enum):
    """Resolution of the sub-second timestamp field, in decimal digits"""

    MICROSECOND = 6
    NANOSECOND = 9

    @property
    def digits(self):
        return self.value

    @property
    def per_second(self):
        return 10 ** self.value


class TimestampFormat(Enum):
    """
    How packet timestamps are represented when reading.

    ``EPOCH`` gives a :py:class:`~decimal.Decimal` number of seconds since
    the epoch; ``PAIR`` gives the raw ``(seconds, fraction)`` tuple, with
    the fraction in units of the file timestamp resolution.
    """

    EPOCH = "epoch"
    PAIR = "pair"


_BYTE_ORDER_ALIASES = {
    "<": ENDIAN_LITTLE,
    ">": ENDIAN_BIG,
    "!": ENDIAN_BIG,
    "=": ENDIAN_NATIVE,
    "@": ENDIAN_NATIVE,
}


_FileOptions = namedtuple(
    "FileOptions",
    [
        "linktype",
        "snaplen",
        "byte_order",
        "timestamp_resolution",
        "time_zone_offset",
        "timestamp_accuracy",
    ],
)


class FileOptions(_FileOptions):
    """
    File-level options, as stored in the file header.

    :param linktype: link-layer type of every packet in the file; see
        :py:mod:`pcapcodec.constants.link_types`
    :param snaplen: maximum number of captured bytes per packet
    :param byte_order: byte order of every multi-byte field in the file,
        in :py:mod:`struct` notation. ``'='`` (the default) selects the
        byte order of this host; it is always stored as ``'<'`` or ``'>'``.
    :param timestamp_resolution: a :py:class:`TimestampResolution`
        (or its number of digits, 6 or 9)
    :param time_zone_offset: ``thiszone`` header field; not interpreted
    :param timestamp_accuracy: ``sigfigs`` header field; not interpreted
    """

    __slots__ = ()

    def __new__(
        cls,
        linktype=link_types.LINKTYPE_ETHERNET,
        snaplen=MAXIMUM_SNAPLEN,
        byte_order="=",
        timestamp_resolution=TimestampResolution.MICROSECOND,
        time_zone_offset=0,
        timestamp_accuracy=0,
    ):
        try:
            byte_order = _BYTE_ORDER_ALIASES[byte_order]
        except KeyError:
            raise ValueError("Invalid byte order: {0!r}".format(byte_order))
        return super(FileOptions, cls).__new__(
            cls,
            linktype,
            snaplen,
            byte_order,
            TimestampResolution(timestamp_resolution),
            time_zone_offset,
            timestamp_accuracy,
        )

    @property
    def swapped(self):
        """Whether the file byte order differs from the one of this host"""
        return self.byte_order != ENDIAN_NATIVE

    @property
    def nanosecond_resolution(self):
        return self.timestamp_resolution is TimestampResolution.NANOSECOND

    @property
    def link_type_description(self):
        try:
            return link_types.LINKTYPE_DESCRIPTIONS[self.linktype]
        except KeyError:
            return "Unknown link type: 0x{0:04x}".format(self.linktype)


class Packet(namedtuple("Packet", ["timestamp", "data", "orig_len"])):
    """
    A single captured packet.

    :param timestamp: capture time; see :py:class:`TimestampFormat`
    :param data: the captured bytes
    :param orig_len: length of the packet on the wire; defaults to the
        length of ``data``. It is larger than ``len(data)`` when the
        capture truncated the packet.
    """

    __slots__ = ()

    def __new__(cls, timestamp, data, orig_len=None):
        # bytes(5) would silently build five zero bytes
        if isinstance(data, int):
            raise TypeError("Packet data must be bytes-like, not int")
        data = bytes(data)
        if orig_len is None:
            orig_len = len(data)
        return super(Packet, cls).__new__(cls, timestamp, data, orig_len)

    @property
    def captured_len(self):
        return len(self.data)

    @property
    def truncated(self):
        return self.orig_len > len(self.data)
