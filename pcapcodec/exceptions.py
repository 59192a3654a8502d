class PcapException(Exception):
    """Base for all the pcap exceptions"""

    pass


class PcapWarning(Warning):
    """Base for all the pcap warnings"""

    pass


class PcapLoadError(PcapException):
    """Indicate an error while loading a pcap file"""

    pass


class PcapDumpError(PcapException):
    """Indicate an error while writing a pcap file"""

    pass


class PcapStrictnessWarning(PcapWarning):
    """Indicate a condition about poorly formed pcap files"""


class StreamEmpty(PcapLoadError):  # End of stream
    """
    Exception indicating that the end of the stream was reached
    and exactly zero bytes were read; when it happens at a record
    boundary it simply means there are no more packets to read.
    """

    pass


class TruncatedFile(PcapLoadError):
    """
    Exception used to indicate that not all the required bytes
    could be read before stream end, but the read length was
    non-zero, indicating a possibly truncated stream.
    """

    pass


class TruncatedRecord(TruncatedFile):
    """
    The stream ended in the middle of a packet record, either inside
    the record header or before all the captured bytes could be read.
    """

    pass


class InvalidMagicNumber(PcapLoadError):
    """
    The first four bytes of the stream are none of the recognized
    pcap magic numbers.
    """

    pass


class UnsupportedVersion(PcapLoadError):
    """The file header carries a version other than 2.4"""

    pass


class RecordTooLarge(PcapLoadError):
    """
    A record header declares a captured length above the sanity
    ceiling; most likely the record header is corrupted.
    """

    pass


class SnaplenExceeded(PcapDumpError):
    """Attempt to write a packet with more data than the file snaplen"""

    pass


class HeaderMismatch(PcapDumpError):
    """
    The header of a file we are about to append to does not match
    the options the caller wants to write with.

    :ivar field: name of the first mismatching field
    :ivar expected: value the caller declared
    :ivar found: value read from the existing file
    """

    def __init__(self, field, expected=None, found=None):
        self.field = field
        self.expected = expected
        self.found = found
        super(HeaderMismatch, self).__init__(field)

    def __str__(self):
        return "Mismatching {0}: expected {1!r}, file has {2!r}".format(
            self.field, self.expected, self.found
        )
