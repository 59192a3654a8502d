import logging
from enum import Enum

from pcapcodec.constants import MAX_RECORD_SIZE
from pcapcodec.exceptions import StreamEmpty
from pcapcodec.records import TimestampFormat
from pcapcodec.structs import read_file_header, read_record

logger = logging.getLogger(__name__)


class ScannerState(Enum):
    READY = "ready"  # At a record boundary, or at end of input
    EXHAUSTED = "exhausted"  # End of input reached
    FAILED = "failed"  # A decoding error was raised


class FileScanner(object):
    """
    pcap file scanner.

    The file header is read as soon as the scanner is created; the
    resulting :py:class:`~pcapcodec.records.FileOptions` are available
    as :py:attr:`options`. The scanner can then be iterated (once) to get
    the packets out of the stream, in file order.

    Example usage:

        .. code-block:: python

            from pcapcodec import FileScanner

            with open('/tmp/mycapture.pcap', 'rb') as fp:
                scanner = FileScanner(fp)
                for packet in scanner:
                    pass  # do something with the packet...

    Iteration stops at the end of the stream. If a record cannot be
    decoded, the exception is raised from the iteration and the scanner
    will not read anything else from the stream.

    :param stream:
        a file-like object from which to read the data.
        If you need to parse data from some string you have entirely in-memory,
        just wrap it in a :py:class:`io.BytesIO` object.

    :param timestamp_format:
        a :py:class:`~pcapcodec.records.TimestampFormat` selecting how
        packet timestamps are returned.

    :param max_record_size:
        records with a captured length above this are considered corrupted,
        and raise :py:exc:`~pcapcodec.exceptions.RecordTooLarge`.
    """

    __slots__ = [
        "stream",
        "options",
        "timestamp_format",
        "max_record_size",
        "state",
        "packets_read",
    ]

    def __init__(
        self,
        stream,
        timestamp_format=TimestampFormat.EPOCH,
        max_record_size=MAX_RECORD_SIZE,
    ):
        self.stream = stream
        self.timestamp_format = TimestampFormat(timestamp_format)
        self.max_record_size = max_record_size
        self.packets_read = 0
        self.options = read_file_header(stream)
        self.state = ScannerState.READY

    @property
    def linktype(self):
        return self.options.linktype

    @property
    def snaplen(self):
        return self.options.snaplen

    def __iter__(self):
        return self

    def __next__(self):
        packet = self.read_packet()
        if packet is None:
            raise StopIteration
        return packet

    def read_packet(self):
        """
        Read the next packet from the stream.

        :returns: a :py:class:`~pcapcodec.records.Packet`, or ``None`` once
            the end of the stream was reached (or after a failure)
        """
        if self.state is not ScannerState.READY:
            return None

        try:
            packet = read_record(
                self.stream,
                self.options,
                timestamp_format=self.timestamp_format,
                max_record_size=self.max_record_size,
            )
        except StreamEmpty:
            logger.debug("End of stream after %d packets", self.packets_read)
            self.state = ScannerState.EXHAUSTED
            return None
        except Exception:
            self.state = ScannerState.FAILED
            raise

        self.packets_read += 1
        return packet

    def close(self):
        self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
