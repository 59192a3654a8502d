import io
import logging
from typing import Protocol, runtime_checkable

from pcapcodec import strictness as strictness
from pcapcodec.exceptions import HeaderMismatch, SnaplenExceeded
from pcapcodec.records import FileOptions, Packet
from pcapcodec.structs import read_file_header, write_file_header, write_record

logger = logging.getLogger(__name__)

# Header fields which must be identical to safely append to a file
APPEND_CHECKED_FIELDS = ("linktype", "snaplen", "byte_order", "timestamp_resolution")


@runtime_checkable
class AppendableStream(Protocol):
    """A stream that can be read from, written to, and repositioned"""

    def read(self, size=-1):
        ...

    def write(self, data):
        ...

    def seek(self, offset, whence=io.SEEK_SET):
        ...

    def tell(self):
        ...


class FileWriter(object):
    """
    pcap file writer.
    """

    __slots__ = [
        "stream",
        "options",
        "packets_written",
    ]

    def __init__(self, stream, options=None, write_header=True):
        """
        Start writing a new pcap file to the given stream. Writes the
        file header immediately, unless ``write_header`` is false.

        To add packets to an existing file, use :py:meth:`append` instead.

        :param stream:
            a file-like object to which to write the data.

        :param options:
            a :py:class:`pcapcodec.records.FileOptions` describing the file;
            defaults to Ethernet packets, maximum snaplen, host byte order
            and microsecond timestamps.

        :param write_header:
            whether to write the file header; pass ``False`` when the stream
            is already positioned after a compatible header.
        """
        if options is None:
            options = FileOptions()
        if not isinstance(options, FileOptions):
            raise TypeError("not a FileOptions")
        self.stream = stream
        self.options = options
        self.packets_written = 0
        if write_header:
            logger.debug("Writing file header: %r", options)
            write_file_header(stream, options)

    @classmethod
    def append(cls, stream, options):
        """
        Append packets to a stream that already contains a pcap file.

        The existing file header is read back and compared with ``options``;
        link type, snaplen, byte order and timestamp resolution must match
        exactly. On success the stream is moved at its end, and the returned
        writer is bound to the options read from the file.

        :param stream:
            an :py:class:`AppendableStream`, for example a file opened
            in ``'r+b'`` mode.

        :param options:
            the :py:class:`pcapcodec.records.FileOptions` the caller
            intends to write with.

        :raises: :py:exc:`~pcapcodec.exceptions.HeaderMismatch` naming the
            first mismatching field; nothing is written in that case.
        """
        if not isinstance(stream, AppendableStream):
            raise TypeError("appending requires a readable, writable, seekable stream")

        stream.seek(0)
        existing = read_file_header(stream)
        for field in APPEND_CHECKED_FIELDS:
            expected = getattr(options, field)
            found = getattr(existing, field)
            if expected != found:
                raise HeaderMismatch(field, expected, found)

        end = stream.seek(0, io.SEEK_END)
        logger.debug("Appending to existing file at offset %s", end)
        return cls(stream, existing, write_header=False)

    @classmethod
    def append_unchecked(cls, stream, options):
        """
        Append packets to a stream, trusting the caller that it is already
        positioned at the end of a pcap file written with ``options``.

        .. warning::
            Nothing is checked: if the existing file was written with
            different options (eg. by another program, or on a machine with
            a different byte order) the resulting file will be corrupted.
            Only use this on files written by this library on the same host,
            when the cost of :py:meth:`append` matters.
        """
        return cls(stream, options, write_header=False)

    @property
    def snaplen(self):
        return self.options.snaplen

    def write(self, packet):
        """
        Write the given packet to this stream.

        :param packet:
            a :py:class:`pcapcodec.records.Packet`. Its timestamp is
            converted to the file resolution.

        :raises: :py:exc:`~pcapcodec.exceptions.SnaplenExceeded` if the
            packet holds more data than the file snaplen allows. When
            strictness is set to ``FIX``, the data is truncated instead.
        """
        if not isinstance(packet, Packet):
            raise TypeError("not a Packet")

        snaplen = self.options.snaplen
        if len(packet.data) > snaplen:
            if not strictness.should_fix():
                raise SnaplenExceeded(
                    "Packet has {0} bytes of data, snaplen is {1}".format(
                        len(packet.data), snaplen
                    )
                )
            strictness.warn(
                "Packet of {0} bytes truncated to snaplen {1}".format(
                    len(packet.data), snaplen
                )
            )
            packet = Packet(
                timestamp=packet.timestamp,
                data=packet.data[:snaplen],
                orig_len=max(packet.orig_len, len(packet.data)),
            )
        if packet.orig_len < len(packet.data):
            strictness.warn(
                "Original length {0} is less than captured length {1}".format(
                    packet.orig_len, len(packet.data)
                )
            )

        write_record(self.stream, packet, self.options)
        self.packets_written += 1

    def write_packets(self, packets):
        for packet in packets:
            self.write(packet)

    def flush(self):
        self.stream.flush()

    def close(self):
        self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
