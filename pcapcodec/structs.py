"""
Module providing the encoding and decoding of the pcap file header
and of the packet records following it.
"""

import logging
import struct

from pcapcodec import strictness as strictness
from pcapcodec.constants import (
    ENDIAN_BIG,
    ENDIAN_LITTLE,
    FILE_HEADER_FORMAT,
    FILE_HEADER_SIZE,
    MAGIC_MICROSECONDS,
    MAGIC_MICROSECONDS_SWAPPED,
    MAGIC_NANOSECONDS,
    MAGIC_NANOSECONDS_SWAPPED,
    MAX_RECORD_SIZE,
    RECORD_HEADER_FORMAT,
    RECORD_HEADER_SIZE,
    VERSION_MAJOR,
    VERSION_MINOR,
)
from pcapcodec.exceptions import (
    InvalidMagicNumber,
    PcapDumpError,
    RecordTooLarge,
    StreamEmpty,
    TruncatedFile,
    TruncatedRecord,
    UnsupportedVersion,
)
from pcapcodec.records import (
    FileOptions,
    Packet,
    TimestampFormat,
    TimestampResolution,
)
from pcapcodec.utils import join_timestamp, split_timestamp

logger = logging.getLogger(__name__)

_MAGIC_RESOLUTIONS = {
    MAGIC_MICROSECONDS: TimestampResolution.MICROSECOND,
    MAGIC_NANOSECONDS: TimestampResolution.NANOSECOND,
}
_RESOLUTION_MAGICS = {v: k for k, v in _MAGIC_RESOLUTIONS.items()}


def read_bytes(stream, size):
    """
    Read the given amount of raw bytes from a stream.

    Short reads (as returned by pipes or sockets) are retried until
    either ``size`` bytes were collected or the stream is exhausted.

    :param stream: the stream from which to read data
    :param size: the size to read, in bytes
    :returns: the read data
    :raises: :py:exc:`~pcapcodec.exceptions.StreamEmpty` if zero bytes were read
    :raises: :py:exc:`~pcapcodec.exceptions.TruncatedFile` if 0 < bytes < size
        were read
    """

    if size == 0:
        return b""

    data = stream.read(size)
    if len(data) == 0:
        raise StreamEmpty("Zero bytes read from stream")
    while len(data) < size:
        chunk = stream.read(size - len(data))
        if not chunk:
            raise TruncatedFile(
                "Trying to read {0} bytes, only got {1}".format(size, len(data))
            )
        data += chunk
    return data


def write_bytes(stream, data):
    """
    Write the given raw bytes to a stream.

    :param stream: the stream into which to write data
    :param data: the data to write
    """
    stream.write(data)


def _pack(fmt, endianness, *values):
    try:
        return struct.pack(endianness + fmt, *values)
    except struct.error as e:
        raise PcapDumpError("Cannot encode {0!r}: {1}".format(values, e)) from e


# ------------------------------------------------------------
#   File header
# ------------------------------------------------------------


def detect_magic(data):
    """
    Figure out byte order and timestamp resolution from the magic number.

    :param data: the first four bytes of the file
    :returns: a ``(byte_order, timestamp_resolution)`` tuple
    :raises: :py:exc:`~pcapcodec.exceptions.InvalidMagicNumber`
    """
    magic = struct.unpack(">I", data)[0]  # Default BIG
    if magic in _MAGIC_RESOLUTIONS:
        return ENDIAN_BIG, _MAGIC_RESOLUTIONS[magic]
    magic_le = struct.unpack("<I", data)[0]
    if magic_le in _MAGIC_RESOLUTIONS:
        return ENDIAN_LITTLE, _MAGIC_RESOLUTIONS[magic_le]
    raise InvalidMagicNumber(
        "Wrong magic number: got 0x{0:08X}, expected one of "
        "0x{1:08X}, 0x{2:08X}, 0x{3:08X}, 0x{4:08X}".format(
            magic,
            MAGIC_MICROSECONDS,
            MAGIC_MICROSECONDS_SWAPPED,
            MAGIC_NANOSECONDS,
            MAGIC_NANOSECONDS_SWAPPED,
        )
    )


def decode_file_header(data):
    """
    Decode the 24-byte global file header.

    :param data: the raw header bytes
    :returns: a :py:class:`~pcapcodec.records.FileOptions`
    :raises: :py:exc:`~pcapcodec.exceptions.InvalidMagicNumber` if the magic
        number is not recognized
    :raises: :py:exc:`~pcapcodec.exceptions.UnsupportedVersion` unless the
        header declares version 2.4
    :raises: :py:exc:`~pcapcodec.exceptions.TruncatedFile` if less than 24
        bytes were given
    """
    if len(data) < FILE_HEADER_SIZE:
        raise TruncatedFile(
            "File header is {0} bytes, got only {1}".format(
                FILE_HEADER_SIZE, len(data)
            )
        )

    endianness, resolution = detect_magic(data[:4])
    logger.debug(
        "magic number: %s, byte order %r, %s resolution",
        bytes(data[:4]).hex(),
        endianness,
        resolution.name.lower(),
    )

    (
        _magic,
        version_major,
        version_minor,
        thiszone,
        sigfigs,
        snaplen,
        network,
    ) = struct.unpack(endianness + FILE_HEADER_FORMAT, data[:FILE_HEADER_SIZE])

    if (version_major, version_minor) != (VERSION_MAJOR, VERSION_MINOR):
        raise UnsupportedVersion(
            "Unsupported version {0}.{1}, expected {2}.{3}".format(
                version_major, version_minor, VERSION_MAJOR, VERSION_MINOR
            )
        )

    return FileOptions(
        linktype=network,
        snaplen=snaplen,
        byte_order=endianness,
        timestamp_resolution=resolution,
        time_zone_offset=thiszone,
        timestamp_accuracy=sigfigs,
    )


def encode_file_header(options):
    """
    Encode a :py:class:`~pcapcodec.records.FileOptions` into the 24-byte
    global file header.

    The magic number is picked after the timestamp resolution, and all
    the fields are written in ``options.byte_order``.
    """
    return _pack(
        FILE_HEADER_FORMAT,
        options.byte_order,
        _RESOLUTION_MAGICS[options.timestamp_resolution],
        VERSION_MAJOR,
        VERSION_MINOR,
        options.time_zone_offset,
        options.timestamp_accuracy,
        options.snaplen,
        options.linktype,
    )


def read_file_header(stream):
    """
    Read and decode the file header from the start of a stream.

    :raises: :py:exc:`~pcapcodec.exceptions.TruncatedFile` if the stream
        ends before the header does (or is entirely empty)
    """
    try:
        data = read_bytes(stream, FILE_HEADER_SIZE)
    except StreamEmpty as e:
        raise TruncatedFile("Empty stream, no file header found") from e
    return decode_file_header(data)


def write_file_header(stream, options):
    write_bytes(stream, encode_file_header(options))


# ------------------------------------------------------------
#   Packet records
# ------------------------------------------------------------


def read_record(
    stream,
    options,
    timestamp_format=TimestampFormat.EPOCH,
    max_record_size=MAX_RECORD_SIZE,
):
    """
    Read one packet record from a stream.

    Each record is in the form:

    - 32bit timestamp, seconds
    - 32bit timestamp, fraction (micro or nanoseconds, as per file header)
    - 32bit captured length
    - 32bit original length
    - captured length bytes of packet data

    :param stream: the stream from which to read data
    :param options: the :py:class:`~pcapcodec.records.FileOptions`
        decoded from the file header
    :param timestamp_format: representation of the returned timestamp
    :param max_record_size: refuse records whose captured length is
        greater than this
    :returns: a :py:class:`~pcapcodec.records.Packet`
    :raises: :py:exc:`~pcapcodec.exceptions.StreamEmpty` if the stream is
        exhausted right at the record boundary
    :raises: :py:exc:`~pcapcodec.exceptions.TruncatedRecord` if the stream
        ends in the middle of the record
    :raises: :py:exc:`~pcapcodec.exceptions.RecordTooLarge`
    """
    try:
        header = read_bytes(stream, RECORD_HEADER_SIZE)
    except TruncatedFile as e:
        raise TruncatedRecord("Truncated record header: {0}".format(e)) from e

    ts_sec, ts_frac, incl_len, orig_len = struct.unpack(
        options.byte_order + RECORD_HEADER_FORMAT, header
    )

    if incl_len > max_record_size:
        raise RecordTooLarge(
            "Captured length {0} exceeds the maximum record size {1}".format(
                incl_len, max_record_size
            )
        )

    try:
        data = read_bytes(stream, incl_len)
    except (StreamEmpty, TruncatedFile) as e:
        raise TruncatedRecord(
            "Record declares {0} captured bytes: {1}".format(incl_len, e)
        ) from e

    resolution = options.timestamp_resolution
    if ts_frac >= resolution.per_second:
        strictness.warn(
            "Timestamp fraction {0} out of range for {1} resolution".format(
                ts_frac, resolution.name.lower()
            )
        )
    if incl_len > options.snaplen:
        strictness.warn(
            "Captured length {0} exceeds snaplen {1}".format(incl_len, options.snaplen)
        )
    if orig_len < incl_len:
        strictness.warn(
            "Original length {0} is less than captured length {1}".format(
                orig_len, incl_len
            )
        )

    if timestamp_format is TimestampFormat.PAIR:
        timestamp = (ts_sec, ts_frac)
    else:
        timestamp = join_timestamp(ts_sec, ts_frac, resolution)

    return Packet(timestamp=timestamp, data=data, orig_len=orig_len)


def encode_record_header(packet, options):
    """
    Encode the 16-byte record header for a packet.

    The timestamp is converted to the file resolution, see
    :py:func:`~pcapcodec.utils.split_timestamp`.
    """
    ts_sec, ts_frac = split_timestamp(packet.timestamp, options.timestamp_resolution)
    return _pack(
        RECORD_HEADER_FORMAT,
        options.byte_order,
        ts_sec,
        ts_frac,
        len(packet.data),
        packet.orig_len,
    )


def write_record(stream, packet, options):
    """
    Write a packet record (header, then data verbatim) to a stream.

    No check is made on the packet size; see
    :py:meth:`pcapcodec.writer.FileWriter.write`.
    """
    header = encode_record_header(packet, options)
    write_bytes(stream, header)
    write_bytes(stream, packet.data)
