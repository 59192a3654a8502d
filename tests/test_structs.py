"""
Test encoding and decoding of the file header and packet records
"""

import io
import struct
from decimal import Decimal

import pytest

from pcapcodec.constants import ENDIAN_BIG, ENDIAN_LITTLE
from pcapcodec.exceptions import (
    InvalidMagicNumber,
    PcapDumpError,
    PcapStrictnessWarning,
    RecordTooLarge,
    StreamEmpty,
    TruncatedFile,
    TruncatedRecord,
    UnsupportedVersion,
)
from pcapcodec.records import FileOptions, Packet, TimestampFormat, TimestampResolution
from pcapcodec.structs import (
    decode_file_header,
    detect_magic,
    encode_file_header,
    read_bytes,
    read_file_header,
    read_record,
    write_record,
)

HEADER_BE = (
    b"\xa1\xb2\xc3\xd4"  # magic
    b"\x00\x02\x00\x04"  # version 2.4
    b"\x00\x00\x00\x00"  # thiszone
    b"\x00\x00\x00\x00"  # sigfigs
    b"\x00\x00\xff\xff"  # snaplen
    b"\x00\x00\x00\x01"  # linktype
)

HEADER_LE = (
    b"\xd4\xc3\xb2\xa1"
    b"\x02\x00\x04\x00"
    b"\x00\x00\x00\x00"
    b"\x00\x00\x00\x00"
    b"\xff\xff\x00\x00"
    b"\x01\x00\x00\x00"
)


class ChunkedStream(object):
    """Stream returning at most ``chunk`` bytes per read, like a pipe"""

    def __init__(self, data, chunk=3):
        self._fp = io.BytesIO(data)
        self._chunk = chunk

    def read(self, size=-1):
        return self._fp.read(min(size, self._chunk))


def test_read_bytes():
    assert read_bytes(io.BytesIO(b"ABCDextra"), 4) == b"ABCD"
    assert read_bytes(io.BytesIO(b""), 0) == b""


def test_read_bytes_empty_stream():
    with pytest.raises(StreamEmpty):
        read_bytes(io.BytesIO(b""), 4)


def test_read_bytes_truncated_stream():
    with pytest.raises(TruncatedFile):
        read_bytes(io.BytesIO(b"AB"), 4)


def test_read_bytes_short_reads():
    assert read_bytes(ChunkedStream(b"0123456789"), 10) == b"0123456789"
    with pytest.raises(TruncatedFile):
        read_bytes(ChunkedStream(b"0123456"), 10)


@pytest.mark.parametrize(
    "magic,expected",
    [
        (b"\xa1\xb2\xc3\xd4", (ENDIAN_BIG, TimestampResolution.MICROSECOND)),
        (b"\xd4\xc3\xb2\xa1", (ENDIAN_LITTLE, TimestampResolution.MICROSECOND)),
        (b"\xa1\xb2\x3c\x4d", (ENDIAN_BIG, TimestampResolution.NANOSECOND)),
        (b"\x4d\x3c\xb2\xa1", (ENDIAN_LITTLE, TimestampResolution.NANOSECOND)),
    ],
)
def test_detect_magic(magic, expected):
    assert detect_magic(magic) == expected


def test_decode_file_header_big_endian():
    options = decode_file_header(HEADER_BE)
    assert options.byte_order == ENDIAN_BIG
    assert options.timestamp_resolution is TimestampResolution.MICROSECOND
    assert options.snaplen == 65535
    assert options.linktype == 1
    assert options.time_zone_offset == 0
    assert options.timestamp_accuracy == 0


def test_decode_file_header_little_endian():
    options = decode_file_header(HEADER_LE)
    assert options.byte_order == ENDIAN_LITTLE
    assert options == decode_file_header(HEADER_BE)._replace(byte_order=ENDIAN_LITTLE)


def test_decode_file_header_signed_zone():
    data = HEADER_BE[:8] + struct.pack(">i", -3600) + HEADER_BE[12:]
    assert decode_file_header(data).time_zone_offset == -3600


def test_decode_file_header_is_idempotent():
    data = bytearray(HEADER_LE)
    first = decode_file_header(data)
    second = decode_file_header(data)
    assert first == second
    assert bytes(data) == HEADER_LE


def test_decode_file_header_bad_magic():
    with pytest.raises(InvalidMagicNumber):
        decode_file_header(b"\x0a\x0d\x0d\x0a" + HEADER_BE[4:])


@pytest.mark.parametrize("version", [b"\x00\x02\x00\x03", b"\x00\x01\x00\x04"])
def test_decode_file_header_unsupported_version(version):
    with pytest.raises(UnsupportedVersion):
        decode_file_header(HEADER_BE[:4] + version + HEADER_BE[8:])


def test_decode_file_header_truncated():
    with pytest.raises(TruncatedFile):
        decode_file_header(HEADER_BE[:20])


def test_read_file_header():
    stream = io.BytesIO(HEADER_BE + b"rest")
    assert read_file_header(stream) == decode_file_header(HEADER_BE)
    assert stream.read() == b"rest"


def test_read_file_header_empty_stream():
    with pytest.raises(TruncatedFile):
        read_file_header(io.BytesIO(b""))


def test_encode_file_header():
    options = FileOptions(linktype=1, snaplen=65535, byte_order=">")
    assert encode_file_header(options) == HEADER_BE
    assert encode_file_header(options._replace(byte_order="<")) == HEADER_LE


@pytest.mark.parametrize("byte_order", ["<", ">"])
@pytest.mark.parametrize("resolution", list(TimestampResolution))
def test_file_header_round_trip(byte_order, resolution):
    options = FileOptions(
        linktype=127,
        snaplen=262144,
        byte_order=byte_order,
        timestamp_resolution=resolution,
        time_zone_offset=-7200,
        timestamp_accuracy=3,
    )
    data = encode_file_header(options)
    assert len(data) == 24
    assert decode_file_header(data) == options


def test_encode_file_header_out_of_range():
    with pytest.raises(PcapDumpError):
        encode_file_header(FileOptions(snaplen=-1))
    with pytest.raises(PcapDumpError):
        encode_file_header(FileOptions(linktype=2 ** 32))


def _record(byte_order, sec, frac, incl_len, orig_len, data=b""):
    return struct.pack(byte_order + "IIII", sec, frac, incl_len, orig_len) + data


@pytest.mark.parametrize("byte_order", ["<", ">"])
def test_read_record(byte_order):
    options = FileOptions(byte_order=byte_order)
    stream = io.BytesIO(_record(byte_order, 1, 500000, 2, 60, b"\xde\xad"))

    packet = read_record(stream, options)
    assert packet.timestamp == Decimal("1.5")
    assert packet.data == b"\xde\xad"
    assert packet.orig_len == 60

    with pytest.raises(StreamEmpty):
        read_record(stream, options)


def test_read_record_nanoseconds():
    options = FileOptions(
        byte_order="<", timestamp_resolution=TimestampResolution.NANOSECOND
    )
    data = _record("<", 1600000000, 123456789, 1, 1, b"x")

    packet = read_record(io.BytesIO(data), options)
    assert packet.timestamp == Decimal("1600000000.123456789")

    packet = read_record(io.BytesIO(data), options, TimestampFormat.PAIR)
    assert packet.timestamp == (1600000000, 123456789)


def test_read_record_empty_payload():
    options = FileOptions(byte_order="<")
    packet = read_record(io.BytesIO(_record("<", 0, 0, 0, 0)), options)
    assert packet.data == b""
    assert packet.orig_len == 0


def test_read_record_truncated_header():
    options = FileOptions(byte_order="<")
    with pytest.raises(TruncatedRecord):
        read_record(io.BytesIO(_record("<", 1, 0, 4, 4)[:10]), options)


@pytest.mark.parametrize("available", [0, 40])
def test_read_record_truncated_payload(available):
    options = FileOptions(byte_order="<")
    data = _record("<", 1, 0, 100, 100, b"\x00" * available)
    with pytest.raises(TruncatedRecord):
        read_record(io.BytesIO(data), options)


def test_read_record_too_large():
    options = FileOptions(byte_order=">")
    with pytest.raises(RecordTooLarge):
        read_record(io.BytesIO(_record(">", 0, 0, 0xFFFFFFFF, 0xFFFFFFFF)), options)
    with pytest.raises(RecordTooLarge):
        read_record(
            io.BytesIO(_record(">", 0, 0, 11, 11, b"A" * 11)),
            options,
            max_record_size=10,
        )


def test_read_record_fraction_out_of_range():
    options = FileOptions(byte_order="<")
    data = _record("<", 1, 1500000, 0, 0)

    with pytest.warns(PcapStrictnessWarning, match="out of range"):
        packet = read_record(io.BytesIO(data), options)
    assert packet.timestamp == Decimal("2.5")

    with pytest.warns(PcapStrictnessWarning, match="out of range"):
        packet = read_record(io.BytesIO(data), options, TimestampFormat.PAIR)
    assert packet.timestamp == (1, 1500000)


def test_read_record_over_snaplen():
    options = FileOptions(byte_order="<", snaplen=4)
    with pytest.warns(PcapStrictnessWarning, match="exceeds snaplen"):
        packet = read_record(io.BytesIO(_record("<", 0, 0, 6, 6, b"abcdef")), options)
    assert packet.data == b"abcdef"


def test_read_record_orig_len_too_small():
    options = FileOptions(byte_order="<")
    with pytest.warns(PcapStrictnessWarning, match="less than captured"):
        packet = read_record(io.BytesIO(_record("<", 0, 0, 6, 2, b"abcdef")), options)
    assert packet.orig_len == 2


def test_write_record():
    options = FileOptions(byte_order=">")
    stream = io.BytesIO()
    write_record(stream, Packet(timestamp=Decimal("1.5"), data=b"\xde\xad"), options)
    assert stream.getvalue() == (
        b"\x00\x00\x00\x01"
        b"\x00\x07\xa1\x20"  # 500000
        b"\x00\x00\x00\x02"
        b"\x00\x00\x00\x02"
        b"\xde\xad"
    )


def test_write_record_nanoseconds():
    options = FileOptions(
        byte_order="<", timestamp_resolution=TimestampResolution.NANOSECOND
    )
    stream = io.BytesIO()
    write_record(stream, Packet(Decimal("10.000000001"), b"", orig_len=64), options)
    assert stream.getvalue() == _record("<", 10, 1, 0, 64)


def test_write_record_out_of_range():
    options = FileOptions(byte_order="<")
    stream = io.BytesIO()
    with pytest.raises(PcapDumpError):
        write_record(stream, Packet(-1, b"data"), options)
    with pytest.raises(PcapDumpError):
        write_record(stream, Packet(2 ** 32, b"data"), options)
    # Nothing must have been written
    assert stream.getvalue() == b""
