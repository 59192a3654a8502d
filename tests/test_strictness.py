import io
import struct
import warnings

import pytest

from pcapcodec import FileWriter, Packet
from pcapcodec.exceptions import PcapStrictnessWarning, SnaplenExceeded
from pcapcodec.records import FileOptions
from pcapcodec.strictness import Strictness, should_fix
from pcapcodec.structs import read_record

# Fraction out of range, captured length over snaplen and above orig_len
QUESTIONABLE_RECORD = struct.pack("<IIII", 1, 2000000, 8, 4) + b"ABCDEFGH"


def test_set_strictness_type(strictness_level):
    with pytest.raises(AssertionError):
        strictness_level(3)


def test_no_warnings_when_disabled(strictness_level):
    strictness_level(Strictness.NONE)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        packet = read_record(
            io.BytesIO(QUESTIONABLE_RECORD), FileOptions(snaplen=4, byte_order="<")
        )
    assert packet.data == b"ABCDEFGH"


@pytest.mark.parametrize("level", [Strictness.WARN, Strictness.FIX, Strictness.FORBID])
def test_warnings_when_reading(strictness_level, level):
    strictness_level(level)
    with pytest.warns(PcapStrictnessWarning) as record:
        read_record(
            io.BytesIO(QUESTIONABLE_RECORD), FileOptions(snaplen=4, byte_order="<")
        )
    assert len(record) == 3


@pytest.mark.parametrize("level", [Strictness.NONE, Strictness.WARN, Strictness.FORBID])
def test_snaplen_only_fixed_in_fix_mode(strictness_level, level):
    strictness_level(level)
    assert not should_fix()
    writer = FileWriter(io.BytesIO(), FileOptions(snaplen=4))
    with pytest.raises(SnaplenExceeded):
        writer.write(Packet(0, b"ABCDEFGH"))