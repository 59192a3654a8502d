#!/usr/bin/env python

import argparse
import time
from decimal import Decimal

from pcapcodec import FileOptions, FileWriter, Packet, TimestampResolution
from pcapcodec.constants.link_types import LINKTYPE_ETHERNET

parser = argparse.ArgumentParser()
parser.add_argument("outfile", type=argparse.FileType("wb"))
parser.add_argument("--count", type=int, default=1)
parser.add_argument("--nanoseconds", action="store_true")
parser.add_argument(
    "--byte-order", choices=["<", ">", "="], default="=", help="struct notation"
)
args = parser.parse_args()

options = FileOptions(
    linktype=LINKTYPE_ETHERNET,
    snaplen=65535,
    byte_order=args.byte_order,
    timestamp_resolution=(
        TimestampResolution.NANOSECOND
        if args.nanoseconds
        else TimestampResolution.MICROSECOND
    ),
)

# FileWriter() immediately writes the file header
writer = FileWriter(args.outfile, options)

# fmt: off
test_pl = (
        0xff, 0xff, 0xff, 0xff, 0xff, 0xff,     # dest MAC
        0x11, 0x22, 0x33, 0xdd, 0xaa, 0x00,     # src MAC
        0x08, 0x00,                             # ethertype (ipv4)
        0x45, 0x00, 0x00, 31,                   # IP start
        0x00, 0x00, 0x00, 0x00,                 # ID+flags
        0xfe, 17,                               # TTL, UDP
        0x00, 0x00,                             # checksum
        127, 0, 0, 1,                           # src IP
        127, 0, 0, 2,                           # dst IP
        0x12, 0x34, 0x56, 0x78,                 # src/dst ports
        0x00, 11,                               # length
        0x00, 0x00,                             # checksum
        0x44, 0x41, 0x50,                       # Payload
)
# fmt: on

now = time.time_ns()
for i in range(args.count):
    # Exact nanoseconds since the epoch; rounded to the file resolution on write
    timestamp = Decimal(now + i * 1000).scaleb(-9)
    writer.write(Packet(timestamp=timestamp, data=bytes(test_pl)))
writer.flush()
