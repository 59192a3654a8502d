#!/usr/bin/env python

import argparse
import logging
import sys
from datetime import datetime, timezone

import pcapcodec

logger = logging.getLogger("pcapcodec")

ENDIANNESS_DESC = {
    "<": "Little endian",
    ">": "Big endian",
}


def setup_logging(debug):
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "\033[1;37;40m  %(levelname)s  \033[0m \033[0;32m%(message)s\033[0m"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def dump_header(options):
    print("Link type:   {0} ({1})".format(options.linktype, options.link_type_description))
    print("Snaplen:     {0}".format(options.snaplen))
    print(
        "Byte order:  {0}{1}".format(
            ENDIANNESS_DESC[options.byte_order], " (swapped)" if options.swapped else ""
        )
    )
    print("Resolution:  {0}".format(options.timestamp_resolution.name.lower()))
    print("Zone offset: {0}".format(options.time_zone_offset))
    print("Accuracy:    {0}".format(options.timestamp_accuracy))


def dump_packets(scanner):
    for num, packet in enumerate(scanner, 1):
        when = datetime.fromtimestamp(float(packet.timestamp), tz=timezone.utc)
        print(
            "{0:>6} {1} {2:>5} bytes{3}".format(
                num,
                when.isoformat(),
                packet.captured_len,
                " (of {0})".format(packet.orig_len) if packet.truncated else "",
            )
        )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Dump a pcap file header and packets")
    parser.add_argument("infile", nargs="?", type=argparse.FileType("rb"))
    parser.add_argument("--debug", action="store_true")
    parser.add_argument(
        "--header-only", action="store_true", help="do not list the packets"
    )
    args = parser.parse_args()
    setup_logging(args.debug)

    infile = args.infile or sys.stdin.buffer
    with pcapcodec.FileScanner(infile) as scanner:
        dump_header(scanner.options)
        if not args.header_only:
            dump_packets(scanner)
