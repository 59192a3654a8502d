#!/usr/bin/env python
"""
Append the packets of one or more pcap files to an existing one.

All the files must share link type, snaplen, byte order and timestamp
resolution with the target file.
"""

import argparse
import logging
import sys

from pcapcodec import FileScanner, FileWriter, TimestampFormat
from pcapcodec.exceptions import HeaderMismatch

logger = logging.getLogger("pcapcodec")
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler(sys.stderr))


def merge(target, sources):
    total = 0
    for path in sources:
        with open(path, "rb") as fp:
            # Keep the raw timestamp fields, no need to convert them back and forth
            scanner = FileScanner(fp, timestamp_format=TimestampFormat.PAIR)
            try:
                writer = FileWriter.append(target, scanner.options)
            except HeaderMismatch as e:
                logger.error("Skipping %s: %s", path, e)
                continue
            writer.write_packets(scanner)
            logger.info("%s: appended %d packets", path, writer.packets_written)
            total += writer.packets_written
    return total


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("target", help="existing pcap file to append to")
    parser.add_argument("sources", nargs="+")
    args = parser.parse_args()

    with open(args.target, "r+b") as target:
        count = merge(target, args.sources)
    logger.info("Appended %d packets in total", count)
