"""
Module for alerting the user when reading or writing pcap data that
isn't strictly valid.
"""

import warnings
from enum import Enum

from pcapcodec.exceptions import PcapStrictnessWarning


class Strictness(Enum):
    NONE = 0  # No warnings, do what you want
    WARN = 1  # Do what you want, but warn of potential issues
    FIX = 2  # Warn of potential issues, fix *if possible* (eg. truncate packets)
    FORBID = 3  # Same as WARN: oversized packets are refused, never truncated


strict_level = Strictness.FORBID


def set_strictness(level):
    assert type(level) is Strictness
    global strict_level
    strict_level = level


def get_strictness():
    return strict_level


def warn(msg):
    "Show a warning with the given message."
    if strict_level.value > Strictness.NONE.value:
        warnings.warn(PcapStrictnessWarning(msg), stacklevel=3)


def should_fix():
    "Helper function for showing code used to fix questionable pcap data."
    return strict_level == Strictness.FIX
