from decimal import ROUND_FLOOR, ROUND_HALF_EVEN, Decimal
from typing import Tuple, Union

from pcapcodec.exceptions import PcapDumpError

_Timestamp = Union[Decimal, int, float, Tuple[int, int]]


def join_timestamp(seconds, fraction, resolution):
    # type: (int, int, TimestampResolution) -> Decimal
    """
    Build an absolute timestamp (seconds since the epoch) out of the
    two timestamp fields of a record header.

    The result is an exact :py:class:`~decimal.Decimal`, so nanosecond
    timestamps survive the conversion. The fraction is not range-checked:
    a fraction of one second or more simply carries into the seconds.
    """
    return Decimal(seconds) + Decimal(fraction).scaleb(-resolution.digits)


def split_timestamp(timestamp, resolution):
    # type: (_Timestamp, TimestampResolution) -> Tuple[int, int]
    """
    Split a timestamp into ``(seconds, fraction)``, the fraction being
    expressed in units of the given resolution.

    :param timestamp: either seconds since the epoch (``int``, ``float``
        or :py:class:`~decimal.Decimal`), or an already split
        ``(seconds, fraction)`` pair, which is returned as-is.
    :param resolution: a :py:class:`~pcapcodec.records.TimestampResolution`
    :raises: :py:exc:`~pcapcodec.exceptions.PcapDumpError` if the pair
        fraction is out of range for the resolution, or the timestamp is
        not a finite number
    """
    if isinstance(timestamp, tuple):
        seconds, fraction = timestamp
        if not 0 <= fraction < resolution.per_second:
            raise PcapDumpError(
                "Timestamp fraction {0} out of range for {1} resolution".format(
                    fraction, resolution.name.lower()
                )
            )
        return int(seconds), int(fraction)

    # Decimal(float) is exact, no need to go through str()
    value = Decimal(timestamp)
    if not value.is_finite():
        raise PcapDumpError("Cannot encode timestamp {0!r}".format(timestamp))
    seconds = int(value.to_integral_value(rounding=ROUND_FLOOR))
    fraction = int(
        (value - seconds)
        .scaleb(resolution.digits)
        .to_integral_value(rounding=ROUND_HALF_EVEN)
    )
    if fraction >= resolution.per_second:
        # Rounded up to the next full second
        seconds += 1
        fraction -= resolution.per_second
    return seconds, fraction
