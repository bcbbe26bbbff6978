"""
Unix Epoch Millisecond Conversions

Moves between datetime values and milliseconds elapsed since
1970-01-01T00:00:00.

ASYMMETRY (kept on purpose, callers depend on it):
    datetime_to_epoch_millis converts its input to UTC before measuring
    from the UTC epoch.

    epoch_millis_to_datetime adds milliseconds to a NAIVE epoch and
    returns a naive datetime. It does not convert to local time.

    On a machine whose local zone is UTC the two are exact inverses to
    the millisecond. Elsewhere a naive input shifts by the local offset.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from numbers import Real
from typing import Optional

from convertkit.converters import conversion_failed

EPOCH = datetime(1970, 1, 1, 0, 0, 0)
EPOCH_UTC = datetime(1970, 1, 1, 0, 0, 0, tzinfo=timezone.utc)

_ONE_MILLISECOND = timedelta(milliseconds=1)


def epoch_millis_to_datetime(value: float) -> datetime:
    """
    Return the naive datetime `value` milliseconds after 1970-01-01.

    Accepts any real number, Decimal and Fraction included. Fractional
    milliseconds are kept to microsecond resolution.

    Example:
        epoch_millis_to_datetime(86_400_000) -> datetime(1970, 1, 2, 0, 0)
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise conversion_failed(value, "datetime", "epoch milliseconds must be a number")
    try:
        millis = value if isinstance(value, int) else float(value)
        return EPOCH + timedelta(milliseconds=millis)
    except (OverflowError, ValueError) as e:
        raise conversion_failed(value, "datetime", "outside the supported date range") from e


def datetime_to_epoch_millis(value: datetime) -> float:
    """
    Return milliseconds between 1970-01-01T00:00:00Z and value.

    Naive values are read as local time, aware values use their own
    offset. The result is a float and may carry a fractional part.
    """
    if not isinstance(value, datetime):
        raise conversion_failed(value, "epoch milliseconds", "expected a datetime")
    try:
        utc_value = value.astimezone(timezone.utc)
    except (OverflowError, ValueError, OSError) as e:
        raise conversion_failed(value, "epoch milliseconds", "cannot be expressed in UTC") from e
    return (utc_value - EPOCH_UTC) / _ONE_MILLISECOND


def epoch_millis_to_datetime_null(value: Optional[float]) -> Optional[datetime]:
    if value is None:
        return None
    return epoch_millis_to_datetime(value)


def datetime_to_epoch_millis_null(value: Optional[datetime]) -> Optional[float]:
    if value is None:
        return None
    return datetime_to_epoch_millis(value)


__all__ = [
    "EPOCH",
    "EPOCH_UTC",
    "epoch_millis_to_datetime",
    "datetime_to_epoch_millis",
    "epoch_millis_to_datetime_null",
    "datetime_to_epoch_millis_null",
]
