"""
Scalar Converters

Two families of converters live here:

    Strict (to_int32, to_bool, ...):
        Convert any accepted value, treating None as the type's default
        (0, Decimal(0), False, datetime.min). Anything that cannot be
        represented raises ConversionError.

    Nullable (to_int32_null, to_bool_null, ...):
        Return None for blank input, otherwise delegate to the strict
        converter and propagate its result or error unchanged.

The nullable family is generated from the strict one with or_null(),
so the two cannot drift apart.

IMPORTANT:
    Blank input only short-circuits. A non-blank value that fails to
    convert still raises ConversionError from the nullable sibling.
"""

import functools
import logging
import math
import re
import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Optional

from convertkit.predicates import _DECIMAL_RE, _GUID_RE, is_blank

logger = logging.getLogger(__name__)


class ConversionError(ValueError):
    """Raised when a non-blank value cannot be converted to the requested type."""

    def __init__(self, value: Any, target: str, reason: str = ""):
        self.value = value
        self.target = target
        self.reason = reason
        message = f"Cannot convert {value!r} to {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def conversion_failed(value: Any, target: str, reason: str = "") -> ConversionError:
    """Log a failed conversion and return the error for the caller to raise."""
    logger.debug("Conversion of %r to %s failed: %s", value, target, reason or "unsupported value")
    return ConversionError(value, target, reason)


def or_null(converter: Callable) -> Callable:
    """
    Build the blank-tolerant sibling of a converter.

    The returned function is named "<converter>_null" and returns None
    for blank input. Every other argument is passed through untouched.
    """

    @functools.wraps(converter)
    def wrapper(value, *args, **kwargs):
        if is_blank(value):
            return None
        return converter(value, *args, **kwargs)

    wrapper.__name__ = f"{converter.__name__}_null"
    wrapper.__qualname__ = wrapper.__name__
    wrapper.__doc__ = f"Like {converter.__name__}(), but return None for blank input."
    return wrapper


# (minimum, maximum) for each integral target
INTEGRAL_RANGES = {
    "int16": (-(2 ** 15), 2 ** 15 - 1),
    "int32": (-(2 ** 31), 2 ** 31 - 1),
    "int64": (-(2 ** 63), 2 ** 63 - 1),
    "byte": (0, 255),
}

_SIGNED_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

DATETIME_FORMATS = (
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%d.%m.%Y %H:%M:%S",
    "%d.%m.%Y",
)


def _to_integral(value: Any, target: str) -> int:
    """
    Shared conversion for the integral targets.

    Floats and Decimals are rounded half-to-even before the range check,
    strings must be an optionally signed run of ASCII digits.
    """
    minimum, maximum = INTEGRAL_RANGES[target]

    if value is None:
        return 0

    if isinstance(value, bool):
        result = int(value)
    elif isinstance(value, int):
        result = value
    elif isinstance(value, (float, Decimal)):
        try:
            result = round(value)
        except (ValueError, ArithmeticError) as e:
            raise conversion_failed(value, target, "not a finite number") from e
    elif isinstance(value, str):
        text = value.strip()
        if _SIGNED_INTEGER_RE.fullmatch(text) is None:
            raise conversion_failed(value, target, "not an integer")
        result = int(text)
    else:
        raise conversion_failed(value, target, f"unsupported type {type(value).__name__}")

    if not minimum <= result <= maximum:
        raise conversion_failed(value, target, f"outside range {minimum}..{maximum}")
    return result


def to_int16(value: Any) -> int:
    return _to_integral(value, "int16")


def to_int32(value: Any) -> int:
    """
    Convert value to a 32-bit integer.

    Examples:
        to_int32("42")   -> 42
        to_int32(" -7 ") -> -7
        to_int32(2.5)    -> 2   (half-to-even)
        to_int32(None)   -> 0
        to_int32("abc")  -> ConversionError
    """
    return _to_integral(value, "int32")


def to_int64(value: Any) -> int:
    return _to_integral(value, "int64")


def to_byte(value: Any) -> int:
    """Convert value to an unsigned byte (0..255)."""
    return _to_integral(value, "byte")


def to_decimal(value: Any) -> Decimal:
    """
    Convert value to Decimal.

    Strings use the invariant number format: optional sign, digits with
    optional ',' thousands groups and an optional '.' fraction.
    Exponents, NaN and infinities are rejected.
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise conversion_failed(value, "decimal", "not a finite number")
        return Decimal(repr(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise conversion_failed(value, "decimal", "not a finite number")
        return value
    if isinstance(value, str):
        text = value.strip()
        if _DECIMAL_RE.fullmatch(text) is None:
            raise conversion_failed(value, "decimal", "not a decimal number")
        return Decimal(text.replace(",", ""))
    raise conversion_failed(value, "decimal", f"unsupported type {type(value).__name__}")


def to_bool(value: Any) -> bool:
    """
    Convert value to bool.

    Numbers are True when non-zero. Strings must read "true" or "false"
    in any letter case, surrounding whitespace ignored.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
        raise conversion_failed(value, "bool", "expected 'true' or 'false'")
    raise conversion_failed(value, "bool", f"unsupported type {type(value).__name__}")


def to_datetime(value: Any) -> datetime:
    """
    Convert value to datetime.

    Strings are tried as ISO-8601 first, then against DATETIME_FORMATS
    in order. None becomes datetime.min.
    """
    if value is None:
        return datetime.min
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise conversion_failed(value, "datetime", f"unsupported type {type(value).__name__}")

    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise conversion_failed(value, "datetime", "unrecognised date format")


def to_guid(value: Any) -> uuid.UUID:
    """Parse the textual form of value as a GUID (N, D, B or P format)."""
    if isinstance(value, uuid.UUID):
        return value
    if value is None:
        raise conversion_failed(value, "guid", "value is None")
    text = str(value).strip()
    if _GUID_RE.fullmatch(text) is None:
        raise conversion_failed(value, "guid", "malformed GUID")
    return uuid.UUID(text.strip("{}()"))


def to_byte_array(value: Any) -> bytes:
    """Return value as bytes. Only byte-sequence values are accepted."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise conversion_failed(value, "bytes", "not a byte sequence")


def to_string_null(value: Any) -> Optional[str]:
    """Return str(value), or None for blank input."""
    if is_blank(value):
        return None
    return str(value)


to_int16_null = or_null(to_int16)
to_int32_null = or_null(to_int32)
to_int64_null = or_null(to_int64)
to_decimal_null = or_null(to_decimal)
to_byte_null = or_null(to_byte)
to_bool_null = or_null(to_bool)
to_datetime_null = or_null(to_datetime)
to_guid_null = or_null(to_guid)
to_byte_array_null = or_null(to_byte_array)


__all__ = [
    "ConversionError",
    "or_null",
    "to_int16",
    "to_int32",
    "to_int64",
    "to_decimal",
    "to_byte",
    "to_bool",
    "to_datetime",
    "to_guid",
    "to_byte_array",
    "to_string_null",
    "to_int16_null",
    "to_int32_null",
    "to_int64_null",
    "to_decimal_null",
    "to_byte_null",
    "to_bool_null",
    "to_datetime_null",
    "to_guid_null",
    "to_byte_array_null",
]
