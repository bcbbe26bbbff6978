"""
convertkit

Null-safe predicates and conversions for single values.

CONTRACT:
---------
A value is BLANK when it is None, or a string that is empty or
whitespace-only. Every "_null" function returns None for blank input
before attempting any conversion.

Non-blank values that cannot be converted raise ConversionError.
Predicates (is_*) never raise.

Every function is pure and keeps no state between calls.
"""

from convertkit.converters import (
    ConversionError,
    to_bool,
    to_bool_null,
    to_byte,
    to_byte_array,
    to_byte_array_null,
    to_byte_null,
    to_datetime,
    to_datetime_null,
    to_decimal,
    to_decimal_null,
    to_guid,
    to_guid_null,
    to_int16,
    to_int16_null,
    to_int32,
    to_int32_null,
    to_int64,
    to_int64_null,
    to_string_null,
)
from convertkit.epoch import (
    datetime_to_epoch_millis,
    datetime_to_epoch_millis_null,
    epoch_millis_to_datetime,
    epoch_millis_to_datetime_null,
)
from convertkit.hexbytes import bytes_to_hex_with_separator, hex_with_separator_to_bytes
from convertkit.predicates import (
    is_blank,
    is_dictionary,
    is_guid,
    is_integer,
    is_integer_or_decimal,
    is_list,
    is_not_blank,
)
from convertkit.text import (
    join_with_delimiter,
    to_lower_null,
    to_md5,
    to_title_case,
    to_upper_null,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "is_blank",
    "is_not_blank",
    "is_integer",
    "is_integer_or_decimal",
    "is_list",
    "is_dictionary",
    "is_guid",
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
    "epoch_millis_to_datetime",
    "datetime_to_epoch_millis",
    "epoch_millis_to_datetime_null",
    "datetime_to_epoch_millis_null",
    "join_with_delimiter",
    "hex_with_separator_to_bytes",
    "bytes_to_hex_with_separator",
    "to_title_case",
    "to_upper_null",
    "to_lower_null",
    "to_md5",
]
