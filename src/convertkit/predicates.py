"""
Blank and Type Predicates

Every helper in convertkit starts from the same question: is this value
blank? A value is blank when it is None, or when it is a string that is
empty or holds only whitespace.

The type predicates answer "could this value be converted?" without
converting it. They are the validation step callers run before a strict
converter when a failure must be avoided.

RULE:
    Predicates never raise. Anything that does not satisfy a predicate,
    including blank input, simply returns False.
"""

import re
import unicodedata
from typing import Any


_WHITE_SPACE_CONTROLS = frozenset("\t\n\x0b\x0c\r\x85")

_INTEGER_RE = re.compile(r"[0-9]+")

# Invariant number format: optional sign, digits with optional ',' thousands
# groups, optional '.' fraction. No exponent.
_DECIMAL_RE = re.compile(r"[+-]?(?=\.?[0-9])(?:[0-9]{1,3}(?:,[0-9]{3})+|[0-9]*)(?:\.[0-9]*)?")

_GUID_D = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
_GUID_RE = re.compile(
    rf"[0-9a-f]{{32}}|{_GUID_D}|\{{{_GUID_D}\}}|\({_GUID_D}\)",
    re.IGNORECASE,
)


def is_blank(value: Any) -> bool:
    """
    Return True if value is None or a whitespace-only string.

    Only str values are inspected for whitespace. Other objects are
    never blank, even when their str() happens to be empty.

    Whitespace means Unicode space, line and paragraph separators plus
    the controls \\t \\n \\v \\f \\r and \\x85. The information separators
    \\x1c-\\x1f are not whitespace here, although str.isspace() says so.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return all(_is_white_space(ch) for ch in value)
    return False


def _is_white_space(ch: str) -> bool:
    return ch in _WHITE_SPACE_CONTROLS or unicodedata.category(ch) in ("Zs", "Zl", "Zp")


def is_not_blank(value: Any) -> bool:
    return not is_blank(value)


def is_integer(value: Any) -> bool:
    """
    Return True if the textual form of value is ASCII digits only.

    Examples:
        is_integer("123")  -> True
        is_integer("12.3") -> False
        is_integer("-5")   -> False  (no sign support)
    """
    if is_blank(value):
        return False
    return _INTEGER_RE.fullmatch(str(value)) is not None


def is_integer_or_decimal(value: Any) -> bool:
    """Return True if value is an integer or parses as an invariant decimal."""
    if is_blank(value):
        return False
    if is_integer(value):
        return True
    return _DECIMAL_RE.fullmatch(str(value).strip()) is not None


def is_list(value: Any) -> bool:
    """Return True for list instances. Tuples and other iterables are not lists."""
    return isinstance(value, list)


def is_dictionary(value: Any) -> bool:
    """Return True for dict instances (including OrderedDict and defaultdict)."""
    return isinstance(value, dict)


def is_guid(value: Any) -> bool:
    """
    Return True if the textual form of value is a GUID.

    Accepted formats:
        N: 00000000000000000000000000000000
        D: 00000000-0000-0000-0000-000000000000
        B: {00000000-0000-0000-0000-000000000000}
        P: (00000000-0000-0000-0000-000000000000)
    """
    if is_blank(value):
        return False
    return _GUID_RE.fullmatch(str(value).strip()) is not None


__all__ = [
    "is_blank",
    "is_not_blank",
    "is_integer",
    "is_integer_or_decimal",
    "is_list",
    "is_dictionary",
    "is_guid",
]
