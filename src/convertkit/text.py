"""
String helpers: joining, casing and legacy MD5 hashing.

Every function here returns None for blank input.

HASH COMPATIBILITY:
    to_md5 encodes with Windows code page 1254 (Turkish), not UTF-8.
    Stored hashes were produced that way; switching the encoding would
    silently change the digest of every non-ASCII string.
"""

import hashlib
import warnings
from enum import Enum
from typing import Any, Iterable, Optional

from convertkit import casing
from convertkit.predicates import is_blank

DEFAULT_TITLE_CULTURE = "tr-TR"
LEGACY_HASH_ENCODING = "cp1254"


def _render_item(item: Any) -> str:
    if item is None:
        return ""
    if isinstance(item, Enum):
        return str(item.value)
    return str(item)


def join_with_delimiter(values: Optional[Iterable[Any]], delimiter: str) -> Optional[str]:
    """
    Join the textual form of each value with delimiter.

    Enum members are rendered as their underlying value, so an IntEnum
    contributes its integer code. Returns None for None or an empty
    collection. No trailing delimiter is produced.

    Example:
        join_with_delimiter([1, 2, 3], ",") -> "1,2,3"
    """
    if values is None:
        return None
    items = list(values)
    if not items:
        return None
    return delimiter.join(_render_item(item) for item in items)


def to_title_case(value: Optional[str], culture: str = DEFAULT_TITLE_CULTURE) -> Optional[str]:
    """
    Trim, lower-case and title-case value under culture.

    The default culture is Turkish, where "i" title-cases to "İ" and
    "I" lower-cases to "ı". Pass culture="" for invariant casing.

    Example:
        to_title_case("istanbul BÜYÜKŞEHİR") -> "İstanbul Büyükşehir"
    """
    if is_blank(value):
        return None
    text = str(value).strip()
    return casing.title(casing.lower(text, culture), culture)


def to_upper_null(value: Optional[str], culture: Optional[str] = None) -> Optional[str]:
    """Upper-case value under culture, or under the process locale when culture is None."""
    if is_blank(value):
        return None
    if culture is None:
        culture = casing.current_culture()
    return casing.upper(str(value), culture)


def to_lower_null(value: Optional[str], culture: Optional[str] = None) -> Optional[str]:
    """Lower-case value under culture, or under the process locale when culture is None."""
    if is_blank(value):
        return None
    if culture is None:
        culture = casing.current_culture()
    return casing.lower(str(value), culture)


def to_md5(value: Optional[str]) -> Optional[str]:
    """
    Return the MD5 digest of value as 32 uppercase hex characters.

    The string is encoded with code page 1254. Characters that code page
    cannot represent are replaced by "?" and a UserWarning is issued.
    """
    if is_blank(value):
        return None
    text = str(value)
    try:
        data = text.encode(LEGACY_HASH_ENCODING)
    except UnicodeEncodeError:
        warnings.warn(
            f"String contains characters outside {LEGACY_HASH_ENCODING}; they were hashed as '?'",
            UserWarning,
        )
        data = text.encode(LEGACY_HASH_ENCODING, errors="replace")
    return hashlib.md5(data).hexdigest().upper()


__all__ = [
    "DEFAULT_TITLE_CULTURE",
    "LEGACY_HASH_ENCODING",
    "join_with_delimiter",
    "to_title_case",
    "to_upper_null",
    "to_lower_null",
    "to_md5",
]
