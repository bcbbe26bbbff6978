"""
Hyphen-separated hexadecimal byte strings.

    bytes_to_hex_with_separator(b"\\x0a\\x1b\\xff") -> "A-1B-FF"
    hex_with_separator_to_bytes("0A-1B-FF")       -> b"\\x0a\\x1b\\xff"

Rendering does not zero-pad, so single-digit bytes come out as one
character. Parsing accepts one or two hex digits per segment, which
means every rendered string parses back to the same bytes.
"""

import re
from typing import Any, Optional

from convertkit.converters import conversion_failed
from convertkit.predicates import is_blank

SEPARATOR = "-"

_HEX_BYTE_RE = re.compile(r"[0-9A-Fa-f]{1,2}")


def hex_with_separator_to_bytes(value: Optional[str]) -> Optional[bytes]:
    """
    Parse hyphen-separated hex bytes.

    Returns None for blank input. Each segment may carry surrounding
    whitespace but must otherwise be one or two hex digits.

    Raises:
        ConversionError: If any segment is empty, too wide or not hex
    """
    if is_blank(value):
        return None

    result = bytearray()
    for index, segment in enumerate(str(value).split(SEPARATOR)):
        text = segment.strip()
        if _HEX_BYTE_RE.fullmatch(text) is None:
            raise conversion_failed(value, "bytes", f"segment {index} ({segment!r}) is not a hex byte")
        result.append(int(text, 16))
    return bytes(result)


def bytes_to_hex_with_separator(value: Any) -> str:
    """Render each byte as uppercase hex joined by '-'."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
    elif isinstance(value, (list, tuple)):
        if not all(isinstance(b, int) and not isinstance(b, bool) and 0 <= b <= 255 for b in value):
            raise conversion_failed(value, "hex string", "sequence items must be ints in 0..255")
        data = bytes(value)
    else:
        raise conversion_failed(value, "hex string", "not a byte sequence")

    return SEPARATOR.join(format(b, "X") for b in data)


__all__ = [
    "SEPARATOR",
    "hex_with_separator_to_bytes",
    "bytes_to_hex_with_separator",
]
