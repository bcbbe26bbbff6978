"""
Culture-aware character casing.

Python's str.lower()/str.upper() are locale-blind, which is wrong for
Turkish and Azerbaijani: those languages pair dotless I with dotless ı
and dotted İ with dotted i.

    invariant: "I".lower() -> "i"     "i".upper() -> "I"
    tr / az:   "I"         -> "ı"     "i"         -> "İ"

All cultures use 1:1 (simple) case mappings. A character whose full
Unicode mapping expands to several characters is left unchanged
("ß".upper() stays "ß"), except "İ" which lowers to plain "i".

Culture names follow BCP-47 / .NET style ("tr-TR", "tr_TR", "az-Latn-AZ").
Only the language subtag matters. "" or None selects invariant casing.
"""

import locale
import re
import unicodedata
from typing import Optional

from convertkit.converters import conversion_failed

DOTTED_I_LANGUAGES = frozenset({"tr", "az"})

_LANGUAGE_RE = re.compile(r"([A-Za-z]{2,8})(?:[-_][A-Za-z0-9]{1,8})*")

_DOTTED_I_LOWER = {"I": "ı", "İ": "i"}
_DOTTED_I_UPPER = {"i": "İ", "ı": "I"}


def language_of(culture: Optional[str]) -> str:
    """
    Return the lowercase language subtag of a culture name.

    Returns "" (invariant) for None or "".

    Raises:
        ConversionError: If the name is not a well-formed culture name
    """
    if culture is None or culture == "":
        return ""
    match = _LANGUAGE_RE.fullmatch(culture.strip()) if isinstance(culture, str) else None
    if match is None:
        raise conversion_failed(culture, "culture", "malformed culture name")
    return match.group(1).lower()


def _simple(ch: str, mapped: str) -> str:
    return mapped if len(mapped) == 1 else ch


def lower_char(ch: str, language: str = "") -> str:
    if language in DOTTED_I_LANGUAGES and ch in _DOTTED_I_LOWER:
        return _DOTTED_I_LOWER[ch]
    if ch == "İ":
        return "i"
    return _simple(ch, ch.lower())


def upper_char(ch: str, language: str = "") -> str:
    if language in DOTTED_I_LANGUAGES and ch in _DOTTED_I_UPPER:
        return _DOTTED_I_UPPER[ch]
    return _simple(ch, ch.upper())


def title_char(ch: str, language: str = "") -> str:
    if language in DOTTED_I_LANGUAGES and ch in _DOTTED_I_UPPER:
        return _DOTTED_I_UPPER[ch]
    return _simple(ch, ch.title())


def lower(text: str, culture: Optional[str] = None) -> str:
    language = language_of(culture)
    return "".join(lower_char(ch, language) for ch in text)


def upper(text: str, culture: Optional[str] = None) -> str:
    language = language_of(culture)
    return "".join(upper_char(ch, language) for ch in text)


# Unicode categories that end a word. Digits, letter numbers and marks do
# not, and the ASCII apostrophe is handled separately.
_WORD_SEPARATORS = frozenset({
    "Zs", "Zl", "Zp", "Cc", "Cf", "Cs", "Co", "Cn",
    "Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po",
    "Sm", "Sc", "Sk", "So",
})


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch) in ("Lu", "Ll", "Lt", "Lm", "Lo")


def title(text: str, culture: Optional[str] = None) -> str:
    """
    Upper-case the first letter of every word and lower-case the rest.

    A word starts at a letter and runs until a word separator (space,
    punctuation, symbol, control). Digits and combining marks inside a
    word keep it going, but a digit never starts one, so "1st" becomes
    "1St". The ASCII apostrophe stays inside the word ("o'neil" becomes
    "O'neil"); the typographic ’ is a separator ("o’neil" becomes
    "O’Neil").

    Words without any lowercase letter are treated as acronyms and only
    their first letter is touched: "USA" stays "USA".
    """
    language = language_of(culture)
    out = []
    index = 0
    length = len(text)
    while index < length:
        ch = text[index]
        index += 1
        if not _is_letter(ch):
            out.append(ch)
            continue

        out.append(title_char(ch, language))
        has_lower = unicodedata.category(ch) == "Ll"
        segment = []
        while index < length:
            ch = text[index]
            if ch == "'":
                out.append(_lower_if(segment, has_lower, language))
                out.append(ch)
                segment = []
            elif unicodedata.category(ch) in _WORD_SEPARATORS:
                break
            else:
                has_lower = has_lower or unicodedata.category(ch) == "Ll"
                segment.append(ch)
            index += 1
        out.append(_lower_if(segment, has_lower, language))
    return "".join(out)


def _lower_if(segment: list, has_lower: bool, language: str) -> str:
    if not has_lower:
        return "".join(segment)
    return "".join(lower_char(ch, language) for ch in segment)


def current_culture() -> str:
    """
    Return the culture name of the process LC_CTYPE locale.

    "" (invariant) when the locale is unset, "C", or not a
    well-formed culture name (e.g. Windows "Turkish_Türkiye").
    """
    try:
        name = locale.getlocale(locale.LC_CTYPE)[0]
    except ValueError:
        return ""
    if not name or _LANGUAGE_RE.fullmatch(name) is None:
        return ""
    return name


__all__ = [
    "DOTTED_I_LANGUAGES",
    "current_culture",
    "language_of",
    "lower",
    "upper",
    "title",
]
