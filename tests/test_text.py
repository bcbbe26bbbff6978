"""
Tests for string helpers: joining, casing and legacy MD5.
"""

import hashlib
import locale
from enum import Enum, IntEnum

import pytest

from convertkit.converters import ConversionError
from convertkit.text import (
    DEFAULT_TITLE_CULTURE,
    join_with_delimiter,
    to_title_case,
    to_upper_null,
    to_lower_null,
    to_md5,
)


class Status(IntEnum):
    ACTIVE = 1
    PASSIVE = 2


class Colour(Enum):
    RED = 10
    BLUE = 20


class TestJoinWithDelimiter:

    def test_no_trailing_delimiter(self):
        assert join_with_delimiter([1, 2, 3], ",") == "1,2,3"

    def test_multi_character_delimiter(self):
        assert join_with_delimiter(["a", "b"], "; ") == "a; b"

    def test_single_item(self):
        assert join_with_delimiter(["only"], ",") == "only"

    def test_empty_and_none(self):
        assert join_with_delimiter([], ",") is None
        assert join_with_delimiter(None, ",") is None

    def test_enum_members_render_their_code(self):
        assert join_with_delimiter([Status.ACTIVE, Status.PASSIVE], "|") == "1|2"
        assert join_with_delimiter([Colour.RED, Colour.BLUE], ",") == "10,20"

    def test_none_item_renders_empty(self):
        assert join_with_delimiter(["a", None, "b"], ",") == "a,,b"

    def test_any_iterable(self):
        assert join_with_delimiter((n * 2 for n in range(3)), "-") == "0-2-4"


class TestTitleCase:

    def test_default_culture_is_turkish(self):
        assert DEFAULT_TITLE_CULTURE == "tr-TR"
        assert to_title_case("istanbul BÜYÜKŞEHİR") == "İstanbul Büyükşehir"

    def test_turkish_differs_from_invariant(self):
        turkish = to_title_case("istanbul BÜYÜKŞEHİR", "tr-TR")
        invariant = to_title_case("istanbul BÜYÜKŞEHİR", "")
        assert turkish == "İstanbul Büyükşehir"
        assert invariant == "Istanbul Büyükşehir"
        assert turkish != invariant

    def test_dotless_capital_i(self):
        assert to_title_case("  IŞIK  ") == "Işık"
        assert to_title_case("  IŞIK  ", "en-US") == "Işik"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank(self, value):
        assert to_title_case(value) is None

    def test_malformed_culture(self):
        with pytest.raises(ConversionError):
            to_title_case("abc", "!!")


class TestUpperLower:

    def test_upper_turkish(self):
        assert to_upper_null("istanbul", "tr-TR") == "İSTANBUL"

    def test_upper_default_follows_process_locale(self, monkeypatch):
        monkeypatch.setattr(locale, "getlocale", lambda category=None: ("tr_TR", "UTF-8"))
        assert to_upper_null("istanbul") == "İSTANBUL"

    def test_upper_default_non_turkish_locale(self, monkeypatch):
        monkeypatch.setattr(locale, "getlocale", lambda category=None: ("en_US", "UTF-8"))
        assert to_upper_null("istanbul") == "ISTANBUL"

    def test_upper_default_c_locale_is_invariant(self, monkeypatch):
        monkeypatch.setattr(locale, "getlocale", lambda category=None: (None, None))
        assert to_upper_null("istanbul") == "ISTANBUL"

    def test_explicit_culture_beats_process_locale(self, monkeypatch):
        monkeypatch.setattr(locale, "getlocale", lambda category=None: ("tr_TR", "UTF-8"))
        assert to_upper_null("istanbul", "en-US") == "ISTANBUL"
        assert to_lower_null("ISPARTA", "") == "isparta"

    def test_lower_turkish(self):
        assert to_lower_null("ISPARTA", "tr-TR") == "ısparta"

    def test_lower_default_follows_process_locale(self, monkeypatch):
        monkeypatch.setattr(locale, "getlocale", lambda category=None: ("tr_TR", "UTF-8"))
        assert to_lower_null("ISPARTA") == "ısparta"

    def test_lower_default_non_turkish_locale(self, monkeypatch):
        monkeypatch.setattr(locale, "getlocale", lambda category=None: ("en_US", "UTF-8"))
        assert to_lower_null("ISPARTA") == "isparta"

    @pytest.mark.parametrize("value", [None, "", " \t "])
    def test_blank(self, value):
        assert to_upper_null(value) is None
        assert to_lower_null(value) is None


class TestMd5:

    def test_ascii(self):
        assert to_md5("abc") == "900150983CD24FB0D6963F7D28E17F72"

    def test_format(self):
        digest = to_md5("anything")
        assert len(digest) == 32
        assert digest == digest.upper()
        assert all(ch in "0123456789ABCDEF" for ch in digest)

    @pytest.mark.parametrize("value,encoded", [("ı", b"\xfd"), ("ğ", b"\xf0"), ("Ş", b"\xde")])
    def test_turkish_code_page_bytes_are_hashed(self, value, encoded):
        assert value.encode("cp1254") == encoded
        assert to_md5(value) == hashlib.md5(encoded).hexdigest().upper()

    def test_differs_from_utf8(self):
        utf8_digest = hashlib.md5("ığüşöç".encode("utf-8")).hexdigest().upper()
        assert to_md5("ığüşöç") != utf8_digest

    def test_unencodable_characters_warn(self):
        with pytest.warns(UserWarning):
            digest = to_md5("中")
        assert digest == hashlib.md5(b"?").hexdigest().upper()

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank(self, value):
        assert to_md5(value) is None
