"""Tests for string helpers used on scraped payloads."""

import pytest

from scrapekit.errors import SubstringNotFoundError
from scrapekit.text import (
    decode_json_unicode,
    encode_json_unicode,
    escape_json_data,
    format_thousands,
    get_json_value,
    get_json_value_or_fail,
    has_content,
    hex_to_bytes,
    is_web_link,
    null_on_empty,
    to_upper_first,
)


class TestJsonUnicode:
    """Test \\uXXXX escaping."""

    def test_encode_cyrillic(self):
        assert encode_json_unicode("Привет") == "\\u041f\\u0440\\u0438\\u0432\\u0435\\u0442"

    def test_ascii_untouched(self):
        assert encode_json_unicode('plain "text"') == 'plain "text"'

    def test_surrogate_pairs(self):
        """Characters outside the BMP are written as two escapes and read back as one."""
        encoded = encode_json_unicode("\U0001F600")

        assert encoded == "\\ud83d\\ude00"
        assert decode_json_unicode(encoded) == "\U0001F600"

    def test_decode_mixed(self):
        assert decode_json_unicode("caf\\u00e9 ok") == "café ok"

    def test_decode_empty(self):
        assert decode_json_unicode(None) == ""
        assert decode_json_unicode("") == ""


class TestJsonValue:
    """Test naive key lookup."""

    payload = '{"name":"Widget","price":42,"id":7}'

    def test_number(self):
        assert get_json_value(self.payload, "price") == "42"

    def test_quotes_stripped(self):
        assert get_json_value(self.payload, "name") == "Widget"

    def test_string_terminator(self):
        assert get_json_value(self.payload, "name", ends_with='"') == "Widget"

    def test_last_key_needs_custom_terminator(self):
        """The default terminator needs a following key."""
        assert get_json_value(self.payload, "id") is None
        assert get_json_value(self.payload, "id", ends_with="}") == "7"

    def test_or_fail(self):
        with pytest.raises(SubstringNotFoundError) as exc_info:
            get_json_value_or_fail(self.payload, "missing")

        assert exc_info.value.keys == {"key": "missing"}
        assert '"missing"' in str(exc_info.value)

    def test_escape_json_data(self):
        assert escape_json_data('say "hi" \\ bye') == 'say \\"hi\\" \\\\ bye'
        assert escape_json_data("é", escape_unicode=True) == "\\u00e9"


class TestStringHelpers:
    """Test small text utilities."""

    def test_to_upper_first(self):
        assert to_upper_first("hELLO") == "Hello"
        assert to_upper_first("hELLO", lower_rest=False) == "HELLO"
        assert to_upper_first("") == ""

    def test_is_web_link(self):
        assert is_web_link("https://example.com")
        assert is_web_link("http://example.com")
        assert not is_web_link("ftp://example.com")
        assert not is_web_link("  https://example.com")
        assert is_web_link("  https://example.com", trim=True)

    def test_has_content(self):
        assert has_content("x")
        assert not has_content("   ")
        assert not has_content(None)

    def test_null_on_empty(self):
        assert null_on_empty("") is None
        assert null_on_empty("a") == "a"

    def test_hex_to_bytes(self):
        assert hex_to_bytes("00ff10") == b"\x00\xff\x10"

    def test_format_thousands(self):
        assert format_thousands(1234567) == "1 234 567"
        assert format_thousands(1234.5, decimals=2) == "1 234.50"
        assert format_thousands(999) == "999"
