"""Small string helpers for scraped payloads (JSON fragments, links, numbers)."""

import re
from typing import Optional

from .errors import SubstringNotFoundError
from .substrings import between

HTTP_PROTO = "http://"
HTTPS_PROTO = "https://"

_JSON_UNICODE_ESCAPE = re.compile(r"\\u([0-9A-Fa-f]{4})")

# Group separator for format_thousands; digits are always invariant
THOUSANDS_SEPARATOR = " "


def encode_json_unicode(value: str) -> str:
    """Replace every non-ASCII character with a ``\\uXXXX`` escape."""
    return "".join(
        char if ord(char) <= 0x7F else _escape_code_units(char)
        for char in value
    )


def _escape_code_units(char: str) -> str:
    # Characters outside the BMP become a UTF-16 surrogate pair, as JSON expects
    encoded = char.encode("utf-16-be")
    return "".join(
        "\\u%04x" % int.from_bytes(encoded[i:i + 2], "big")
        for i in range(0, len(encoded), 2)
    )


def decode_json_unicode(value: Optional[str]) -> str:
    """Turn ``\\uXXXX`` escapes back into characters."""
    if not value:
        return ""
    decoded = _JSON_UNICODE_ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), value)
    # Re-join surrogate pairs produced by encode_json_unicode
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def escape_json_data(data: str, escape_unicode: bool = False) -> str:
    """Escape backslashes and double quotes so ``data`` fits inside a JSON string."""
    escaped = data.replace("\\", "\\\\").replace('"', '\\"')
    if escape_unicode:
        escaped = encode_json_unicode(escaped)
    return escaped


def get_json_value(json: str, key: str, ends_with: str = ',"') -> Optional[str]:
    """
    Naive lookup of ``"key":value`` in a JSON text without parsing it.

    With ``ends_with='"'`` the value is read as a quoted string; otherwise
    everything up to ``ends_with`` is taken and stripped of quotes and
    line breaks.
    """
    if ends_with == '"':
        return between(json, f'"{key}":"', '"')

    value = between(json, f'"{key}":', ends_with)
    if value is None:
        return None
    return value.strip('"\r\n\t')


def get_json_value_or_fail(json: str, key: str, ends_with: str = ',"') -> str:
    value = get_json_value(json, key, ends_with)
    if value is None:
        raise SubstringNotFoundError(f'JSON key "{key}" not found. Response: {json}', key=key)
    return value


def to_upper_first(value: Optional[str], lower_rest: bool = True) -> str:
    if not value:
        return ""
    rest = value[1:]
    if lower_rest:
        rest = rest.lower()
    return value[0].upper() + rest


def is_web_link(value: str, trim: bool = False) -> bool:
    if trim:
        value = value.strip()
    return value.startswith((HTTP_PROTO, HTTPS_PROTO))


def has_content(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def null_on_empty(value: Optional[str]) -> Optional[str]:
    return None if value == "" else value


def hex_to_bytes(value: str) -> bytes:
    return bytes.fromhex(value)


def format_thousands(number, decimals: int = 0) -> str:
    """Format ``1234567.5`` as ``1 234 567.50`` (with ``decimals=2``)."""
    return f"{number:,.{decimals}f}".replace(",", THOUSANDS_SEPARATOR)
