"""
Hex color code parsing and formatting.

Accepted input forms are ``#RRGGBB`` and the shorthand ``#RGB`` where every
nibble is doubled (``#abc`` == ``#aabbcc``). The six digit form is tried
first. Only ``0-9a-fA-F`` are digits; signs, whitespace, underscores and
``0x`` prefixes are rejected.
"""
from string import hexdigits

from ..errors import HexCodeParseError

_HEX_DIGITS = frozenset(hexdigits)


def _parse_digits(digits: str, code: str) -> int:
    if not digits or any(ch not in _HEX_DIGITS for ch in digits):
        raise HexCodeParseError(code, "non-hex digit in color code")
    return int(digits, 16)


def expand_shorthand(value: int) -> int:
    """Expand a 12-bit ``0xRGB`` into ``0xRRGGBB`` by duplicating each nibble."""
    r = (value & 0xF00) >> 8
    g = (value & 0x0F0) >> 4
    b = value & 0x00F
    return (r * 0x11) << 16 | (g * 0x11) << 8 | (b * 0x11)


def parse_hex_code(code: str) -> int:
    """
    Parse a ``#RRGGBB`` or ``#RGB`` string into a packed ``0xRRGGBB`` integer.

    Raises:
        HexCodeParseError: missing ``#``, wrong length or non-hex digits
    """
    if not isinstance(code, str) or not code.startswith("#") or len(code) < 4:
        raise HexCodeParseError(str(code), "expected '#RGB' or '#RRGGBB'")

    digits = code[1:]
    if len(digits) == 6:
        return _parse_digits(digits, code)
    if len(digits) == 3:
        return expand_shorthand(_parse_digits(digits, code))
    raise HexCodeParseError(code, f"expected 3 or 6 hex digits, got {len(digits)}")


def format_hex_code(value: int, num_octets: int = 3, upper: bool = False) -> str:
    """Format a packed integer as ``#`` followed by ``2 * num_octets`` hex digits."""
    spec = f"0{2 * num_octets}{'X' if upper else 'x'}"
    return "#" + format(value, spec)
