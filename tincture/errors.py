"""
Exceptions raised by tincture.

Exception Hierarchy:
    TinctureError (base)
    ├── HexCodeParseError          (also a ValueError)
    ├── UnsupportedColorSpaceError (also a ValueError)
    └── InvariantViolation         (also an AssertionError)

Parse and lookup errors are recoverable; the caller decides on a fallback.
InvariantViolation signals a caller bug and is never caught inside the library.
"""


class TinctureError(Exception):
    """Base exception for all tincture errors."""
    pass


class HexCodeParseError(TinctureError, ValueError):
    """
    Raised when a hex color code cannot be parsed.

    Attributes:
        code: The string that failed to parse
    """

    def __init__(self, code: str, reason: str = "malformed hex code"):
        super().__init__(f"{reason}: {code!r}")
        self.code = code
        self.reason = reason


class UnsupportedColorSpaceError(TinctureError, ValueError):
    """Raised when a color space name is not one of the known spaces."""

    def __init__(self, space: object):
        super().__init__(f"Unsupported color space: {space!r}")
        self.space = space


class InvariantViolation(TinctureError, AssertionError):
    """Raised when a precondition is broken (non-finite hue, inverted bounds)."""
    pass
