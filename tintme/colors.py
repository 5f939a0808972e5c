# colors.py

import re
from enum import Enum
from typing import NamedTuple, Optional, Union

from .errors import InvalidHex, UnknownColor, InvalidAttribute

HEX_PATTERN = re.compile(r'#?(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})')


class RGB(NamedTuple):
    """A 24-bit color, one byte per channel."""
    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


class Color(Enum):
    """
    Named terminal colors.

    The value of each member is its foreground SGR code. DEFAULT and RESET carry
    no code: DEFAULT means "no color" and is never emitted, RESET only has meaning
    as the right-hand side of a composition.
    """
    DEFAULT = 'default'
    RESET = 'reset'
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97
    # Alias of BRIGHT_BLACK (same value)
    GRAY = 90

    @property
    def code(self) -> Optional[int]:
        """Foreground SGR code, or None for DEFAULT and RESET."""
        return self.value if isinstance(self.value, int) else None


ColorValue = Union[Color, RGB]

# Name table, including the 'gray' spelling that the enum folds into BRIGHT_BLACK
COLOR_NAMES = {name.lower(): member for name, member in Color.__members__.items()}


def parse_hex(value: str) -> RGB:
    """
    Parse a 3- or 6-digit hex color, with or without a leading '#'.

    The short form is expanded by doubling each digit, so 'F00' reads as 'FF0000'.
    """
    if not isinstance(value, str) or not HEX_PATTERN.fullmatch(value):
        raise InvalidHex(value)
    digits = value.removeprefix('#')
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def lookup_color(name: Union[str, Color]) -> Color:
    """Resolve a color name such as 'red' or 'bright_blue'."""
    if isinstance(name, Color):
        return name
    if not isinstance(name, str):
        raise UnknownColor(name)
    try:
        return COLOR_NAMES[name.lower()]
    except KeyError:
        raise UnknownColor(name) from None


def parse_color(value, attribute: Optional[str] = None) -> ColorValue:
    """
    Resolve any supported color spelling to a ColorValue.

    Accepts a Color, an RGB, a tuple of three ints in 0-255, a color name or a
    hex string. Names win over hex, so 'red' never reads as a hex triple.
    Errors carry the attribute name when one is given.
    """
    if isinstance(value, (Color, RGB)):
        return value
    if isinstance(value, tuple):
        if len(value) == 3 and all(
            isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value
        ):
            return RGB(*value)
        raise InvalidAttribute(attribute or 'color', value, 'three integers in 0-255')
    if not isinstance(value, str):
        raise InvalidAttribute(attribute or 'color', value, 'a color name or hex string')

    if value.lower() in COLOR_NAMES:
        return COLOR_NAMES[value.lower()]
    if HEX_PATTERN.fullmatch(value):
        return parse_hex(value)
    # Looks like an attempt at hex: digits, '#', or only hex letters
    if value.startswith('#') or (value and all(c in '0123456789abcdefABCDEF' for c in value)):
        raise InvalidHex(value, attribute=attribute)
    raise UnknownColor(value, attribute=attribute)
