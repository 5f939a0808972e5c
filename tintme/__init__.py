# __init__.py

from .colors import Color, RGB, parse_hex, parse_color, lookup_color
from .errors import (
    StyleError,
    ParseError,
    InvalidHex,
    UnknownColor,
    MutuallyExclusiveAttributes,
    InvalidAttribute,
)
from .flags import Flag
from .logger import Logger
from .style import Style, compose
from .schema import style, validate
from .terminal import ColorSupport, write

__all__ = [
    "Style", "compose", "style", "validate", "Color", "RGB", "Flag",
    "parse_hex", "parse_color", "lookup_color", "ColorSupport", "write", "Logger",
    "StyleError", "ParseError", "InvalidHex", "UnknownColor",
    "MutuallyExclusiveAttributes", "InvalidAttribute",
]
