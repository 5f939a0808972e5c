# sgr.py

"""
SGR (Select Graphic Rendition) escape sequence builder.

Stateless module: the tables below are the only data, every function is pure.
Parameters are always emitted in the same order so identical styles produce
byte-identical output:

    1. foreground (30-37, 90-97, or 38;2;r;g;b)
    2. background (40-47, 100-107, or 48;2;r;g;b)
    3. effects in ascending code order:
       bold(1) faint(2) italic(3) underline(4) blink(5) inverse(7)
       conceal(8) double underline(21) overline(53)
"""

from typing import List, Optional, Union

from .colors import Color, RGB, ColorValue
from .errors import InvalidAttribute
from .flags import Flag

ESC = '\x1b'
CSI = f'{ESC}['
SGR_END = 'm'

FMT = lambda x: f'{CSI}{x}{SGR_END}'  # Core formatting utility

RESET_CODE = f'{CSI}0{SGR_END}'

BACKGROUND_OFFSET = 10
RGB_FOREGROUND = 38
RGB_BACKGROUND = 48

EFFECTS = {
    'bold': 1,
    'faint': 2,
    'italic': 3,
    'underline': 4,
    'blink': 5,
    'inverse': 7,
    'conceal': 8,
    'double_underline': 21,
    'overline': 53,
}

# Values an underline may hold; anything else is a caller bug
UNDERLINE_DOMAIN = frozenset({Flag.UNSET, Flag.OFF, Flag.ON, Flag.DOUBLE, Flag.RESET})


def rgb_to_sgr(color: RGB, background: bool = False) -> str:
    base = RGB_BACKGROUND if background else RGB_FOREGROUND
    return f"{base};2;{color.red};{color.green};{color.blue}"


def color_parameter(color: Optional[ColorValue], background: bool = False) -> Optional[Union[int, str]]:
    """Return the SGR parameter for a color, or None when nothing should be emitted."""
    if color is None:
        return None
    if isinstance(color, RGB):
        return rgb_to_sgr(color, background)
    if isinstance(color, Color):
        code = color.code
        if code is None:
            # DEFAULT and RESET
            return None
        return code + BACKGROUND_OFFSET if background else code
    raise InvalidAttribute('background' if background else 'foreground', color, 'a Color or RGB')


def underline_parameter(underline: Flag) -> Optional[int]:
    if not isinstance(underline, Flag) or underline not in UNDERLINE_DOMAIN:
        raise InvalidAttribute('underline', underline, 'unset, off, on or double')
    if underline is Flag.ON:
        return EFFECTS['underline']
    if underline is Flag.DOUBLE:
        return EFFECTS['double_underline']
    return None


def build_parameters(
    foreground: Optional[ColorValue] = None,
    background: Optional[ColorValue] = None,
    bold: Flag = Flag.UNSET,
    faint: Flag = Flag.UNSET,
    italic: Flag = Flag.UNSET,
    underline: Flag = Flag.UNSET,
    blink: Flag = Flag.UNSET,
    inverse: Flag = Flag.UNSET,
    conceal: Flag = Flag.UNSET,
    overline: Flag = Flag.UNSET,
) -> List[Union[int, str]]:
    """Collect SGR parameters for the given attributes in canonical order."""
    parameters: List[Union[int, str]] = []

    for color, is_background in ((foreground, False), (background, True)):
        param = color_parameter(color, background=is_background)
        if param is not None:
            parameters.append(param)

    toggles = {
        'bold': bold,
        'faint': faint,
        'italic': italic,
        'blink': blink,
        'inverse': inverse,
        'conceal': conceal,
        'overline': overline,
    }
    effects = [EFFECTS[name] for name, value in toggles.items() if value is Flag.ON]

    underline_code = underline_parameter(underline)
    if underline_code is not None:
        effects.append(underline_code)

    parameters.extend(sorted(effects))
    return parameters


def build_sequence(parameters: List[Union[int, str]]) -> str:
    if not parameters:
        return ''
    return FMT(';'.join(str(p) for p in parameters))


def build_prefix(**attributes) -> str:
    """
    Build the escape sequence that switches on the given attributes.

    Returns an empty string when no attribute produces a parameter; callers must
    then leave their text untouched.
    """
    return build_sequence(build_parameters(**attributes))


def reset_code() -> str:
    return RESET_CODE
