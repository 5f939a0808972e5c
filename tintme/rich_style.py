# rich_style.py

from typing import Optional

from rich.style import Style as RichStyle

from .colors import Color, RGB, ColorValue
from .flags import Flag

# Our effect names -> rich's attribute names
RICH_EFFECTS = {
    'bold': 'bold',
    'faint': 'dim',
    'italic': 'italic',
    'overline': 'overline',
    'blink': 'blink',
    'inverse': 'reverse',
    'conceal': 'conceal',
}


def rich_color(color: Optional[ColorValue]) -> Optional[str]:
    """Return the rich color string for a color, or None when no color is set."""
    if color is None or color is Color.RESET:
        return None
    if isinstance(color, RGB):
        return color.hex
    # BRIGHT_BLACK also covers the 'gray' spelling
    return color.name.lower()


def rich_flag(flag: Flag) -> Optional[bool]:
    if flag is Flag.ON:
        return True
    if flag is Flag.OFF:
        return False
    return None


def to_rich_style(style) -> RichStyle:
    """
    Map a tintme Style onto rich's style model.

    rich is tri-state too (None/False/True), so unset and reset both become None.
    A double underline maps to rich's underline2.
    """
    effects = {
        rich_name: rich_flag(getattr(style, name))
        for name, rich_name in RICH_EFFECTS.items()
    }
    if style.underline is Flag.DOUBLE:
        effects['underline2'] = True
    else:
        effects['underline'] = rich_flag(style.underline)

    return RichStyle(
        color=rich_color(style.foreground),
        bgcolor=rich_color(style.background),
        **effects,
    )
