# style.py

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from . import sgr
from .colors import Color, RGB, ColorValue, parse_color
from .errors import InvalidAttribute, MutuallyExclusiveAttributes
from .flags import Flag, EFFECT_NAMES, EFFECT_DOMAINS
from .logger import Logger
from .rich_style import to_rich_style

COLOR_NAMES = ('foreground', 'background')
ATTRIBUTE_NAMES = COLOR_NAMES + EFFECT_NAMES

logger = Logger(__name__)


@dataclass(frozen=True, repr=False)
class Style:
    """
    Immutable terminal style: two optional colors and eight tri-state effects.

    The escape sequence is built once when the style is created, so applying a
    style to many strings costs only a concatenation.

    Component Hierarchy:
    Style → sgr (parameter tables and sequence builder) → colors / flags

    Example:
        base = Style(foreground=Color.BLUE, background="#F93")
        loud = base >> Style(bold=Flag.ON, underline=Flag.DOUBLE)
        print(loud("Styled text"))
    """
    foreground: Optional[ColorValue] = None
    background: Optional[ColorValue] = None
    bold: Flag = Flag.UNSET
    faint: Flag = Flag.UNSET
    italic: Flag = Flag.UNSET
    underline: Flag = Flag.UNSET
    overline: Flag = Flag.UNSET
    blink: Flag = Flag.UNSET
    inverse: Flag = Flag.UNSET
    conceal: Flag = Flag.UNSET

    _prefix: str = field(init=False, repr=False, compare=False, default='')
    _reset: str = field(init=False, repr=False, compare=False, default='')

    def __post_init__(self):
        """Normalise color spellings, validate, and cache the prefix/reset pair."""
        for name in COLOR_NAMES:
            value = getattr(self, name)
            if isinstance(value, (str, tuple)):
                object.__setattr__(self, name, parse_color(value, attribute=name))
        self._validate()
        prefix = sgr.build_prefix(**self._render_attributes())
        object.__setattr__(self, '_prefix', prefix)
        object.__setattr__(self, '_reset', sgr.reset_code() if prefix else '')

    def _validate(self) -> None:
        for name in COLOR_NAMES:
            value = getattr(self, name)
            if value is None or isinstance(value, Color):
                continue
            if isinstance(value, RGB) and all(
                isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value
            ):
                continue
            logger.debug(f"Rejected {name}={value!r}")
            raise InvalidAttribute(name, value, 'a Color, an RGB triple or None')

        for name in EFFECT_NAMES:
            value = getattr(self, name)
            if not isinstance(value, Flag) or value not in EFFECT_DOMAINS[name]:
                allowed = ', '.join(sorted(f.value for f in EFFECT_DOMAINS[name]))
                logger.debug(f"Rejected {name}={value!r}")
                raise InvalidAttribute(name, value, f'one of {allowed}')

        if self.bold is Flag.ON and self.faint is Flag.ON:
            logger.debug("Rejected style with both bold and faint on")
            raise MutuallyExclusiveAttributes('bold', 'faint')

    def _render_attributes(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in ATTRIBUTE_NAMES}

    @property
    def prefix(self) -> str:
        """Escape sequence emitted before styled text ('' for a plain style)."""
        return self._prefix

    @property
    def reset(self) -> str:
        """Escape sequence emitted after styled text ('' for a plain style)."""
        return self._reset

    @property
    def is_plain(self) -> bool:
        return not self._prefix

    def apply(self, text: str) -> str:
        """
        Wrap text in this style's escape sequences.

        Args:
            text: Text to style

        Returns:
            prefix + text + reset, or text itself when the style sets nothing
        """
        if not self._prefix:
            return text
        return f"{self._prefix}{text}{self._reset}"

    __call__ = apply

    def __getitem__(self, text: str) -> str:
        return self.apply(text)

    def compose(self, other: 'Style') -> 'Style':
        return compose(self, other)

    def __rshift__(self, other):
        if not isinstance(other, Style):
            return NotImplemented
        return compose(self, other)

    def to_rich(self):
        """Return the equivalent rich.style.Style."""
        return to_rich_style(self)

    def attributes(self) -> Dict[str, Any]:
        """Attributes that differ from their unset default."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.init and getattr(self, f.name) != f.default
        }

    def __repr__(self) -> str:
        args = ', '.join(f"{name}={value!r}" for name, value in self.attributes().items())
        return f"{type(self).__name__}({args})"


def _compose_attribute(current, other, unset, reset):
    if other is unset:
        return current
    if other is reset:
        return unset
    return other


def compose(base: Style, overlay: Style) -> Style:
    """
    Layer overlay on top of base; overlay wins wherever it has an opinion.

    Per attribute: an unset overlay keeps base, a reset overlay clears the
    attribute, any other overlay value replaces base. Afterwards bold and faint
    are reconciled: switching one on in the overlay turns the other off, so the
    result never has both on.
    """
    values = {
        name: _compose_attribute(getattr(base, name), getattr(overlay, name), None, Color.RESET)
        for name in COLOR_NAMES
    }
    values.update({
        name: _compose_attribute(getattr(base, name), getattr(overlay, name), Flag.UNSET, Flag.RESET)
        for name in EFFECT_NAMES
    })

    if overlay.bold is Flag.ON:
        values['faint'] = Flag.OFF
    elif overlay.faint is Flag.ON:
        values['bold'] = Flag.OFF

    return Style(**values)
