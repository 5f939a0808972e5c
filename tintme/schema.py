# schema.py

"""
Validation of loose keyword input into typed Style attributes.

Colors accept None, a Color, an RGB (or a plain tuple of three bytes), a color
name, or a hex string. Effects accept None/False/True, the string 'reset', or a
Flag; underline also takes 'double'. Anything else is rejected: strings such as
'true' or 'on' and integers are not coerced.
"""

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Strict, StrictBool, ValidationError, field_validator

from .colors import parse_color
from .errors import InvalidAttribute, StyleError
from .flags import Flag, EFFECT_NAMES, EFFECT_DOMAINS
from .logger import Logger
from .style import Style

logger = Logger(__name__)

StrictFlag = Annotated[Flag, Strict()]
EffectOption = Optional[Union[StrictFlag, StrictBool, Literal['reset']]]
UnderlineOption = Optional[Union[StrictFlag, StrictBool, Literal['reset', 'double']]]

# Non-Flag spellings accepted for effects
EFFECT_ALIASES = {
    None: Flag.UNSET,
    False: Flag.OFF,
    True: Flag.ON,
    'reset': Flag.RESET,
    'double': Flag.DOUBLE,
}

EXPECTED = {name: 'None, True, False, "reset"' for name in EFFECT_NAMES}
EXPECTED['underline'] += ' or "double"'
EXPECTED['foreground'] = EXPECTED['background'] = 'a color name, hex string, RGB triple or None'


class StyleInput(BaseModel):
    """Loose keyword input for a Style; unknown keys are rejected."""
    model_config = ConfigDict(extra='forbid')

    foreground: Any = None
    background: Any = None
    bold: EffectOption = None
    faint: EffectOption = None
    italic: EffectOption = None
    underline: UnderlineOption = None
    overline: EffectOption = None
    blink: EffectOption = None
    inverse: EffectOption = None
    conceal: EffectOption = None

    @field_validator('foreground', 'background', mode='before')
    @classmethod
    def parse_colors(cls, value, info):
        if value is None:
            return None
        return parse_color(value, attribute=info.field_name)

    @field_validator(*EFFECT_NAMES, mode='after')
    @classmethod
    def to_flag(cls, value, info):
        flag = value if isinstance(value, Flag) else EFFECT_ALIASES[value]
        if flag not in EFFECT_DOMAINS[info.field_name]:
            raise InvalidAttribute(info.field_name, value, EXPECTED[info.field_name])
        return flag


def _translate(error: ValidationError) -> StyleError:
    """Turn the first pydantic error into the matching StyleError."""
    detail = error.errors()[0]
    original = detail.get('ctx', {}).get('error')
    if isinstance(original, StyleError):
        return original
    name = str(detail['loc'][0])
    return InvalidAttribute(name, detail.get('input'), EXPECTED.get(name, 'a known style attribute'))


def validate(**raw: Any) -> Dict[str, Any]:
    """
    Turn raw keyword values into typed Style attributes.

    Only the keywords that were passed appear in the result.

    Raises:
        InvalidAttribute: unknown keyword or a value of the wrong shape
        InvalidHex / UnknownColor: a color string that does not resolve
    """
    try:
        model = StyleInput(**raw)
    except ValidationError as e:
        failure = _translate(e)
        logger.debug(f"Rejected style input: {failure}")
        raise failure from None
    return {name: getattr(model, name) for name in model.model_fields_set}


def style(**raw: Any) -> Style:
    """
    Shortcut: validate raw values and build a Style.

    Example:
        style(foreground='red', bold=True)
        style(background='#F93', underline='double')
    """
    return Style(**validate(**raw))
