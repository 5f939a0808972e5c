# flags.py

from enum import Enum


class Flag(Enum):
    """
    State of a single text effect.

    UNSET means "no opinion" and inherits during composition. RESET is an
    instruction for composition only: it clears whatever the left-hand style
    had. DOUBLE is valid for underline alone.
    """
    UNSET = 'unset'
    OFF = 'off'
    ON = 'on'
    DOUBLE = 'double'
    RESET = 'reset'


EFFECT_NAMES = (
    'bold',
    'faint',
    'italic',
    'underline',
    'overline',
    'blink',
    'inverse',
    'conceal',
)

# Effect name -> states it may hold
EFFECT_DOMAINS = {
    name: frozenset({Flag.UNSET, Flag.OFF, Flag.ON, Flag.RESET})
    for name in EFFECT_NAMES
}
EFFECT_DOMAINS['underline'] = EFFECT_DOMAINS['underline'] | {Flag.DOUBLE}
