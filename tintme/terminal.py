# terminal.py
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

from .colors import Color, RGB
from .logger import Logger
from .style import Style

logger = Logger(__name__)


@dataclass(frozen=True)
class ColorSupport:
    """What the output stream can display."""

    enabled: bool
    truecolor: bool = False

    @classmethod
    def detect(cls, stream: Optional[TextIO] = None,
               environ: Optional[Mapping[str, str]] = None) -> 'ColorSupport':
        """
        Decide color support from the environment and the stream.

        NO_COLOR disables color, FORCE_COLOR enables it, otherwise the stream
        must be a TTY. COLORTERM=truecolor/24bit marks RGB support.
        """
        environ = os.environ if environ is None else environ
        stream = sys.stdout if stream is None else stream
        colorterm = environ.get("COLORTERM", "")
        truecolor = "truecolor" in colorterm or "24bit" in colorterm

        if environ.get("NO_COLOR"):
            logger.debug("Color disabled by NO_COLOR")
            return cls(enabled=False, truecolor=truecolor)
        if environ.get("FORCE_COLOR"):
            logger.debug("Color forced by FORCE_COLOR")
            return cls(enabled=True, truecolor=truecolor)

        is_tty = hasattr(stream, "isatty") and stream.isatty()
        if not is_tty:
            logger.debug("Color disabled: stream is not a TTY")
        return cls(enabled=is_tty, truecolor=truecolor)


def adapt(style: Style, support: ColorSupport) -> Style:
    """Drop what the terminal cannot show: everything when color is off, RGB without truecolor."""
    if not support.enabled:
        return Style()
    if support.truecolor:
        return style
    drop = {
        name: Color.RESET
        for name in ('foreground', 'background')
        if isinstance(getattr(style, name), RGB)
    }
    if drop:
        logger.debug(f"Dropping RGB colors without truecolor support: {sorted(drop)}")
        return style >> Style(**drop)
    return style


def write(style: Style, text: str, stream: Optional[TextIO] = None,
          support: Optional[ColorSupport] = None, newline: bool = True) -> str:
    """
    Write styled text to a stream, honoring its color support.

    Returns:
        The exact string written
    """
    stream = sys.stdout if stream is None else stream
    if support is None:
        support = ColorSupport.detect(stream)
    output = adapt(style, support).apply(text)
    if newline:
        output += "\n"
    stream.write(output)
    stream.flush()
    return output
