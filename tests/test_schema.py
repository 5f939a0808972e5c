# test_schema.py

import logging
import pytest
from pydantic import ValidationError

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tintme import style, validate, Color, RGB, Flag
from tintme.errors import InvalidAttribute, InvalidHex, UnknownColor, MutuallyExclusiveAttributes
from tintme.schema import StyleInput

ESC = "\x1b"


class TestValidate:
    """Raw keyword values to typed attributes."""

    def test_effect_spellings(self):
        assert validate(bold=None, italic=False, blink=True, conceal="reset") == {
            "bold": Flag.UNSET,
            "italic": Flag.OFF,
            "blink": Flag.ON,
            "conceal": Flag.RESET,
        }

    def test_underline_double(self):
        assert validate(underline="double") == {"underline": Flag.DOUBLE}

    def test_flags_pass_through(self):
        assert validate(inverse=Flag.ON) == {"inverse": Flag.ON}

    def test_color_spellings(self):
        attrs = validate(foreground="red", background="#F00")
        assert attrs["foreground"] is Color.RED
        assert attrs["background"] == RGB(255, 0, 0)
        assert validate(foreground=None) == {"foreground": None}
        assert validate(background="reset") == {"background": Color.RESET}

    @pytest.mark.parametrize("value", ["true", 1, 0, "on", "double"])
    def test_rejects_loose_booleans(self, value):
        with pytest.raises(InvalidAttribute) as exc:
            validate(bold=value)
        assert exc.value.attribute == "bold"

    def test_rejects_invalid_underline(self):
        with pytest.raises(InvalidAttribute, match="underline"):
            validate(underline="invalid")

    def test_rejects_unknown_keyword(self):
        with pytest.raises(InvalidAttribute) as exc:
            validate(hide=True)
        assert exc.value.attribute == "hide"

    def test_rejects_wrong_color_type(self):
        with pytest.raises(InvalidAttribute, match="foreground"):
            validate(foreground=123)

    def test_unknown_color_names_attribute(self):
        with pytest.raises(UnknownColor) as exc:
            validate(foreground="orange")
        assert exc.value.attribute == "foreground"

    @pytest.mark.parametrize("value", ["#GGG", "#12", "#1234567"])
    def test_bad_hex(self, value):
        with pytest.raises(InvalidHex, match="background"):
            validate(background=value)

    def test_rejection_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tintme.schema")
        with pytest.raises(InvalidAttribute):
            validate(italic="yes")
        assert "italic" in caplog.text

    def test_color_type_rejection_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tintme.schema")
        with pytest.raises(InvalidAttribute):
            validate(background=(1, 2, 300))
        assert "background" in caplog.text

    def test_double_flag_only_for_underline(self):
        assert validate(underline=Flag.DOUBLE) == {"underline": Flag.DOUBLE}
        with pytest.raises(InvalidAttribute) as exc:
            validate(blink=Flag.DOUBLE)
        assert exc.value.attribute == "blink"

    def test_only_passed_keywords_are_returned(self):
        assert validate(italic=True) == {"italic": Flag.ON}
        assert validate() == {}


class TestStyleInput:
    """The pydantic model behind validate()."""

    def test_unknown_keys_forbidden(self):
        with pytest.raises(ValidationError):
            StyleInput(strike=True)

    def test_converts_values(self):
        model = StyleInput(foreground="gray", underline="double", bold=False)
        assert model.foreground is Color.BRIGHT_BLACK
        assert model.underline is Flag.DOUBLE
        assert model.bold is Flag.OFF

    def test_strict_flags(self):
        with pytest.raises(ValidationError):
            StyleInput(inverse="on")


class TestStyleShortcut:
    """style(**raw) builds a Style from loose input."""

    def test_builds_style(self):
        assert style(foreground="red", bold=True).apply("hi") == f"{ESC}[31;1mhi{ESC}[0m"

    def test_tuple_color(self):
        assert style(foreground=(255, 0, 0)).apply("x") == f"{ESC}[38;2;255;0;0mx{ESC}[0m"

    def test_hex_without_hash(self):
        assert style(foreground="FF0000") == style(foreground="#F00")

    def test_empty(self):
        assert style().apply("x") == "x"

    def test_bold_and_faint(self):
        with pytest.raises(MutuallyExclusiveAttributes):
            style(bold=True, faint=True)

    def test_composes(self):
        composed = style(foreground="blue") >> style(bold=True, underline="double")
        assert composed.apply("x") == f"{ESC}[34;1;21mx{ESC}[0m"
