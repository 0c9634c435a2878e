from __future__ import annotations
import re
from typing import TYPE_CHECKING, Optional

from ..channels import (
    Red, Green, Blue, Alpha, Intensity,
    Hue, Saturation, Lightness,
    Cyan, Magenta, Yellow, Black,
)
from ..conversions import unit_rgb_to_hsl, unit_rgb_to_cmyk
from ..utils import round_half_up
from .color_base import FrozenColor
from .parsing import ALPHA_PATTERN, first_match

if TYPE_CHECKING:
    from .hsla import HSLA
    from .cmyka import CMYKA

HEXADECIMAL_PATTERN = re.compile(r'^#?(?P<digits>[0-9a-fA-F]+)$')
RGB_FUNCTION_PATTERN = re.compile(
    r'^rgb\((?P<red>\d{1,3}), ?(?P<green>\d{1,3}), ?(?P<blue>\d{1,3})\)$'
)
PERCENTED_RGB_FUNCTION_PATTERN = re.compile(
    r'^rgb\((?P<red>\d{1,3})%, ?(?P<green>\d{1,3})%, ?(?P<blue>\d{1,3})%\)$'
)
RGBA_FUNCTION_PATTERN = re.compile(
    r'^rgba\((?P<red>\d{1,3}), ?(?P<green>\d{1,3}), ?(?P<blue>\d{1,3}), ?' + ALPHA_PATTERN + r'\)$'
)
PERCENTED_RGBA_FUNCTION_PATTERN = re.compile(
    r'^rgba\((?P<red>\d{1,3})%, ?(?P<green>\d{1,3})%, ?(?P<blue>\d{1,3})%, ?' + ALPHA_PATTERN + r'\)$'
)


def _split_hex(digits: str) -> list[str]:
    """'f03c' -> ['f', '0', '3', 'c'], 'ff0033cc' -> ['ff', '00', '33', 'cc']"""
    if len(digits) in (3, 4):
        return list(digits)
    return [digits[i:i + 2] for i in range(0, len(digits), 2)]


def _hex_digits(color: str, lengths: tuple[int, int]) -> Optional[list[str]]:
    match = HEXADECIMAL_PATTERN.match(color)
    if match is None or len(match['digits']) not in lengths:
        return None
    return _split_hex(match['digits'])


def match_hexadecimal_with_alpha(color: str) -> Optional[RGBA]:
    parts = _hex_digits(color, (4, 8))
    if parts is None:
        return None
    red, green, blue, alpha = parts
    return RGBA(
        Red.from_hexadecimal(red),
        Green.from_hexadecimal(green),
        Blue.from_hexadecimal(blue),
        Alpha.from_hexadecimal(alpha),
    )


def match_hexadecimal_without_alpha(color: str) -> Optional[RGBA]:
    parts = _hex_digits(color, (3, 6))
    if parts is None:
        return None
    red, green, blue = parts
    return RGBA(
        Red.from_hexadecimal(red),
        Green.from_hexadecimal(green),
        Blue.from_hexadecimal(blue),
    )


def _points(match: re.Match) -> tuple[Red, Green, Blue]:
    return Red(int(match['red'])), Green(int(match['green'])), Blue(int(match['blue']))


def _percents(match: re.Match) -> tuple[Red, Green, Blue]:
    return (
        Red.from_intensity(Intensity(int(match['red']))),
        Green.from_intensity(Intensity(int(match['green']))),
        Blue.from_intensity(Intensity(int(match['blue']))),
    )


def match_rgb_function_with_points(color: str) -> Optional[RGBA]:
    match = RGB_FUNCTION_PATTERN.match(color)
    if match is None:
        return None
    return RGBA(*_points(match))


def match_rgb_function_with_percents(color: str) -> Optional[RGBA]:
    match = PERCENTED_RGB_FUNCTION_PATTERN.match(color)
    if match is None:
        return None
    return RGBA(*_percents(match))


def match_rgba_function_with_points(color: str) -> Optional[RGBA]:
    match = RGBA_FUNCTION_PATTERN.match(color)
    if match is None:
        return None
    return RGBA(*_points(match), Alpha(float(match['alpha'])))


def match_rgba_function_with_percents(color: str) -> Optional[RGBA]:
    match = PERCENTED_RGBA_FUNCTION_PATTERN.match(color)
    if match is None:
        return None
    return RGBA(*_percents(match), Alpha(float(match['alpha'])))


HEXADECIMAL_MATCHERS = (
    match_hexadecimal_with_alpha,
    match_hexadecimal_without_alpha,
)
RGB_FUNCTION_MATCHERS = (
    match_rgb_function_with_points,
    match_rgb_function_with_percents,
)
RGBA_FUNCTION_MATCHERS = (
    match_rgba_function_with_points,
    match_rgba_function_with_percents,
)
# order matters: first match wins
MATCHERS = HEXADECIMAL_MATCHERS + RGB_FUNCTION_MATCHERS + RGBA_FUNCTION_MATCHERS


class RGBA(FrozenColor):
    """
    Red, green, blue and alpha channels.

    RGBA is the hub of the library: HSLA and CMYKA convert to each other
    through it. Conversions are computed once and kept on the instance.

    >>> color = RGBA.of("#ff0033")
    >>> color.to_hsla()
    HSLA(Hue(348), Saturation(100), Lightness(50), Alpha(1.0))
    >>> str(color.subtract_alpha(Alpha(0.2)))
    'rgba(255, 0, 51, 0.8)'
    """
    __slots__ = ('_red', '_green', '_blue', '_alpha', '_hsla', '_cmyka', '_string')

    def __init__(
        self,
        red: Red,
        green: Green,
        blue: Blue,
        alpha: Alpha | None = None,
    ) -> None:
        self._red = red
        self._green = green
        self._blue = blue
        self._alpha = alpha if alpha is not None else Alpha.opaque()
        self._hsla = None
        self._cmyka = None
        self._string = None
        self._freeze()

    # ------------------ PARSING ------------------
    @classmethod
    def of(cls, color: str) -> RGBA:
        """
        Parse any of the hexadecimal, ``rgb()`` and ``rgba()`` notations.

        Raises:
            ColorParseError: if no notation matches.
        """
        return first_match(MATCHERS, color)

    from_string = of

    @classmethod
    def from_hexadecimal(cls, color: str) -> RGBA:
        return first_match(HEXADECIMAL_MATCHERS, color)

    @classmethod
    def from_rgb_function(cls, color: str) -> RGBA:
        return first_match(RGB_FUNCTION_MATCHERS, color)

    @classmethod
    def from_rgba_function(cls, color: str) -> RGBA:
        return first_match(RGBA_FUNCTION_MATCHERS, color)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> Red:
        return self._red

    @property
    def green(self) -> Green:
        return self._green

    @property
    def blue(self) -> Blue:
        return self._blue

    @property
    def alpha(self) -> Alpha:
        return self._alpha

    # ------------------ ADJUSTMENTS ------------------
    def add_red(self, red: Red) -> RGBA:
        return RGBA(self._red.add(red), self._green, self._blue, self._alpha)

    def subtract_red(self, red: Red) -> RGBA:
        return RGBA(self._red.subtract(red), self._green, self._blue, self._alpha)

    def add_green(self, green: Green) -> RGBA:
        return RGBA(self._red, self._green.add(green), self._blue, self._alpha)

    def subtract_green(self, green: Green) -> RGBA:
        return RGBA(self._red, self._green.subtract(green), self._blue, self._alpha)

    def add_blue(self, blue: Blue) -> RGBA:
        return RGBA(self._red, self._green, self._blue.add(blue), self._alpha)

    def subtract_blue(self, blue: Blue) -> RGBA:
        return RGBA(self._red, self._green, self._blue.subtract(blue), self._alpha)

    def add_alpha(self, alpha: Alpha) -> RGBA:
        return RGBA(self._red, self._green, self._blue, self._alpha.add(alpha))

    def subtract_alpha(self, alpha: Alpha) -> RGBA:
        return RGBA(self._red, self._green, self._blue, self._alpha.subtract(alpha))

    # ------------------ CONVERSIONS ------------------
    def to_rgba(self) -> RGBA:
        return self

    def to_hsla(self) -> HSLA:
        if self._hsla is not None:
            return self._hsla

        from .hsla import HSLA  # local import to avoid cycles

        hue, saturation, lightness = unit_rgb_to_hsl(*self._unit_rgb())

        return self._cache('_hsla', HSLA(
            Hue(round_half_up(hue) % 360),
            Saturation(round_half_up(saturation * 100)),
            Lightness(round_half_up(lightness * 100)),
            self._alpha,
        ))

    def to_cmyka(self) -> CMYKA:
        if self._cmyka is not None:
            return self._cmyka

        from .cmyka import CMYKA  # local import to avoid cycles

        cyan, magenta, yellow, black = unit_rgb_to_cmyk(*self._unit_rgb())

        return self._cache('_cmyka', CMYKA(
            Cyan(round_half_up(cyan * 100)),
            Magenta(round_half_up(magenta * 100)),
            Yellow(round_half_up(yellow * 100)),
            Black(round_half_up(black * 100)),
            self._alpha,
        ))

    def _unit_rgb(self) -> tuple[float, float, float]:
        return (
            self._red.to_int() / 255,
            self._green.to_int() / 255,
            self._blue.to_int() / 255,
        )

    # ------------------ RENDERING ------------------
    def to_hexadecimal(self) -> str:
        """``rrggbb``, followed by the alpha byte when not fully opaque."""
        hexadecimal = (
            self._red.to_hexadecimal()
            + self._green.to_hexadecimal()
            + self._blue.to_hexadecimal()
        )
        if not self._alpha.at_maximum():
            hexadecimal += self._alpha.to_hexadecimal()
        return hexadecimal

    def __str__(self) -> str:
        if self._string is not None:
            return self._string

        if self._alpha.at_maximum():
            string = '#' + self.to_hexadecimal()
        else:
            string = f"rgba({self._red}, {self._green}, {self._blue}, {self._alpha})"
        return self._cache('_string', string)

    to_string = __str__

    def __repr__(self) -> str:
        return f"RGBA({self._red!r}, {self._green!r}, {self._blue!r}, {self._alpha!r})"

    # ------------------ COMPARISON ------------------
    def equals(self, other: RGBA) -> bool:
        self._check_same_color(other)
        return (
            self._red.equals(other.red)
            and self._green.equals(other.green)
            and self._blue.equals(other.blue)
            and self._alpha.equals(other.alpha)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RGBA):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((RGBA, self._red, self._green, self._blue, self._alpha))
