from __future__ import annotations
from typing import Callable, Union

from .color_base import Convertible
from .rgba import RGBA, MATCHERS as RGBA_MATCHERS
from .hsla import HSLA, MATCHERS as HSLA_MATCHERS
from .cmyka import CMYKA, MATCHERS as CMYKA_MATCHERS
from .parsing import first_match

Color = Union[RGBA, HSLA, CMYKA]

# first match wins
ALL_MATCHERS = RGBA_MATCHERS + HSLA_MATCHERS + CMYKA_MATCHERS

space_to_converter: dict[str, Callable[[Convertible], Color]] = {
    "rgba": lambda color: color.to_rgba(),
    "hsla": lambda color: color.to_hsla(),
    "cmyka": lambda color: color.to_cmyka(),
}


def parse_color(color: str) -> Color:
    """
    Parse any supported notation, returning the class it is written in.

    >>> parse_color("#ff0033")
    RGBA(Red(255), Green(0), Blue(51), Alpha(1.0))
    >>> parse_color("hsl(210, 50%, 40%)").to_rgba()
    RGBA(Red(51), Green(102), Blue(153), Alpha(1.0))

    Raises:
        ColorParseError: if the string is in none of the RGBA, HSLA or
            CMYKA notations.
    """
    return first_match(ALL_MATCHERS, color)


def convert_color(color: Convertible, to_space: str) -> Color:
    """
    Convert a color to "rgba", "hsla" or "cmyka".

    Args:
        color: Any RGBA, HSLA or CMYKA instance
        to_space: Target space name, case insensitive

    Returns:
        New color instance in the target space
    """
    if not isinstance(color, Convertible):
        raise TypeError(f"Cannot convert {type(color).__name__}, expected RGBA, HSLA or CMYKA")

    converter = space_to_converter.get(to_space.lower())
    if converter is None:
        raise ValueError(
            f"Unsupported color space: {to_space}, expected one of {sorted(space_to_converter)}"
        )
    return converter(color)
