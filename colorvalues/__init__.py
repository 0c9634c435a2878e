"""
colorvalues - Color Value Library
=================================

Immutable color values in RGB, HSL and CMYK (each with alpha), parsed from
CSS-like notations, converted between spaces and adjusted channel by channel.

Key Features
------------
- Bounded channel types (Red, Hue, Saturation, Cyan, Alpha, ...) that
  saturate on arithmetic instead of overflowing, hue wrapping around 360
- RGBA, HSLA and CMYKA colors with memoized conversions, RGBA being the hub
- Parsing of hexadecimal, rgb()/rgba(), hsl()/hsla() and device-cmyk()
  notations, rendering back to the shortest matching notation
- Vectorized numpy conversions for batches of colors

Quick Start
-----------
>>> from colorvalues import RGBA, HSLA, Hue, parse_color
>>>
>>> color = RGBA.of("#ff0033")
>>> str(color.to_hsla())
'hsl(348, 100%, 50%)'
>>> str(color.to_cmyka())
'device-cmyk(0%, 100%, 80%, 0%)'
>>> str(HSLA.of("hsla(120, 100%, 50%, 0.8)").to_rgba())
'rgba(0, 255, 0, 0.8)'
>>> Hue(350).rotate_by(20).to_int()
10
"""

from .exceptions import ColorError, ColorParseError, InvalidValueRangeError
from .channels import (
    Intensity,
    Red,
    Green,
    Blue,
    Hue,
    Saturation,
    Lightness,
    Cyan,
    Magenta,
    Yellow,
    Black,
    Alpha,
)
from .colors import (
    Convertible,
    RGBA,
    HSLA,
    CMYKA,
    Color,
    parse_color,
    convert_color,
)
from .conversions import (
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    unit_rgb_to_cmyk,
    cmyk_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_hsl_to_unit_rgb,
    np_unit_rgb_to_cmyk,
    np_cmyk_to_unit_rgb,
    np_convert,
)

__all__ = [
    # errors
    "ColorError",
    "ColorParseError",
    "InvalidValueRangeError",
    # channels
    "Intensity",
    "Red",
    "Green",
    "Blue",
    "Hue",
    "Saturation",
    "Lightness",
    "Cyan",
    "Magenta",
    "Yellow",
    "Black",
    "Alpha",
    # colors
    "Convertible",
    "RGBA",
    "HSLA",
    "CMYKA",
    "Color",
    "parse_color",
    "convert_color",
    # conversions
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "unit_rgb_to_cmyk",
    "cmyk_to_unit_rgb",
    "np_unit_rgb_to_hsl",
    "np_hsl_to_unit_rgb",
    "np_unit_rgb_to_cmyk",
    "np_cmyk_to_unit_rgb",
    "np_convert",
]

__version__ = "0.1.0"
