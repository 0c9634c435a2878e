"""
colorvalues Color Space Conversions
===================================

Pure conversion formulas between RGB, HSL and CMYK, each with a scalar
and a vectorized (numpy) implementation.

Scalar functions work on unit floats (hue in degrees) and do no
rounding; the color classes quantize their results. ``np_convert``
works on quantized channel arrays and reproduces the color classes'
rounding, so a batch gives the same values as converting one color
at a time.

Conversion Functions
-------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
    np_unit_rgb_to_hsl(r, g, b)

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
    np_hsl_to_unit_rgb(h, s, l)
    hue_to_point(p, q, t)

RGB → CMYK:
    unit_rgb_to_cmyk(r, g, b)
    np_unit_rgb_to_cmyk(r, g, b)

CMYK → RGB:
    cmyk_to_unit_rgb(c, m, y, k)
    np_cmyk_to_unit_rgb(c, m, y, k)

High-Level API
-------------
    np_convert(colors, from_space, to_space)

Examples
--------
>>> from colorvalues.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> h, s, l = unit_rgb_to_hsl(1.0, 0.0, 0.2)
>>> r, g, b = hsl_to_unit_rgb(h, s, l)
>>>
>>> import numpy as np
>>> from colorvalues.conversions import np_convert
>>> np_convert(np.array([[255, 0, 51], [0, 0, 0]]), "rgb", "cmyk")
array([[  0, 100,  80,   0],
       [  0,   0,   0, 100]])
"""

from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_rgb import (
    hue_to_point,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
    cmyk_to_unit_rgb,
    np_cmyk_to_unit_rgb,
)
from .to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk
from .wrapper import np_convert

__all__ = [
    # RGB → HSL
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',

    # HSL → RGB
    'hue_to_point',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',

    # RGB → CMYK
    'unit_rgb_to_cmyk',
    'np_unit_rgb_to_cmyk',

    # CMYK → RGB
    'cmyk_to_unit_rgb',
    'np_cmyk_to_unit_rgb',

    # High-level API
    'np_convert',
]
