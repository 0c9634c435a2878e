"""
colorvalues Color Classes
=========================

Immutable colors in three spaces, all sharing the ``Convertible``
capability (``to_rgba``, ``to_hsla``, ``to_cmyka``, ``str()``).

Features
--------
- Immutable instances (frozen after initialization)
- Parsing from hexadecimal and functional notations
- Conversions memoized per instance, RGBA being the hub
- One-channel adjustments returning new instances

Usage
-----
>>> from colorvalues.colors import RGBA, HSLA
>>> from colorvalues.channels import Red, Alpha
>>>
>>> color = RGBA.of("rgb(255, 0, 51)")
>>> str(color)
'#ff0033'
>>> str(color.subtract_red(Red(55)).subtract_alpha(Alpha(0.2)))
'rgba(200, 0, 51, 0.8)'
>>> str(HSLA.of("hsl(350, 100%, 50%)").rotate_by(20))
'hsl(10, 100%, 50%)'

Notations
---------
    RGBA:  #rgb, #rgba, #rrggbb, #rrggbbaa (leading # optional),
           rgb(R, G, B), rgb(R%, G%, B%), rgba(R, G, B, A), rgba(R%, G%, B%, A)
    HSLA:  hsl(H, S%, L%), hsla(H, S%, L%, A)
    CMYKA: device-cmyk(C%, M%, Y%, K%), device-cmyka(C%, M%, Y%, K%, A)

Notes
-----
- Rendering drops the alpha component when alpha is exactly 1.0
- Hex output is lowercase
- Parse failures raise ColorParseError, channel bounds InvalidValueRangeError
"""

from .color_base import Convertible
from .rgba import RGBA
from .hsla import HSLA
from .cmyka import CMYKA
from .color import Color, parse_color, convert_color

__all__ = [
    'Convertible',
    'RGBA',
    'HSLA',
    'CMYKA',
    'Color',
    'parse_color',
    'convert_color',
]
