"""
Channel value types.

Every channel is an immutable number bounded to an inclusive range.
Construction outside of the range raises ``InvalidValueRangeError``;
``add``/``subtract`` saturate at the bounds instead of raising, except
for ``Hue`` which wraps around 360 degrees.

>>> Red(250).add(Red(10)).to_int()
255
>>> Hue(350).rotate_by(20).to_int()
10
"""

from .channel_base import ChannelBase
from .rgb import Intensity, Red, Green, Blue
from .hsl import Hue, Saturation, Lightness
from .cmyk import Cyan, Magenta, Yellow, Black
from .alpha import Alpha

__all__ = [
    'ChannelBase',
    'Intensity',
    'Red',
    'Green',
    'Blue',
    'Hue',
    'Saturation',
    'Lightness',
    'Cyan',
    'Magenta',
    'Yellow',
    'Black',
    'Alpha',
]
