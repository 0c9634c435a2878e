from __future__ import annotations
import re
from typing import TYPE_CHECKING, Optional

from ..channels import Red, Green, Blue, Cyan, Magenta, Yellow, Black, Alpha
from ..conversions import cmyk_to_unit_rgb
from ..utils import round_half_up
from .color_base import FrozenColor
from .parsing import ALPHA_PATTERN, first_match

if TYPE_CHECKING:
    from .rgba import RGBA
    from .hsla import HSLA

_CHANNELS = (
    r'(?P<cyan>\d{1,3})%, ?(?P<magenta>\d{1,3})%, ?'
    r'(?P<yellow>\d{1,3})%, ?(?P<black>\d{1,3})%'
)
PATTERN_WITH_ALPHA = re.compile(r'^device-cmyka\(' + _CHANNELS + r', ?' + ALPHA_PATTERN + r'\)$')
PATTERN_WITHOUT_ALPHA = re.compile(r'^device-cmyk\(' + _CHANNELS + r'\)$')


def _channels(match: re.Match) -> tuple[Cyan, Magenta, Yellow, Black]:
    return (
        Cyan(int(match['cyan'])),
        Magenta(int(match['magenta'])),
        Yellow(int(match['yellow'])),
        Black(int(match['black'])),
    )


def match_with_alpha(color: str) -> Optional[CMYKA]:
    match = PATTERN_WITH_ALPHA.match(color)
    if match is None:
        return None
    return CMYKA(*_channels(match), Alpha(float(match['alpha'])))


def match_without_alpha(color: str) -> Optional[CMYKA]:
    match = PATTERN_WITHOUT_ALPHA.match(color)
    if match is None:
        return None
    return CMYKA(*_channels(match))


MATCHERS = (match_with_alpha, match_without_alpha)


class CMYKA(FrozenColor):
    """
    Cyan, magenta, yellow, black and alpha channels, all but alpha in percent.

    Written as ``device-cmyk(0%, 100%, 80%, 0%)``, or
    ``device-cmyka(0%, 100%, 80%, 0%, 0.5)`` when not fully opaque.
    """
    __slots__ = ('_cyan', '_magenta', '_yellow', '_black', '_alpha', '_rgba', '_string')

    def __init__(
        self,
        cyan: Cyan,
        magenta: Magenta,
        yellow: Yellow,
        black: Black,
        alpha: Alpha | None = None,
    ) -> None:
        self._cyan = cyan
        self._magenta = magenta
        self._yellow = yellow
        self._black = black
        self._alpha = alpha if alpha is not None else Alpha.opaque()
        self._rgba = None
        self._string = None
        self._freeze()

    @classmethod
    def of(cls, color: str) -> CMYKA:
        return first_match(MATCHERS, color)

    from_string = of

    @property
    def cyan(self) -> Cyan:
        return self._cyan

    @property
    def magenta(self) -> Magenta:
        return self._magenta

    @property
    def yellow(self) -> Yellow:
        return self._yellow

    @property
    def black(self) -> Black:
        return self._black

    @property
    def alpha(self) -> Alpha:
        return self._alpha

    def _with(self, **channels) -> CMYKA:
        values = {
            'cyan': self._cyan,
            'magenta': self._magenta,
            'yellow': self._yellow,
            'black': self._black,
            'alpha': self._alpha,
        }
        values.update(channels)
        return CMYKA(**values)

    def add_cyan(self, cyan: Cyan) -> CMYKA:
        return self._with(cyan=self._cyan.add(cyan))

    def subtract_cyan(self, cyan: Cyan) -> CMYKA:
        return self._with(cyan=self._cyan.subtract(cyan))

    def add_magenta(self, magenta: Magenta) -> CMYKA:
        return self._with(magenta=self._magenta.add(magenta))

    def subtract_magenta(self, magenta: Magenta) -> CMYKA:
        return self._with(magenta=self._magenta.subtract(magenta))

    def add_yellow(self, yellow: Yellow) -> CMYKA:
        return self._with(yellow=self._yellow.add(yellow))

    def subtract_yellow(self, yellow: Yellow) -> CMYKA:
        return self._with(yellow=self._yellow.subtract(yellow))

    def add_black(self, black: Black) -> CMYKA:
        return self._with(black=self._black.add(black))

    def subtract_black(self, black: Black) -> CMYKA:
        return self._with(black=self._black.subtract(black))

    def add_alpha(self, alpha: Alpha) -> CMYKA:
        return self._with(alpha=self._alpha.add(alpha))

    def subtract_alpha(self, alpha: Alpha) -> CMYKA:
        return self._with(alpha=self._alpha.subtract(alpha))

    def to_rgba(self) -> RGBA:
        if self._rgba is not None:
            return self._rgba

        from .rgba import RGBA  # local import to avoid cycles

        r, g, b = cmyk_to_unit_rgb(
            self._cyan.to_int() / 100,
            self._magenta.to_int() / 100,
            self._yellow.to_int() / 100,
            self._black.to_int() / 100,
        )

        return self._cache('_rgba', RGBA(
            Red(round_half_up(r * 255)),
            Green(round_half_up(g * 255)),
            Blue(round_half_up(b * 255)),
            self._alpha,
        ))

    def to_hsla(self) -> HSLA:
        return self.to_rgba().to_hsla()

    def to_cmyka(self) -> CMYKA:
        return self

    def __str__(self) -> str:
        if self._string is not None:
            return self._string

        channels = f"{self._cyan}%, {self._magenta}%, {self._yellow}%, {self._black}%"
        if self._alpha.at_maximum():
            string = f"device-cmyk({channels})"
        else:
            string = f"device-cmyka({channels}, {self._alpha})"
        return self._cache('_string', string)

    to_string = __str__

    def __repr__(self) -> str:
        return (
            f"CMYKA({self._cyan!r}, {self._magenta!r}, {self._yellow!r}, "
            f"{self._black!r}, {self._alpha!r})"
        )

    def equals(self, other: CMYKA) -> bool:
        self._check_same_color(other)
        return (
            self._cyan.equals(other.cyan)
            and self._magenta.equals(other.magenta)
            and self._yellow.equals(other.yellow)
            and self._black.equals(other.black)
            and self._alpha.equals(other.alpha)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CMYKA):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((CMYKA, self._cyan, self._magenta, self._yellow, self._black, self._alpha))
