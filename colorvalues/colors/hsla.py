from __future__ import annotations
import re
from typing import TYPE_CHECKING, Optional

from ..channels import Red, Green, Blue, Hue, Saturation, Lightness, Alpha
from ..conversions import hsl_to_unit_rgb
from ..utils import round_half_up
from .color_base import FrozenColor
from .parsing import ALPHA_PATTERN, first_match

if TYPE_CHECKING:
    from .rgba import RGBA
    from .cmyka import CMYKA

PATTERN_WITH_ALPHA = re.compile(
    r'^hsla\((?P<hue>\d{1,3}), ?(?P<saturation>\d{1,3})%, ?(?P<lightness>\d{1,3})%, ?'
    + ALPHA_PATTERN + r'\)$'
)
PATTERN_WITHOUT_ALPHA = re.compile(
    r'^hsl\((?P<hue>\d{1,3}), ?(?P<saturation>\d{1,3})%, ?(?P<lightness>\d{1,3})%\)$'
)


def match_with_alpha(color: str) -> Optional[HSLA]:
    match = PATTERN_WITH_ALPHA.match(color)
    if match is None:
        return None
    return HSLA(
        Hue(int(match['hue'])),
        Saturation(int(match['saturation'])),
        Lightness(int(match['lightness'])),
        Alpha(float(match['alpha'])),
    )


def match_without_alpha(color: str) -> Optional[HSLA]:
    match = PATTERN_WITHOUT_ALPHA.match(color)
    if match is None:
        return None
    return HSLA(
        Hue(int(match['hue'])),
        Saturation(int(match['saturation'])),
        Lightness(int(match['lightness'])),
    )


MATCHERS = (match_with_alpha, match_without_alpha)


class HSLA(FrozenColor):
    """Hue, saturation, lightness and alpha channels."""
    __slots__ = ('_hue', '_saturation', '_lightness', '_alpha', '_rgba', '_string')

    def __init__(
        self,
        hue: Hue,
        saturation: Saturation,
        lightness: Lightness,
        alpha: Alpha | None = None,
    ) -> None:
        self._hue = hue
        self._saturation = saturation
        self._lightness = lightness
        self._alpha = alpha if alpha is not None else Alpha.opaque()
        self._rgba = None
        self._string = None
        self._freeze()

    @classmethod
    def of(cls, color: str) -> HSLA:
        """
        Parse ``hsla(H, S%, L%, A)`` or ``hsl(H, S%, L%)``.

        Raises:
            ColorParseError: if neither notation matches.
        """
        return first_match(MATCHERS, color)

    from_string = of

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def hue(self) -> Hue:
        return self._hue

    @property
    def saturation(self) -> Saturation:
        return self._saturation

    @property
    def lightness(self) -> Lightness:
        return self._lightness

    @property
    def alpha(self) -> Alpha:
        return self._alpha

    # ------------------ ADJUSTMENTS ------------------
    def rotate_by(self, degrees: int) -> HSLA:
        return HSLA(self._hue.rotate_by(degrees), self._saturation, self._lightness, self._alpha)

    def add_saturation(self, saturation: Saturation) -> HSLA:
        return HSLA(self._hue, self._saturation.add(saturation), self._lightness, self._alpha)

    def subtract_saturation(self, saturation: Saturation) -> HSLA:
        return HSLA(self._hue, self._saturation.subtract(saturation), self._lightness, self._alpha)

    def add_lightness(self, lightness: Lightness) -> HSLA:
        return HSLA(self._hue, self._saturation, self._lightness.add(lightness), self._alpha)

    def subtract_lightness(self, lightness: Lightness) -> HSLA:
        return HSLA(self._hue, self._saturation, self._lightness.subtract(lightness), self._alpha)

    def add_alpha(self, alpha: Alpha) -> HSLA:
        return HSLA(self._hue, self._saturation, self._lightness, self._alpha.add(alpha))

    def subtract_alpha(self, alpha: Alpha) -> HSLA:
        return HSLA(self._hue, self._saturation, self._lightness, self._alpha.subtract(alpha))

    # ------------------ CONVERSIONS ------------------
    def to_rgba(self) -> RGBA:
        if self._rgba is not None:
            return self._rgba

        from .rgba import RGBA  # local import to avoid cycles

        r, g, b = hsl_to_unit_rgb(
            self._hue.to_int(),
            self._saturation.to_int() / 100,
            self._lightness.to_int() / 100,
        )

        return self._cache('_rgba', RGBA(
            Red(round_half_up(r * 255)),
            Green(round_half_up(g * 255)),
            Blue(round_half_up(b * 255)),
            self._alpha,
        ))

    def to_hsla(self) -> HSLA:
        return self

    def to_cmyka(self) -> CMYKA:
        return self.to_rgba().to_cmyka()

    # ------------------ RENDERING ------------------
    def __str__(self) -> str:
        if self._string is not None:
            return self._string

        if self._alpha.at_maximum():
            string = f"hsl({self._hue}, {self._saturation}%, {self._lightness}%)"
        else:
            string = f"hsla({self._hue}, {self._saturation}%, {self._lightness}%, {self._alpha})"
        return self._cache('_string', string)

    to_string = __str__

    def __repr__(self) -> str:
        return f"HSLA({self._hue!r}, {self._saturation!r}, {self._lightness!r}, {self._alpha!r})"

    # ------------------ COMPARISON ------------------
    def equals(self, other: HSLA) -> bool:
        self._check_same_color(other)
        return (
            self._hue.equals(other.hue)
            and self._saturation.equals(other.saturation)
            and self._lightness.equals(other.lightness)
            and self._alpha.equals(other.alpha)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HSLA):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((HSLA, self._hue, self._saturation, self._lightness, self._alpha))
