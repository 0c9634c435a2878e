from __future__ import annotations
from typing import ClassVar, Self

from ..utils import format_float, round_half_up
from .channel_base import ChannelBase


class Alpha(ChannelBase):
    """Opacity, from 0.0 (transparent) to 1.0 (opaque)."""
    minimum: ClassVar[float] = 0.0
    maximum: ClassVar[float] = 1.0
    _type:   ClassVar[type] = float

    @classmethod
    def opaque(cls) -> Self:
        return cls(cls.maximum)

    @classmethod
    def from_hexadecimal(cls, digits: str) -> Self:
        """
        Build from the alpha byte of a hex notation (``"cc"`` -> 0.8).

        The byte is scaled to [0, 1] and kept to two decimals, so values
        written by hand in hex read back as the float one would expect.
        A single digit is doubled, as in ``#f03c``.
        """
        if len(digits) == 1:
            digits = digits * 2
        if len(digits) != 2:
            raise ValueError(f"Alpha expects 1 or 2 hex digits, got {digits!r}")
        return cls(round(int(digits, 16) / 255, 2))

    def to_hexadecimal(self) -> str:
        return format(round_half_up(self._value * 255), '02x')

    def __str__(self) -> str:
        return format_float(self._value)
