from __future__ import annotations
from typing import ClassVar, Self

from ..utils import round_half_up
from .channel_base import ChannelBase


class Intensity(ChannelBase):
    """Percentage of a byte channel, as written in ``rgb(50%, 0%, 100%)``."""
    minimum: ClassVar[int] = 0
    maximum: ClassVar[int] = 100
    _type:   ClassVar[type] = int


class ByteChannel(ChannelBase):
    minimum: ClassVar[int] = 0
    maximum: ClassVar[int] = 255
    _type:   ClassVar[type] = int

    @classmethod
    def from_hexadecimal(cls, digits: str) -> Self:
        """
        Build from one or two hex digits. A single digit is doubled,
        so ``"f"`` reads as ``"ff"``.
        """
        if len(digits) == 1:
            digits = digits * 2
        if len(digits) != 2:
            raise ValueError(f"{cls.__name__} expects 1 or 2 hex digits, got {digits!r}")
        return cls(int(digits, 16))

    @classmethod
    def from_intensity(cls, intensity: Intensity) -> Self:
        return cls(round_half_up(intensity.to_int() / 100 * cls.maximum))

    def to_hexadecimal(self) -> str:
        return format(self._value, '02x')


class Red(ByteChannel):
    pass


class Green(ByteChannel):
    pass


class Blue(ByteChannel):
    pass
