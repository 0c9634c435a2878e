from __future__ import annotations
from typing import ClassVar, Self

from .channel_base import ChannelBase

HUE_360 = 360


class Hue(ChannelBase):
    """
    Hue angle in whole degrees.

    Hue is circular, so every arithmetic operation wraps around 360
    instead of saturating at the bounds.
    """
    minimum: ClassVar[int] = 0
    maximum: ClassVar[int] = HUE_360 - 1
    _type:   ClassVar[type] = int

    def rotate_by(self, degrees: int) -> Self:
        return self.__class__((self._value + int(degrees)) % HUE_360)

    def opposite(self) -> Self:
        return self.rotate_by(180)

    def add(self, other: Self) -> Self:
        self._check_same_channel(other)
        return self.rotate_by(other.value)

    def subtract(self, other: Self) -> Self:
        self._check_same_channel(other)
        return self.rotate_by(-other.value)


class Saturation(ChannelBase):
    minimum: ClassVar[int] = 0
    maximum: ClassVar[int] = 100
    _type:   ClassVar[type] = int


class Lightness(ChannelBase):
    minimum: ClassVar[int] = 0
    maximum: ClassVar[int] = 100
    _type:   ClassVar[type] = int
