from typing import ClassVar

from .channel_base import ChannelBase


class PercentChannel(ChannelBase):
    minimum: ClassVar[int] = 0
    maximum: ClassVar[int] = 100
    _type:   ClassVar[type] = int


class Cyan(PercentChannel):
    pass


class Magenta(PercentChannel):
    pass


class Yellow(PercentChannel):
    pass


class Black(PercentChannel):
    pass
