from __future__ import annotations

from .types.color_types import Scalar


class ColorError(ValueError):
    """Base class for every error raised by colorvalues."""


class InvalidValueRangeError(ColorError):
    """A channel was built from a value outside of its inclusive bounds."""

    def __init__(self, channel: str, value: Scalar, minimum: Scalar, maximum: Scalar) -> None:
        self.channel = channel
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{channel} expects a value in [{minimum}, {maximum}], got {value!r}"
        )


class ColorParseError(ColorError):
    """No known notation matched the given string."""

    def __init__(self, color: str) -> None:
        self.color = color
        super().__init__(f"Unrecognized color notation: {color!r}")
