from __future__ import annotations
from typing import ClassVar, Self

from boundednumbers import clamp

from ..exceptions import InvalidValueRangeError
from ..types.color_types import Scalar


class ChannelBase:
    """
    A single bounded, immutable channel value.

    Subclasses only declare their bounds and numeric type:

    >>> class Red(ChannelBase):
    ...     minimum = 0
    ...     maximum = 255
    ...     _type = int
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    minimum: ClassVar[Scalar]
    maximum: ClassVar[Scalar]
    _type:   ClassVar[type] = int

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Scalar) -> None:
        if not self.minimum <= value <= self.maximum:
            raise InvalidValueRangeError(
                self.__class__.__name__, value, self.minimum, self.maximum
            )
        if self._type is int and value != int(value):
            raise TypeError(
                f"{self.__class__.__name__} expects an integral value, got {value!r}"
            )
        self._value = self._type(value)

        # freeze instance
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Scalar:
        return self._value

    def to_int(self) -> int:
        return int(self._value)

    def to_float(self) -> float:
        return float(self._value)

    def at_minimum(self) -> bool:
        return self._value == self.minimum

    def at_maximum(self) -> bool:
        return self._value == self.maximum

    # ------------------ ARITHMETIC ------------------
    def _check_same_channel(self, other: object) -> None:
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def _saturate(self, value: Scalar) -> Self:
        return self.__class__(self._type(clamp(value, self.minimum, self.maximum)))

    def add(self, other: Self) -> Self:
        """Return a new channel holding ``self + other``, clamped to the bounds."""
        self._check_same_channel(other)
        return self._saturate(self._value + other.value)

    def subtract(self, other: Self) -> Self:
        """Return a new channel holding ``self - other``, clamped to the bounds."""
        self._check_same_channel(other)
        return self._saturate(self._value - other.value)

    def __add__(self, other: Self) -> Self:
        return self.add(other)

    def __sub__(self, other: Self) -> Self:
        return self.subtract(other)

    # ------------------ COMPARISON ------------------
    def equals(self, other: Self) -> bool:
        self._check_same_channel(other)
        return self._value == other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
