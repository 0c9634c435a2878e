from __future__ import annotations
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .rgba import RGBA
    from .hsla import HSLA
    from .cmyka import CMYKA


@runtime_checkable
class Convertible(Protocol):
    """Anything that can be expressed in each of the supported spaces."""

    def to_rgba(self) -> RGBA: ...

    def to_hsla(self) -> HSLA: ...

    def to_cmyka(self) -> CMYKA: ...

    def __str__(self) -> str: ...


class FrozenColor:
    """
    Immutable storage for a color made of channel values.

    Conversion results are memoized in dedicated slots; since the channels
    never change the caches are never invalidated.
    """
    __slots__ = ('_is_frozen',)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)

    def _cache(self, name: str, value: Any) -> Any:
        """Store a computed value on a frozen instance and return it."""
        object.__setattr__(self, name, value)
        return value

    def _check_same_color(self, other: object) -> None:
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
