from __future__ import annotations
from typing import Literal, Union

Scalar = Union[int, float]
ColorSpace = Literal["rgb", "rgba", "hsl", "hsla", "cmyk", "cmyka"]
ALPHA_SPACES = {"rgba", "hsla", "cmyka"}

# channel count without alpha
space_channels: dict[str, int] = {
    "rgb": 3,
    "hsl": 3,
    "cmyk": 4,
}


def base_space(color_space: str) -> str:
    """Strip the trailing alpha marker: 'hsla' -> 'hsl', 'cmyka' -> 'cmyk'."""
    color_space = color_space.lower()
    if color_space in ALPHA_SPACES:
        return color_space[:-1]
    if color_space not in space_channels:
        raise ValueError(f"Unknown space: {color_space}")
    return color_space


def has_alpha(color_space: str) -> bool:
    return color_space.lower() in ALPHA_SPACES
