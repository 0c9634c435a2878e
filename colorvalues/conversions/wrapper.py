import numpy as np
from typing import Callable

from ..channels import Red, Green, Blue, Hue, Saturation, Lightness, Cyan, Magenta, Yellow, Black, Alpha
from ..exceptions import InvalidValueRangeError
from ..types.color_types import ColorSpace, base_space, has_alpha, space_channels
from ..utils import np_round_half_up

from .to_rgb import np_hsl_to_unit_rgb, np_cmyk_to_unit_rgb
from .to_hsl import np_unit_rgb_to_hsl
from .to_cmyk import np_unit_rgb_to_cmyk

# Direct formulas; every other pair goes through quantized rgb
CONVERT_NUMPY_DIRECT: dict[tuple[str, str], Callable[..., np.ndarray]] = {
    ("rgb", "hsl"): np_unit_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_unit_rgb,
    ("rgb", "cmyk"): np_unit_rgb_to_cmyk,
    ("cmyk", "rgb"): np_cmyk_to_unit_rgb,
}


# channel classes bound each column, alpha last
SPACE_CHANNELS = {
    "rgb": (Red, Green, Blue),
    "hsl": (Hue, Saturation, Lightness),
    "cmyk": (Cyan, Magenta, Yellow, Black),
}


def validate(colors: np.ndarray, space: str, alpha: bool) -> None:
    """Apply the channel bounds of the color classes to every column."""
    channels = SPACE_CHANNELS[space] + ((Alpha,) if alpha else ())
    for i, channel in enumerate(channels):
        column = colors[..., i]
        outside = np.isnan(column) | (column < channel.minimum) | (column > channel.maximum)
        if np.any(outside):
            raise InvalidValueRangeError(
                channel.__name__, float(column[outside][0]), channel.minimum, channel.maximum
            )
        if channel._type is int and np.any(column != np.floor(column)):
            raise TypeError(f"{channel.__name__} expects integral values")


def normalize(color: np.ndarray, space: str) -> np.ndarray:
    """Quantized channels -> unit floats (hue stays in degrees)."""
    if space == "rgb":
        return color / 255

    if space == "hsl":
        h = color[..., 0]
        s = color[..., 1] / 100
        l = color[..., 2] / 100
        return np.stack([h, s, l], axis=-1)

    if space == "cmyk":
        return color / 100

    raise ValueError(f"Unknown space: {space}")


def scale(color: np.ndarray, space: str) -> np.ndarray:
    """Unit floats -> quantized integer channels, rounding halves up."""
    if space == "rgb":
        return np_round_half_up(color * 255)

    if space == "hsl":
        h = np_round_half_up(color[..., 0]) % 360
        s = np_round_half_up(color[..., 1] * 100)
        l = np_round_half_up(color[..., 2] * 100)
        return np.stack([h, s, l], axis=-1)

    if space == "cmyk":
        return np_round_half_up(color * 100)

    raise ValueError(f"Unknown space: {space}")


def _convert_base(base: np.ndarray, fs: str, ts: str) -> np.ndarray:
    if fs == ts:
        return base.astype(int)

    key = (fs, ts)
    if key not in CONVERT_NUMPY_DIRECT:
        rgb = _convert_base(base, fs, "rgb")
        return _convert_base(rgb.astype(float), "rgb", ts)

    # normalize → convert → scale
    base_norm = normalize(base, fs)
    converted = CONVERT_NUMPY_DIRECT[key](
        *(base_norm[..., i] for i in range(base_norm.shape[-1]))
    )
    return scale(converted, ts)


def np_convert(
    colors: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """
    Convert a batch of quantized colors in one call.

    Channels use the same units as the scalar color classes: rgb in
    0-255, hsl as degrees/percent/percent, cmyk in percent and alpha
    as a float in [0, 1]. The result matches converting every color
    with RGBA/HSLA/CMYKA one by one.

    Args:
        colors: array of shape (..., n) where n is the channel count of
            ``from_space`` (plus one for alpha spaces)
        from_space: "rgb", "rgba", "hsl", "hsla", "cmyk" or "cmyka"
        to_space: target space, same choices

    Raises:
        InvalidValueRangeError: if a channel is outside the bounds of its
            color class.
        TypeError: if an integer channel holds a fractional value.

    Returns:
        Integer array for alpha-less targets; float array when the target
        has alpha (last column is alpha, 1.0 if the input had none).
    """
    colors = np.asarray(colors, dtype=float)
    fs, ts = base_space(from_space), base_space(to_space)
    alpha_in, alpha_out = has_alpha(from_space), has_alpha(to_space)

    expected = space_channels[fs] + (1 if alpha_in else 0)
    if colors.shape[-1] != expected:
        raise ValueError(
            f"{from_space} expects last dimension to be {expected}, got shape {colors.shape}"
        )
    validate(colors, fs, alpha_in)

    if alpha_in:
        base = colors[..., :-1]
        alpha = colors[..., -1]
    else:
        base = colors
        alpha = np.ones(colors.shape[:-1])

    out = _convert_base(base, fs, ts)

    if alpha_out:
        return np.concatenate([out.astype(float), alpha[..., None]], axis=-1)
    return out
