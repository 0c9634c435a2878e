import numpy as np
from numpy import ndarray as NDArray

## HSL to RGB conversions
# Standard HSL -> RGB transform, see
# https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB_alternative
# and the CSS Color 3 reference code (https://www.w3.org/TR/css-color-3/#hsl-color).
# q is the largest channel value of the colour (m2 in the CSS text),
# p the smallest (m1); hue_to_point places a channel between the two
# according to its distance, in turns, from the hue.


def hue_to_point(p: float, q: float, t: float) -> float:
    """
    Channel value for the hue offset ``t`` (in turns) between the minimum
    ``p`` and the maximum ``q``.
    """
    if t < 0:
        t += 1
    if t > 1:
        t -= 1

    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    # achromatic
    if s == 0:
        return l, l, l

    hue = h / 360
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return (
        hue_to_point(p, q, hue + 1 / 3),
        hue_to_point(p, q, hue),
        hue_to_point(p, q, hue - 1 / 3),
    )


def np_hue_to_point(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)

    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    hue = h / 360
    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = np_hue_to_point(p, q, hue + 1 / 3)
    g = np_hue_to_point(p, q, hue)
    b = np_hue_to_point(p, q, hue - 1 / 3)

    achromatic = s == 0
    r = np.where(achromatic, l, r)
    g = np.where(achromatic, l, g)
    b = np.where(achromatic, l, b)

    return np.stack([r, g, b], axis=-1)


## CMYK to RGB conversions

def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """
    Convert CMYK to RGB.

    Args:
        c, m, y, k: Cyan, magenta, yellow and black in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    return (
        (1 - c) * (1 - k),
        (1 - m) * (1 - k),
        (1 - y) * (1 - k),
    )


def np_cmyk_to_unit_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """
    Vectorized: Convert CMYK to RGB.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    c, m, y, k = np.broadcast_arrays(
        np.asarray(c, dtype=float),
        np.asarray(m, dtype=float),
        np.asarray(y, dtype=float),
        np.asarray(k, dtype=float),
    )
    return np.stack([(1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)], axis=-1)
