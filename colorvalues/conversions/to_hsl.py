import numpy as np
from numpy import ndarray as NDArray


## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0, 360), saturation [0, 1], lightness [0, 1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    # achromatic
    if max_c == min_c:
        return 0.0, 0.0, lightness

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        hue = ((g - b) / delta) + (6 if g < b else 0)
    elif max_c == g:
        hue = ((b - r) / delta) + 2
    else:
        hue = ((r - g) / delta) + 4

    return hue * 60, saturation, lightness


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2

    chromatic = delta > 0

    # Saturation
    saturation = np.zeros(out_shape)
    bright = chromatic & (lightness > 0.5)
    dark = chromatic & ~(lightness > 0.5)
    saturation[bright] = delta[bright] / (2 - max_c[bright] - min_c[bright])
    saturation[dark] = delta[dark] / (max_c[dark] + min_c[dark])

    # Hue, same precedence as the scalar version: red, then green, then blue
    hue = np.zeros(out_shape)
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue[mask_r] = ((g[mask_r] - b[mask_r]) / delta[mask_r]) + np.where(g[mask_r] < b[mask_r], 6, 0)
    hue[mask_g] = ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 2
    hue[mask_b] = ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 4

    return np.stack([hue * 60, saturation, lightness], axis=-1)
