import numpy as np
from numpy import ndarray as NDArray


## RGB to CMYK conversions

def unit_rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Convert RGB to CMYK.

    Args:
        r, g, b: Red, green and blue in [0, 1]

    Returns:
        Tuple[float, float, float, float]: (c, m, y, k) in [0, 1]
    """
    # pure black, the general formula would divide by zero
    if r == 0 and g == 0 and b == 0:
        return 0.0, 0.0, 0.0, 1.0

    black = min(1 - r, 1 - g, 1 - b)
    return (
        (1 - r - black) / (1 - black),
        (1 - g - black) / (1 - black),
        (1 - b - black) / (1 - black),
        black,
    )


def np_unit_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to CMYK.

    Returns:
        cmyk: array of shape (..., 4): (c, m, y, k) in [0, 1]
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )

    black = np.minimum.reduce([1 - r, 1 - g, 1 - b])
    is_black = (r == 0) & (g == 0) & (b == 0)
    # any non zero divisor works for black pixels, their result is overwritten
    divisor = np.where(is_black, 1.0, 1 - black)

    c = np.where(is_black, 0.0, (1 - r - black) / divisor)
    m = np.where(is_black, 0.0, (1 - g - black) / divisor)
    y = np.where(is_black, 0.0, (1 - b - black) / divisor)
    k = np.where(is_black, 1.0, black)

    return np.stack([c, m, y, k], axis=-1)
