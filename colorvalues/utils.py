import math

import numpy as np

# digits kept when rendering a float, enough to hide binary artefacts
FLOAT_PRECISION = 14


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def np_round_half_up(values: np.ndarray) -> np.ndarray:
    """Vectorized round_half_up, returns an integer array."""
    values = np.asarray(values, dtype=float)
    return (np.sign(values) * np.floor(np.abs(values) + 0.5)).astype(int)


def format_float(value: float) -> str:
    """
    Shortest positional rendering, cut to FLOAT_PRECISION decimals.

    0.8 -> '0.8', 1.0 -> '1', 0.0 -> '0', 0.1 + 0.2 -> '0.3'.
    """
    return np.format_float_positional(float(value), precision=FLOAT_PRECISION, trim='-')
