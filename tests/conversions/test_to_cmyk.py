from colorvalues.conversions.to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk
import numpy as np
from samples import samples_rgb_cmyk

samples_unit_rgb_cmyk = {
    (r / 255, g / 255, b / 255): (c / 100, m / 100, y / 100, k / 100)
    for (r, g, b), (c, m, y, k) in samples_rgb_cmyk.items()
}


def test_unit_rgb_to_cmyk():
    for rgb, expected in samples_unit_rgb_cmyk.items():
        result = unit_rgb_to_cmyk(*rgb)
        for out, exp in zip(result, expected):
            assert abs(out - exp) < 1/200


def test_black_does_not_divide_by_zero():
    assert unit_rgb_to_cmyk(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0, 1.0)


def test_unit_rgb_to_cmyk_numpy():
    the_matrix = np.array(list(samples_unit_rgb_cmyk.keys()))
    result = np_unit_rgb_to_cmyk(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    expected = np.array([unit_rgb_to_cmyk(*rgb) for rgb in samples_unit_rgb_cmyk])
    assert result.shape == (len(samples_unit_rgb_cmyk), 4)
    assert np.array_equal(result, expected)


def test_numpy_black_pixels():
    result = np_unit_rgb_to_cmyk(np.zeros(3), np.zeros(3), np.array([0.0, 1.0, 0.0]))
    assert np.array_equal(result[0], (0.0, 0.0, 0.0, 1.0))
    assert np.array_equal(result[2], (0.0, 0.0, 0.0, 1.0))
    assert np.allclose(result[1], (1.0, 1.0, 0.0, 0.0))
