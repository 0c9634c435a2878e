import pytest

from colorvalues.channels import Alpha, Red, Green, Blue
from colorvalues.colors import RGBA
from colorvalues.exceptions import InvalidValueRangeError


def test_bounds():
    assert Alpha(0).to_float() == 0.0
    assert Alpha(1).to_float() == 1.0
    assert Alpha(0.5).to_float() == 0.5
    with pytest.raises(InvalidValueRangeError):
        Alpha(-0.1)
    with pytest.raises(InvalidValueRangeError):
        Alpha(1.1)


def test_predicates():
    assert Alpha(1.0).at_maximum()
    assert Alpha.opaque().at_maximum()
    assert Alpha(0).at_minimum()
    assert not Alpha(0.5).at_maximum()
    assert not Alpha(0.5).at_minimum()


def test_arithmetic_saturates():
    assert Alpha(0.8).add(Alpha(0.5)).to_float() == 1.0
    assert Alpha(0.2).subtract(Alpha(0.5)).to_float() == 0.0
    assert Alpha(0.5).add(Alpha(0.25)).to_float() == 0.75


def test_from_hexadecimal():
    assert Alpha.from_hexadecimal("ff").to_float() == 1.0
    assert Alpha.from_hexadecimal("00").to_float() == 0.0
    assert Alpha.from_hexadecimal("cc").to_float() == 0.8
    assert Alpha.from_hexadecimal("c").to_float() == 0.8
    assert Alpha.from_hexadecimal("80").to_float() == 0.5


def test_to_hexadecimal():
    assert Alpha(1.0).to_hexadecimal() == "ff"
    assert Alpha(0.0).to_hexadecimal() == "00"
    assert Alpha(0.8).to_hexadecimal() == "cc"
    assert Alpha(0.5).to_hexadecimal() == "80"


def test_rendering():
    assert str(Alpha(0.8)) == "0.8"
    assert str(Alpha(0.25)) == "0.25"
    assert str(Alpha(1.0)) == "1"
    assert str(Alpha(0)) == "0"


def test_rendering_after_arithmetic():
    assert str(Alpha(0.1) + Alpha(0.2)) == "0.3"
    color = RGBA(Red(1), Green(2), Blue(3), Alpha(0.1).add(Alpha(0.2)))
    assert str(color) == "rgba(1, 2, 3, 0.3)"
