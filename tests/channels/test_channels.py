import pytest

from colorvalues.channels import (
    Intensity, Red, Green, Blue, Saturation, Lightness,
    Cyan, Magenta, Yellow, Black,
)
from colorvalues.exceptions import InvalidValueRangeError

bounded_channels = {
    Intensity: (0, 100),
    Red: (0, 255),
    Green: (0, 255),
    Blue: (0, 255),
    Saturation: (0, 100),
    Lightness: (0, 100),
    Cyan: (0, 100),
    Magenta: (0, 100),
    Yellow: (0, 100),
    Black: (0, 100),
}


def test_value_within_bounds_is_kept():
    for cls, (lo, hi) in bounded_channels.items():
        for v in (lo, (lo + hi) // 2, hi):
            assert cls(v).to_int() == v


def test_out_of_bounds_raises():
    for cls, (lo, hi) in bounded_channels.items():
        with pytest.raises(InvalidValueRangeError):
            cls(lo - 1)
        with pytest.raises(InvalidValueRangeError):
            cls(hi + 1)


def test_range_error_describes_channel():
    with pytest.raises(InvalidValueRangeError) as info:
        Intensity(101)
    assert info.value.channel == "Intensity"
    assert info.value.value == 101
    assert (info.value.minimum, info.value.maximum) == (0, 100)
    assert isinstance(info.value, ValueError)


def test_arithmetic_saturates():
    assert Red(250).add(Red(10)).to_int() == 255
    assert Red(5).subtract(Red(10)).to_int() == 0
    assert Saturation(90).add(Saturation(20)).to_int() == 100
    assert Black(10).subtract(Black(3)).to_int() == 7
    assert (Green(100) + Green(20)).to_int() == 120
    assert (Blue(100) - Blue(120)).to_int() == 0


def test_arithmetic_returns_new_instance():
    red = Red(100)
    result = red.add(Red(1))
    assert red.to_int() == 100
    assert result.to_int() == 101
    assert isinstance(result, Red)


def test_mixing_channel_types_is_rejected():
    with pytest.raises(TypeError):
        Red(1).add(Green(1))
    with pytest.raises(TypeError):
        Cyan(1).equals(Magenta(1))


def test_equality():
    assert Red(10).equals(Red(10))
    assert not Red(10).equals(Red(11))
    assert Red(10) == Red(10)
    assert Red(10) != Green(10)
    assert len({Red(10), Red(10), Red(11)}) == 2


def test_channels_are_immutable():
    red = Red(10)
    with pytest.raises(AttributeError):
        red._value = 20
    assert red.to_int() == 10


def test_bounds_predicates():
    assert Red(0).at_minimum()
    assert Red(255).at_maximum()
    assert not Red(128).at_minimum()
    assert not Red(128).at_maximum()


def test_byte_hexadecimal():
    assert Red.from_hexadecimal("ff").to_int() == 255
    assert Green.from_hexadecimal("0A").to_int() == 10
    assert Blue.from_hexadecimal("3").to_int() == 0x33
    assert Red(255).to_hexadecimal() == "ff"
    assert Red(10).to_hexadecimal() == "0a"
    assert Blue(0).to_hexadecimal() == "00"
    with pytest.raises(ValueError):
        Red.from_hexadecimal("fff")


def test_byte_from_intensity():
    assert Red.from_intensity(Intensity(0)).to_int() == 0
    assert Red.from_intensity(Intensity(100)).to_int() == 255
    assert Green.from_intensity(Intensity(50)).to_int() == 128
    assert Blue.from_intensity(Intensity(20)).to_int() == 51


def test_rendering():
    assert str(Red(51)) == "51"
    assert str(Saturation(40)) == "40"
    assert repr(Cyan(3)) == "Cyan(3)"
    assert int(Lightness(12)) == 12
    assert float(Lightness(12)) == 12.0


def test_integer_channels_reject_fractions():
    for cls in bounded_channels:
        with pytest.raises(TypeError):
            cls(50.7)
    with pytest.raises(TypeError):
        Red(254.9)
    assert Red(254.0).to_int() == 254
    assert isinstance(Red(254.0).value, int)
